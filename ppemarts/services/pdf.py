# Filename: ppemarts/services/pdf.py
# Printable calculator report, rendered in memory; returns (pdf bytes, filename)
# so the route can send it back without touching disk.

from datetime import date

from fpdf import FPDF

from ppemarts.calculator import CalculationResult


class _ReportPDF(FPDF):
    def header(self):
        self.set_font("Helvetica", "B", 15)
        self.cell(0, 10, "PPE Requirements Calculation", border=0, align="C")
        self.ln(8)
        self.set_font("Helvetica", size=9)
        self.cell(0, 6, f"Generated on {date.today():%Y-%m-%d} from PPEMarts.com", align="C")
        self.ln(12)

    def footer(self):
        self.set_y(-25)
        self.set_font("Helvetica", "I", 8)
        self.cell(0, 5, "This is an estimate. Always consult with safety professionals for exact requirements.", align="C")
        self.ln(5)
        self.cell(0, 5, "Visit www.ppemarts.com for more tools and PPE products.", align="C")


def generate_calculation_pdf(result: CalculationResult) -> tuple[bytes, str]:
    pdf = _ReportPDF()
    pdf.add_page()

    for line in result.lines:
        pdf.set_font("Helvetica", "B", 11)
        pdf.cell(120, 7, line.name)
        pdf.cell(0, 7, f"{line.quantity:,} {line.unit}", align="R")
        pdf.ln(6)
        pdf.set_font("Helvetica", size=9)
        pdf.cell(120, 5, line.description)
        pdf.cell(0, 5, f"{line.per_worker_per_day.normalize()} {line.unit}/worker/day", align="R")
        pdf.ln(9)

    pdf.set_font("Helvetica", "B", 12)
    pdf.cell(120, 9, "Total Monthly Requirement:", border="T")
    pdf.cell(0, 9, f"{result.total:,} items", border="T", align="R")
    pdf.ln(8)
    pdf.set_font("Helvetica", size=9)
    pdf.cell(0, 5, f"For {result.workers} workers x {result.work_days} days")
    pdf.ln(8)
    pdf.cell(0, 5, "These are estimated quantities. Adjust based on your specific needs.")

    filename = f"ppe-requirements-{result.workers}w-{result.work_days}d.pdf"
    return bytes(pdf.output()), filename
