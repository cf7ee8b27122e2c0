# Filename: ppemarts/main.py
# HTTP layer for PPE Marts:
#  - /api/ai-assistant: assistant reply + product recommendations
#  - /api/products: static catalog with category filter
#  - /api/calculator: PPE requirement estimate (+ printable PDF report)
#  - /api/share: social share links
# All handlers are stateless; the catalog and equipment tables are read-only.

from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Query, Request, Response
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ppemarts import utils
from ppemarts.calculator import (
    EQUIPMENT_ITEMS,
    PRESETS,
    CalculationResult,
    CalculatorState,
    calculate,
    resolve_selection,
)
from ppemarts.catalog import PRODUCTS, filter_products, get_product
from ppemarts.llm_logic import respond
from ppemarts.models import (
    CalculationLineOut,
    CalculationRequest,
    CalculationResponse,
    ChatRequest,
    ChatResponse,
    EquipmentItemOut,
    InvalidInputError,
    Product,
)
from ppemarts.recommendations import MAX_RECOMMENDATIONS, recommend
from ppemarts.services.pdf import generate_calculation_pdf
from ppemarts.share import share_links
from ppemarts.utils import logger

app = FastAPI(title="PPE Marts API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    logger.info(f"Rejected input on {request.url.path}: {exc}")
    return JSONResponse({"error": str(exc)}, status_code=400)


@app.exception_handler(RequestValidationError)
async def calculator_validation_handler(request: Request, exc: RequestValidationError):
    # calculator clients get the same 400 {"error": ...} shape as InvalidInputError
    if not request.url.path.startswith("/api/calculator"):
        return await request_validation_exception_handler(request, exc)
    first = exc.errors()[0]
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body") or "body"
    logger.info(f"Rejected input on {request.url.path}: {field}: {first.get('msg')}")
    return JSONResponse({"error": f"Invalid {field}: {first.get('msg')}"}, status_code=400)


@app.get("/health")
def health():
    return {"status": "ok", "llm_enabled": bool(utils.OPENAI_API_KEY)}


# -------------------- Assistant -------------------- #
@app.options("/api/ai-assistant")
def ai_assistant_preflight():
    return Response(status_code=200)


@app.api_route("/api/ai-assistant", methods=["GET", "PUT", "PATCH", "DELETE"], include_in_schema=False)
def ai_assistant_wrong_method():
    return JSONResponse({"error": "Method not allowed"}, status_code=405)


@app.post("/api/ai-assistant", response_model=ChatResponse)
async def ai_assistant(request: Request):
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        payload = {}

    message = payload.get("message")
    if not isinstance(message, str) or not message:
        return JSONResponse({"error": "Message is required"}, status_code=400)

    try:
        chat = ChatRequest.model_validate({"message": message, "history": payload.get("history") or []})
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(p) for p in first.get("loc", ()))
        return JSONResponse(
            {"error": "Invalid history", "message": f"{where}: {first.get('msg')}"},
            status_code=400,
        )

    try:
        # OpenAI client is blocking; keep it off the event loop
        text = await run_in_threadpool(respond, chat.message, chat.history)
        recommendations = recommend(chat.message, PRODUCTS)
    except Exception as e:
        logger.exception("AI Assistant error")
        return JSONResponse(
            {"error": "Failed to generate response", "message": str(e)},
            status_code=500,
        )

    return ChatResponse(
        text=text,
        recommendations=recommendations[:MAX_RECOMMENDATIONS],
        timestamp=_utc_timestamp(),
    )


# -------------------- Catalog -------------------- #
@app.get("/api/products", response_model=list[Product])
def list_products(category: str = Query("all")):
    return filter_products(category)


@app.get("/api/products/{product_id}", response_model=Product)
def product_detail(product_id: int):
    product = get_product(product_id)
    if product is None:
        return JSONResponse({"error": "Product not found"}, status_code=404)
    return product


# -------------------- Calculator -------------------- #
@app.get("/api/calculator/items", response_model=list[EquipmentItemOut])
def calculator_items():
    return [
        EquipmentItemOut(
            key=item.key,
            name=item.name,
            description=item.description,
            unit=item.unit,
            per_worker_per_day=float(item.per_worker_per_day),
        )
        for item in EQUIPMENT_ITEMS.values()
    ]


@app.get("/api/calculator/presets")
def calculator_presets():
    return {name: list(keys) for name, keys in PRESETS.items()}


@app.get("/api/calculator/defaults")
def calculator_defaults():
    """Form values the reset button restores."""
    state = CalculatorState()
    return {
        "workers": state.workers,
        "work_days": state.work_days,
        "preset": state.preset,
        "custom_items": state.custom_items,
        "result": None,
    }


@app.post("/api/calculator", response_model=CalculationResponse)
def run_calculator(req: CalculationRequest):
    return _result_out(_calculate(req))


@app.post("/api/calculator/report")
def calculator_report(req: CalculationRequest):
    result = _calculate(req)
    content, filename = generate_calculation_pdf(result)
    logger.info(f"Calculator report rendered: {filename} ({len(content)} bytes)")
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# -------------------- Sharing -------------------- #
@app.get("/api/share")
def share(url: str = Query(..., min_length=1)):
    return share_links(url)


# ----------------- Helpers ----------------- #
def _calculate(req: CalculationRequest) -> CalculationResult:
    selection = resolve_selection(req.preset, req.items)
    return calculate(req.workers, req.work_days, selection)


def _result_out(result: CalculationResult) -> CalculationResponse:
    return CalculationResponse(
        workers=result.workers,
        work_days=result.work_days,
        total=result.total,
        lines=[
            CalculationLineOut(
                key=line.key,
                name=line.name,
                description=line.description,
                quantity=line.quantity,
                unit=line.unit,
                per_worker_per_day=float(line.per_worker_per_day),
            )
            for line in result.lines
        ],
    )


def _utc_timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
