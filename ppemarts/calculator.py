# Filename: ppemarts/calculator.py
# Monthly PPE requirement estimate: ceil(workers x per-worker-per-day rate x work days)
# for each selected item. Rates are Decimals so ceil() sees exact values.

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Sequence, Tuple

from ppemarts.errors import InvalidInputError

DEFAULT_WORKERS = 10
DEFAULT_WORK_DAYS = 22
DEFAULT_PRESET = "basic"
DEFAULT_CUSTOM_ITEMS: Tuple[str, ...] = ("mask", "gloves")
CUSTOM_PRESET = "custom"

EMPTY_SELECTION_MSG = "Please select at least one PPE item for calculation."


@dataclass(frozen=True)
class EquipmentItem:
    key: str
    name: str
    description: str
    unit: str
    per_worker_per_day: Decimal


EQUIPMENT_ITEMS: Dict[str, EquipmentItem] = {
    item.key: item
    for item in (
        EquipmentItem("mask", "Face Masks", "Surgical/N95 masks", "pieces", Decimal("2")),
        EquipmentItem("gloves", "Gloves", "Disposable latex/nitrile gloves", "pairs", Decimal("2")),
        EquipmentItem("gown", "Disposable Gowns", "Protective gowns/coveralls", "pieces", Decimal("0.5")),
        EquipmentItem("faceShield", "Face Shields", "Reusable face shields", "pieces", Decimal("0.2")),
        EquipmentItem("goggles", "Safety Goggles", "Protective eyewear", "pairs", Decimal("0.1")),
        EquipmentItem("respirator", "Respirators", "Half/full face respirators", "pieces", Decimal("0.05")),
        EquipmentItem("harness", "Safety Harness", "Full body harness", "pieces", Decimal("0.01")),
        EquipmentItem("helmet", "Safety Helmet", "Hard hats/helmets", "pieces", Decimal("0.01")),
        EquipmentItem("shoes", "Safety Shoes", "Steel-toe boots", "pairs", Decimal("0.005")),
    )
}

PRESETS: Dict[str, Tuple[str, ...]] = {
    "basic": ("mask", "gloves", "gown"),
    "full": ("mask", "gloves", "gown", "faceShield", "goggles"),
    "respiratory": ("mask", "gloves", "respirator", "goggles"),
    "fall": ("helmet", "harness", "shoes", "gloves"),
}

for _item in EQUIPMENT_ITEMS.values():
    if _item.per_worker_per_day <= 0:
        raise RuntimeError(f"Non-positive rate for {_item.key}")
for _name, _keys in PRESETS.items():
    _unknown = [k for k in _keys if k not in EQUIPMENT_ITEMS]
    if _unknown:
        raise RuntimeError(f"Preset {_name!r} references unknown items: {_unknown}")


@dataclass(frozen=True)
class CalculationLine:
    key: str
    name: str
    description: str
    quantity: int
    unit: str
    per_worker_per_day: Decimal


@dataclass(frozen=True)
class CalculationResult:
    workers: int
    work_days: int
    lines: Tuple[CalculationLine, ...]
    total: int


def resolve_selection(preset: str, items: Optional[Sequence[str]] = None) -> List[str]:
    """Item keys for a preset name; for "custom" the caller's own `items`."""
    if preset == CUSTOM_PRESET:
        return list(items or [])
    if preset not in PRESETS:
        raise InvalidInputError(f"Unknown preset: {preset}")
    return list(PRESETS[preset])


def _positive_int(value, label: str) -> int:
    # bool is an int subclass; a checkbox value must not count as one worker
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidInputError(f"{label} must be a positive whole number.")
    return value


def calculate(workers: int, work_days: int, selection: Sequence[str]) -> CalculationResult:
    """
    Per-item monthly quantities and their total, in selection order.

    Raises InvalidInputError for non-positive counts, an empty selection,
    unknown item keys or repeated keys; nothing is computed in that case.
    """
    workers = _positive_int(workers, "Number of workers")
    work_days = _positive_int(work_days, "Working days")
    if not selection:
        raise InvalidInputError(EMPTY_SELECTION_MSG)

    unknown = [k for k in selection if k not in EQUIPMENT_ITEMS]
    if unknown:
        raise InvalidInputError(f"Unknown PPE item(s): {', '.join(map(str, unknown))}")
    if len(set(selection)) != len(selection):
        raise InvalidInputError("Each PPE item can only be selected once.")

    lines = []
    total = 0
    for key in selection:
        item = EQUIPMENT_ITEMS[key]
        qty = math.ceil(workers * item.per_worker_per_day * work_days)
        total += qty
        lines.append(
            CalculationLine(
                key=item.key,
                name=item.name,
                description=item.description,
                quantity=qty,
                unit=item.unit,
                per_worker_per_day=item.per_worker_per_day,
            )
        )
    return CalculationResult(workers=workers, work_days=work_days, lines=tuple(lines), total=total)


@dataclass
class CalculatorState:
    """Form state behind the calculator widget."""
    workers: int = DEFAULT_WORKERS
    work_days: int = DEFAULT_WORK_DAYS
    preset: str = DEFAULT_PRESET
    custom_items: List[str] = field(default_factory=lambda: list(DEFAULT_CUSTOM_ITEMS))
    result: Optional[CalculationResult] = None

    def run(self) -> CalculationResult:
        selection = resolve_selection(self.preset, self.custom_items)
        self.result = calculate(self.workers, self.work_days, selection)
        return self.result

    def reset(self) -> None:
        self.workers = DEFAULT_WORKERS
        self.work_days = DEFAULT_WORK_DAYS
        self.preset = DEFAULT_PRESET
        self.custom_items = list(DEFAULT_CUSTOM_ITEMS)
        self.result = None
