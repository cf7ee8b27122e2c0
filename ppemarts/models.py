# Filename: ppemarts/models.py
# Request/response schemas for the API plus the Product record.

from typing import List, Literal, Optional, Tuple, get_args

from pydantic import BaseModel, ConfigDict, Field

from ppemarts.calculator import DEFAULT_PRESET, DEFAULT_WORK_DAYS, DEFAULT_WORKERS
from ppemarts.errors import InvalidInputError  # noqa: F401

Category = Literal["respiratory", "head", "eye", "hearing", "hand", "body", "foot", "fall"]
CATEGORIES: Tuple[str, ...] = get_args(Category)


class Product(BaseModel):
    """
    Affiliate product shown in the catalog and in assistant recommendations.
    - category: one of CATEGORIES (validated on construction)
    - affiliate_link: outbound purchase URL, serialized as `affiliateLink`
    - badge: optional label such as "Bestseller"
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    category: Category
    brand: str
    image: str
    affiliate_link: str = Field(alias="affiliateLink")
    description: str
    rating: float
    badge: Optional[str] = None


# ------------------ Assistant ------------------ #
class HistoryTurn(BaseModel):
    sender: str
    text: str


class ChatRequest(BaseModel):
    message: str
    history: List[HistoryTurn] = Field(default_factory=list)


class ChatResponse(BaseModel):
    text: str
    recommendations: List[Product]
    timestamp: str


# ------------------ Calculator ------------------ #
class CalculationRequest(BaseModel):
    workers: int = DEFAULT_WORKERS
    work_days: int = DEFAULT_WORK_DAYS
    preset: str = DEFAULT_PRESET
    items: List[str] = Field(default_factory=list)  # only read when preset == "custom"


class CalculationLineOut(BaseModel):
    key: str
    name: str
    description: str
    quantity: int
    unit: str
    per_worker_per_day: float


class CalculationResponse(BaseModel):
    workers: int
    work_days: int
    lines: List[CalculationLineOut]
    total: int


class EquipmentItemOut(BaseModel):
    key: str
    name: str
    description: str
    unit: str
    per_worker_per_day: float
