# Filename: ppemarts/catalog.py
# Static affiliate catalog. Built once at import and only read afterwards,
# so request handlers can share it without locking.

from typing import Optional, Tuple

from ppemarts.errors import InvalidInputError
from ppemarts.models import CATEGORIES, Product

PRODUCTS: Tuple[Product, ...] = (
    Product(
        id=1,
        name="Personal Protective Equipment KIT (PPE KIT)",
        category="body",
        brand="SafetyPro",
        image="assets/images/products/ppe-kit.jpg",
        affiliate_link="https://amzn.to/4bcAm6e",
        description="Complete PPE kit for full body protection",
        rating=4.5,
        badge="Bestseller",
    ),
    Product(
        id=2,
        name="Serplex Gas Mask Set Respirator",
        category="respiratory",
        brand="Serplex",
        image="assets/images/products/gas-mask.jpg",
        affiliate_link="https://amzn.to/4s4Fr6K",
        description="Gas mask with respirator for chemical protection",
        rating=4.3,
        badge="Industrial",
    ),
    Product(
        id=3,
        name="Non Woven Polypropylene Disposable Gown",
        category="body",
        brand="MediSafe",
        image="assets/images/products/disposable-gown.jpg",
        affiliate_link="https://amzn.to/49rqlRr",
        description="Disposable protective gown for medical use",
        rating=4.2,
        badge="Medical",
    ),
    Product(
        id=4,
        name="CF IND Full Body Safety Harness",
        category="fall",
        brand="CF IND",
        image="assets/images/products/safety-harness.jpg",
        affiliate_link="https://amzn.to/4jh3StM",
        description="Full body harness for fall protection",
        rating=4.7,
        badge="Premium",
    ),
    Product(
        id=5,
        name="Karam Magna Premium Full Body Safety Harness",
        category="fall",
        brand="Karam",
        image="assets/images/products/premium-harness.jpg",
        affiliate_link="https://amzn.to/494Ws89",
        description="Premium safety harness with comfort padding",
        rating=4.8,
        badge="Top Rated",
    ),
    Product(
        id=6,
        name="Safety Goggles Anti-Fog",
        category="eye",
        brand="VisionSafe",
        image="assets/images/products/safety-goggles.jpg",
        affiliate_link="#",
        description="Anti-fog safety goggles with UV protection",
        rating=4.4,
    ),
    Product(
        id=7,
        name="Industrial Safety Helmet",
        category="head",
        brand="HardHat Pro",
        image="assets/images/products/safety-helmet.jpg",
        affiliate_link="#",
        description="Industrial safety helmet with chin strap",
        rating=4.6,
        badge="Bestseller",
    ),
    Product(
        id=8,
        name="Safety Shoes Steel Toe",
        category="foot",
        brand="FootGuard",
        image="assets/images/products/safety-shoes.jpg",
        affiliate_link="#",
        description="Steel toe safety shoes with slip resistance",
        rating=4.5,
    ),
    Product(
        id=9,
        name="Nitrile Gloves Box of 100",
        category="hand",
        brand="GloveMaster",
        image="assets/images/products/nitrile-gloves.jpg",
        affiliate_link="#",
        description="Nitrile gloves box of 100 pieces",
        rating=4.7,
        badge="Medical",
    ),
)

_BY_ID = {p.id: p for p in PRODUCTS}
if len(_BY_ID) != len(PRODUCTS):
    raise RuntimeError("Duplicate product id in catalog")


def filter_products(category: str = "all") -> list[Product]:
    """Catalog-order products for a category filter button ("all" shows everything)."""
    cat = (category or "all").strip().lower()
    if cat == "all":
        return list(PRODUCTS)
    if cat not in CATEGORIES:
        raise InvalidInputError(f"Unknown category: {category}")
    return [p for p in PRODUCTS if p.category == cat]


def get_product(product_id: int) -> Optional[Product]:
    return _BY_ID.get(product_id)
