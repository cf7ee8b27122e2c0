# Filename: ppemarts/recommendations.py
# Keyword -> category product picks attached to every assistant reply.
#
# Unlike the reply fallback in llm_logic (first keyword wins), every matching
# keyword contributes its category here, so "gloves and goggles" shows both.

import random
from typing import List, Optional, Sequence, Tuple

from ppemarts import utils
from ppemarts.models import Product

MAX_RECOMMENDATIONS = 4
FALLBACK_MODES = ("random", "none")

KEYWORD_CATEGORIES: Tuple[Tuple[str, str], ...] = (
    # Respiratory
    ("mask", "respiratory"),
    ("respirator", "respiratory"),
    ("breathing", "respiratory"),
    ("lung", "respiratory"),
    ("n95", "respiratory"),
    # Head
    ("helmet", "head"),
    ("hard hat", "head"),
    ("head", "head"),
    # Eye
    ("goggle", "eye"),
    ("glasses", "eye"),
    ("eye", "eye"),
    ("vision", "eye"),
    # Hand
    ("glove", "hand"),
    ("hand", "hand"),
    # Body
    ("suit", "body"),
    ("gown", "body"),
    ("vest", "body"),
    ("body", "body"),
    ("ppe kit", "body"),
    # Foot
    ("shoe", "foot"),
    ("boot", "foot"),
    ("foot", "foot"),
    # Fall
    ("harness", "fall"),
    ("fall", "fall"),
    ("height", "fall"),
    ("lanyard", "fall"),
)


def match_categories(message: str) -> List[str]:
    """Every category with a keyword in `message`, in table order, without repeats."""
    lower = message.lower()
    found: List[str] = []
    for keyword, category in KEYWORD_CATEGORIES:
        if keyword in lower and category not in found:
            found.append(category)
    return found


def recommend(
    message: str,
    products: Sequence[Product],
    *,
    rng: Optional[random.Random] = None,
    fallback: Optional[str] = None,
) -> List[Product]:
    """
    Up to MAX_RECOMMENDATIONS products for `message`.

    Matched categories -> catalog-order prefix of the products in them.
    No match -> uniform sample without replacement ("random") or nothing ("none").
    Pass a seeded `rng` for reproducible samples.
    """
    categories = match_categories(message)
    if categories:
        picked = [p for p in products if p.category in categories]
        return picked[:MAX_RECOMMENDATIONS]

    mode = (fallback or utils.RECOMMENDATION_FALLBACK).strip().lower()
    if mode not in FALLBACK_MODES:
        raise ValueError(f"Unknown recommendation fallback mode: {mode!r}")
    if mode == "none":
        return []
    rng = rng or random.Random()
    return rng.sample(list(products), min(MAX_RECOMMENDATIONS, len(products)))
