import random

import pytest

from ppemarts.catalog import PRODUCTS
from ppemarts.recommendations import MAX_RECOMMENDATIONS, match_categories, recommend


def test_fall_message_returns_only_fall_products_in_catalog_order():
    recs = recommend("I need a harness for fall protection at height", PRODUCTS)
    assert [p.id for p in recs] == [4, 5]
    assert all(p.category == "fall" for p in recs)


def test_match_categories_collects_every_match_once():
    assert match_categories("Gloves, goggles and a mask") == ["respiratory", "eye", "hand"]
    assert match_categories("helmet or hard hat for my head") == ["head"]
    assert match_categories("nothing relevant") == []


def test_multiple_categories_keep_catalog_order_and_cap():
    # body(1), respiratory(2), body(3), eye(6) ... capped at 4
    recs = recommend("mask, gown, goggles and boots", PRODUCTS)
    assert [p.id for p in recs] == [1, 2, 3, 6]
    assert len(recs) == MAX_RECOMMENDATIONS


def test_keyword_match_is_case_insensitive():
    assert [p.id for p in recommend("STEEL TOE BOOTS", PRODUCTS)] == [8]


def test_unmatched_topic_with_none_mode_returns_empty():
    # hearing protection has no keyword and no products
    assert recommend("ear plugs please", PRODUCTS, fallback="none") == []


def test_no_match_random_sample_is_seedable_subset():
    first = recommend("hello", PRODUCTS, rng=random.Random(7), fallback="random")
    again = recommend("hello", PRODUCTS, rng=random.Random(7), fallback="random")

    assert first == again
    assert len(first) == MAX_RECOMMENDATIONS
    assert len({p.id for p in first}) == len(first)
    assert all(p in PRODUCTS for p in first)


def test_no_match_unseeded_calls_stay_within_bounds():
    for _ in range(20):
        recs = recommend("what's up", PRODUCTS)
        assert len(recs) <= MAX_RECOMMENDATIONS
        assert set(recs) <= set(PRODUCTS)


def test_no_match_small_catalog_returns_everything():
    small = PRODUCTS[:2]
    recs = recommend("hi", small, rng=random.Random(1), fallback="random")
    assert sorted(p.id for p in recs) == [1, 2]


def test_no_match_none_mode_returns_empty():
    assert recommend("hi", PRODUCTS, fallback="none") == []


def test_unknown_fallback_mode_rejected():
    with pytest.raises(ValueError):
        recommend("hi", PRODUCTS, fallback="ranked")


@pytest.mark.parametrize("message", ["", "mask", "gloves for hand and body at height", "zzz"])
def test_never_more_than_four(message):
    assert len(recommend(message, PRODUCTS)) <= MAX_RECOMMENDATIONS
