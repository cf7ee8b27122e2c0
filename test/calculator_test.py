from decimal import Decimal

import pytest

from ppemarts.calculator import (
    EMPTY_SELECTION_MSG,
    EQUIPMENT_ITEMS,
    PRESETS,
    CalculatorState,
    calculate,
    resolve_selection,
)
from ppemarts.models import InvalidInputError


def test_basic_preset_month():
    result = calculate(10, 22, ["mask", "gloves", "gown"])

    assert [(l.key, l.quantity) for l in result.lines] == [("mask", 440), ("gloves", 440), ("gown", 110)]
    assert result.total == 990
    assert result.lines[2].unit == "pieces"
    assert result.lines[2].per_worker_per_day == Decimal("0.5")


def test_fractional_rate_rounds_up_to_one():
    result = calculate(1, 1, ["helmet"])
    assert result.lines[0].quantity == 1
    assert result.total == 1


def test_decimal_rates_do_not_over_round():
    # 3 * 0.1 * 10 is 3.0000000000000004 in binary floats
    assert calculate(3, 10, ["goggles"]).total == 3
    assert calculate(7, 20, ["shoes"]).total == 1  # 0.7 -> 1


def test_output_follows_selection_order():
    result = calculate(5, 20, ["shoes", "mask", "harness"])
    assert [l.key for l in result.lines] == ["shoes", "mask", "harness"]
    assert [l.quantity for l in result.lines] == [1, 200, 1]
    assert result.total == 202


def test_empty_selection_rejected():
    with pytest.raises(InvalidInputError) as err:
        calculate(10, 22, [])
    assert str(err.value) == EMPTY_SELECTION_MSG


@pytest.mark.parametrize("selection", [["mask", "visor"], ["Mask"]])
def test_unknown_items_rejected(selection):
    with pytest.raises(InvalidInputError, match="Unknown PPE item"):
        calculate(10, 22, selection)


def test_duplicate_items_rejected():
    with pytest.raises(InvalidInputError, match="only be selected once"):
        calculate(10, 22, ["mask", "mask"])


@pytest.mark.parametrize("workers, days", [(0, 22), (-1, 22), (10, 0), (True, 22), (2.5, 22)])
def test_non_positive_counts_rejected(workers, days):
    with pytest.raises(InvalidInputError):
        calculate(workers, days, ["mask"])


def test_presets_reference_known_items():
    for keys in PRESETS.values():
        assert keys
        assert all(k in EQUIPMENT_ITEMS for k in keys)
    assert all(item.per_worker_per_day > 0 for item in EQUIPMENT_ITEMS.values())


def test_resolve_selection():
    assert resolve_selection("fall") == ["helmet", "harness", "shoes", "gloves"]
    assert resolve_selection("custom", ["goggles"]) == ["goggles"]
    assert resolve_selection("custom") == []
    with pytest.raises(InvalidInputError):
        resolve_selection("deluxe")


def test_state_run_and_reset():
    state = CalculatorState(workers=4, work_days=5, preset="custom", custom_items=["respirator"])
    result = state.run()
    assert result.total == 1
    assert state.result is result

    state.reset()
    assert (state.workers, state.work_days, state.preset) == (10, 22, "basic")
    assert state.custom_items == ["mask", "gloves"]
    assert state.result is None


def test_state_defaults_run_basic_preset():
    assert CalculatorState().run().total == 990
