import pytest

from mcp_dice_notation.dice import roll_from_text
from mcp_dice_notation.errors import DiceError, InvalidNotation


def test_payload(scripted):
    payload = roll_from_text("2d6-1", rng=scripted([3, 5]))

    assert payload["input"] == "2d6-1"
    assert payload["total"] == 7
    assert payload["terms"] == [
        {"notation": "2d6", "sign": 1, "amount": 2, "sides": 6, "rolls": [3, 5], "subtotal": 8},
        {"notation": "1", "sign": -1, "amount": 1, "sides": 1, "rolls": [], "subtotal": -1},
    ]
    assert payload["title"] == "7 = +8-1"
    assert payload["subtitle"] == "+3+5(2d6) (1)"
    assert payload["copy_text"] == "7 (2d6-1)"
    assert len(payload["request_id"]) == 32
    assert payload["timestamp"].endswith("Z")


def test_default_source_rolls_in_range():
    for _ in range(50):
        payload = roll_from_text("3d6")
        assert 3 <= payload["total"] <= 18


@pytest.mark.parametrize("text", ["", "d6", "2d6 +1"])
def test_invalid_input_never_yields_a_total(text, forbidden_rng):
    with pytest.raises(InvalidNotation):
        roll_from_text(text, rng=forbidden_rng)


def test_errors_share_a_base(forbidden_rng):
    with pytest.raises(DiceError):
        roll_from_text("2147483647+2147483647", rng=forbidden_rng)


def test_largest_dice_group_rolls_every_die():
    payload = roll_from_text("1000d6")
    assert len(payload["terms"][0]["rolls"]) == 1000
    assert 1000 <= payload["total"] <= 6000
