"""Unit tests for Sourced and Limited"""

from dataclasses import FrozenInstanceError
from decimal import Decimal
from fractions import Fraction

import pytest

from crazy_generics.domain.value_objects import Limited, Sourced


class TestSourced:
    def test_defaults_are_empty(self):
        sourced: Sourced[int] = Sourced()

        assert sourced.value is None
        assert sourced.source is None

    def test_holds_any_value_with_source(self):
        sourced = Sourced({"temperature": 21.5}, "sensor-7")

        assert sourced.value == {"temperature": 21.5}
        assert sourced.source == "sensor-7"

    def test_fields_are_mutable(self):
        sourced = Sourced(1, "cache")

        sourced.value = 2
        sourced.source = "database"

        assert sourced == Sourced(2, "database")


class TestLimited:
    def test_holds_actual_min_and_max(self):
        limited = Limited(actual=5, min=0, max=10)

        assert (limited.actual, limited.min, limited.max) == (5, 0, 10)

    @pytest.mark.parametrize(
        "actual, low, high",
        [
            (1.5, 0.0, 2.0),
            (Decimal("9.99"), Decimal("0"), Decimal("100")),
            (Fraction(1, 3), Fraction(0), Fraction(1)),
        ],
    )
    def test_accepts_any_number_type(self, actual, low, high):
        limited = Limited(actual, low, high)

        assert limited.actual == actual

    def test_is_immutable(self):
        limited = Limited(5, 0, 10)

        with pytest.raises(FrozenInstanceError):
            limited.actual = 7  # type: ignore[misc]

    def test_bounds_are_not_validated(self):
        """
        GIVEN min greater than max and actual outside both
        WHEN a Limited is created
        THEN it is accepted as given.
        """
        limited = Limited(actual=100, min=10, max=1)

        assert limited.min > limited.max

    @pytest.mark.parametrize("field", ["actual", "min", "max"])
    def test_rejects_non_numbers(self, field):
        values = {"actual": 1, "min": 0, "max": 2}
        values[field] = "3"

        with pytest.raises(TypeError, match=f"Limited.{field} must be a number"):
            Limited(**values)


def test_limited_rejects_bools():
    """
    GIVEN boolean values, which Python treats as ints
    WHEN a Limited is created from them
    THEN it is rejected as non-numeric.
    """
    with pytest.raises(TypeError, match="Limited.actual must be a number, got bool"):
        Limited(True, False, True)
