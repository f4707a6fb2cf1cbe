"""Tests for loop counts, curve selectors and errors."""

import pytest

from looptween import (
    INFINITE,
    Family,
    Finite,
    InvalidConfiguration,
    LoopTweenError,
    UnknownCurve,
    Variant,
)
from looptween.types import loop_count, positive_duration


class TestLoopCount:
    """Test loop normalization into Finite | INFINITE."""

    def test_zero_is_infinite(self):
        assert loop_count(0) is INFINITE

    def test_positive_is_finite(self):
        assert loop_count(1) == Finite(1)
        assert loop_count(7) == Finite(7)

    def test_loop_counts_pass_through(self):
        assert loop_count(INFINITE) is INFINITE
        three = Finite(3)
        assert loop_count(three) is three

    def test_negative_raises(self):
        with pytest.raises(InvalidConfiguration):
            loop_count(-1)

    @pytest.mark.parametrize("value", [1.0, "3", None, True])
    def test_non_int_raises(self, value):
        with pytest.raises(InvalidConfiguration):
            loop_count(value)

    def test_finite_requires_positive_count(self):
        with pytest.raises(InvalidConfiguration):
            Finite(0)

    def test_finite_is_frozen(self):
        loops = Finite(2)
        with pytest.raises(AttributeError):
            loops.count = 3

    def test_infinite_never_equals_finite(self):
        assert INFINITE != Finite(1)
        assert repr(INFINITE) == "INFINITE"


class TestDuration:
    """Test duration validation."""

    def test_int_becomes_float(self):
        assert positive_duration(2) == 2.0
        assert isinstance(positive_duration(2), float)

    @pytest.mark.parametrize("value", [0, -0.5, float("nan"), float("-inf"), "1", True])
    def test_rejects(self, value):
        with pytest.raises(InvalidConfiguration):
            positive_duration(value)


class TestSelectors:
    """Test Family/Variant name resolution."""

    def test_by_value(self):
        assert Family("Sinusoidal") is Family.SINUSOIDAL
        assert Variant("InOut") is Variant.IN_OUT

    def test_by_member_name_any_case(self):
        assert Family("sinusoidal") is Family.SINUSOIDAL
        assert Family("EXPONENTIAL") is Family.EXPONENTIAL
        assert Variant("in_out") is Variant.IN_OUT
        assert Variant("in-out") is Variant.IN_OUT
        assert Variant("inout") is Variant.IN_OUT

    def test_unknown_name_is_value_error(self):
        with pytest.raises(ValueError):
            Family("Wobbly")
        with pytest.raises(ValueError):
            Variant(3)

    def test_str_is_display_name(self):
        assert str(Family.QUADRATIC) == "Quadratic"
        assert str(Variant.IN_OUT) == "InOut"

    def test_eleven_families(self):
        assert len(Family) == 11


class TestErrors:
    """Test the error taxonomy."""

    def test_hierarchy(self):
        assert issubclass(InvalidConfiguration, LoopTweenError)
        assert issubclass(InvalidConfiguration, ValueError)
        assert issubclass(UnknownCurve, LoopTweenError)
        assert issubclass(UnknownCurve, KeyError)

    def test_unknown_curve_message(self):
        err = UnknownCurve(Family.BACK, "Sideways")
        assert str(err) == "Unknown easing curve Back.Sideways"
        assert err.family is Family.BACK
        assert err.variant == "Sideways"
