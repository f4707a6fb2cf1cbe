"""Tests for easing curves and the curve catalog."""

import math

import pytest

from looptween import EASINGS, Family, UnknownCurve, Variant, curves, lookup, variants
from looptween.easing import (
    back_in,
    back_out,
    bounce_in,
    bounce_out,
    circular_in,
    cubic_in,
    cubic_out,
    elastic_out,
    exponential_in,
    exponential_out,
    quadratic_in,
    quadratic_out,
    quartic_in,
    quintic_in,
    sinusoidal_out,
)

SAMPLES = [i / 20 for i in range(21)]


class TestEndpoints:
    """Every registered curve starts at 0 and ends at 1."""

    def test_all_curves_map_zero_to_zero(self):
        for (family, variant), curve in EASINGS.items():
            assert curve(0.0) == pytest.approx(0.0, abs=1e-9), f"{family}.{variant}(0)"

    def test_all_curves_map_one_to_one(self):
        for (family, variant), curve in EASINGS.items():
            assert curve(1.0) == pytest.approx(1.0, abs=1e-9), f"{family}.{variant}(1)"

    def test_exact_endpoints_for_special_cased_curves(self):
        """Exponential and Elastic special-case their endpoints exactly."""
        for family in (Family.EXPONENTIAL, Family.ELASTIC):
            assert lookup(family, Variant.IN_OUT)(0.0) == 0.0
            assert lookup(family, Variant.IN_OUT)(1.0) == 1.0
        assert lookup(Family.EXPONENTIAL, Variant.IN)(0.0) == 0.0
        assert lookup(Family.EXPONENTIAL, Variant.OUT)(1.0) == 1.0
        assert lookup(Family.ELASTIC, Variant.IN)(1.0) == 1.0
        assert lookup(Family.ELASTIC, Variant.OUT)(0.0) == 0.0


class TestInOutMidpoint:
    """Symmetric InOut curves pass through (0.5, 0.5)."""

    def test_quadratic_in_out_midpoint(self):
        assert lookup(Family.QUADRATIC, Variant.IN_OUT)(0.5) == 0.5

    def test_cubic_in_out_midpoint(self):
        assert lookup(Family.CUBIC, Variant.IN_OUT)(0.5) == 0.5

    def test_all_in_out_midpoints(self):
        for family in Family:
            curve = lookup(family, Variant.IN_OUT)
            assert curve(0.5) == pytest.approx(0.5), f"{family}.InOut(0.5)"

    def test_in_out_is_point_symmetric(self):
        """InOut(k) + InOut(1 - k) == 1 for the power and trig families."""
        for family in (Family.QUADRATIC, Family.CUBIC, Family.QUARTIC, Family.QUINTIC,
                       Family.SINUSOIDAL, Family.CIRCULAR, Family.EXPONENTIAL):
            curve = lookup(family, Variant.IN_OUT)
            for k in SAMPLES:
                assert curve(k) + curve(1 - k) == pytest.approx(1.0), f"{family} at {k}"


class TestPowerCurves:
    """Test polynomial families at a known phase."""

    def test_quadratic(self):
        assert quadratic_in(0.5) == 0.25
        assert quadratic_out(0.5) == 0.75

    def test_cubic(self):
        assert cubic_in(0.5) == 0.125
        assert cubic_out(0.5) == 0.875

    def test_quartic_and_quintic(self):
        assert quartic_in(0.5) == 0.0625
        assert quintic_in(0.5) == 0.03125

    def test_in_and_out_mirror_each_other(self):
        """Out(k) == 1 - In(1 - k) for every power family."""
        for family in (Family.QUADRATIC, Family.CUBIC, Family.QUARTIC, Family.QUINTIC):
            ease_in = lookup(family, Variant.IN)
            ease_out = lookup(family, Variant.OUT)
            for k in SAMPLES:
                assert ease_out(k) == pytest.approx(1 - ease_in(1 - k))

    def test_higher_powers_start_slower(self):
        k = 0.3
        values = [lookup(f, Variant.IN)(k) for f in
                  (Family.QUADRATIC, Family.CUBIC, Family.QUARTIC, Family.QUINTIC)]
        assert values == sorted(values, reverse=True)


class TestTrigAndExponential:
    """Test sinusoidal, exponential and circular families."""

    def test_sinusoidal_out(self):
        assert sinusoidal_out(0.5) == pytest.approx(math.sin(math.pi / 4))

    def test_exponential(self):
        assert exponential_in(0.5) == pytest.approx(1 / 32)
        assert exponential_out(0.5) == pytest.approx(1 - 1 / 32)

    def test_circular_in(self):
        assert circular_in(0.5) == pytest.approx(1 - math.sqrt(0.75))

    def test_monotonic_on_unit_interval(self):
        for family in (Family.SINUSOIDAL, Family.EXPONENTIAL, Family.CIRCULAR):
            for variant in variants(family):
                curve = lookup(family, variant)
                values = [curve(k) for k in SAMPLES]
                assert values == sorted(values), f"{family}.{variant}"


class TestOvershootCurves:
    """Back and Elastic leave [0, 1]; Bounce stays inside it."""

    def test_back_in_dips_below_zero(self):
        assert back_in(0.2) < 0.0

    def test_back_out_overshoots_one(self):
        assert back_out(0.8) > 1.0

    def test_elastic_out_overshoots_one(self):
        assert max(elastic_out(k) for k in SAMPLES) > 1.0

    def test_elastic_in_dips_below_zero(self):
        curve = lookup(Family.ELASTIC, Variant.IN)
        assert min(curve(k) for k in SAMPLES) < 0.0

    def test_bounce_stays_in_unit_range(self):
        for variant in variants(Family.BOUNCE):
            curve = lookup(Family.BOUNCE, variant)
            for k in SAMPLES:
                assert -1e-9 <= curve(k) <= 1.0 + 1e-9

    def test_bounce_segment_joins(self):
        """Each bounce segment lands back on 1.0 at its threshold."""
        for threshold in (1 / 2.75, 2 / 2.75, 2.5 / 2.75):
            assert bounce_out(threshold) == pytest.approx(1.0)

    def test_bounce_in_is_reflected_out(self):
        for k in SAMPLES:
            assert bounce_in(k) == pytest.approx(1 - bounce_out(1 - k))


class TestLookup:
    """Test catalog lookup by enum or name."""

    def test_lookup_by_enum(self):
        assert lookup(Family.QUADRATIC, Variant.IN) is quadratic_in

    def test_lookup_by_name(self):
        assert lookup("Quadratic", "In") is quadratic_in
        assert lookup("cubic", "in_out") is lookup(Family.CUBIC, Variant.IN_OUT)
        assert lookup("BOUNCE", "InOut") is lookup(Family.BOUNCE, Variant.IN_OUT)

    def test_variant_defaults_to_in_out(self):
        assert lookup(Family.LINEAR) is lookup(Family.LINEAR, Variant.IN_OUT)

    def test_unknown_family_raises(self):
        with pytest.raises(UnknownCurve):
            lookup("Wobbly", "In")

    def test_unknown_variant_raises(self):
        with pytest.raises(UnknownCurve):
            lookup(Family.CUBIC, "Sideways")

    def test_linear_only_has_in_out(self):
        with pytest.raises(UnknownCurve):
            lookup(Family.LINEAR, Variant.IN)
        with pytest.raises(UnknownCurve):
            lookup(Family.LINEAR, Variant.OUT)

    def test_unknown_curve_is_key_error(self):
        with pytest.raises(KeyError):
            lookup("Wobbly", "In")

    def test_unknown_curve_carries_selector(self):
        with pytest.raises(UnknownCurve) as exc_info:
            lookup(Family.LINEAR, Variant.OUT)
        assert exc_info.value.family is Family.LINEAR
        assert exc_info.value.variant is Variant.OUT
        assert str(exc_info.value) == "Unknown easing curve Linear.Out"


class TestCatalog:
    """Test EASINGS completeness and immutability."""

    def test_catalog_size(self):
        """Ten families with three variants plus Linear.InOut."""
        assert len(EASINGS) == 31
        assert len(list(curves())) == 31

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            EASINGS[(Family.LINEAR, Variant.IN)] = lambda k: k

    def test_values_are_callable(self):
        for key, curve in EASINGS.items():
            assert callable(curve), f"{key} is not callable"

    def test_variants(self):
        assert variants(Family.LINEAR) == [Variant.IN_OUT]
        assert variants("Bounce") == [Variant.IN, Variant.OUT, Variant.IN_OUT]

    def test_variants_unknown_family(self):
        with pytest.raises(UnknownCurve):
            variants("Wobbly")
