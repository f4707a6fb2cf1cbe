"""Easing curves for tween phases.

Robert Penner's equations. Each curve maps a phase in [0, 1] to an eased
value; Back and Elastic overshoot that range. Input is not clamped.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Iterator, Mapping

from looptween.types import Curve, Family, UnknownCurve, Variant


def linear(k: float) -> float:
    return k


def quadratic_in(k: float) -> float:
    return k * k


def quadratic_out(k: float) -> float:
    return k * (2 - k)


def quadratic_in_out(k: float) -> float:
    k *= 2
    if k < 1:
        return 0.5 * k * k
    k -= 1
    return -0.5 * (k * (k - 2) - 1)


def cubic_in(k: float) -> float:
    return k * k * k


def cubic_out(k: float) -> float:
    k -= 1
    return k * k * k + 1


def cubic_in_out(k: float) -> float:
    k *= 2
    if k < 1:
        return 0.5 * k * k * k
    k -= 2
    return 0.5 * (k * k * k + 2)


def quartic_in(k: float) -> float:
    return k * k * k * k


def quartic_out(k: float) -> float:
    k -= 1
    return 1 - k * k * k * k


def quartic_in_out(k: float) -> float:
    k *= 2
    if k < 1:
        return 0.5 * k * k * k * k
    k -= 2
    return -0.5 * (k * k * k * k - 2)


def quintic_in(k: float) -> float:
    return k * k * k * k * k


def quintic_out(k: float) -> float:
    k -= 1
    return k * k * k * k * k + 1


def quintic_in_out(k: float) -> float:
    k *= 2
    if k < 1:
        return 0.5 * k * k * k * k * k
    k -= 2
    return 0.5 * (k * k * k * k * k + 2)


def sinusoidal_in(k: float) -> float:
    return 1 - math.cos(k * math.pi / 2)


def sinusoidal_out(k: float) -> float:
    return math.sin(k * math.pi / 2)


def sinusoidal_in_out(k: float) -> float:
    return 0.5 * (1 - math.cos(math.pi * k))


def exponential_in(k: float) -> float:
    return 0.0 if k == 0 else math.pow(1024, k - 1)


def exponential_out(k: float) -> float:
    return 1.0 if k == 1 else 1 - math.pow(2, -10 * k)


def exponential_in_out(k: float) -> float:
    if k == 0:
        return 0.0
    if k == 1:
        return 1.0
    k *= 2
    if k < 1:
        return 0.5 * math.pow(1024, k - 1)
    return 0.5 * (2 - math.pow(2, -10 * (k - 1)))


def circular_in(k: float) -> float:
    return 1 - math.sqrt(1 - k * k)


def circular_out(k: float) -> float:
    k -= 1
    return math.sqrt(1 - k * k)


def circular_in_out(k: float) -> float:
    k *= 2
    if k < 1:
        return -0.5 * (math.sqrt(1 - k * k) - 1)
    k -= 2
    return 0.5 * (math.sqrt(1 - k * k) + 1)


def elastic_in(k: float) -> float:
    if k == 0:
        return 0.0
    if k == 1:
        return 1.0
    return -math.pow(2, 10 * (k - 1)) * math.sin((k - 1.1) * 5 * math.pi)


def elastic_out(k: float) -> float:
    if k == 0:
        return 0.0
    if k == 1:
        return 1.0
    return math.pow(2, -10 * k) * math.sin((k - 0.1) * 5 * math.pi) + 1


def elastic_in_out(k: float) -> float:
    if k == 0:
        return 0.0
    if k == 1:
        return 1.0
    k *= 2
    if k < 1:
        return -0.5 * math.pow(2, 10 * (k - 1)) * math.sin((k - 1.1) * 5 * math.pi)
    return 0.5 * math.pow(2, -10 * (k - 1)) * math.sin((k - 1.1) * 5 * math.pi) + 1


_BACK_S = 1.70158
_BACK_S_IN_OUT = _BACK_S * 1.525


def back_in(k: float) -> float:
    s = _BACK_S
    return k * k * ((s + 1) * k - s)


def back_out(k: float) -> float:
    s = _BACK_S
    k -= 1
    return k * k * ((s + 1) * k + s) + 1


def back_in_out(k: float) -> float:
    s = _BACK_S_IN_OUT
    k *= 2
    if k < 1:
        return 0.5 * (k * k * ((s + 1) * k - s))
    k -= 2
    return 0.5 * (k * k * ((s + 1) * k + s) + 2)


def bounce_out(k: float) -> float:
    """Four parabolic bounces, each lower than the last."""
    if k < 1 / 2.75:
        return 7.5625 * k * k
    if k < 2 / 2.75:
        k -= 1.5 / 2.75
        return 7.5625 * k * k + 0.75
    if k < 2.5 / 2.75:
        k -= 2.25 / 2.75
        return 7.5625 * k * k + 0.9375
    k -= 2.625 / 2.75
    return 7.5625 * k * k + 0.984375


def bounce_in(k: float) -> float:
    return 1 - bounce_out(1 - k)


def bounce_in_out(k: float) -> float:
    if k < 0.5:
        return bounce_in(k * 2) * 0.5
    return bounce_out(k * 2 - 1) * 0.5 + 0.5


EASINGS: Mapping[tuple[Family, Variant], Curve] = MappingProxyType({
    (Family.LINEAR, Variant.IN_OUT): linear,
    (Family.QUADRATIC, Variant.IN): quadratic_in,
    (Family.QUADRATIC, Variant.OUT): quadratic_out,
    (Family.QUADRATIC, Variant.IN_OUT): quadratic_in_out,
    (Family.CUBIC, Variant.IN): cubic_in,
    (Family.CUBIC, Variant.OUT): cubic_out,
    (Family.CUBIC, Variant.IN_OUT): cubic_in_out,
    (Family.QUARTIC, Variant.IN): quartic_in,
    (Family.QUARTIC, Variant.OUT): quartic_out,
    (Family.QUARTIC, Variant.IN_OUT): quartic_in_out,
    (Family.QUINTIC, Variant.IN): quintic_in,
    (Family.QUINTIC, Variant.OUT): quintic_out,
    (Family.QUINTIC, Variant.IN_OUT): quintic_in_out,
    (Family.SINUSOIDAL, Variant.IN): sinusoidal_in,
    (Family.SINUSOIDAL, Variant.OUT): sinusoidal_out,
    (Family.SINUSOIDAL, Variant.IN_OUT): sinusoidal_in_out,
    (Family.EXPONENTIAL, Variant.IN): exponential_in,
    (Family.EXPONENTIAL, Variant.OUT): exponential_out,
    (Family.EXPONENTIAL, Variant.IN_OUT): exponential_in_out,
    (Family.CIRCULAR, Variant.IN): circular_in,
    (Family.CIRCULAR, Variant.OUT): circular_out,
    (Family.CIRCULAR, Variant.IN_OUT): circular_in_out,
    (Family.ELASTIC, Variant.IN): elastic_in,
    (Family.ELASTIC, Variant.OUT): elastic_out,
    (Family.ELASTIC, Variant.IN_OUT): elastic_in_out,
    (Family.BACK, Variant.IN): back_in,
    (Family.BACK, Variant.OUT): back_out,
    (Family.BACK, Variant.IN_OUT): back_in_out,
    (Family.BOUNCE, Variant.IN): bounce_in,
    (Family.BOUNCE, Variant.OUT): bounce_out,
    (Family.BOUNCE, Variant.IN_OUT): bounce_in_out,
})


def lookup(family: Family | str, variant: Variant | str = Variant.IN_OUT) -> Curve:
    """Resolve a curve by family and variant, as enums or their names.

    Raises UnknownCurve if either name is unknown or the pair is not
    registered (Linear only has InOut).
    """
    try:
        key = (Family(family), Variant(variant))
    except ValueError:
        raise UnknownCurve(family, variant) from None
    try:
        return EASINGS[key]
    except KeyError:
        raise UnknownCurve(key[0], key[1]) from None


def variants(family: Family | str) -> list[Variant]:
    """Registered variants of a family, in In, Out, InOut order."""
    try:
        fam = Family(family)
    except ValueError:
        raise UnknownCurve(family, "*") from None
    return [v for v in Variant if (fam, v) in EASINGS]


def curves() -> Iterator[tuple[Family, Variant]]:
    """Iterate every registered (family, variant) pair."""
    return iter(EASINGS)
