"""Shared types, loop counts and errors for looptween."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

Curve = Callable[[float], float]


class LoopTweenError(Exception):
    """Base class for looptween errors."""


class InvalidConfiguration(LoopTweenError, ValueError):
    """Raised on bad tween, clock or schedule configuration."""


class UnknownCurve(LoopTweenError, KeyError):
    """Raised when a (family, variant) pair is not in the easing catalog."""

    def __init__(self, family: object, variant: object) -> None:
        self.family = family
        self.variant = variant
        super().__init__(f"Unknown easing curve {family!s}.{variant!s}")

    def __str__(self) -> str:
        # KeyError repr-quotes its argument
        return str(self.args[0])


class _NamedEnum(Enum):
    """Enum that also resolves its own member names, case-insensitively."""

    @classmethod
    def _missing_(cls, value: object) -> _NamedEnum | None:
        if not isinstance(value, str):
            return None
        key = value.replace("-", "_").replace(" ", "_").lower()
        for member in cls:
            if key in (member.name.lower(), member.value.lower()):
                return member
        return None

    def __str__(self) -> str:
        return self.value


class Family(_NamedEnum):
    LINEAR = "Linear"
    QUADRATIC = "Quadratic"
    CUBIC = "Cubic"
    QUARTIC = "Quartic"
    QUINTIC = "Quintic"
    SINUSOIDAL = "Sinusoidal"
    EXPONENTIAL = "Exponential"
    CIRCULAR = "Circular"
    ELASTIC = "Elastic"
    BACK = "Back"
    BOUNCE = "Bounce"


class Variant(_NamedEnum):
    IN = "In"
    OUT = "Out"
    IN_OUT = "InOut"


class Infinite(Enum):
    """Unbounded loop count. ``INFINITE`` is the only member."""

    INFINITE = "infinite"

    def __repr__(self) -> str:
        return "INFINITE"


INFINITE = Infinite.INFINITE


@dataclass(frozen=True, slots=True)
class Finite:
    """A bounded loop count of at least one cycle."""

    count: int

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise InvalidConfiguration(f"loop count must be an int, got {self.count!r}")
        if self.count < 1:
            raise InvalidConfiguration(f"finite loop count must be >= 1, got {self.count}")


LoopCount = Finite | Infinite


def loop_count(value: int | LoopCount) -> LoopCount:
    """Normalize a configured loop value.

    ``0`` means infinite, positive ints are finite counts. Negative or
    non-integer values raise InvalidConfiguration.
    """
    if isinstance(value, (Finite, Infinite)):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"loop must be an int or LoopCount, got {value!r}")
    if value < 0:
        raise InvalidConfiguration(f"loop must be >= 0 (0 means infinite), got {value}")
    if value == 0:
        return INFINITE
    return Finite(value)


def positive_duration(value: float) -> float:
    """Validate a cycle duration in seconds."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfiguration(f"duration must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfiguration(f"duration must be positive and finite, got {value}")
    return float(value)


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


Handler = Callable[[float, FrameContext], None]
Hook = Callable[[FrameContext], None]
