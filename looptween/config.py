"""Tween configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from looptween.easing import lookup
from looptween.types import (
    Curve,
    Family,
    InvalidConfiguration,
    LoopCount,
    Variant,
    loop_count,
    positive_duration,
)


@dataclass(frozen=True)
class TweenConfig:
    """Immutable configuration for a Tween and the curve it is played with.

    Attributes:
        duration: Seconds per cycle. Must be positive.
        loop: Number of cycles; ``0`` (or ``INFINITE``) loops forever.
        pingpong: Mirror the eased phase on odd cycles.
        family: Easing family, as a Family member or its name.
        variant: Easing variant, as a Variant member or its name.

    Values are validated and normalized on construction: ``loop`` becomes a
    LoopCount and ``family``/``variant`` become enum members.
    """

    duration: float = 1.0
    loop: int | LoopCount = 1
    pingpong: bool = False
    family: Family | str = Family.LINEAR
    variant: Variant | str = Variant.IN_OUT

    def __post_init__(self) -> None:
        lookup(self.family, self.variant)
        object.__setattr__(self, "duration", positive_duration(self.duration))
        object.__setattr__(self, "loop", loop_count(self.loop))
        object.__setattr__(self, "pingpong", bool(self.pingpong))
        object.__setattr__(self, "family", Family(self.family))
        object.__setattr__(self, "variant", Variant(self.variant))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TweenConfig:
        """Build a config from plain data, e.g. a parsed JSON object."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidConfiguration(f"Unknown tween config keys: {', '.join(unknown)}")
        return cls(**data)

    @property
    def curve(self) -> Curve:
        return lookup(self.family, self.variant)

    def advance_options(self) -> dict[str, Any]:
        """Keyword arguments selecting this config's curve in Tween.advance."""
        return {"family": self.family, "variant": self.variant}
