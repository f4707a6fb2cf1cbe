"""Tween - per-frame cycle, loop and ping-pong timer with easing output."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable

from looptween.easing import lookup
from looptween.types import (
    INFINITE,
    Family,
    Finite,
    LoopCount,
    Variant,
    loop_count,
    positive_duration,
)

if TYPE_CHECKING:
    from looptween.config import TweenConfig

logger = logging.getLogger(__name__)

_SINGLE_SHOT = Finite(1)

# Relative tolerance for landing on a cycle boundary from summed frame deltas.
_BOUNDARY_TOL = 1e-9


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _snap(elapsed: float, duration: float) -> float:
    """Pull ``elapsed`` onto 0 or ``duration`` when float drift left it just short."""
    tolerance = duration * _BOUNDARY_TOL
    if math.isclose(elapsed, duration, rel_tol=_BOUNDARY_TOL, abs_tol=tolerance):
        return duration
    if math.isclose(elapsed, 0.0, abs_tol=tolerance):
        return 0.0
    return elapsed


class Tween:
    """Timer that walks a progression through [0, 1] once per cycle.

    ``advance`` is called once per frame with the frame's delta time and
    returns the eased phase for that frame. Cycles repeat ``loop`` times
    (``0`` or ``INFINITE`` loops forever). With ``pingpong`` set, odd cycles
    feed the curve a mirrored phase.

    Reaching a boundary (progression 1 going forward, 0 going backward)
    counts a cycle, moves the timer to the opposite boundary while cycles
    remain, and otherwise holds it at the boundary reached.
    """

    def __init__(
        self,
        duration: float = 1.0,
        loop: int | LoopCount = 1,
        pingpong: bool = False,
    ) -> None:
        self._duration = positive_duration(duration)
        self._loop = loop_count(loop)
        self.pingpong = pingpong

        self._elapsed = 0.0
        self._flow = 1
        self._cycle = 0
        self._progression = 0.0
        self._paused = False

        self._cycle_fired = False
        self._complete_fired = False

    @classmethod
    def from_config(cls, config: TweenConfig) -> Tween:
        return cls(duration=config.duration, loop=config.loop, pingpong=config.pingpong)

    @property
    def duration(self) -> float:
        return self._duration

    @duration.setter
    def duration(self, value: float) -> None:
        self._duration = positive_duration(value)
        self._elapsed = min(self._elapsed, self._duration)

    @property
    def loop(self) -> LoopCount:
        return self._loop

    @loop.setter
    def loop(self, value: int | LoopCount) -> None:
        """Set the loop count. Completed cycles are capped at a lower count."""
        self._loop = loop_count(value)
        if self._loop is not INFINITE and self._cycle > self._loop.count:
            self._cycle = self._loop.count

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def cycle_index(self) -> int:
        return self._cycle

    @property
    def progression(self) -> float:
        return self._progression

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def reversed(self) -> bool:
        return self._flow < 0

    @property
    def finished(self) -> bool:
        """True once a finite loop count has been reached."""
        return not self._cycles_left()

    def _cycles_left(self) -> bool:
        return self._loop is INFINITE or self._cycle < self._loop.count

    def advance(
        self,
        dt: float,
        on_cycle_complete: Callable[[], None] | None = None,
        on_all_cycles_complete: Callable[[], None] | None = None,
        family: Family | str = Family.LINEAR,
        variant: Variant | str = Variant.IN_OUT,
    ) -> float:
        """Advance by ``dt`` seconds and return the eased value.

        Callbacks fire synchronously, before the value is returned:
        ``on_cycle_complete`` once per boundary crossing (never for a
        single-loop tween), then ``on_all_cycles_complete`` once when the
        last cycle ends. Raises UnknownCurve before touching any state.
        """
        curve = lookup(family, variant)

        if not self._paused:
            elapsed = _snap(self._elapsed + self._flow * dt, self._duration)
            self._elapsed = _clamp(elapsed, 0.0, self._duration)
        self._progression = _clamp(self._elapsed / self._duration, 0.0, 1.0)

        forward_complete = self._flow > 0 and self._progression == 1.0
        reverse_complete = self._flow < 0 and self._progression == 0.0
        if forward_complete or reverse_complete:
            self._cross_boundary(reverse_complete, on_cycle_complete, on_all_cycles_complete)

        phase = self._progression
        if self.pingpong and self._cycle % 2 != 0:
            phase = 1.0 - self._progression
        return curve(phase)

    def _cross_boundary(
        self,
        at_start: bool,
        on_cycle_complete: Callable[[], None] | None,
        on_all_cycles_complete: Callable[[], None] | None,
    ) -> None:
        if self._cycles_left():
            self._cycle += 1
            logger.debug(f"Tween cycle {self._cycle} complete (loop={self._loop!r})")

        more = self._cycles_left()
        if more:
            self._elapsed = self._duration if at_start else 0.0
        else:
            self._elapsed = 0.0 if at_start else self._duration

        if not self._cycle_fired and self._loop != _SINGLE_SHOT:
            self._cycle_fired = True
            if on_cycle_complete is not None:
                on_cycle_complete()

        if not self._complete_fired and not more:
            self._complete_fired = True
            logger.debug(f"Tween finished after {self._cycle} cycles")
            if on_all_cycles_complete is not None:
                on_all_cycles_complete()

        if more:
            self._cycle_fired = False

    def pause_resume(self) -> None:
        """Toggle pause. Paused tweens still report, but time stands still."""
        self._paused = not self._paused

    def reset(self) -> None:
        """Rewind to a fresh run. Duration, loop and pingpong are kept."""
        self._elapsed = 0.0
        self._flow = 1
        self._cycle = 0
        self._progression = 0.0
        self._paused = False
        self._cycle_fired = False
        self._complete_fired = False

    def reverse(self) -> None:
        """Flip the direction of time. Re-arms both callbacks."""
        self._flow = -self._flow
        self._cycle_fired = False
        self._complete_fired = False

    def __repr__(self) -> str:
        return (
            f"Tween(duration={self._duration}, loop={self._loop!r}, "
            f"pingpong={self.pingpong}, cycle_index={self._cycle}, "
            f"progression={self._progression:.3f}, reversed={self.reversed}, "
            f"paused={self._paused})"
        )
