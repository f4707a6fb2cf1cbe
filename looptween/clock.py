"""FrameClock and FrameContext for frame-driven hosts."""

from __future__ import annotations

import time
from typing import Callable

from looptween.types import FrameContext, InvalidConfiguration


class FrameClock:
    def __init__(self, tps: int = 60) -> None:
        if tps <= 0:
            raise InvalidConfiguration("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._frame_number = 0
        self._elapsed = 0.0
        self._last_sample: float | None = None

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float | None = None) -> int:
        """Count one frame of ``dt`` seconds (the fixed step by default)."""
        self._frame_number += 1
        self._elapsed += self._dt if dt is None else dt
        return self._frame_number

    def measure(self) -> float:
        """Wall-clock seconds since the previous call; 0.0 on the first."""
        now = time.monotonic()
        delta = 0.0 if self._last_sample is None else now - self._last_sample
        self._last_sample = now
        return delta

    def context(self, stop_fn: Callable[[], None], dt: float | None = None) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt if dt is None else dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
        )

    def reset(self, frame_number: int = 0, elapsed: float | None = None) -> None:
        """Rewind to ``frame_number``.

        Without ``elapsed`` the clock assumes every frame was a fixed step.
        Pass it explicitly when frames were advanced with custom deltas.
        """
        self._frame_number = frame_number
        self._elapsed = frame_number * self._dt if elapsed is None else elapsed
        self._last_sample = None
