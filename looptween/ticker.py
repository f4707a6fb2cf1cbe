"""Ticker - frame loop, per-frame handler registration and lifecycle hooks."""

from __future__ import annotations

import logging
import time
from typing import Callable

from looptween.clock import FrameClock
from looptween.easing import lookup
from looptween.schedule import DelayedCall
from looptween.tween import Tween
from looptween.types import Family, FrameContext, Handler, Hook, Variant

logger = logging.getLogger(__name__)


class Ticker:
    """Calls registered handlers once per frame with that frame's delta.

    Handlers run in registration order as ``handler(dt, frame)``. A handler
    may add or remove handlers; changes apply from the next frame.
    """

    def __init__(self, tps: int = 60) -> None:
        self._clock = FrameClock(tps)
        self._handlers: list[Handler] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def handlers(self) -> tuple[Handler, ...]:
        return tuple(self._handlers)

    def add(self, handler: Handler) -> Handler:
        self._handlers.append(handler)
        return handler

    def remove(self, handler: Handler) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass

    def bind(
        self,
        tween: Tween,
        on_value: Callable[[float], None],
        *,
        on_cycle_complete: Callable[[], None] | None = None,
        on_all_cycles_complete: Callable[[], None] | None = None,
        family: Family | str = Family.LINEAR,
        variant: Variant | str = Variant.IN_OUT,
    ) -> Handler:
        """Drive ``tween`` every frame and pass its eased value to ``on_value``.

        The curve is resolved here, so an unknown selector raises
        UnknownCurve at bind time instead of on the first frame.
        """
        lookup(family, variant)
        family, variant = Family(family), Variant(variant)

        def tween_handler(dt: float, frame: FrameContext) -> None:
            on_value(tween.advance(
                dt,
                on_cycle_complete=on_cycle_complete,
                on_all_cycles_complete=on_all_cycles_complete,
                family=family,
                variant=variant,
            ))

        return self.add(tween_handler)

    def after(self, delay: float, callback: Callable[[], None]) -> DelayedCall:
        """Run ``callback`` once ``delay`` seconds of frame time have passed."""
        delayed = DelayedCall(delay, callback)

        def delayed_handler(dt: float, frame: FrameContext) -> None:
            if not delayed.update(dt):
                self.remove(delayed_handler)

        self.add(delayed_handler)
        return delayed

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, dt: float) -> None:
        self._clock.advance(dt)
        frame = self._clock.context(self._request_stop, dt)
        for handler in list(self._handlers):
            handler(dt, frame)
            if self._stop_requested:
                break

    def _run_hooks(self, hooks: list[Hook]) -> None:
        frame = self._clock.context(self._request_stop, 0.0)
        for hook in hooks:
            hook(frame)

    def step(self, dt: float | None = None) -> None:
        self._stop_requested = False
        self._tick(self._clock.dt if dt is None else dt)

    def run(self, n: int, dt: float | None = None) -> None:
        """Run ``n`` frames of ``dt`` seconds (the fixed step by default)."""
        step_dt = self._clock.dt if dt is None else dt
        self._stop_requested = False
        logger.debug(f"Ticker running {n} frames at dt={step_dt:.4f}")
        self._run_hooks(self._start_hooks)

        for _ in range(n):
            self._tick(step_dt)
            if self._stop_requested:
                break

        self._run_hooks(self._stop_hooks)
        logger.debug(f"Ticker stopped at frame {self._clock.frame_number}")

    def run_forever(self) -> None:
        """Run frames paced to the clock's rate, fed with measured deltas."""
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        target = self._clock.dt
        self._clock.measure()
        while not self._stop_requested:
            start = time.monotonic()
            self._tick(self._clock.measure())
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = target - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._run_hooks(self._stop_hooks)
        logger.debug(f"Ticker stopped at frame {self._clock.frame_number}")
