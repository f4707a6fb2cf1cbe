"""Frame-driven delayed callbacks and once-only wrappers."""

from __future__ import annotations

import logging
import math
from typing import Any, Callable

from looptween.types import InvalidConfiguration

logger = logging.getLogger(__name__)


class DelayedCall:
    """One-shot callback fired once accumulated frame time passes ``delay``.

    Feed it frame deltas with ``update``. The callback runs on the first
    update where the total is strictly greater than ``delay``; later updates
    do nothing.
    """

    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        if not math.isfinite(delay) or delay < 0:
            raise InvalidConfiguration(f"delay must be finite and >= 0, got {delay}")
        self._delay = float(delay)
        self._callback = callback
        self._time = 0.0
        self._fired = False

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def remaining(self) -> float:
        return max(0.0, self._delay - self._time)

    def update(self, dt: float) -> bool:
        """Accumulate ``dt``. Returns True while the call is still pending."""
        if self._fired:
            return False
        self._time += dt
        if self._time > self._delay:
            self._fired = True
            logger.debug(f"Delayed call fired after {self._time:.3f}s (delay={self._delay}s)")
            self._callback()
            return False
        return True


class SingleCall:
    """Wrap ``fn`` so only the first call goes through until ``reset``.

    Later calls return None without invoking ``fn``.
    """

    def __init__(self, fn: Callable[..., Any]) -> None:
        self._fn = fn
        self._called = False

    @property
    def called(self) -> bool:
        return self._called

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self._called:
            return None
        self._called = True
        return self._fn(*args, **kwargs)

    def reset(self) -> None:
        self._called = False
