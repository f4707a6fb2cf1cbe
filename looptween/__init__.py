"""looptween - Frame-driven tweening with looping, ping-pong and easing curves."""

from looptween.clock import FrameClock
from looptween.config import TweenConfig
from looptween.easing import EASINGS, curves, lookup, variants
from looptween.schedule import DelayedCall, SingleCall
from looptween.ticker import Ticker
from looptween.tween import Tween
from looptween.types import (
    INFINITE,
    Family,
    Finite,
    FrameContext,
    InvalidConfiguration,
    LoopCount,
    LoopTweenError,
    UnknownCurve,
    Variant,
)

__all__ = [
    "Tween",
    "TweenConfig",
    "Family",
    "Variant",
    "EASINGS",
    "lookup",
    "variants",
    "curves",
    "Finite",
    "INFINITE",
    "LoopCount",
    "Ticker",
    "FrameClock",
    "FrameContext",
    "DelayedCall",
    "SingleCall",
    "LoopTweenError",
    "InvalidConfiguration",
    "UnknownCurve",
]
