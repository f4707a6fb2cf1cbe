"""Gallery state: one tween per variant lane, all driven by one Ticker."""
from __future__ import annotations

import logging

from looptween import Family, Ticker, Tween, Variant, variants
from looptween.types import Handler

from ui.constants import FAMILIES, LOOP_PRESETS

logger = logging.getLogger(__name__)


class Lane:
    """A variant lane: its tween and the latest eased value it produced."""

    def __init__(self, variant: Variant, tween: Tween) -> None:
        self.variant = variant
        self.tween = tween
        self.value = 0.0
        self.cycles_done = 0
        self.finished = False
        self.handler: Handler | None = None

    def on_value(self, value: float) -> None:
        self.value = value

    def on_cycle(self) -> None:
        self.cycles_done += 1

    def on_finished(self) -> None:
        self.finished = True


class GalleryState:
    """Holds the ticker, the lanes and the user's settings."""

    def __init__(self, tps: int) -> None:
        self.ticker = Ticker(tps=tps)
        self.family_index = FAMILIES.index(Family.QUADRATIC)
        self.duration = 1.5
        self.loop_index = 0
        self.pingpong = True
        self.lanes: list[Lane] = []
        self.rebuild()

    @property
    def family(self) -> Family:
        return FAMILIES[self.family_index]

    @property
    def loop(self) -> int:
        return LOOP_PRESETS[self.loop_index]

    def rebuild(self) -> None:
        """Replace all lanes with fresh tweens for the current settings."""
        for lane in self.lanes:
            if lane.handler is not None:
                self.ticker.remove(lane.handler)
        self.lanes = []
        for variant in variants(self.family):
            tween = Tween(duration=self.duration, loop=self.loop, pingpong=self.pingpong)
            lane = Lane(variant, tween)
            lane.handler = self.ticker.bind(
                tween,
                lane.on_value,
                on_cycle_complete=lane.on_cycle,
                on_all_cycles_complete=lane.on_finished,
                family=self.family,
                variant=variant,
            )
            self.lanes.append(lane)
        logger.info(
            f"Showing {self.family} ({len(self.lanes)} variants), "
            f"duration={self.duration}s loop={self.loop} pingpong={self.pingpong}"
        )

    def next_family(self, step: int) -> None:
        self.family_index = (self.family_index + step) % len(FAMILIES)
        self.rebuild()

    def next_loop(self) -> None:
        self.loop_index = (self.loop_index + 1) % len(LOOP_PRESETS)
        self.rebuild()

    def toggle_pingpong(self) -> None:
        self.pingpong = not self.pingpong
        for lane in self.lanes:
            lane.tween.pingpong = self.pingpong

    def change_duration(self, delta: float) -> None:
        self.duration = max(0.25, min(5.0, self.duration + delta))
        for lane in self.lanes:
            lane.tween.duration = self.duration

    def pause_resume(self) -> None:
        for lane in self.lanes:
            lane.tween.pause_resume()

    def reverse(self) -> None:
        for lane in self.lanes:
            lane.tween.reverse()
            lane.finished = False

    def reset(self) -> None:
        for lane in self.lanes:
            lane.tween.reset()
            lane.cycles_done = 0
            lane.finished = False
