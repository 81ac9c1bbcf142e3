from __future__ import annotations

"""Animation object exposing the progress accessors."""

import logging
from typing import Optional

from ..types import ProgressMode, TimingSnapshot
from .progress import compute_progress
from .timing import EffectTiming, Timeline

logger = logging.getLogger(__name__)


class Animation:
    """Couples an :class:`EffectTiming` to a :class:`Timeline`.

    The current time follows the timeline while the animation is playing
    (``start_time`` set) and is frozen in a hold time otherwise, e.g. after
    :meth:`pause` or when assigned without a running timeline.

    ``overall_progress`` is the canonical accessor; ``progress`` returns the
    same value.  ``iteration_progress`` measures only the current iteration.
    """

    def __init__(
        self,
        effect: Optional[EffectTiming] = None,
        timeline: Optional[Timeline] = None,
        start_time: Optional[float] = None,
        playback_rate: float = 1.0,
    ) -> None:
        self.effect = effect
        self.timeline = timeline
        self.start_time = start_time
        self.playback_rate = float(playback_rate)
        self._hold_time: Optional[float] = None

    def _timeline_time(self) -> Optional[float]:
        if self.timeline is None:
            return None
        return self.timeline.current_time

    # ------------------------------------------------------------------
    # Time control
    # ------------------------------------------------------------------

    @property
    def current_time(self) -> Optional[float]:
        if self._hold_time is not None:
            return self._hold_time
        timeline_time = self._timeline_time()
        if timeline_time is None or self.start_time is None:
            return None
        return (timeline_time - self.start_time) * self.playback_rate

    @current_time.setter
    def current_time(self, value: Optional[float]) -> None:
        if value is None:
            self._hold_time = None
            return
        value = float(value)
        timeline_time = self._timeline_time()
        if timeline_time is None or self.start_time is None or self.playback_rate == 0:
            self._hold_time = value
        else:
            self._hold_time = None
            self.start_time = timeline_time - value / self.playback_rate

    @property
    def is_playing(self) -> bool:
        return self._hold_time is None and self.start_time is not None

    def play(self) -> None:
        """Run the animation against its timeline from the held time (or 0)."""

        if self.is_playing:
            return
        timeline_time = self._timeline_time()
        seek = self._hold_time if self._hold_time is not None else 0.0
        if timeline_time is None or self.playback_rate == 0:
            logger.debug("timeline inactive; holding current time at %s", seek)
            self._hold_time = seek
            return
        self.start_time = timeline_time - seek / self.playback_rate
        self._hold_time = None

    def pause(self) -> None:
        """Freeze the current time."""

        current = self.current_time
        self._hold_time = 0.0 if current is None else current
        self.start_time = None

    def cancel(self) -> None:
        """Drop all timing state; progress becomes undefined."""

        self.start_time = None
        self._hold_time = None

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------

    def snapshot(self, mode: ProgressMode = ProgressMode.OVERALL) -> TimingSnapshot:
        """Return the timing inputs for the progress computation in ``mode``."""

        current = self.current_time
        if self.effect is None:
            return TimingSnapshot(current, has_effect=False, end_time=0.0, start_time=self.start_time)
        return self.effect.snapshot(current, mode, start_time=self.start_time)

    @property
    def overall_progress(self) -> Optional[float]:
        return compute_progress(self.snapshot(ProgressMode.OVERALL))

    @property
    def progress(self) -> Optional[float]:
        return self.overall_progress

    @property
    def iteration_progress(self) -> Optional[float]:
        return compute_progress(self.snapshot(ProgressMode.ITERATION))

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return (
            f"Animation(effect={self.effect!r}, timeline={self.timeline!r}, "
            f"start_time={self.start_time!r}, playback_rate={self.playback_rate!r})"
        )


__all__ = ["Animation"]
