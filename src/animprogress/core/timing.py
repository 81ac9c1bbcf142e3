from __future__ import annotations

"""Effect timing and timelines feeding the progress calculator.

This is a reduced timing model: it derives an effect's end time from its
delays, iteration duration and iteration count, and reduces a timeline
position to the :class:`TimingSnapshot` consumed by
:func:`~animprogress.core.progress.compute_progress`.  All times share one
unit (milliseconds for document timelines, percent for scroll timelines).
"""

import math
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from ..config import Settings
from ..types import ProgressMode, TimingSnapshot


@runtime_checkable
class Timeline(Protocol):
    """Protocol describing the source of an animation's time.

    ``current_time`` is ``None`` while the timeline is inactive, e.g. a scroll
    container that cannot scroll.
    """

    name: str
    current_time: Optional[float]


class ManualTimeline:
    """Timeline whose position is set explicitly by the host."""

    def __init__(self, current_time: Optional[float] = None, name: str = "manual") -> None:
        self.name = name
        self.current_time = current_time

    def advance(self, delta: float) -> None:
        """Move the timeline forward by ``delta``."""

        if self.current_time is None:
            raise ValueError("cannot advance an inactive timeline")
        self.current_time += delta

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"ManualTimeline(current_time={self.current_time!r}, name={self.name!r})"


@dataclass(frozen=True)
class EffectTiming:
    """Timing properties of an animation effect.

    Parameters
    ----------
    duration:
        Length of a single iteration.  May be ``math.inf``.
    iterations:
        Number of iterations, possibly fractional or ``math.inf``.
    delay:
        Start delay before the active phase.  May be negative.
    end_delay:
        Delay after the active phase.  May be negative.
    """

    duration: float = 0.0
    iterations: float = 1.0
    delay: float = 0.0
    end_delay: float = 0.0

    def __post_init__(self) -> None:
        for name in ("duration", "iterations", "delay", "end_delay"):
            if math.isnan(getattr(self, name)):
                raise ValueError(f"{name} must not be NaN")
        if self.duration < 0:
            raise ValueError("duration must be non-negative")
        if self.iterations < 0:
            raise ValueError("iterations must be non-negative")
        if math.isinf(self.delay) or math.isinf(self.end_delay):
            raise ValueError("delay and end_delay must be finite")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "EffectTiming":
        """Build an :class:`EffectTiming` from the ``timing`` settings section."""

        if settings is None:
            settings = Settings()
        cfg = settings.timing
        return cls(
            duration=cfg.duration,
            iterations=cfg.iterations,
            delay=cfg.delay,
            end_delay=cfg.end_delay,
        )

    @property
    def active_duration(self) -> float:
        """Return the length of the active phase across all iterations."""

        if self.duration == 0 or self.iterations == 0:
            return 0.0
        return self.duration * self.iterations

    @property
    def end_time(self) -> float:
        """Return the end of the effect including both delays, floored at 0."""

        return max(self.delay + self.active_duration + self.end_delay, 0.0)

    def overall_snapshot(
        self, current_time: Optional[float], start_time: Optional[float] = None
    ) -> TimingSnapshot:
        """Snapshot measuring ``current_time`` against the effect end time."""

        return TimingSnapshot(
            current_time=current_time,
            has_effect=True,
            end_time=self.end_time,
            start_time=start_time,
        )

    def iteration_snapshot(
        self, current_time: Optional[float], start_time: Optional[float] = None
    ) -> TimingSnapshot:
        """Snapshot measuring the time within the current iteration.

        The returned ``current_time`` is local to the iteration and
        ``end_time`` is the iteration duration.  Before the active phase the
        first iteration is used; after it the last one, evaluated at the end of
        the active phase so that fractional iteration counts stop part-way.
        """

        if current_time is None or math.isnan(current_time):
            return TimingSnapshot(current_time, True, self.duration, start_time)

        active = current_time - self.delay
        if self.duration == 0 or self.iterations == 0:
            return TimingSnapshot(active, True, 0.0, start_time)
        if math.isinf(self.duration):
            return TimingSnapshot(active, True, math.inf, start_time)

        if active < 0:
            local = active
        elif math.isfinite(self.iterations) and active >= self.active_duration:
            last = math.ceil(self.iterations) - 1
            local = self.active_duration - last * self.duration
            if math.isclose(local, self.duration):
                local = self.duration
        else:
            _, local = divmod(active, self.duration)
            # a remainder within rounding of a full iteration starts the next one
            if math.isclose(local, self.duration):
                local = 0.0
        return TimingSnapshot(local, True, self.duration, start_time)

    def snapshot(
        self,
        current_time: Optional[float],
        mode: ProgressMode = ProgressMode.OVERALL,
        start_time: Optional[float] = None,
    ) -> TimingSnapshot:
        """Dispatch to the snapshot builder for ``mode``."""

        mode = ProgressMode(mode)
        if mode is ProgressMode.ITERATION:
            return self.iteration_snapshot(current_time, start_time)
        return self.overall_snapshot(current_time, start_time)


__all__ = ["Timeline", "ManualTimeline", "EffectTiming"]
