"""Common type helpers for animprogress.

This module defines the lightweight value containers exchanged between the
timing model and the progress calculator.  The structures are intentionally
minimal; they carry no behaviour beyond validating their own invariants.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Optional


class ProgressMode(str, enum.Enum):
    """Selects which end time a snapshot is built against."""

    OVERALL = "overall"
    ITERATION = "iteration"


@dataclass(frozen=True)
class TimingSnapshot:
    """Read-only view of an animation's timing at one observation.

    Parameters
    ----------
    current_time:
        Position along the timeline, already expressed in the same unit as
        ``end_time``.  ``None`` means the animation has no current time.
    has_effect:
        ``False`` when the animation has no associated effect.
    end_time:
        End point of the effect (or of the current iteration).  Non-negative,
        possibly ``math.inf``.  Ignored when ``has_effect`` is false.
    start_time:
        Informational only; never read by the progress computation.
    """

    current_time: Optional[float]
    has_effect: bool = True
    end_time: float = 0.0
    start_time: Optional[float] = None

    def __post_init__(self) -> None:
        if self.has_effect:
            if math.isnan(self.end_time):
                raise ValueError("end_time must not be NaN")
            if self.end_time < 0:
                raise ValueError("end_time must be non-negative")
