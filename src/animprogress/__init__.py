"""Normalised progress for time- and scroll-driven animations."""

from .types import ProgressMode, TimingSnapshot
from .core import (
    Animation,
    EffectTiming,
    ManualTimeline,
    Timeline,
    compute_progress,
    progress_curve,
)

__version__ = "0.1.0"

__all__ = [
    "ProgressMode",
    "TimingSnapshot",
    "Animation",
    "EffectTiming",
    "ManualTimeline",
    "Timeline",
    "compute_progress",
    "progress_curve",
]
