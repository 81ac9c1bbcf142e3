"""Core algorithms and data structures for animprogress."""

from .progress import compute_progress, progress_curve
from .timing import EffectTiming, ManualTimeline, Timeline
from .animation import Animation

__all__ = [
    "compute_progress",
    "progress_curve",
    "EffectTiming",
    "ManualTimeline",
    "Timeline",
    "Animation",
]
