"""Export helpers for sampled progress curves."""

from .to_numpy import sample_progress, to_numpy

__all__ = ["sample_progress", "to_numpy"]
