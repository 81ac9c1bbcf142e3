from __future__ import annotations

"""Normalised progress of an animation.

The single computation in this module maps a :class:`TimingSnapshot` to a
value in the closed interval ``[0, 1]`` or to ``None`` when progress is
undefined.  Branch order matters: both the zero-length and the unbounded
cases are resolved before the general division

.. math::

   p = \\min(1, \\max(0, t / T_{end}))

where ``t`` is the current time and :math:`T_{end}` the end time carried by
the snapshot.
"""

import logging
import math
from typing import Optional, Sequence

import numpy as np

from ..types import TimingSnapshot

logger = logging.getLogger(__name__)


def compute_progress(snapshot: TimingSnapshot) -> Optional[float]:
    """Return the progress described by ``snapshot``.

    Parameters
    ----------
    snapshot:
        Timing inputs.  Per-iteration and overall progress differ only in
        which ``end_time`` the snapshot carries.

    Returns
    -------
    float or None
        ``None`` when there is no current time (including NaN) or no effect,
        otherwise a float clamped to ``[0, 1]``.
    """

    current = snapshot.current_time
    if current is None or not snapshot.has_effect:
        return None
    if math.isnan(current):
        logger.debug("current_time is NaN; treating progress as undefined")
        return None

    end = snapshot.end_time
    if end == 0:
        return 0.0 if current < 0 else 1.0
    if math.isinf(end):
        return 0.0

    raw = float(current) / float(end)
    return max(0.0, min(1.0, raw))


def progress_curve(
    current_times: Sequence[float] | np.ndarray,
    end_time: float,
    has_effect: bool = True,
) -> np.ndarray:
    """Vectorised :func:`compute_progress` over an array of current times.

    Undefined progress is encoded as ``NaN`` since arrays have no ``None``.
    """

    t = np.asarray(current_times, dtype=float)
    if not has_effect:
        return np.full(t.shape, np.nan)
    if end_time < 0 or math.isnan(end_time):
        raise ValueError("end_time must be non-negative")

    if end_time == 0:
        out = np.where(t < 0, 0.0, 1.0)
    elif math.isinf(end_time):
        out = np.zeros(t.shape)
    else:
        out = np.clip(t / end_time, 0.0, 1.0)
    return np.where(np.isnan(t), np.nan, out)


__all__ = ["compute_progress", "progress_curve"]
