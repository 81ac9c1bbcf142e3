from __future__ import annotations

"""Utilities for sampling progress curves into NumPy arrays."""

from pathlib import Path
from typing import Sequence

import numpy as np

from ..core.progress import progress_curve
from ..core.timing import EffectTiming
from ..types import ProgressMode


def sample_progress(
    effect: EffectTiming | None,
    start: float,
    stop: float,
    num: int,
    mode: ProgressMode | str = ProgressMode.OVERALL,
) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(times, values)`` for ``num`` evenly spaced current times.

    Parameters
    ----------
    effect:
        Timing of the sampled effect.  ``None`` models an animation without an
        effect, whose progress is undefined everywhere.
    start, stop:
        Inclusive range of current times, in timeline units.
    num:
        Number of samples.
    mode:
        :class:`~animprogress.types.ProgressMode` selecting overall or
        per-iteration progress.

    Returns
    -------
    tuple of numpy.ndarray
        Sample times and the matching progress values.  Undefined progress is
        ``NaN``.
    """

    if num < 1:
        raise ValueError("num must be positive")
    times = np.linspace(start, stop, num)
    mode = ProgressMode(mode)
    if effect is None:
        return times, progress_curve(times, 0.0, has_effect=False)
    if mode is ProgressMode.OVERALL:
        return times, progress_curve(times, effect.end_time)

    # Per-iteration end times and local times vary per sample.
    values = np.empty(times.shape, dtype=float)
    for i, t in enumerate(times):
        snap = effect.iteration_snapshot(float(t))
        values[i] = progress_curve([snap.current_time], snap.end_time)[0]
    return times, values


def to_numpy(
    times: Sequence[float] | np.ndarray,
    values: Sequence[float] | np.ndarray,
    *,
    save_csv: str | Path | None = None,
    save_npz: str | Path | None = None,
) -> np.ndarray:
    """Return a ``(n_samples, 2)`` array of ``time, progress`` rows.

    Parameters
    ----------
    times, values:
        Sequences of equal length, typically produced by
        :func:`sample_progress`.
    save_csv, save_npz:
        Optional paths.  If provided the samples are persisted either as a CSV
        file with a ``time,progress`` header or an ``.npz`` archive with
        ``time`` and ``progress`` entries.
    """

    t = np.asarray(times, dtype=float).reshape(-1)
    v = np.asarray(values, dtype=float).reshape(-1)

    if t.shape[0] != v.shape[0]:
        raise ValueError("times and values must contain the same number of samples")

    arr = np.column_stack([t, v])

    if save_csv:
        np.savetxt(Path(save_csv), arr, delimiter=",", header="time,progress", comments="")

    if save_npz:
        np.savez(Path(save_npz), time=t, progress=v)

    return arr
