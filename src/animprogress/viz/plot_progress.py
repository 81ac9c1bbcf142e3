"""Plot sampled progress curves."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

PROGRESS_RC = {
    "figure.figsize": (8, 4),
    "axes.grid": True,
    "grid.linestyle": "--",
    "grid.alpha": 0.5,
    "lines.linewidth": 1.5,
}

# Margins keep the clamped 0 and 1 plateaus off the frame.
Y_LIMITS = (-0.05, 1.05)
Y_TICKS = (0.0, 0.5, 1.0)


def load_samples(path: str | Path) -> tuple[np.ndarray, np.ndarray]:
    """Load ``(times, values)`` written by :func:`~animprogress.export.to_numpy`.

    ``.npz`` archives are read by entry name, ``.npy`` as the stacked
    ``(n, 2)`` array, and any other extension as CSV with a ``time,progress``
    header.
    """
    p = Path(path)
    if p.suffix == ".npz":
        with np.load(p) as data:
            return data["time"], data["progress"]
    if p.suffix == ".npy":
        arr = np.load(p)
    else:
        arr = np.loadtxt(p, delimiter=",", skiprows=1, ndmin=2)
    return arr[:, 0], arr[:, 1]


def plot_progress(
    ax: plt.Axes,
    times: Sequence[float],
    values: Sequence[float],
    label: str | None = None,
    **kwargs,
) -> None:
    """Plot a progress curve on ``ax``.  NaN samples leave gaps."""
    with plt.rc_context(PROGRESS_RC):
        ax.plot(times, values, label=label, **kwargs)
    ax.set_ylim(*Y_LIMITS)
    ax.set_yticks(Y_TICKS)
    ax.set_xlabel("Current time")
    ax.set_ylabel("Progress")
    if label:
        ax.legend()


def new_figure() -> tuple[plt.Figure, plt.Axes]:
    """Return a figure and axes sized for a single progress curve."""
    with plt.rc_context(PROGRESS_RC):
        return plt.subplots()


def save_or_show(fig: plt.Figure, save: str | Path | None = None, show: bool = False) -> None:
    """Save ``fig`` to ``save`` or display it interactively.

    When neither is requested the figure is shown.
    """
    if save:
        fig.savefig(save, bbox_inches="tight")
    if show or not save:
        plt.show()


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Plot one or more sampled progress curves")
    parser.add_argument("samples", nargs="+", help="Paths to sample files (.csv, .npy or .npz)")
    parser.add_argument("--labels", nargs="*", help="Optional labels for each curve")
    parser.add_argument("--title", default="Animation progress")
    parser.add_argument("--save", help="Path to save the figure")
    parser.add_argument("--show", action="store_true", help="Display the figure interactively")
    args = parser.parse_args(argv)

    if args.labels and len(args.labels) != len(args.samples):
        parser.error("Number of labels must match number of sample files")

    fig, ax = new_figure()
    labels = args.labels or [Path(p).stem for p in args.samples]
    for path, label in zip(args.samples, labels):
        times, values = load_samples(path)
        plot_progress(ax, times, values, label=label)
    ax.set_title(args.title)

    save_or_show(fig, args.save, args.show)


if __name__ == "__main__":
    main()
