from __future__ import annotations

"""Command line interface for animprogress using Typer."""

from pathlib import Path
from typing import Dict, List, Optional

import json
import logging

import numpy as np
import typer
from pydantic import ValidationError

from ._typer import bad_parameter
from .config import Settings, load_settings
from .core.progress import compute_progress
from .core.timing import EffectTiming
from .export import sample_progress, to_numpy
from .types import ProgressMode, TimingSnapshot
from .utils.logging import get_logger
from .utils.timeparse import parse_time

app = typer.Typer(help="Compute normalised animation progress")
logger = logging.getLogger(__name__)


def _parse_override_value(raw: str) -> object:
    lower = raw.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    if lower in {"null", "none"}:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        pass
    if raw.startswith("[") or raw.startswith("{"):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            raise typer.BadParameter(f"invalid JSON override value: {raw}") from None
    return raw


def _ensure_path(settings: Settings, keys: List[str]) -> None:
    current: object = settings
    for key in keys[:-1]:
        if not hasattr(current, key):
            raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")
        current = getattr(current, key)
    if not hasattr(current, keys[-1]):
        raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")


def _apply_override(data: Dict[str, object], keys: List[str], value: object) -> None:
    target = data
    for key in keys[:-1]:
        existing = target.get(key)
        if not isinstance(existing, dict):
            existing = {}
            target[key] = existing
        target = existing
    target[keys[-1]] = value


def _parse_time_option(value: Optional[str], name: str) -> Optional[float]:
    if value is None:
        return None
    try:
        return parse_time(value)
    except ValueError as exc:
        bad_parameter(str(exc), param_hint=name, cause=exc)


def _format_progress(value: Optional[float]) -> str:
    return "null" if value is None else f"{value:.6g}"


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        exists=False,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. timing.duration=2s",
    ),
) -> None:
    """Initialise the Typer context with validated settings."""

    if config is not None and not config.exists():
        raise typer.BadParameter(f"configuration file not found: {config}")

    try:
        settings = load_settings(config) if config else Settings()
    except (FileNotFoundError, RuntimeError, TypeError, json.JSONDecodeError, ValidationError) as exc:
        raise typer.BadParameter(f"failed to load configuration: {exc}") from exc

    if set_overrides:
        data = settings.model_dump()
        for override in set_overrides:
            if "=" not in override:
                raise typer.BadParameter(
                    "overrides must be of the form --set section.key=value"
                )
            key, raw_value = override.split("=", 1)
            if not key:
                raise typer.BadParameter("override key cannot be empty")
            keys = key.split(".")
            _ensure_path(settings, keys)
            value = _parse_override_value(raw_value)
            _apply_override(data, keys, value)
        try:
            settings = Settings.model_validate(data)
        except ValidationError as exc:
            raise typer.BadParameter(f"invalid configuration override: {exc}") from exc

    get_logger("animprogress", level=settings.logging.level, fmt=settings.logging.format)
    ctx.obj = settings


@app.command()
def compute(
    current_time: Optional[str] = typer.Option(
        None, "--current-time", "-t", help="Current time, e.g. 500, 1.5s or 40%"
    ),
    end_time: str = typer.Option(..., "--end-time", "-e", help="End time in the same unit"),
    no_effect: bool = typer.Option(False, "--no-effect", help="Model an animation without an effect"),
) -> None:
    """Print the progress for a single observation, or ``null`` if undefined."""

    t = _parse_time_option(current_time, "--current-time")
    end = _parse_time_option(end_time, "--end-time")
    try:
        snapshot = TimingSnapshot(current_time=t, has_effect=not no_effect, end_time=end)
    except ValueError as exc:
        bad_parameter(str(exc), param_hint="--end-time", cause=exc)
    value = compute_progress(snapshot)
    logger.debug("snapshot=%s progress=%s", snapshot, value)
    typer.echo(_format_progress(value))


def _sample(
    cfg: Settings,
    mode: Optional[ProgressMode],
    start: Optional[str],
    stop: Optional[str],
    num: Optional[int],
) -> tuple[np.ndarray, np.ndarray]:
    mode = mode or cfg.sample.mode
    start_f = _parse_time_option(start, "--start")
    stop_f = _parse_time_option(stop, "--stop")
    start_f = cfg.sample.start if start_f is None else start_f
    stop_f = cfg.sample.stop if stop_f is None else stop_f
    num = cfg.sample.num if num is None else num
    if num < 1:
        bad_parameter("num must be positive", param_hint="--num")
    try:
        effect = EffectTiming.from_settings(cfg)
    except ValueError as exc:
        bad_parameter(f"invalid timing configuration: {exc}", cause=exc)
    logger.info(
        "sampling %s progress of %s over [%s, %s] with %d points",
        mode.value, effect, start_f, stop_f, num,
    )
    return sample_progress(effect, start_f, stop_f, num, mode)


@app.command()
def sample(
    ctx: typer.Context,
    mode: Optional[ProgressMode] = typer.Option(None, "--mode", "-m", case_sensitive=False),
    start: Optional[str] = typer.Option(None, "--start"),
    stop: Optional[str] = typer.Option(None, "--stop"),
    num: Optional[int] = typer.Option(None, "--num", "-n"),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
) -> None:
    """Sample the configured effect's progress over a range of current times.

    With ``--output`` the samples are written as ``.csv``, ``.npz`` or
    ``.npy`` depending on the suffix; otherwise one ``time progress`` pair is
    printed per line, with ``null`` marking undefined progress.
    """

    cfg: Settings = ctx.obj
    times, values = _sample(cfg, mode, start, stop, num)

    if output is None:
        for t, v in zip(times, values):
            typer.echo(f"{t:g} {_format_progress(None if np.isnan(v) else float(v))}")
        return

    suffix = output.suffix.lower()
    if suffix == ".csv":
        to_numpy(times, values, save_csv=output)
    elif suffix == ".npz":
        to_numpy(times, values, save_npz=output)
    elif suffix == ".npy":
        np.save(output, to_numpy(times, values))
    else:
        bad_parameter(f"unsupported output format: {output.suffix}", param_hint="--output")
    typer.echo(f"saved {len(times)} samples to {output}")


@app.command()
def viz(
    ctx: typer.Context,
    mode: Optional[ProgressMode] = typer.Option(None, "--mode", "-m", case_sensitive=False),
    start: Optional[str] = typer.Option(None, "--start"),
    stop: Optional[str] = typer.Option(None, "--stop"),
    num: Optional[int] = typer.Option(None, "--num", "-n"),
    save: Optional[Path] = typer.Option(None, "--save"),
) -> None:
    """Plot the configured effect's progress curve using matplotlib if available."""

    cfg: Settings = ctx.obj
    times, values = _sample(cfg, mode, start, stop, num)
    try:
        from .viz.plot_progress import new_figure, plot_progress, save_or_show
    except ImportError:
        typer.echo("matplotlib not available, printing summary statistics")
        defined = values[~np.isnan(values)]
        if defined.size:
            typer.echo(
                f"samples={values.size} defined={defined.size} "
                f"min={float(defined.min()):.3f} max={float(defined.max()):.3f}"
            )
        else:
            typer.echo(f"samples={values.size} defined=0")
        return

    fig, ax = new_figure()
    plot_progress(ax, times, values, label=(mode or cfg.sample.mode).value)
    ax.set_title(cfg.viz.title)
    save_path = save or cfg.viz.save
    save_or_show(fig, save_path)
    if save_path:
        typer.echo(f"saved figure to {save_path}")


def main() -> None:
    """Execute the Typer application."""

    app()


if __name__ == "__main__":
    main()
