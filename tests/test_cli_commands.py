import json

import numpy as np
import pytest
from typer.testing import CliRunner

from animprogress.cli import app


runner = CliRunner()


@pytest.mark.parametrize(
    "args, expected",
    [
        (["--current-time", "500", "--end-time", "1000"], "0.5"),
        (["--current-time=-100", "--end-time", "1000"], "0"),
        (["--current-time", "1500", "--end-time", "1000"], "1"),
        (["--current-time", "0", "--end-time", "0"], "1"),
        (["--current-time=-5", "--end-time", "0"], "0"),
        (["--current-time", "5s", "--end-time", "inf"], "0"),
        (["--current-time", "25%", "--end-time", "100%"], "0.25"),
        (["--end-time", "1000"], "null"),
        (["--current-time", "500", "--end-time", "1000", "--no-effect"], "null"),
    ],
)
def test_compute(args, expected):
    result = runner.invoke(app, ["compute", *args])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == expected


def test_compute_rejects_bad_input():
    result = runner.invoke(app, ["compute", "--current-time", "0", "--end-time=-5"])
    assert result.exit_code != 0
    result = runner.invoke(app, ["compute", "--current-time", "soon", "--end-time", "1"])
    assert result.exit_code != 0


def test_sample_prints_pairs():
    result = runner.invoke(
        app,
        ["--set", "timing.duration=1s", "sample", "--start", "0", "--stop", "1s", "-n", "3"],
    )
    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["0 0", "500 0.5", "1000 1"]


def test_sample_iteration_mode_from_config(tmp_path):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(
        json.dumps(
            {
                "timing": {"duration": 100, "iterations": 2},
                "sample": {"start": 0, "stop": 200, "num": 5, "mode": "iteration"},
            }
        )
    )
    out = tmp_path / "curve.npz"
    result = runner.invoke(app, ["--config", str(cfg), "sample", "--output", str(out)])
    assert result.exit_code == 0, result.output
    assert "saved 5 samples" in result.stdout
    with np.load(out) as data:
        np.testing.assert_allclose(data["progress"], [0.0, 0.5, 0.0, 0.5, 1.0])


def test_sample_output_formats(tmp_path):
    csv_path = tmp_path / "curve.csv"
    npy_path = tmp_path / "curve.npy"
    for path in (csv_path, npy_path):
        result = runner.invoke(app, ["sample", "-n", "2", "--output", str(path)])
        assert result.exit_code == 0, result.output
    assert csv_path.read_text().startswith("time,progress")
    assert np.load(npy_path).shape == (2, 2)

    result = runner.invoke(app, ["sample", "--output", str(tmp_path / "curve.txt")])
    assert result.exit_code != 0


def test_overrides_are_validated():
    result = runner.invoke(app, ["--set", "timing.bogus=1", "sample"])
    assert result.exit_code != 0
    result = runner.invoke(app, ["--set", "timing.duration=-1", "sample"])
    assert result.exit_code != 0
    result = runner.invoke(app, ["--set", "timing", "sample"])
    assert result.exit_code != 0
    result = runner.invoke(app, ["--set", "logging.level=bogus", "compute", "-t", "1", "-e", "2"])
    assert result.exit_code == 2


def test_missing_config_file(tmp_path):
    result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml"), "sample"])
    assert result.exit_code != 0


def test_viz_saves_figure(tmp_path):
    pytest.importorskip("matplotlib")
    out = tmp_path / "curve.png"
    result = runner.invoke(app, ["viz", "--mode", "iteration", "--save", str(out)])
    assert result.exit_code == 0, result.output
    assert out.exists()
