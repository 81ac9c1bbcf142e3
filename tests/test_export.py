import math

import numpy as np
import pytest

from animprogress.core import EffectTiming
from animprogress.export import sample_progress, to_numpy
from animprogress.types import ProgressMode


def test_sample_overall():
    effect = EffectTiming(duration=1000.0, iterations=2.0)
    times, values = sample_progress(effect, 0.0, 2000.0, 5)
    np.testing.assert_allclose(times, [0.0, 500.0, 1000.0, 1500.0, 2000.0])
    np.testing.assert_allclose(values, [0.0, 0.25, 0.5, 0.75, 1.0])


def test_sample_iteration():
    effect = EffectTiming(duration=1000.0, iterations=2.0)
    _, values = sample_progress(effect, 0.0, 2000.0, 5, mode=ProgressMode.ITERATION)
    np.testing.assert_allclose(values, [0.0, 0.5, 0.0, 0.5, 1.0])


def test_sample_without_effect_is_nan():
    _, values = sample_progress(None, 0.0, 10.0, 3)
    assert np.isnan(values).all()


def test_sample_infinite_duration():
    _, values = sample_progress(EffectTiming(duration=math.inf), 0.0, 10.0, 3, mode="iteration")
    np.testing.assert_array_equal(values, [0.0, 0.0, 0.0])


def test_sample_rejects_empty_grid():
    with pytest.raises(ValueError):
        sample_progress(EffectTiming(duration=1.0), 0.0, 1.0, 0)


def test_to_numpy_saves(tmp_path):
    csv_path = tmp_path / "curve.csv"
    npz_path = tmp_path / "curve.npz"
    arr = to_numpy([0.0, 1.0], [0.0, np.nan], save_csv=csv_path, save_npz=npz_path)
    assert arr.shape == (2, 2)
    assert csv_path.read_text().splitlines()[0] == "time,progress"
    loaded = np.loadtxt(csv_path, delimiter=",", skiprows=1)
    np.testing.assert_allclose(loaded, arr)
    with np.load(npz_path) as data:
        np.testing.assert_allclose(data["time"], [0.0, 1.0])
        assert np.isnan(data["progress"][1])


def test_to_numpy_length_mismatch():
    with pytest.raises(ValueError):
        to_numpy([0.0, 1.0], [0.0])
