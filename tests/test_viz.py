import numpy as np
import pytest

pytest.importorskip("matplotlib")

from animprogress.core import EffectTiming
from animprogress.export import sample_progress, to_numpy
from animprogress.viz.plot_progress import Y_TICKS, load_samples, main, new_figure, plot_progress


@pytest.fixture
def samples():
    return sample_progress(EffectTiming(duration=100.0), -50.0, 150.0, 5)


@pytest.mark.parametrize("suffix", [".csv", ".npz", ".npy"])
def test_load_samples_reads_exported_files(tmp_path, samples, suffix):
    times, values = samples
    path = tmp_path / f"curve{suffix}"
    if suffix == ".csv":
        to_numpy(times, values, save_csv=path)
    elif suffix == ".npz":
        to_numpy(times, values, save_npz=path)
    else:
        np.save(path, to_numpy(times, values))

    loaded_times, loaded_values = load_samples(path)
    np.testing.assert_allclose(loaded_times, times)
    np.testing.assert_allclose(loaded_values, [0.0, 0.0, 0.5, 1.0, 1.0])


def test_load_samples_keeps_undefined_progress(tmp_path):
    path = tmp_path / "curve.csv"
    to_numpy([0.0, 1.0], [np.nan, 0.5], save_csv=path)
    _, values = load_samples(path)
    assert np.isnan(values[0])
    assert values[1] == 0.5


def test_plot_progress_axes(samples):
    fig, ax = new_figure()
    plot_progress(ax, *samples, label="overall")
    assert tuple(ax.get_yticks()) == Y_TICKS
    assert ax.get_ylabel() == "Progress"


def test_main_saves_figure(tmp_path, samples):
    data = tmp_path / "curve.csv"
    to_numpy(*samples, save_csv=data)
    out = tmp_path / "curve.png"
    main([str(data), "--labels", "fade", "--save", str(out)])
    assert out.exists()
