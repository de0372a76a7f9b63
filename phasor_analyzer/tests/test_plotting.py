"""Smoke tests for the matplotlib helpers (Agg backend)."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from phasor_analyzer.analysis.plotting import plot_phasors, plot_samples
from phasor_analyzer.analysis.sampling import sample_table
from phasor_analyzer.models.complex import Complex
from phasor_analyzer.models.sinusoid import Sinusoid


@pytest.fixture
def ax():
    fig, ax = plt.subplots()
    yield ax
    plt.close(fig)


class TestPlotSamples:
    def test_one_line_per_value_column(self, ax):
        df = sample_table([Sinusoid(1.0, 1.0, 0.0), Sinusoid(0.5, 2.0, 0.3)], 0.0, 1.0, 50.0)
        out = plot_samples(ax, df)
        assert out is ax
        assert len(ax.get_lines()) == 3  # s0, s1, sum
        assert ax.get_xlabel() == "t"

    def test_missing_time_column(self, ax):
        with pytest.raises(KeyError):
            plot_samples(ax, pd.DataFrame({"value": [0.0, 1.0]}))


class TestPlotPhasors:
    def test_limits_cover_longest_phasor(self, ax):
        phasors = [Complex(3.0, 0.0), Complex(0.0, -4.0), Sinusoid(5.0, 1.0, 0.5).to_phasor()]
        plot_phasors(ax, phasors, labels=["a", "b", "a+b"])
        lo, hi = ax.get_xlim()
        assert hi == pytest.approx(5.5)
        assert lo == pytest.approx(-5.5)

    def test_empty_input(self, ax):
        plot_phasors(ax, [])
        assert ax.get_xlim() == (-1.0, 1.0)

    def test_label_length_mismatch(self, ax):
        with pytest.raises(ValueError):
            plot_phasors(ax, [Complex(1.0, 0.0)], labels=["a", "b"])
