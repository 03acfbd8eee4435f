"""Tests for torque/horsepower curve sampling."""

import pandas as pd
import pytest

from autoguru.core.curve import peak_values, sample_curve
from autoguru.core.engine import EngineConfig
from autoguru.core.torque import torque


def test_default_grid_covers_idle_to_redline() -> None:
    """Default sampling is every 200 rpm from 800 to 8000 inclusive."""
    curve = sample_curve(EngineConfig(), throttle=100)
    assert isinstance(curve, pd.DataFrame)
    assert list(curve.columns) == ["rpm", "torque", "horsepower"]
    assert len(curve) == 37
    assert curve["rpm"].iloc[0] == 800.0
    assert curve["rpm"].iloc[-1] == 8000.0


def test_samples_match_models() -> None:
    """Every row must agree with the torque and horsepower formulas."""
    curve = sample_curve(EngineConfig(1500), throttle=60, rpm_step=400)
    for row in curve.itertuples():
        assert row.torque == pytest.approx(torque(row.rpm, 1500, 60))
        assert row.horsepower == pytest.approx(row.torque * row.rpm / 5252)


def test_peaks_are_mid_range() -> None:
    """Peak torque sits mid-range and peak power never comes before it."""
    peaks = peak_values(sample_curve(EngineConfig(1200), throttle=100))
    assert 3000.0 < peaks["peak_torque_rpm"] < 6000.0
    assert peaks["peak_hp_rpm"] >= peaks["peak_torque_rpm"]
    assert peaks["peak_torque"] > 0.0


def test_bigger_engine_makes_more_torque() -> None:
    """Peak torque must increase with displacement."""
    small = peak_values(sample_curve(EngineConfig(800), throttle=100))
    large = peak_values(sample_curve(EngineConfig(2000), throttle=100))
    assert large["peak_torque"] > small["peak_torque"]


def test_invalid_ranges_rejected() -> None:
    """Non-positive steps and inverted ranges raise ValueError."""
    with pytest.raises(ValueError):
        sample_curve(EngineConfig(), 50, rpm_step=0)
    with pytest.raises(ValueError):
        sample_curve(EngineConfig(), 50, rpm_start=5000, rpm_stop=1000)


def test_empty_curve_has_no_peak() -> None:
    """peak_values refuses an empty frame."""
    empty = pd.DataFrame({"rpm": [], "torque": [], "horsepower": []})
    with pytest.raises(ValueError):
        peak_values(empty)
