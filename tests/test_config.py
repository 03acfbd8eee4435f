"""Tests for the YAML settings loader."""

from pathlib import Path

import pytest

from autoguru.config import load_settings
from autoguru.core.engine import TransmissionKind

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "simulator.yaml"
    path.write_text(text, encoding="utf-8")
    return path


_VALID = """\
tick_interval: 0.05
curve_rpm_step: 100
default_displacement_cc: 2000
default_transmission: DCT
"""

# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


def test_bundled_settings_load() -> None:
    """The shipped settings file must load with the documented defaults."""
    settings = load_settings()
    assert settings.tick_interval == pytest.approx(0.1)
    assert settings.curve_rpm_step == pytest.approx(200.0)
    assert settings.engine.displacement_cc == 1200
    assert settings.engine.transmission is TransmissionKind.MANUAL


def test_custom_settings(tmp_path: Path) -> None:
    """Values from an override file are used and seed is optional."""
    settings = load_settings(_write(tmp_path, _VALID))
    assert settings.tick_interval == pytest.approx(0.05)
    assert settings.engine.displacement_cc == 2000
    assert settings.engine.transmission is TransmissionKind.DCT
    assert settings.seed is None


def test_missing_file(tmp_path: Path) -> None:
    """A missing settings file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.yaml")


def test_missing_field(tmp_path: Path) -> None:
    """Omitting a required field raises ValueError naming it."""
    text = _VALID.replace("curve_rpm_step: 100\n", "")
    with pytest.raises(ValueError, match="curve_rpm_step"):
        load_settings(_write(tmp_path, text))


def test_non_positive_tick(tmp_path: Path) -> None:
    """A zero or negative tick interval is rejected."""
    text = _VALID.replace("tick_interval: 0.05", "tick_interval: 0")
    with pytest.raises(ValueError, match="tick_interval"):
        load_settings(_write(tmp_path, text))


def test_unsupported_engine_falls_back(tmp_path: Path) -> None:
    """Unsupported engine selections are substituted, not rejected."""
    text = _VALID.replace("2000", "1300").replace("DCT", "Sequential")
    settings = load_settings(_write(tmp_path, text))
    assert settings.engine.displacement_cc == 1200
    assert settings.engine.transmission is TransmissionKind.MANUAL
