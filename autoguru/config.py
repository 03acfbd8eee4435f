"""Configuration loader for the AutoGuru engine simulator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from autoguru.core.engine import EngineConfig

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
SETTINGS_PATH: Path = DATA_DIR / "simulator.yaml"

_REQUIRED_FIELDS: tuple[str, ...] = (
    "tick_interval",
    "curve_rpm_step",
    "default_displacement_cc",
    "default_transmission",
)

_POSITIVE_FIELDS: tuple[str, ...] = ("tick_interval", "curve_rpm_step")


@dataclass(frozen=True)
class SimulatorSettings:
    """Runtime settings for a simulator driver.

    Attributes:
        tick_interval: Seconds between simulation ticks.
        curve_rpm_step: RPM spacing used when sampling torque curves.
        engine: Engine selected at start-up.
        seed: Optional seed for the noise generators.
    """

    tick_interval: float
    curve_rpm_step: float
    engine: EngineConfig
    seed: int | None = None


def load_settings(path: Path | None = None) -> SimulatorSettings:
    """Load simulator settings from a YAML file.

    Unsupported engine selections fall back to the engine defaults, the
    same as selections made at runtime.

    Args:
        path: Optional override for the settings file path.

    Returns:
        Validated :class:`SimulatorSettings`.

    Raises:
        FileNotFoundError: If the settings file does not exist.
        ValueError: If fields are missing or have invalid values.
    """
    settings_path = path or SETTINGS_PATH
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with open(settings_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {settings_path} must contain a mapping")

    # --- Validate required fields ---
    for field in _REQUIRED_FIELDS:
        if field not in data:
            raise ValueError(f"Settings are missing required field '{field}'")

    # --- Validate positive numerics ---
    for field in _POSITIVE_FIELDS:
        val = data[field]
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            raise ValueError(
                f"'{field}' must be numeric, got {type(val).__name__}"
            )
        if float(val) <= 0.0:
            raise ValueError(f"'{field}' must be > 0, got {val}")

    displacement = data["default_displacement_cc"]
    if isinstance(displacement, bool) or not isinstance(displacement, int):
        raise ValueError(
            "'default_displacement_cc' must be an integer, "
            f"got {type(displacement).__name__}"
        )

    seed = data.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ValueError(f"'seed' must be an integer, got {type(seed).__name__}")

    return SimulatorSettings(
        tick_interval=float(data["tick_interval"]),
        curve_rpm_step=float(data["curve_rpm_step"]),
        engine=EngineConfig.create(displacement, str(data["default_transmission"])),
        seed=seed,
    )
