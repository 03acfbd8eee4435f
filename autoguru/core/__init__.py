"""Core simulation modules for the AutoGuru engine simulator."""

from autoguru.core.curve import peak_values, sample_curve
from autoguru.core.drivetrain import (
    Drivetrain,
    Reading,
    gear_down,
    gear_up,
    horsepower_at,
    reset,
    set_config,
    set_throttle,
    start,
    stop,
)
from autoguru.core.engine import (
    SUPPORTED_DISPLACEMENTS,
    EngineConfig,
    TransmissionKind,
)
from autoguru.core.gearbox import (
    DOWNSHIFT_RPM,
    GEAR_RATIOS,
    SHIFT_DURATIONS,
    UPSHIFT_RPM,
    maybe_shift,
)
from autoguru.core.noise import NoiseSource, QuietNoise, make_noise
from autoguru.core.power import horsepower
from autoguru.core.session import simulate_run
from autoguru.core.state import SimulationState
from autoguru.core.torque import CURVE_COEFFICIENTS, CurveCoefficients, torque

__all__ = [
    "CURVE_COEFFICIENTS",
    "CurveCoefficients",
    "DOWNSHIFT_RPM",
    "Drivetrain",
    "EngineConfig",
    "GEAR_RATIOS",
    "NoiseSource",
    "QuietNoise",
    "Reading",
    "SHIFT_DURATIONS",
    "SUPPORTED_DISPLACEMENTS",
    "SimulationState",
    "TransmissionKind",
    "UPSHIFT_RPM",
    "gear_down",
    "gear_up",
    "horsepower",
    "horsepower_at",
    "make_noise",
    "maybe_shift",
    "peak_values",
    "reset",
    "sample_curve",
    "set_config",
    "set_throttle",
    "simulate_run",
    "start",
    "stop",
    "torque",
]
