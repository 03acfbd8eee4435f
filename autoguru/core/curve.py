"""Torque and horsepower curve sampling for the AutoGuru simulation core.

Curves are computed from the engine configuration alone, independent of
any live simulation state, and are returned as :class:`pandas.DataFrame`
objects ready for charting.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from autoguru.core.engine import EngineConfig
from autoguru.core.noise import NoiseSource
from autoguru.core.power import horsepower
from autoguru.core.state import IDLE_RPM, MAX_RPM
from autoguru.core.torque import torque


def sample_curve(
    config: EngineConfig,
    throttle: float,
    rpm_start: float = IDLE_RPM,
    rpm_stop: float = MAX_RPM,
    rpm_step: float = 200.0,
    noise: NoiseSource | None = None,
) -> pd.DataFrame:
    """Sample torque and horsepower across an RPM range.

    Args:
        config: Engine to evaluate.
        throttle: Throttle position in percent (0-100).
        rpm_start: First sampled RPM.
        rpm_stop: Last sampled RPM (inclusive when on the step grid).
        rpm_step: Spacing between samples (> 0).
        noise: Optional ripple source; ``None`` gives a smooth curve.

    Returns:
        DataFrame with columns ``rpm``, ``torque`` and ``horsepower``.

    Raises:
        ValueError: If rpm_step <= 0 or rpm_start > rpm_stop.
    """
    if rpm_step <= 0.0:
        raise ValueError("rpm_step must be > 0.")
    if rpm_start > rpm_stop:
        raise ValueError("rpm_start must be <= rpm_stop.")

    count: int = int(np.floor((rpm_stop - rpm_start) / rpm_step + 1e-9)) + 1
    rpms = rpm_start + rpm_step * np.arange(count, dtype=float)

    torques: list[float] = [
        torque(float(r), config.displacement_cc, throttle, noise) for r in rpms
    ]
    return pd.DataFrame(
        {
            "rpm": rpms,
            "torque": torques,
            "horsepower": [horsepower(t, float(r)) for t, r in zip(torques, rpms)],
        }
    )


def peak_values(curve: pd.DataFrame) -> dict[str, Any]:
    """Locate peak torque and peak horsepower on a sampled curve.

    Args:
        curve: Output of :func:`sample_curve`.

    Returns:
        Dictionary with keys:
            peak_torque     -- highest torque value (float)
            peak_torque_rpm -- RPM at which it occurs (float)
            peak_hp         -- highest horsepower value (float)
            peak_hp_rpm     -- RPM at which it occurs (float)

    Raises:
        ValueError: If the curve is empty.
    """
    if curve.empty:
        raise ValueError("curve must contain at least one sample.")

    t_idx = curve["torque"].idxmax()
    hp_idx = curve["horsepower"].idxmax()
    return {
        "peak_torque": float(curve.at[t_idx, "torque"]),
        "peak_torque_rpm": float(curve.at[t_idx, "rpm"]),
        "peak_hp": float(curve.at[hp_idx, "horsepower"]),
        "peak_hp_rpm": float(curve.at[hp_idx, "rpm"]),
    }
