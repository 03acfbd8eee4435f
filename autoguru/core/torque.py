"""Torque curve model for the AutoGuru simulation core.

The curve is a skewed parabola over normalised RPM ``x = rpm / 8000``:

    factor(x) = k * x * (1 - x) * (1 + s * x)

where ``k`` (height) and ``s`` (skew towards high RPM) grow with engine
displacement.  Base magnitude is ``displacement_cc / 1000 * 100``.
"""

from __future__ import annotations

from dataclasses import dataclass

from autoguru.core.noise import NoiseSource

REDLINE_RPM: float = 8000.0
NOISE_AMPLITUDE: float = 0.04  # +-2 % torque ripple
THROTTLE_FLOOR: float = 0.2  # fraction of torque available at closed throttle


@dataclass(frozen=True)
class CurveCoefficients:
    """Shape parameters of one displacement's torque curve.

    Attributes:
        k: Height multiplier of the parabola.
        s: Skew term; larger values move the peak to higher RPM.
    """

    k: float
    s: float


CURVE_COEFFICIENTS: dict[int, CurveCoefficients] = {
    800: CurveCoefficients(k=4.0, s=0.2),
    1000: CurveCoefficients(k=4.1, s=0.3),
    1200: CurveCoefficients(k=4.2, s=0.4),
    1500: CurveCoefficients(k=4.3, s=0.5),
    2000: CurveCoefficients(k=4.4, s=0.6),
}

# Symmetric parabola for displacements outside the table.
DEFAULT_COEFFICIENTS: CurveCoefficients = CurveCoefficients(k=4.0, s=0.0)


def curve_coefficients(displacement_cc: int) -> CurveCoefficients:
    """Return the tabulated coefficients, or the default row if unknown."""
    return CURVE_COEFFICIENTS.get(displacement_cc, DEFAULT_COEFFICIENTS)


def torque(
    rpm: float,
    displacement_cc: int,
    throttle: float,
    noise: NoiseSource | None = None,
) -> float:
    """Calculate instantaneous engine torque.

    Args:
        rpm: Engine speed.
        displacement_cc: Engine displacement in cc.
        throttle: Throttle position in percent (0-100).
        noise: Optional source of uniform ``[0, 1)`` draws.  ``None``
            disables the ripple entirely.

    Returns:
        Torque in arbitrary Nm-like units, never negative.
    """
    base_torque: float = displacement_cc / 1000.0 * 100.0
    coeffs = curve_coefficients(displacement_cc)
    x: float = rpm / REDLINE_RPM
    factor: float = coeffs.k * x * (1.0 - x) * (1.0 + coeffs.s * x)

    value: float = base_torque * factor
    if noise is not None:
        value *= 1.0 + (noise.random() - 0.5) * NOISE_AMPLITUDE
    value *= THROTTLE_FLOOR + (1.0 - THROTTLE_FLOOR) * (throttle / 100.0)

    return max(0.0, value)
