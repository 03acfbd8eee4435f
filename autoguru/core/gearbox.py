"""Gear tables and automatic shift policy for the AutoGuru simulation core.

Only the discrete-gear automatics (AMT, IMT, DCT) shift on their own.  A
shift, once started, blocks further shifts until its delay has elapsed.
"""

from __future__ import annotations

import dataclasses
import logging

from autoguru.core.engine import TransmissionKind
from autoguru.core.state import NEUTRAL, TOP_GEAR, SimulationState

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Static tables, indexed by gear (0 = neutral)
# ---------------------------------------------------------------------------

GEAR_RATIOS: tuple[float, ...] = (0.0, 3.909, 2.056, 1.269, 0.906, 0.779, 0.651)
UPSHIFT_RPM: tuple[float, ...] = (0.0, 2500.0, 3000.0, 3500.0, 4000.0, 4500.0, 5000.0)
DOWNSHIFT_RPM: tuple[float, ...] = (0.0, 800.0, 1200.0, 1500.0, 1800.0, 2000.0, 2200.0)

# Seconds spent between gears: dual-clutch is near-instant, AMT slowest.
SHIFT_DURATIONS: dict[TransmissionKind, float] = {
    TransmissionKind.DCT: 0.1,
    TransmissionKind.AMT: 0.5,
    TransmissionKind.IMT: 0.3,
}


def maybe_shift(state: SimulationState) -> SimulationState:
    """Apply at most one automatic gear change.

    The rules, checked in order:

    * Manual, CVT, neutral, or a shift already in flight: no change.
    * ``rpm > UPSHIFT_RPM[gear]`` below top gear: shift up.
    * ``rpm < DOWNSHIFT_RPM[gear]`` above first gear: shift down.

    Either shift arms ``shift_delay_remaining`` with the transmission's
    entry in :data:`SHIFT_DURATIONS`.

    Args:
        state: Current simulation state.

    Returns:
        The state after the shift decision (the same object if no shift).
    """
    transmission = state.config.transmission
    if not transmission.is_automatic or state.gear == NEUTRAL or state.shifting:
        return state

    gear: int = state.gear
    if state.rpm > UPSHIFT_RPM[gear] and gear < TOP_GEAR:
        new_gear = gear + 1
    elif state.rpm < DOWNSHIFT_RPM[gear] and gear > 1:
        new_gear = gear - 1
    else:
        return state

    delay: float = SHIFT_DURATIONS[transmission]
    logger.debug(
        "%s shift %d -> %d at %.0f rpm (%.1fs)",
        transmission.value,
        gear,
        new_gear,
        state.rpm,
        delay,
    )
    return dataclasses.replace(state, gear=new_gear, shift_delay_remaining=delay)
