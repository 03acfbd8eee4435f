"""Simulation state value for the AutoGuru simulation core."""

from __future__ import annotations

from dataclasses import dataclass

from autoguru.core.engine import EngineConfig

IDLE_RPM: float = 800.0
MAX_RPM: float = 8000.0
NEUTRAL: int = 0
TOP_GEAR: int = 6
MIN_CVT_RATIO: float = 0.5
MAX_CVT_RATIO: float = 2.5
INITIAL_CVT_RATIO: float = 2.0


@dataclass(frozen=True)
class SimulationState:
    """Snapshot of the drivetrain between two ticks.

    Every operation returns a new snapshot rather than mutating this one.

    Attributes:
        config: Engine displacement and transmission currently selected.
        rpm: Engine speed, kept within [800, 8000].
        gear: Engaged gear, 0 (neutral) to 6.
        throttle: Throttle position in percent (0-100).
        shift_delay_remaining: Seconds left in an automatic shift (>= 0).
        cvt_ratio: Continuously variable ratio, kept within [0.5, 2.5].
        running: Whether the driver has started the simulation.
    """

    config: EngineConfig
    rpm: float = IDLE_RPM
    gear: int = NEUTRAL
    throttle: int = 0
    shift_delay_remaining: float = 0.0
    cvt_ratio: float = INITIAL_CVT_RATIO
    running: bool = False

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if not IDLE_RPM <= self.rpm <= MAX_RPM:
            raise ValueError("rpm must be between 800 and 8000.")
        if not NEUTRAL <= self.gear <= TOP_GEAR:
            raise ValueError("gear must be between 0 and 6.")
        if not 0 <= self.throttle <= 100:
            raise ValueError("throttle must be between 0 and 100.")
        if self.shift_delay_remaining < 0.0:
            raise ValueError("shift_delay_remaining must be >= 0.")
        if not MIN_CVT_RATIO <= self.cvt_ratio <= MAX_CVT_RATIO:
            raise ValueError("cvt_ratio must be between 0.5 and 2.5.")

    @property
    def in_neutral(self) -> bool:
        return self.gear == NEUTRAL

    @property
    def shifting(self) -> bool:
        return self.shift_delay_remaining > 0.0

    @property
    def gear_label(self) -> str:
        """Gear as shown on the dashboard: ``"N"`` or the gear number."""
        return "N" if self.gear == NEUTRAL else str(self.gear)
