"""Engine configuration model for the AutoGuru simulation core.

Unsupported displacements and transmission names are not errors: they are
replaced by documented defaults (1200 cc, Manual) and a warning is logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

SUPPORTED_DISPLACEMENTS: tuple[int, ...] = (800, 1000, 1200, 1500, 2000)
DEFAULT_DISPLACEMENT: int = 1200


class TransmissionKind(Enum):
    """Transmission families understood by the drivetrain."""

    MANUAL = "Manual"
    AMT = "AMT"
    IMT = "IMT"
    CVT = "CVT"
    DCT = "DCT"

    @property
    def is_automatic(self) -> bool:
        """True for the discrete-gear automatic variants (AMT, IMT, DCT)."""
        return self in (
            TransmissionKind.AMT,
            TransmissionKind.IMT,
            TransmissionKind.DCT,
        )

    @classmethod
    def parse(cls, value: TransmissionKind | str) -> TransmissionKind:
        """Resolve a kind or its display name, falling back to Manual."""
        if isinstance(value, TransmissionKind):
            return value
        for kind in cls:
            if str(value).strip().upper() == kind.value.upper():
                return kind
        logger.warning("Unsupported transmission %r, using Manual", value)
        return cls.MANUAL


DEFAULT_TRANSMISSION: TransmissionKind = TransmissionKind.MANUAL


def sanitize_displacement(displacement_cc: int) -> int:
    """Return *displacement_cc* if supported, else the 1200 cc default."""
    if displacement_cc in SUPPORTED_DISPLACEMENTS:
        return int(displacement_cc)
    logger.warning(
        "Unsupported displacement %r cc, using %d cc",
        displacement_cc,
        DEFAULT_DISPLACEMENT,
    )
    return DEFAULT_DISPLACEMENT


@dataclass(frozen=True)
class EngineConfig:
    """Engine size and transmission selected by the driver.

    Attributes:
        displacement_cc: Engine displacement, one of
            :data:`SUPPORTED_DISPLACEMENTS`.
        transmission: Transmission family.
    """

    displacement_cc: int = DEFAULT_DISPLACEMENT
    transmission: TransmissionKind = DEFAULT_TRANSMISSION

    def __post_init__(self) -> None:
        # frozen: write through object.__setattr__
        object.__setattr__(
            self, "displacement_cc", sanitize_displacement(self.displacement_cc)
        )
        object.__setattr__(
            self, "transmission", TransmissionKind.parse(self.transmission)
        )

    @classmethod
    def create(
        cls,
        displacement_cc: int = DEFAULT_DISPLACEMENT,
        transmission: TransmissionKind | str = DEFAULT_TRANSMISSION,
    ) -> EngineConfig:
        """Build a config from raw UI values such as ``(1500, "DCT")``."""
        return cls(
            displacement_cc=displacement_cc,
            transmission=transmission,  # type: ignore[arg-type]
        )
