"""Tests for the automatic shift policy."""

import pytest

from autoguru.core.engine import EngineConfig, TransmissionKind
from autoguru.core.gearbox import SHIFT_DURATIONS, maybe_shift
from autoguru.core.state import SimulationState

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _state(
    transmission: TransmissionKind,
    gear: int,
    rpm: float,
    shift_delay_remaining: float = 0.0,
) -> SimulationState:
    return SimulationState(
        config=EngineConfig(1200, transmission),
        rpm=rpm,
        gear=gear,
        shift_delay_remaining=shift_delay_remaining,
        running=True,
    )


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


def test_dct_upshift_sets_short_delay() -> None:
    """DCT above the 2nd-gear threshold must move to 3rd with a 0.1 s delay."""
    shifted = maybe_shift(_state(TransmissionKind.DCT, gear=2, rpm=3100))
    assert shifted.gear == 3
    assert shifted.shift_delay_remaining == pytest.approx(0.1)


def test_no_shift_while_shift_in_flight() -> None:
    """A second call during the shift delay must leave the gear alone."""
    shifted = maybe_shift(_state(TransmissionKind.DCT, gear=2, rpm=3100))
    again = maybe_shift(shifted)
    assert again.gear == 3
    assert again is shifted


def test_amt_downshift() -> None:
    """AMT below the 3rd-gear downshift threshold must drop to 2nd."""
    shifted = maybe_shift(_state(TransmissionKind.AMT, gear=3, rpm=1400))
    assert shifted.gear == 2
    assert shifted.shift_delay_remaining == pytest.approx(0.5)


@pytest.mark.parametrize(
    "transmission, expected",
    [
        (TransmissionKind.DCT, 0.1),
        (TransmissionKind.IMT, 0.3),
        (TransmissionKind.AMT, 0.5),
    ],
)
def test_shift_durations(transmission: TransmissionKind, expected: float) -> None:
    """Each automatic variant arms its own shift duration."""
    shifted = maybe_shift(_state(transmission, gear=1, rpm=2600))
    assert shifted.gear == 2
    assert shifted.shift_delay_remaining == pytest.approx(expected)
    assert SHIFT_DURATIONS[transmission] == pytest.approx(expected)


def test_no_upshift_beyond_top_gear() -> None:
    """Sixth gear is the last; high RPM must not shift further."""
    state = _state(TransmissionKind.DCT, gear=6, rpm=7000)
    assert maybe_shift(state) is state


def test_no_downshift_below_first_gear() -> None:
    """First gear never downshifts into neutral."""
    state = _state(TransmissionKind.AMT, gear=1, rpm=800)
    assert maybe_shift(state) is state


def test_between_thresholds_holds_gear() -> None:
    """RPM inside the shift band must not change gear."""
    state = _state(TransmissionKind.IMT, gear=3, rpm=2500)
    assert maybe_shift(state) is state


@pytest.mark.parametrize(
    "transmission", [TransmissionKind.MANUAL, TransmissionKind.CVT]
)
def test_manual_and_cvt_never_auto_shift(transmission: TransmissionKind) -> None:
    """Manual and CVT transmissions are ignored by the shift policy."""
    state = _state(transmission, gear=2, rpm=6000)
    assert maybe_shift(state) is state


def test_neutral_never_auto_shifts() -> None:
    """An automatic in neutral stays in neutral."""
    state = _state(TransmissionKind.DCT, gear=0, rpm=6000)
    assert maybe_shift(state) is state
