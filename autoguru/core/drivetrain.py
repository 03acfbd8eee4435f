"""Tick-based drivetrain state machine for the AutoGuru simulation core.

Each call to :meth:`Drivetrain.tick` advances a :class:`SimulationState` by
``dt`` seconds:

    1. Let the automatic shift policy change gear (AMT, IMT, DCT only).
    2. While a shift is in flight, count its delay down and either re-sync
       RPM to road speed (DCT) or let it sag towards idle (AMT, IMT).
       Nothing else happens on such a tick.
    3. Otherwise move RPM according to the drivetrain mode: free revving in
       neutral, held in a throttle-dependent band by a CVT, or driven by
       torque against the gear ratio.
    4. Add mechanical jitter and clamp RPM to [800, 8000].

External control events (gear requests, throttle, configuration) are plain
functions that also return a new state.  Nothing here is thread-safe; the
caller must serialise access to a given state.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from autoguru.core.engine import EngineConfig, TransmissionKind
from autoguru.core.gearbox import GEAR_RATIOS, maybe_shift
from autoguru.core.noise import NoiseSource, make_noise
from autoguru.core.power import horsepower
from autoguru.core.state import (
    IDLE_RPM,
    MAX_CVT_RATIO,
    MAX_RPM,
    MIN_CVT_RATIO,
    NEUTRAL,
    TOP_GEAR,
    SimulationState,
)
from autoguru.core.torque import torque

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

NEUTRAL_RESPONSE: float = 2.0  # 1/s, unloaded engine follows throttle quickly
CVT_RESPONSE: float = 1.0  # 1/s, belt and ratio inertia
CVT_BASE_RPM: float = 1500.0
CVT_RPM_SPAN: float = 2500.0
SHIFT_RPM_DECAY: float = 500.0  # rpm/s lost while an AMT/IMT is between gears
ACCEL_GAIN: float = 5000.0
ENGINE_BRAKE_THRESHOLD: int = 10  # throttle % below which engine braking applies
ENGINE_BRAKE_RATE: float = 10.0
JITTER_SPAN: float = 50.0  # total width of the +-25 rpm jitter band
SPEED_SCALE: float = 100.0  # rpm per unit of (speed * gear ratio)


@dataclass(frozen=True)
class Reading:
    """Values the dashboard shows for one state.

    Attributes:
        rpm: Engine speed.
        torque: Torque at that speed and the current throttle.
        horsepower: Power derived from ``torque`` and ``rpm``.
        gear: ``"N"`` or the gear number.
    """

    rpm: float
    torque: float
    horsepower: float
    gear: str


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


# ---------------------------------------------------------------------------
# Control events
# ---------------------------------------------------------------------------


def reset(config: EngineConfig) -> SimulationState:
    """Return the idle state for *config* (800 rpm, neutral, closed throttle)."""
    return SimulationState(config=config)


def start(state: SimulationState) -> SimulationState:
    """Mark the simulation as running so manual gear changes are accepted."""
    logger.debug("Simulation started (%s)", state.config)
    return dataclasses.replace(state, running=True)


def stop(state: SimulationState) -> SimulationState:
    """Stop the simulation and drop the engine back to idle."""
    logger.debug("Simulation stopped at %.0f rpm", state.rpm)
    return reset(state.config)


def gear_up(state: SimulationState) -> SimulationState:
    """Select the next gear; ignored when stopped or already in top gear."""
    if not state.running or state.gear >= TOP_GEAR:
        return state
    return dataclasses.replace(state, gear=state.gear + 1)


def gear_down(state: SimulationState) -> SimulationState:
    """Select the previous gear; ignored when stopped or in neutral."""
    if not state.running or state.gear <= NEUTRAL:
        return state
    return dataclasses.replace(state, gear=state.gear - 1)


def set_throttle(state: SimulationState, value: float) -> SimulationState:
    """Set the throttle position, clamped to 0-100 percent."""
    throttle = int(round(_clamp(value, 0, 100)))
    if throttle == state.throttle:
        return state
    return dataclasses.replace(state, throttle=throttle)


def set_config(state: SimulationState, config: EngineConfig) -> SimulationState:
    """Swap engine size and transmission, effective from the next tick.

    The shift timer and CVT ratio carry over unchanged, so switching
    transmission in the middle of a shift finishes that shift first.
    """
    if config.transmission is not state.config.transmission:
        logger.debug(
            "Transmission %s -> %s in gear %d",
            state.config.transmission.value,
            config.transmission.value,
            state.gear,
        )
    return dataclasses.replace(state, config=config)


def horsepower_at(rpm: float, torque_value: float) -> float:
    """Horsepower produced by *torque_value* at *rpm*."""
    return horsepower(torque_value, rpm)


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------


class Drivetrain:
    """Advances simulation states using injected noise sources.

    Attributes:
        torque_noise: Source for the torque curve ripple.
        jitter_noise: Independent source for per-tick RPM jitter.
    """

    __slots__ = ("torque_noise", "jitter_noise")

    def __init__(
        self,
        torque_noise: NoiseSource | None = None,
        jitter_noise: NoiseSource | None = None,
        seed: int | None = None,
    ) -> None:
        """Initialise the noise sources.

        Args:
            torque_noise: Torque ripple source.  Defaults to a generator
                seeded with ``seed``.
            jitter_noise: RPM jitter source.  Defaults to a generator
                seeded with ``seed + 1`` so the two streams differ.
            seed: Base seed for the default generators; ``None`` draws
                fresh OS entropy.
        """
        self.torque_noise: NoiseSource = (
            torque_noise if torque_noise is not None else make_noise(seed)
        )
        self.jitter_noise: NoiseSource = (
            jitter_noise
            if jitter_noise is not None
            else make_noise(None if seed is None else seed + 1)
        )

    def torque_at(self, rpm: float, config: EngineConfig, throttle: float) -> float:
        """Torque for *config* at *rpm* and *throttle*, with ripple."""
        return torque(rpm, config.displacement_cc, throttle, self.torque_noise)

    def report(self, state: SimulationState) -> Reading:
        """Compute the dashboard reading for *state*."""
        t = self.torque_at(state.rpm, state.config, state.throttle)
        return Reading(
            rpm=state.rpm,
            torque=t,
            horsepower=horsepower_at(state.rpm, t),
            gear=state.gear_label,
        )

    def tick(
        self, state: SimulationState, throttle: float, dt: float
    ) -> SimulationState:
        """Advance *state* by *dt* seconds at the given throttle.

        Args:
            state: State before the step.
            throttle: Throttle position in percent; clamped to 0-100.
            dt: Elapsed time in seconds (>= 0).

        Returns:
            State after the step.

        Raises:
            ValueError: If dt < 0.
        """
        if dt < 0.0:
            raise ValueError("dt must be >= 0.")

        state = maybe_shift(set_throttle(state, throttle))

        if state.shifting:
            return self._advance_shift(state, dt)

        kind = state.config.transmission
        throttle_frac: float = state.throttle / 100.0
        cvt_ratio: float = state.cvt_ratio

        if state.gear == NEUTRAL:
            target = IDLE_RPM + throttle_frac * (MAX_RPM - IDLE_RPM)
            rpm = state.rpm + (target - state.rpm) * NEUTRAL_RESPONSE * dt
        elif kind is TransmissionKind.CVT:
            target = CVT_BASE_RPM + throttle_frac * CVT_RPM_SPAN
            cvt_ratio = _clamp(cvt_ratio, MIN_CVT_RATIO, MAX_CVT_RATIO)
            rpm = state.rpm + (target - state.rpm) * CVT_RESPONSE * dt
        else:
            ratio: float = GEAR_RATIOS[state.gear]
            engine_torque = self.torque_at(state.rpm, state.config, state.throttle)
            accel: float = throttle_frac * engine_torque / (1000.0 * ratio)
            delta: float = accel * ACCEL_GAIN * dt
            if state.throttle < ENGINE_BRAKE_THRESHOLD:
                braking = ENGINE_BRAKE_THRESHOLD - state.throttle
                delta -= braking * ENGINE_BRAKE_RATE * dt
            rpm = max(IDLE_RPM, state.rpm + delta)

        rpm += (self.jitter_noise.random() - 0.5) * JITTER_SPAN
        rpm = _clamp(rpm, IDLE_RPM, MAX_RPM)

        return dataclasses.replace(state, rpm=rpm, cvt_ratio=cvt_ratio)

    @staticmethod
    def _advance_shift(state: SimulationState, dt: float) -> SimulationState:
        """Run one tick of an in-flight shift; no jitter is applied."""
        remaining: float = max(0.0, state.shift_delay_remaining - dt)
        kind = state.config.transmission
        rpm: float = state.rpm

        if kind is TransmissionKind.DCT:
            rpm = _rpm_from_road_speed(state)
        elif kind in (TransmissionKind.AMT, TransmissionKind.IMT):
            rpm = max(IDLE_RPM, rpm - SHIFT_RPM_DECAY * dt)
        # Manual/CVT only get here after a mid-shift transmission swap.

        if remaining == 0.0:
            logger.debug("Shift into gear %d complete", state.gear)
        return dataclasses.replace(state, rpm=rpm, shift_delay_remaining=remaining)


def _rpm_from_road_speed(state: SimulationState) -> float:
    """Re-derive engine speed from the estimated road speed in the current gear.

    Neutral has no ratio to sync against, so RPM is held.
    """
    ratio: float = GEAR_RATIOS[state.gear]
    if ratio == 0.0:
        return state.rpm
    speed: float = state.rpm / (ratio * SPEED_SCALE)
    return _clamp(speed * ratio * SPEED_SCALE, IDLE_RPM, MAX_RPM)
