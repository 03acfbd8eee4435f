"""Scripted simulation runs for the AutoGuru simulation core.

A run stands in for the UI timer: it starts the simulation, ticks it at a
fixed interval, applies any scheduled manual gear requests, and records a
reading after every tick.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from autoguru.core.drivetrain import Drivetrain, gear_down, gear_up, reset, start
from autoguru.core.engine import EngineConfig

ThrottleSchedule = float | Callable[[float], float]

_GEAR_REQUESTS = {"up": gear_up, "down": gear_down}


def simulate_run(
    config: EngineConfig,
    throttle: ThrottleSchedule,
    duration: float,
    dt: float = 0.1,
    seed: int | None = None,
    shift_requests: Mapping[int, str] | None = None,
    drivetrain: Drivetrain | None = None,
) -> dict[str, Any]:
    """Run the simulation from idle and return telemetry traces.

    For each tick *i* (0-based) the sequence is:
        1. Apply the gear request scheduled for tick *i*, if any.
        2. Evaluate the throttle at the elapsed time before the tick.
        3. Advance the drivetrain by ``dt``.
        4. Record the reading.

    Args:
        config: Engine and transmission to simulate.
        throttle: Constant throttle in percent, or a callable mapping
            elapsed seconds to a throttle.
        duration: Simulated time in seconds (> 0).
        dt: Tick interval in seconds (> 0).
        seed: Seed for a default :class:`Drivetrain`; ignored when
            *drivetrain* is given.
        shift_requests: Mapping of tick index to ``"up"`` or ``"down"``.
        drivetrain: Pre-built drivetrain, e.g. with quiet noise sources.

    Returns:
        Dictionary containing:
            time        -- elapsed seconds after each tick (list[float])
            rpm         -- engine speed after each tick (list[float])
            torque      -- torque after each tick (list[float])
            horsepower  -- horsepower after each tick (list[float])
            gear        -- gear label after each tick (list[str])
            final_state -- the last :class:`SimulationState`

    Raises:
        ValueError: If duration or dt is not positive, or a gear request
            is neither ``"up"`` nor ``"down"``.
    """
    if duration <= 0.0:
        raise ValueError("duration must be > 0.")
    if dt <= 0.0:
        raise ValueError("dt must be > 0.")
    requests: Mapping[int, str] = shift_requests or {}
    for tick_idx, request in requests.items():
        if request not in _GEAR_REQUESTS:
            raise ValueError(
                f"gear request at tick {tick_idx} must be 'up' or 'down', "
                f"got {request!r}"
            )

    sim = drivetrain if drivetrain is not None else Drivetrain(seed=seed)
    state = start(reset(config))
    ticks: int = max(1, round(duration / dt))

    times: list[float] = []
    rpms: list[float] = []
    torques: list[float] = []
    powers: list[float] = []
    gears: list[str] = []

    for i in range(ticks):
        if i in requests:
            state = _GEAR_REQUESTS[requests[i]](state)

        elapsed: float = i * dt
        value: float = throttle(elapsed) if callable(throttle) else throttle
        state = sim.tick(state, value, dt)

        reading = sim.report(state)
        times.append((i + 1) * dt)
        rpms.append(reading.rpm)
        torques.append(reading.torque)
        powers.append(reading.horsepower)
        gears.append(reading.gear)

    return {
        "time": times,
        "rpm": rpms,
        "torque": torques,
        "horsepower": powers,
        "gear": gears,
        "final_state": state,
    }
