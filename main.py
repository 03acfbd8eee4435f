"""CLI entrypoint for the AutoGuru engine and transmission simulator."""

from __future__ import annotations

import logging
import sys

from autoguru import __version__
from autoguru.config import load_settings
from autoguru.core.curve import peak_values, sample_curve
from autoguru.core.engine import EngineConfig, TransmissionKind
from autoguru.core.session import simulate_run


def main() -> None:
    """Run a demonstration of the simulation core."""
    logging.basicConfig(level=logging.INFO)

    print(f"AutoGuru Engine & Transmission Simulator v{__version__}")
    print("=" * 56)

    # -- Load settings --------------------------------------------------------
    settings = load_settings()
    engine = EngineConfig.create(
        settings.engine.displacement_cc, TransmissionKind.DCT
    )
    print(f"\nEngine       : {engine.displacement_cc} cc")
    print(f"Transmission : {engine.transmission.value}")
    print(f"Tick         : {settings.tick_interval:.2f} s")
    print("-" * 56)

    # -- Torque curve ---------------------------------------------------------
    curve = sample_curve(engine, throttle=100, rpm_step=settings.curve_rpm_step)
    peaks = peak_values(curve)
    print(
        f"\nPeak torque : {peaks['peak_torque']:6.1f} Nm @ "
        f"{peaks['peak_torque_rpm']:.0f} rpm"
    )
    print(
        f"Peak power  : {peaks['peak_hp']:6.1f} HP @ "
        f"{peaks['peak_hp_rpm']:.0f} rpm"
    )

    # -- Simulated pull -------------------------------------------------------
    duration = 6.0
    print(f"\nFull-throttle pull from first gear ({duration:.0f} s):\n")
    run = simulate_run(
        engine,
        throttle=100,
        duration=duration,
        dt=settings.tick_interval,
        seed=settings.seed,
        shift_requests={0: "up"},
    )
    print(f"  {'Time':>5}  {'Gear':>4}  {'RPM':>6}  {'Torque':>7}  {'HP':>6}")
    print(f"  {'-----':>5}  {'----':>4}  {'------':>6}  {'-------':>7}  {'------':>6}")
    for i in range(4, len(run["time"]), 5):
        print(
            f"  {run['time'][i]:5.1f}  {run['gear'][i]:>4}  {run['rpm'][i]:6.0f}  "
            f"{run['torque'][i]:7.1f}  {run['horsepower'][i]:6.1f}"
        )

    print("\nSimulation complete.")


if __name__ == "__main__":
    sys.exit(main() or 0)
