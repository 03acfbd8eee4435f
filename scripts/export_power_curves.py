#!/usr/bin/env python
"""Export torque and horsepower curves for every supported engine.

For each displacement in ``SUPPORTED_DISPLACEMENTS`` the script samples
the full-throttle curve from idle to redline and writes the samples, plus
the peak values, to ``results/power_curves.json``.

Usage
-----
::

    python scripts/export_power_curves.py [throttle]
"""

from __future__ import annotations

import json
import logging
import os
import sys

# Ensure the project root is on the import path.
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from autoguru.config import load_settings  # noqa: E402
from autoguru.core.curve import peak_values, sample_curve  # noqa: E402
from autoguru.core.engine import SUPPORTED_DISPLACEMENTS, EngineConfig  # noqa: E402

logger = logging.getLogger(__name__)

RESULTS_DIR: str = os.path.join(_project_root, "results")
OUTPUT_PATH: str = os.path.join(RESULTS_DIR, "power_curves.json")


def build_export(throttle: float, rpm_step: float) -> dict[str, object]:
    """Sample every supported engine and collect the JSON payload."""
    engines: dict[str, object] = {}
    for displacement in SUPPORTED_DISPLACEMENTS:
        curve = sample_curve(
            EngineConfig.create(displacement), throttle, rpm_step=rpm_step
        )
        engines[str(displacement)] = {
            "peaks": peak_values(curve),
            "samples": curve.to_dict(orient="list"),
        }
    return {
        "metadata": {"throttle": throttle, "rpm_step": rpm_step},
        "engines": engines,
    }


def main() -> None:
    """Sample, save and summarise the power curves."""
    logging.basicConfig(level=logging.INFO)

    throttle: float = float(sys.argv[1]) if len(sys.argv) > 1 else 100.0
    settings = load_settings()
    output = build_export(throttle, settings.curve_rpm_step)

    os.makedirs(RESULTS_DIR, exist_ok=True)
    with open(OUTPUT_PATH, "w", encoding="utf-8") as fh:
        json.dump(output, fh, indent=2, sort_keys=True)
    logger.info("Curves saved to %s", OUTPUT_PATH)

    print("=" * 60)
    print(f"PEAK OUTPUT AT {throttle:.0f}% THROTTLE")
    print("=" * 60)
    for displacement, entry in output["engines"].items():  # type: ignore[union-attr]
        peaks = entry["peaks"]
        print(
            f"  {displacement:>5s} cc  "
            f"torque: {peaks['peak_torque']:6.1f} @ {peaks['peak_torque_rpm']:5.0f}  "
            f"power: {peaks['peak_hp']:6.1f} @ {peaks['peak_hp_rpm']:5.0f}"
        )


if __name__ == "__main__":
    main()
