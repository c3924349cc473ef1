#!/usr/bin/env python
"""Example: Fly a lunar descent on the quick-hint autopilot.

Runs the default scenario and the classic low-altitude scenario under
QuickHintGuidance, then prints the mission log and the trajectory table.

Usage:
    python lander/examples/autopilot_descent.py
"""

import logging

from lander import QuickHintGuidance, SimulationParameters, Simulator


def fly(name: str, params: SimulationParameters) -> None:
    """Fly one scenario and print its mission log."""
    print("=" * 60)
    print(f"SCENARIO: {name}")
    print("=" * 60)

    sim = Simulator(params)
    result = sim.run(QuickHintGuidance(), max_steps=200)

    # Mission log is newest first; print in flight order
    for line in reversed(sim.mission_log.entries):
        print(f"  {line}")

    print(f"\nOutcome: {result.final_status.value}")
    print(f"Steps: {len(result.states) - 1}")
    print(result.to_dataframe())
    print()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(name)s | %(message)s")

    fly("Default descent", SimulationParameters())
    fly("Classic", SimulationParameters.classic())


if __name__ == "__main__":
    main()
