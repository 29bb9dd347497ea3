"""Monotonic simulation clock shared by an arena and its agents."""

from __future__ import annotations


class SimulationClock:
    """Simulation time in seconds, advanced once per arena step."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = float(start)
        self.frame_count = 0

    def advance(self, dt: float) -> float:
        if dt < 0:
            raise ValueError(f"Simulation time cannot move backwards (dt={dt})")
        self.now += float(dt)
        self.frame_count += 1
        return self.now
