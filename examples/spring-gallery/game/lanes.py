"""Per-preset lanes, each chasing a shared target with its own spring."""
from __future__ import annotations

from dataclasses import dataclass

from tick_spring import (
    PRESETS,
    Spring,
    SpringConfig,
    create,
    equilibrium,
    set_equilibrium_threshold,
    update,
    value,
)

# Longer frames (window drags, stalls) make the stiff presets diverge.
MAX_FRAME_MS = 50.0


@dataclass
class Lane:
    name: str
    cfg: SpringConfig
    spring: Spring
    peak: float = 0.0  # furthest overshoot past the target since last retarget
    direction: float = 1.0  # +1 approaching from below, -1 from above

    @property
    def settled(self) -> bool:
        return equilibrium(self.spring)


def make_lanes(start: float) -> list[Lane]:
    return [
        Lane(name=name, cfg=cfg, spring=create(start, start))
        for name, cfg in PRESETS.items()
    ]


def retarget_all(lanes: list[Lane], target: float) -> None:
    """Restart every lane from where it is now toward a new target."""
    for lane in lanes:
        current = value(lane.spring)
        lane.direction = 1.0 if target >= current else -1.0
        lane.spring = create(current, target)
        lane.peak = 0.0


def set_threshold_all(lanes: list[Lane], threshold: float) -> None:
    for lane in lanes:
        lane.cfg = set_equilibrium_threshold(threshold, lane.cfg)


def step_lanes(lanes: list[Lane], delta_ms: float) -> int:
    """Advance all lanes by one frame. Returns how many are settled."""
    settled = 0
    for lane in lanes:
        lane.spring = update(lane.cfg, delta_ms, lane.spring)
        overshoot = (value(lane.spring) - lane.spring.target) * lane.direction
        lane.peak = max(lane.peak, overshoot)
        if lane.settled:
            settled += 1
    return settled


def clamp_frame_ms(raw_ms: float, max_ms: float = MAX_FRAME_MS) -> float:
    return min(float(raw_ms), max_ms)


def lane_readout(lane: Lane) -> list[str]:
    """Sidebar lines for one lane: name with rest marker, value, velocity, peak."""
    marker = "rest" if lane.settled else ""
    return [
        f"{lane.name:<10}{marker}",
        f" x={value(lane.spring):8.1f}",
        f" v={lane.spring.velocity:8.1f}",
        f" peak={lane.peak:6.1f}",
    ]
