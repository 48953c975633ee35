"""Spring state and the per-step integrator."""
from __future__ import annotations

from dataclasses import dataclass

from tick_spring.config import SpringConfig


@dataclass(frozen=True)
class Spring:
    """One scalar spring. Every update returns a new instance."""

    value: float
    target: float
    velocity: float = 0.0


def create(value: float, target: float) -> Spring:
    return Spring(value=value, target=target)


def update(cfg: SpringConfig, delta_ms: float, spring: Spring) -> Spring:
    """Advance the spring by delta_ms milliseconds with semi-implicit Euler.

    A spring within cfg.equilibrium_threshold of its target, and moving
    slower than that threshold, is snapped exactly onto the target with
    zero velocity. Once snapped, further updates return the same state.
    delta_ms is not clamped.
    """
    threshold = cfg.equilibrium_threshold
    if (
        abs(spring.value - spring.target) < threshold
        and abs(spring.velocity) < threshold
    ):
        return Spring(value=spring.target, target=spring.target, velocity=0.0)

    dt = delta_ms / 1000.0
    acceleration = dt * (
        (spring.target - spring.value) * cfg.tension
        - spring.velocity * cfg.friction
    )
    # Velocity first, then position from the new velocity.
    velocity = spring.velocity + acceleration
    position = spring.value + velocity * dt
    return Spring(value=position, target=spring.target, velocity=velocity)


def value(spring: Spring) -> float:
    return spring.value


def equilibrium(spring: Spring) -> bool:
    """True only for the exact snapped state: on target with zero velocity.

    Independent of any config threshold; a spring that is merely close to
    its target is not at equilibrium until update() snaps it.
    """
    return spring.value == spring.target and spring.velocity == 0
