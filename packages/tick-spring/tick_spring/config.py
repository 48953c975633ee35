"""Spring configuration: tension, friction and the rest threshold."""
from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_EQUILIBRIUM_THRESHOLD = 0.05


@dataclass(frozen=True)
class SpringConfig:
    """Immutable physical parameters shared by any number of springs.

    Attributes:
        tension: Pull toward the target per unit of distance.
        friction: Damping applied against the current velocity.
        equilibrium_threshold: Distance and speed below which a spring is
            snapped onto its target.
    """

    tension: float
    friction: float
    equilibrium_threshold: float = DEFAULT_EQUILIBRIUM_THRESHOLD


def config(tension: float, friction: float) -> SpringConfig:
    """Build a config with the default equilibrium threshold. Values are not validated."""
    return SpringConfig(tension=tension, friction=friction)


def set_equilibrium_threshold(threshold: float, cfg: SpringConfig) -> SpringConfig:
    """Return a copy of cfg with a different rest threshold."""
    return replace(cfg, equilibrium_threshold=threshold)
