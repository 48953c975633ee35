"""tick-spring - Damped spring animation for smoothly chasing a target value."""
from __future__ import annotations

from tick_spring.config import (
    DEFAULT_EQUILIBRIUM_THRESHOLD,
    SpringConfig,
    config,
    set_equilibrium_threshold,
)
from tick_spring.presets import PRESETS, preset
from tick_spring.spring import Spring, create, equilibrium, update, value

__all__ = [
    "DEFAULT_EQUILIBRIUM_THRESHOLD",
    "PRESETS",
    "Spring",
    "SpringConfig",
    "config",
    "create",
    "equilibrium",
    "preset",
    "set_equilibrium_threshold",
    "update",
    "value",
]
