"""Named spring configurations for common animation feels."""
from __future__ import annotations

from tick_spring.config import SpringConfig

PRESETS: dict[str, SpringConfig] = {
    "no_wobble": SpringConfig(tension=170.0, friction=26.0),
    "gentle": SpringConfig(tension=120.0, friction=14.0),
    "wobbly": SpringConfig(tension=180.0, friction=12.0),
    "stiff": SpringConfig(tension=210.0, friction=20.0),
}


def preset(name: str) -> SpringConfig:
    """Look up a preset by name. Raises KeyError if not defined."""
    if name not in PRESETS:
        raise KeyError(name)
    return PRESETS[name]
