"""Tests for SpringConfig construction and threshold overrides."""
from __future__ import annotations

import dataclasses

import pytest
from tick_spring import (
    DEFAULT_EQUILIBRIUM_THRESHOLD,
    SpringConfig,
    config,
    set_equilibrium_threshold,
)


class TestConfigConstruction:
    def test_fields(self) -> None:
        cfg = config(tension=170.0, friction=26.0)
        assert cfg.tension == 170.0
        assert cfg.friction == 26.0

    def test_default_threshold(self) -> None:
        cfg = config(tension=100.0, friction=15.0)
        assert cfg.equilibrium_threshold == 0.05
        assert DEFAULT_EQUILIBRIUM_THRESHOLD == 0.05

    def test_returns_spring_config(self) -> None:
        assert isinstance(config(1.0, 1.0), SpringConfig)

    def test_degenerate_values_accepted(self) -> None:
        """Zero and negative parameters are not validated."""
        cfg = config(tension=0.0, friction=-5.0)
        assert cfg.tension == 0.0
        assert cfg.friction == -5.0


class TestSetEquilibriumThreshold:
    def test_replaces_threshold(self) -> None:
        cfg = set_equilibrium_threshold(0.5, config(100.0, 15.0))
        assert cfg.equilibrium_threshold == 0.5

    def test_keeps_tension_and_friction(self) -> None:
        cfg = set_equilibrium_threshold(0.5, config(100.0, 15.0))
        assert cfg.tension == 100.0
        assert cfg.friction == 15.0

    def test_last_write_wins(self) -> None:
        base = config(100.0, 15.0)
        cfg = set_equilibrium_threshold(0.2, set_equilibrium_threshold(0.1, base))
        assert cfg.equilibrium_threshold == 0.2
        assert cfg.tension == 100.0
        assert cfg.friction == 15.0

    def test_original_untouched(self) -> None:
        base = config(100.0, 15.0)
        set_equilibrium_threshold(1.0, base)
        assert base.equilibrium_threshold == 0.05

    def test_negative_threshold_accepted(self) -> None:
        cfg = set_equilibrium_threshold(-1.0, config(100.0, 15.0))
        assert cfg.equilibrium_threshold == -1.0


class TestConfigImmutability:
    def test_assignment_raises(self) -> None:
        cfg = config(100.0, 15.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.tension = 1.0  # type: ignore[misc]

    def test_equal_by_value(self) -> None:
        assert config(100.0, 15.0) == config(100.0, 15.0)
        assert config(100.0, 15.0) != set_equilibrium_threshold(0.1, config(100.0, 15.0))
