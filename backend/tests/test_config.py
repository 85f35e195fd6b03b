"""
Tests for domain/config.py - GameConfig validation and loading.
"""

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameConfig, InvalidConfiguration, RIGHT


class TestGameConfigDefaults:
    """Tests for the default configuration."""

    def test_defaults(self):
        """Stock settings match the 20x20, 10-target game."""
        config = GameConfig()
        assert config.grid_size == 20
        assert config.max_targets == 10
        assert config.tick_interval_ms == 150
        assert config.initial_body == [(10, 10)]
        assert config.initial_direction == RIGHT
        assert config.initial_target == (15, 10)

    def test_tick_interval_seconds(self):
        """The driver sleeps in seconds."""
        assert GameConfig(tick_interval_ms=150).tick_interval_seconds == pytest.approx(0.15)

    def test_derived_defaults_for_other_grid_sizes(self):
        """Body and target scale with the grid when not given."""
        config = GameConfig(grid_size=8)
        assert config.initial_body == [(4, 4)]
        assert config.initial_target == (6, 4)

    def test_lists_are_normalised_to_tuples(self):
        """Cells given as lists are stored as tuples."""
        config = GameConfig(initial_body=[[3, 3], [2, 3]], initial_target=[5, 5])
        assert config.initial_body == [(3, 3), (2, 3)]
        assert config.initial_target == (5, 5)


class TestGameConfigValidation:
    """Tests for construction-time validation."""

    @pytest.mark.parametrize("kwargs", [
        {"grid_size": 0},
        {"grid_size": -3},
        {"max_targets": 0},
        {"tick_interval_ms": 0},
        {"initial_direction": "SIDEWAYS"},
        {"initial_body": []},
        {"initial_body": [(3, 3), (3, 3)]},
        {"initial_body": [(20, 0)]},
        {"initial_body": [(0, -1)]},
        {"initial_target": (20, 20)},
        {"grid_size": 1},
    ])
    def test_invalid_configuration_raises(self, kwargs):
        """Each broken setting is rejected with InvalidConfiguration."""
        with pytest.raises(InvalidConfiguration):
            GameConfig(**kwargs)

    def test_invalid_configuration_is_value_error(self):
        """Callers catching ValueError also see configuration problems."""
        with pytest.raises(ValueError):
            GameConfig(max_targets=-1)

    def test_body_filling_grid_rejected(self):
        """A body covering every cell leaves nowhere for a target."""
        with pytest.raises(InvalidConfiguration, match="no free cell"):
            GameConfig(grid_size=2, initial_body=[(0, 0), (1, 0), (1, 1), (0, 1)])


    def test_direction_into_second_segment_rejected(self):
        """Facing the neck would lose on the first tick."""
        with pytest.raises(InvalidConfiguration, match="points into the body"):
            GameConfig(initial_body=[(5, 5), (4, 5)], initial_direction="LEFT")

    def test_direction_away_from_second_segment_accepted(self):
        """Any other heading is fine for a multi-cell body."""
        config = GameConfig(initial_body=[(5, 5), (4, 5)], initial_direction="UP")
        assert config.initial_direction == "UP"


class TestGameConfigFromEnv:
    """Tests for GameConfig.from_env()."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SNAKE_GRID_SIZE", "12")
        monkeypatch.setenv("SNAKE_MAX_TARGETS", "4")
        monkeypatch.setenv("SNAKE_TICK_MS", "90")
        config = GameConfig.from_env()
        assert config.grid_size == 12
        assert config.max_targets == 4
        assert config.tick_interval_ms == 90

    def test_missing_variables_use_defaults(self, monkeypatch):
        for name in ("SNAKE_GRID_SIZE", "SNAKE_MAX_TARGETS", "SNAKE_TICK_MS"):
            monkeypatch.delenv(name, raising=False)
        config = GameConfig.from_env()
        assert config.grid_size == 20
        assert config.max_targets == 10
        assert config.tick_interval_ms == 150

    def test_overrides_win_over_environment(self, monkeypatch):
        monkeypatch.setenv("SNAKE_MAX_TARGETS", "4")
        config = GameConfig.from_env(max_targets=7, grid_size=None)
        assert config.max_targets == 7

    def test_non_integer_value_raises(self, monkeypatch):
        monkeypatch.setenv("SNAKE_GRID_SIZE", "big")
        with pytest.raises(InvalidConfiguration, match="SNAKE_GRID_SIZE"):
            GameConfig.from_env()
