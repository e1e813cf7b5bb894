"""Tests for GameConfig and YAML loading."""

from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from breakout import config as config_module
from breakout.config import ConfigError, GameConfig, load_config


class TestGameConfig:
    """Tests for GameConfig validation."""

    def test_defaults(self):
        config = GameConfig()
        assert (config.arena_width, config.arena_height) == (1425, 800)
        assert config.tick_interval_ms == 10
        assert config.brick_count == 40

    def test_entity_configs(self):
        config = GameConfig(brick_columns=3, ball_speed=4, paddle_step=9)
        assert config.grid_config().columns == 3
        assert config.ball_config().speed == 4
        assert config.paddle_config().step == 9
        assert config.paddle_config().bottom_offset == 40

    @pytest.mark.parametrize("field", ['arena_width', 'brick_rows', 'ball_speed', 'tick_interval_ms'])
    def test_rejects_non_positive(self, field):
        with pytest.raises(ValidationError):
            GameConfig(**{field: 0})

    def test_rejects_negative_padding(self):
        with pytest.raises(ValidationError):
            GameConfig(brick_padding=-1)

    def test_zero_padding_allowed(self):
        assert GameConfig(brick_padding=0).brick_padding == 0

    def test_paddle_must_fit(self):
        with pytest.raises(ValidationError):
            GameConfig(arena_width=200, paddle_width=230)

    def test_unknown_field(self):
        with pytest.raises(ValidationError):
            GameConfig(brick_colour='red')

    def test_frozen(self):
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.arena_width = 10

    def test_with_overrides_ignores_none(self):
        config = GameConfig().with_overrides(arena_width=None, brick_rows=2)
        assert config.arena_width == 1425
        assert config.brick_rows == 2

    def test_with_overrides_invalid(self):
        with pytest.raises(ConfigError):
            GameConfig().with_overrides(brick_columns=-2)


class TestLoadConfig:
    """Tests for load_config."""

    def test_none_returns_defaults(self):
        assert load_config(None) == GameConfig()

    def test_partial_file(self, tmp_path):
        path = tmp_path / 'level.yaml'
        path.write_text("arena_width: 1000\nbrick_columns: 7\nball_speed: 4\n")
        config = load_config(path)
        assert config.arena_width == 1000
        assert config.brick_columns == 7
        assert config.ball_speed == 4
        assert config.brick_rows == 4

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text("")
        assert load_config(str(path)) == GameConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / 'nope.yaml')

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text("arena_width: [1, 2\n")
        with pytest.raises(ConfigError, match="Malformed"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / 'list.yaml'
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / 'invalid.yaml'
        path.write_text("brick_rows: 0\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)


class TestEnvDefaults:
    """Tests for integer defaults read from the environment."""

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv('BREAKOUT_ARENA_WIDTH', raising=False)
        assert config_module._get_int('BREAKOUT_ARENA_WIDTH', 1425) == 1425

    def test_integer_value(self, monkeypatch):
        monkeypatch.setenv('BREAKOUT_TICK_INTERVAL_MS', '16')
        assert config_module._get_int('BREAKOUT_TICK_INTERVAL_MS', 10) == 16

    @pytest.mark.parametrize("value", ['wide', '12.5', ''])
    def test_bad_value_falls_back_with_warning(self, monkeypatch, value):
        monkeypatch.setenv('BREAKOUT_ARENA_WIDTH', value)
        warning = Mock()
        monkeypatch.setattr(config_module.log, 'warning', warning)
        assert config_module._get_int('BREAKOUT_ARENA_WIDTH', 1425) == 1425
        warning.assert_called_once()
        assert 'BREAKOUT_ARENA_WIDTH' in warning.call_args[0]
