"""Tests for configuration loading."""

from __future__ import annotations

import logging

from termcanvas.buffer import Buffer
from termcanvas.config import (
    ENV_DEFAULT_HEIGHT,
    ENV_DEFAULT_WIDTH,
    ENV_POOL_MAX_SIZE,
    Config,
    get_config,
    set_config,
)


class TestConfig:
    def test_defaults(self) -> None:
        config = Config()
        assert (config.default_width, config.default_height) == (80, 24)
        assert config.pool_max_size == 64

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv(ENV_DEFAULT_WIDTH, "120")
        monkeypatch.setenv(ENV_DEFAULT_HEIGHT, " 40 ")
        monkeypatch.setenv(ENV_POOL_MAX_SIZE, "8")
        config = Config.from_env()
        assert config == Config(default_width=120, default_height=40, pool_max_size=8)

    def test_invalid_values_are_ignored_with_warning(self, monkeypatch, caplog) -> None:
        monkeypatch.setenv(ENV_DEFAULT_WIDTH, "wide")
        monkeypatch.setenv(ENV_DEFAULT_HEIGHT, "-3")
        with caplog.at_level(logging.WARNING, logger="termcanvas.config"):
            config = Config.from_env()
        assert (config.default_width, config.default_height) == (80, 24)
        messages = [r.getMessage() for r in caplog.records]
        assert any(ENV_DEFAULT_WIDTH in m and "not an integer" in m for m in messages)
        assert any(ENV_DEFAULT_HEIGHT in m and "must be positive" in m for m in messages)

    def test_global_config_is_cached(self, monkeypatch) -> None:
        first = get_config()
        monkeypatch.setenv(ENV_DEFAULT_WIDTH, "99")
        assert get_config() is first
        set_config(None)
        assert get_config().default_width == 99

    def test_buffer_uses_configured_default(self) -> None:
        set_config(Config(default_width=10, default_height=4))
        buf = Buffer(0, -1)
        assert (buf.width, buf.height) == (10, 4)
        buf = Buffer(3, 0)
        assert (buf.width, buf.height) == (3, 4)
