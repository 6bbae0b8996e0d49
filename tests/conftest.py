from __future__ import annotations

import pytest

from termcanvas.config import (
    ENV_DEFAULT_HEIGHT,
    ENV_DEFAULT_WIDTH,
    ENV_POOL_MAX_SIZE,
    set_config,
)
from termcanvas.style import set_style_encoder


@pytest.fixture(autouse=True)
def isolated_globals(monkeypatch):
    """Start every test from default config and a fresh style cache."""
    for name in (ENV_DEFAULT_WIDTH, ENV_DEFAULT_HEIGHT, ENV_POOL_MAX_SIZE):
        monkeypatch.delenv(name, raising=False)
    set_config(None)
    set_style_encoder(None)
    yield
    set_config(None)
    set_style_encoder(None)
