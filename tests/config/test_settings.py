"""Tests for settings module behavior."""

from __future__ import annotations

import importlib
from pathlib import Path


def test_base_url_defaults_to_production(config_runtime_env: Path) -> None:
    """Without configuration the production endpoint and an empty key are used."""

    _ = config_runtime_env

    import fredsor.config.config as config_module
    import fredsor.config.settings as settings

    config_module.config = config_module.Config.load(env={})
    reloaded = importlib.reload(settings)

    assert reloaded.FRED_BASE_URL == "https://api.stlouisfed.org"
    assert reloaded.FRED_API_KEY == ""


def test_settings_use_config_values(config_runtime_env: Path) -> None:
    _ = config_runtime_env

    import fredsor.config.config as config_module
    import fredsor.config.settings as settings

    config_module.config = config_module.Config(api_key="K", base_url="https://example.test")
    reloaded = importlib.reload(settings)

    assert reloaded.FRED_API_KEY == "K"
    assert reloaded.FRED_BASE_URL == "https://example.test"
    assert reloaded.USER_AGENT.startswith("fredsor/")
