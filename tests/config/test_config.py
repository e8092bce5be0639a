"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest

from fredsor.config.config import Config


def _write_config(root: Path, content: str) -> Path:
    target = root / "config" / "config.toml"
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text(content, encoding="utf-8")
    return target


def test_missing_file_yields_defaults(config_runtime_env: Path) -> None:
    """A missing config file produces defaults and is not created."""

    loaded = Config.load(env={})

    assert loaded.api_key is None
    assert loaded.base_url is None
    assert loaded.log_file is None
    assert not (config_runtime_env / "config" / "config.toml").exists()


def test_load_reads_toml_values(config_runtime_env: Path) -> None:
    _ = _write_config(
        config_runtime_env,
        'api_key = "abc123"\nbase_url = "https://example.test"\nlog_file = "/tmp/fred.log"\n',
    )

    loaded = Config.load(env={})

    assert loaded.api_key == "abc123"
    assert loaded.base_url == "https://example.test"
    assert loaded.log_file == Path("/tmp/fred.log")


def test_blank_values_are_treated_as_unset(config_runtime_env: Path) -> None:
    _ = _write_config(config_runtime_env, 'api_key = ""\nlog_file = "  "\n')

    loaded = Config.load(env={})

    assert loaded.api_key is None
    assert loaded.log_file is None


def test_environment_overrides_file(config_runtime_env: Path) -> None:
    _ = _write_config(config_runtime_env, 'api_key = "from-file"\nbase_url = "https://file.test"\n')

    loaded = Config.load(env={"FRED_API_KEY": "from-env", "FRED_BASE_URL": "https://env.test"})

    assert loaded.api_key == "from-env"
    assert loaded.base_url == "https://env.test"


def test_unknown_keys_are_ignored(config_runtime_env: Path) -> None:
    _ = _write_config(config_runtime_env, 'api_key = "k"\nretries = 3\n')

    loaded = Config.load(env={})

    assert loaded.api_key == "k"
    assert not hasattr(loaded, "retries")


def test_invalid_toml_raises(config_runtime_env: Path) -> None:
    target = _write_config(config_runtime_env, "api_key = \n")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load(config_file=target, env={})


def test_singleton_behavior(config_runtime_env: Path) -> None:
    """Subsequent default loads return the cached instance."""

    _ = config_runtime_env
    config1 = Config.load()
    config2 = Config.load()

    assert config1 is config2
