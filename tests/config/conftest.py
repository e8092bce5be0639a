"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

import importlib
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def portable_repo_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Provide a temporary repository root for portable path detection."""

    root = tmp_path.resolve()
    _ = (root / "pyproject.toml").write_text("[project]\nname='tmp'\n")
    monkeypatch.delenv("FREDSOR_CONFIG", raising=False)
    monkeypatch.delenv("FRED_API_KEY", raising=False)
    monkeypatch.delenv("FRED_BASE_URL", raising=False)

    import fredsor.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return root

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    return root


@pytest.fixture
def config_runtime_env(portable_repo_root: Path) -> Iterator[Path]:
    """Reset configuration singletons around a test run.

    Yields the temporary repository root; tests write ``config/config.toml``
    beneath it before reloading.
    """

    import fredsor.config.config as config_module

    original_instance = config_module.Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = config_module.Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    original_config = config_module.config

    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
    config_module.Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]

    try:
        yield portable_repo_root
    finally:
        config_module.Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        config_module.Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]
        config_module.config = original_config
        settings = sys.modules.get("fredsor.config.settings")
        if settings is not None:
            _ = importlib.reload(settings)
