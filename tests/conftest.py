"""Shared test fixtures for cel-builder."""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Ensure src/ is on the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cel_builder.config import settings as settings_module
from cel_builder.config.settings import Settings

# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Return a ``Settings`` instance populated with safe test defaults."""
    return Settings(log_level=None, escape_strings=False, warn_on_raw=True)


@pytest.fixture
def override_settings(
    monkeypatch: pytest.MonkeyPatch, test_settings: Settings
) -> Callable[..., Settings]:
    """Return a callable that swaps the shared settings for the test's duration."""

    def _override(**overrides: Any) -> Settings:
        patched = test_settings.model_copy(update=overrides)
        monkeypatch.setattr(settings_module, "_settings", patched)
        return patched

    return _override
