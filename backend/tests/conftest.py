"""Test fixtures for fsriver."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import pytest

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


@pytest.fixture(autouse=True)
def reset_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset cached settings, logging and environment between tests."""
    monkeypatch.setenv("FSRIVER_CONFIG", str(tmp_path / "missing.yaml"))
    for name in ("FSRIVER_DECODE_MODE", "FSRIVER_DEFAULT_ANALYZER", "FSRIVER_DEFAULT_TYPENAME"):
        monkeypatch.delenv(name, raising=False)

    from fsriver.api import dependencies as deps
    from fsriver.core.config import get_settings

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    get_settings.cache_clear()
    deps.get_app_settings.cache_clear()
    yield
    root.handlers = handlers
    root.setLevel(level)
    get_settings.cache_clear()
    deps.get_app_settings.cache_clear()


@pytest.fixture
def river_document() -> dict[str, Any]:
    return {
        "type": "fs",
        "fs": {
            "name": "tmp",
            "url": "/tmp_es",
            "update_rate": 30000,
            "includes": "*.doc,*.pdf",
            "excludes": "resume.*",
            "analyzer": "standard",
        },
        "index": {
            "index": "docs",
            "type": "doc",
        },
    }
