from __future__ import annotations

from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient


# Ensure `import pluscodes.*` works when pytest chooses an import mode that
# doesn't automatically add the project root to sys.path.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    # Deterministic config regardless of the developer's environment.
    monkeypatch.setenv("PLUSCODES_DEFAULT_CODE_LENGTH", "10")
    monkeypatch.setenv("PLUSCODES_MAX_BATCH_ITEMS", "5")
    monkeypatch.setenv("PLUSCODES_LOG_LEVEL", "DEBUG")

    from pluscodes.core.settings import get_settings

    get_settings.cache_clear()

    from pluscodes.main import create_app

    app = create_app()
    return TestClient(app, raise_server_exceptions=False)
