from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote personas_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from personas_api.core import config as core_config  # noqa: E402
from personas_api.db import models  # noqa: E402
from personas_api.db import session as db_session  # noqa: E402


def _reset_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(monkeypatch):
    """Fresh in-memory store per test; settings/engine caches are reset around it."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("DUPLICATE_DOCUMENT_STATUS", raising=False)
    monkeypatch.setenv("APP_ENV", "dev")
    _reset_caches()

    engine = db_session.get_engine()
    models.Base.metadata.create_all(bind=engine)

    yield engine

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _reset_caches()
