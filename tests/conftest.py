from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from pathlib import Path
import sys

import pytest
import pytest_asyncio
from mongomock_motor import AsyncMongoMockClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from polyid.config import get_settings


@pytest.fixture(autouse=True)
def _env_overrides(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("POLYID_UNSIGNED_OVERFLOW", raising=False)
    monkeypatch.delenv("POLYID_SCALAR_INT_OVERFLOW", raising=False)
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]


@pytest_asyncio.fixture
async def mongo_db() -> AsyncIterator:
    client = AsyncMongoMockClient()
    yield client["polyid-test"]
    client.close()
