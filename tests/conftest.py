import sys
from pathlib import Path

import pytest

# Ensure `src` (containing the `utilkit` package) is on sys.path for tests when not installed editable.
SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from utilkit.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    # Settings are cached process-wide; isolate every test from env changes.
    for key in ("UTILKIT_LOG_LEVEL", "UTILKIT_MAP_ASYNC_CONCURRENCY", "UTILKIT_JSON_INDENT"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
