# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - app_config     → AppConfig with defaults (no .env lookup)
# - write_csv      → Factory writing a CSV file under tmp_path
# - recorder       → Observer that records every import event
# - make_cache     → DataSetCache wired to app_config + recorder
# ==============================================

import pytest

from flatland import config as config_module
from flatland.cache import DataSetCache, ImportObserver
from flatland.config import AppConfig


class RecordingObserver(ImportObserver):
    """Collects import events as tuples, in the order they fire."""

    def __init__(self):
        self.events = []

    def import_started(self, uri):
        self.events.append(("started", uri))

    def import_completed(self, row_count):
        self.events.append(("completed", row_count))

    def field_typed(self, name, field_type):
        self.events.append(("field", name, field_type))


@pytest.fixture(autouse=True)
def reset_config_singleton(monkeypatch):
    """Every test starts without a cached AppConfig."""
    monkeypatch.setattr(config_module, "_config_instance", None)


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture
def write_csv(tmp_path):
    """Return a function that writes text to a .csv file and returns its path."""
    def _write(content: str, name: str = "data.csv", encoding: str = "utf-8") -> str:
        path = tmp_path / name
        path.write_bytes(content.encode(encoding))
        return str(path)
    return _write


@pytest.fixture
def recorder():
    return RecordingObserver()


@pytest.fixture
def make_cache(app_config, recorder):
    def _make(**kwargs):
        kwargs.setdefault("config", app_config)
        kwargs.setdefault("observer", recorder)
        return DataSetCache(**kwargs)
    return _make
