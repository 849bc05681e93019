import pytest
from fastapi.testclient import TestClient

from burnread.infrastructure.memory.entry_store import InMemoryEntryStore
from burnread.main import create_app
from burnread.presentation.dependencies import get_entry_store, get_max_message_length


@pytest.fixture()
def app_and_store():
    app = create_app()
    store = InMemoryEntryStore()

    app.dependency_overrides[get_entry_store] = lambda: store
    app.dependency_overrides[get_max_message_length] = lambda: 10_000

    try:
        yield app, store
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app_and_store):
    app, _ = app_and_store
    return TestClient(app, raise_server_exceptions=False)


def read_path(link: str) -> str:
    """Strip scheme and host from a returned link."""
    return "/" + link.split("://", 1)[1].split("/", 1)[1]
