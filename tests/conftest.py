import pytest

from burnread.infrastructure.filesystem.entry_store import FileEntryStore
from burnread.infrastructure.memory.entry_store import InMemoryEntryStore
from tests.fakes import FakeEntryStore, FakeErroredEntryStore


@pytest.fixture()
def fake_store():
    return FakeEntryStore()


@pytest.fixture()
def errored_store():
    return FakeErroredEntryStore()


@pytest.fixture()
def memory_store():
    return InMemoryEntryStore()


@pytest.fixture()
def file_store(tmp_path):
    store = FileEntryStore(tmp_path / "messages")
    store._ensure_ready_sync()
    return store


@pytest.fixture()
def fixed_id(monkeypatch):
    """
    Make the generated message id deterministic for a test.
    """
    from burnread.domain import services as domain_services

    message_id = "1b4e28ba-2fa1-41d2-883f-0016d3cca427"
    monkeypatch.setattr(domain_services, "generate_message_id", lambda: message_id)
    return message_id
