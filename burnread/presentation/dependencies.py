from fastapi import Request

from burnread.domain.ports.entry_store import EntryStorePort


def get_entry_store(request: Request) -> EntryStorePort:
    # This is set in burnread.main lifespan()
    return request.app.state.entry_store


def get_max_message_length(request: Request) -> int:
    # Same Settings instance the lifespan builds the store from
    return request.app.state.settings.max_message_length
