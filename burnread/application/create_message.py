import logging

import burnread.domain.services as domain_services
from burnread.domain.entities import Entry
from burnread.domain.errors import InvalidMessage
from burnread.domain.ports.entry_store import EntryStorePort
from burnread.domain.sanitize import MAX_MESSAGE_LENGTH, is_acceptable, sanitize_input

logger = logging.getLogger(__name__)


async def create_message(
    store: EntryStorePort,
    raw_message: object,
    max_length: int = MAX_MESSAGE_LENGTH,
) -> str:
    """Validate and sanitize raw input, store it, return the new message id."""
    if not is_acceptable(raw_message, max_length):
        raise InvalidMessage()
    entry = Entry(
        key=domain_services.generate_message_id(),
        content=sanitize_input(raw_message, max_length),
        max_length=max_length,
    )
    await store.create(entry.key, entry.content)
    logger.info(
        "message created",
        extra={
            "key": domain_services.key_hint(entry.key),
            "length": len(entry.content),
        },
    )
    return entry.key
