import logging
from typing import Optional

from burnread.domain.ports.entry_store import EntryStorePort
from burnread.domain.services import is_well_formed, key_hint

logger = logging.getLogger(__name__)


async def read_message(store: EntryStorePort, message_id: str) -> Optional[str]:
    """Consume the message once. None covers unknown, already read and malformed ids."""
    if not is_well_formed(message_id):
        logger.info("rejected malformed message id")
        return None
    content = await store.consume_once(message_id)
    logger.info(
        "message read" if content is not None else "message not found",
        extra={"key": key_hint(message_id)},
    )
    return content
