from __future__ import annotations

import logging
import threading
from typing import Optional

from burnread.domain.entities import Entry
from burnread.domain.ports.entry_store import EntryStorePort
from burnread.domain.sanitize import MAX_MESSAGE_LENGTH
from burnread.domain.services import is_well_formed, key_hint

logger = logging.getLogger(__name__)


class InMemoryEntryStore(EntryStorePort):
    """
    Process-local store. A single lock guards the dict so that the
    pop is the only place an entry can leave the store, whether callers
    are asyncio tasks or OS threads.
    """

    def __init__(self, *, max_length: int = MAX_MESSAGE_LENGTH) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()
        self._max_length = max_length

    async def ensure_ready(self) -> None:
        return None

    async def create(self, key: str, content: str) -> None:
        entry = Entry(key=key, content=content, max_length=self._max_length)
        with self._lock:
            self._entries[entry.key] = entry.content
        logger.debug("entry created", extra={"key": key_hint(key)})

    async def consume_once(self, key: str) -> Optional[str]:
        if not is_well_formed(key):
            return None
        with self._lock:
            content = self._entries.pop(key, None)
        if content is not None:
            logger.debug("entry consumed", extra={"key": key_hint(key)})
        return content

    async def close(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
