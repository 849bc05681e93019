from __future__ import annotations

import asyncio
import logging
import os
import uuid
from pathlib import Path
from typing import Optional

from burnread.domain.entities import Entry
from burnread.domain.errors import RaceLost, StorageFailure
from burnread.domain.ports.entry_store import EntryStorePort
from burnread.domain.sanitize import MAX_MESSAGE_LENGTH
from burnread.domain.services import is_well_formed, key_hint

logger = logging.getLogger(__name__)

_SUFFIX = ".txt"


class FileEntryStore(EntryStorePort):
    """
    One file per entry: <directory>/<key>.txt, UTF-8.

    Writes go through a hidden temp file and os.replace, so a reader sees
    either the whole entry or nothing. Consumption renames the entry file
    to a unique hidden claim name; rename(2) on one source succeeds for a
    single caller only, which makes it the arbiter between threads and
    between processes sharing the directory.
    """

    def __init__(
        self, directory: str | os.PathLike[str], *, max_length: int = MAX_MESSAGE_LENGTH
    ) -> None:
        self._dir = Path(directory)
        self._max_length = max_length

    @property
    def directory(self) -> Path:
        return self._dir

    def _path(self, key: str) -> Path:
        return self._dir / f"{key}{_SUFFIX}"

    def _scratch(self, key: str, kind: str) -> Path:
        return self._dir / f".{key}.{uuid.uuid4().hex}.{kind}"

    async def ensure_ready(self) -> None:
        await asyncio.to_thread(self._ensure_ready_sync)

    def _ensure_ready_sync(self) -> None:
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageFailure(f"cannot create messages directory: {e}") from e
        if not os.access(self._dir, os.W_OK | os.X_OK):
            raise StorageFailure("messages directory is not writable")
        logger.info("file entry store ready", extra={"directory": str(self._dir)})

    async def create(self, key: str, content: str) -> None:
        entry = Entry(key=key, content=content, max_length=self._max_length)
        await asyncio.to_thread(self._write, entry)
        logger.debug("entry created", extra={"key": key_hint(key)})

    def _write(self, entry: Entry) -> None:
        tmp = self._scratch(entry.key, "tmp")
        try:
            fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(entry.content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self._path(entry.key))
        except (OSError, ValueError) as e:
            raise StorageFailure(f"cannot write entry: {e}") from e
        finally:
            # no-op after a successful replace
            self._discard(tmp)

    async def consume_once(self, key: str) -> Optional[str]:
        if not is_well_formed(key):
            return None
        try:
            return await asyncio.to_thread(self._consume, key)
        except RaceLost:
            logger.debug("entry already claimed", extra={"key": key_hint(key)})
            return None

    def _consume(self, key: str) -> str:
        claimed = self._claim(key)
        try:
            content = claimed.read_text(encoding="utf-8")
        except (OSError, ValueError) as e:
            raise StorageFailure(f"cannot read claimed entry: {e}") from e
        finally:
            self._discard(claimed)
        logger.debug("entry consumed", extra={"key": key_hint(key)})
        return content

    def _discard(self, path: Path) -> None:
        """Remove a scratch file. It is unaddressable by key, so a leftover is only litter."""
        try:
            path.unlink(missing_ok=True)
        except OSError:
            logger.warning(
                "cannot remove scratch file", exc_info=True, extra={"file": path.name}
            )

    def _claim(self, key: str) -> Path:
        """Move the entry out of the addressable namespace; only one caller wins."""
        claimed = self._scratch(key, "claimed")
        try:
            os.rename(self._path(key), claimed)
        except FileNotFoundError as e:
            raise RaceLost() from e
        except OSError as e:
            raise StorageFailure(f"cannot claim entry: {e}") from e
        return claimed

    async def close(self) -> None:
        return None
