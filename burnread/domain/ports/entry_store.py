from typing import Optional, Protocol


class EntryStorePort(Protocol):
    async def ensure_ready(self) -> None:
        """
        Check the backing medium is reachable and writable.
        Raise StorageFailure otherwise (fatal at startup).
        """

    async def create(self, key: str, content: str) -> None:
        """
        Persist content under key. Either fully visible afterwards or not at all.
        Does not check whether key already exists.
        Raise StorageFailure if the medium rejects the write.
        """

    async def consume_once(self, key: str) -> Optional[str]:
        """
        Return content and remove the entry in one atomic step.

        At most one caller ever gets the content for a given key; every
        other caller, and every caller for an unknown or malformed key,
        gets None.
        """

    async def close(self) -> None:
        """Release medium resources."""
