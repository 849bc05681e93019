# burnread/domain/services.py
from __future__ import annotations

import re
import uuid

# Canonical UUID4: version nibble 4, variant nibble 8-b.
_MESSAGE_ID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def generate_message_id() -> str:
    """Random UUID4 (122 random bits from os.urandom), lowercase hex form."""
    return str(uuid.uuid4())


def is_well_formed(candidate: object) -> bool:
    """
    Structural check run before any storage lookup.

    Rejects anything that could address something other than a single
    entry (path separators, dots, wildcards, prefixes of other keys).
    """
    if not isinstance(candidate, str):
        return False
    return _MESSAGE_ID_RE.fullmatch(candidate) is not None


def key_hint(key: str) -> str:
    """Short, non-reversible prefix of a key for log lines."""
    return key[:8]
