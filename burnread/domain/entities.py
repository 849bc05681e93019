from dataclasses import dataclass

from burnread.domain.errors import InvalidMessage, MalformedKey
from burnread.domain.sanitize import MAX_MESSAGE_LENGTH
from burnread.domain.services import is_well_formed


@dataclass(frozen=True)
class Entry:
    key: str
    content: str
    max_length: int = MAX_MESSAGE_LENGTH

    def __post_init__(self):
        if not is_well_formed(self.key):
            raise MalformedKey()
        if not isinstance(self.content, str) or not self.content:
            raise InvalidMessage("content is required")
        if len(self.content) > self.max_length:
            raise InvalidMessage("content exceeds maximum length")
