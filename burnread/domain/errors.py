class DomainError(Exception):
    """Base class for all domain-level errors."""

    pass


class ValidationFailure(DomainError):
    """Input rejected before it reaches the store."""

    pass


class InvalidMessage(ValidationFailure):
    """Message content is empty, oversized or not text."""

    pass


class MalformedKey(ValidationFailure):
    """Message id does not have the structure of a generated id."""

    pass


class StorageFailure(DomainError):
    """The backing medium rejected a write, read or remove, or is unavailable."""

    pass


class RaceLost(DomainError):
    """
    Another consumer removed the entry first.

    Adapters fold this into a miss; it never crosses the store boundary.
    """

    pass
