from __future__ import annotations

MAX_MESSAGE_LENGTH = 10_000

_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        '"': "&quot;",
        "'": "&#x27;",
        "<": "&lt;",
        ">": "&gt;",
        "/": "&#x2F;",
        "\\": "&#x5C;",
        "`": "&#96;",
    }
)


def escape_markup(text: str) -> str:
    """
    Replace every markup-significant character with its entity.

    Not idempotent: "&lt;" becomes "&amp;lt;".
    """
    return text.translate(_ESCAPES)


def is_acceptable(raw: object, max_length: int = MAX_MESSAGE_LENGTH) -> bool:
    if not isinstance(raw, str) or not raw:
        return False
    if not raw.strip():
        return False
    if len(raw) > max_length:
        return False
    # Lone surrogates cannot be stored or sent back to the reader.
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def sanitize_input(raw: str, max_length: int = MAX_MESSAGE_LENGTH) -> str:
    """
    Trim, escape, then cut to max_length.

    The cut can split an entity when escaping grew the text past the
    bound; the stored length bound wins over entity integrity.
    """
    sanitized = escape_markup(raw.strip())
    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length]
    return sanitized
