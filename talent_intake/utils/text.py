import re

_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def truncate(text: str, max_length: int) -> str:
    """Drop everything after ``max_length`` characters.

    Idempotent: truncating already-truncated text returns it unchanged.
    """
    if max_length < 0:
        raise ValueError("max_length must be non-negative")
    return text[:max_length]


def preview(text: str, length: int = 500) -> str:
    """Short preview of ``text`` with an ellipsis when something was cut."""
    if len(text) <= length:
        return text
    return text[:length] + "..."
