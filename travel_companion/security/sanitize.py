"""Free-text sanitization applied before user text reaches the model."""

from __future__ import annotations

import unicodedata

DEFAULT_MAX_LENGTH = 2000

_CONTROL_CATEGORIES = {"Cc", "Cf"}
_WHITESPACE_CONTROLS = {"\n", "\r", "\t", "\v", "\f"}


def _strip_controls(text: str) -> str:
    kept: list[str] = []
    for ch in text:
        if ch in _WHITESPACE_CONTROLS:
            kept.append(" ")
        elif unicodedata.category(ch) in _CONTROL_CATEGORIES:
            continue
        else:
            kept.append(ch)
    return "".join(kept)


def sanitize(raw: str | None, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Remove control characters, cap the length and trim surrounding whitespace.

    Never raises. The result is at most ``max_length`` code points long and may be
    empty; callers decide whether an empty result is acceptable.
    """
    if not raw:
        return ""
    limit = max(0, int(max_length))
    cleaned = _strip_controls(str(raw))
    return cleaned[:limit].strip()


__all__ = ["DEFAULT_MAX_LENGTH", "sanitize"]
