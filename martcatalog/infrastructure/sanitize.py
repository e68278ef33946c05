"""Search term sanitization.

Applied once when a query enters the service; the filter stage treats
search text as already clean. Idempotent and side-effect free.
"""

import re

DEFAULT_MAX_LENGTH = 100

_HTML_TAG = re.compile(r"<[^>]*>")
_DANGEROUS_PATTERNS = [
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"vbscript:", re.IGNORECASE),
    re.compile(r"data:", re.IGNORECASE),
    re.compile(r"on\w+\s*=", re.IGNORECASE),
    re.compile(r"expression\s*\(", re.IGNORECASE),
]
_DISALLOWED = re.compile(r"[^\w\s\-.,'\"]")
_DISALLOWED_WITH_WILDCARDS = re.compile(r"[^\w\s\-.,?*'\"]")
_WHITESPACE = re.compile(r"\s+")


def remove_dangerous_patterns(text: str) -> str:
    """Strip script-injection fragments from text."""
    for pattern in _DANGEROUS_PATTERNS:
        text = pattern.sub("", text)
    return text


def sanitize_search_term(
    term: str | None,
    max_length: int = DEFAULT_MAX_LENGTH,
    allow_wildcards: bool = False,
) -> str:
    """Clean a user-supplied search term.

    Removes markup, injection fragments and special characters, collapses
    whitespace and caps the length.

    Args:
        term: Raw search text.
        max_length: Maximum length of the result.
        allow_wildcards: Keep "*" and "?" characters.

    Returns:
        Sanitized term; empty string for non-string input.
    """
    if not isinstance(term, str):
        return ""

    result = _HTML_TAG.sub("", term)
    result = remove_dangerous_patterns(result)
    disallowed = _DISALLOWED_WITH_WILDCARDS if allow_wildcards else _DISALLOWED
    result = disallowed.sub("", result)
    result = _WHITESPACE.sub(" ", result).strip()

    if len(result) > max_length:
        result = result[:max_length].strip()

    return result
