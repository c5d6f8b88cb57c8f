"""
Escape sequence normalization for decoded parameters.

Upstream senders sometimes escape a JSON string before base64/URL encoding
it, so the decoded text still carries literal backslash sequences.
"""

from __future__ import annotations

from typing import List, Optional, Tuple


# Applied in this order, each over the whole string
ESCAPE_SEQUENCES: List[Tuple[str, str]] = [
    ('\\"', '"'),
    ('\\n', '\n'),
    ('\\r', '\r'),
    ('\\t', '\t'),
]


def normalize_escapes(text: Optional[str]) -> Optional[str]:
    """
    Replace literal two-character escapes with the characters they stand for.

    Only \\", \\n, \\r and \\t are recognized; anything else (\\\\, \\u0041,
    \\b) is left untouched.

    Args:
        text: Decoded text, possibly None

    Returns:
        Normalized text, or None when text is None
    """
    if text is None:
        return None

    for sequence, replacement in ESCAPE_SEQUENCES:
        text = text.replace(sequence, replacement)
    return text
