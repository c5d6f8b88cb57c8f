"""
Individual decoding strategies.

Each strategy turns an encoded string into UTF-8 text or raises a typed
error. attempt_decode() wraps a strategy into a result-or-error value so
the detector can fall back without juggling exceptions.
"""

from __future__ import annotations

import base64
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional
from urllib.parse import unquote_to_bytes

from param_decoder.errors import DecoderError, InvalidBase64, InvalidUrlEncoding


class EncodingType(Enum):
    """Encodings the detector knows how to reverse."""
    BASE64 = "base64"
    URL = "url"


@dataclass
class DecodeAttempt:
    """Outcome of running a single decoding strategy."""
    encoding: EncodingType
    success: bool
    text: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "encoding": self.encoding.value,
            "success": self.success,
            "error": self.error,
        }


# A '%' that does not start a complete two-digit hex escape
_MALFORMED_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


def decode_base64(value: str) -> str:
    """
    Decode standard base64 (A-Z, a-z, 0-9, +, / with = padding) to UTF-8 text.

    Decoding is strict: characters outside the alphabet, bad padding and
    byte sequences that are not UTF-8 are all rejected.

    Args:
        value: Base64-encoded string

    Returns:
        Decoded text

    Raises:
        InvalidBase64: If the value is not base64 or the bytes are not UTF-8
    """
    try:
        raw = base64.b64decode(value, validate=True)
        return raw.decode("utf-8")
    except ValueError as e:
        # binascii.Error and UnicodeDecodeError are both ValueErrors
        raise InvalidBase64(f"Invalid base64 encoding: {e}") from e


def decode_url(value: str) -> str:
    """
    Percent-decode a value as UTF-8 text using form-decoding rules.

    '+' decodes to a space and '%XX' to the byte 0xXX. A '%' that is not
    followed by two hex digits is an error rather than a literal.

    Args:
        value: Percent-encoded string

    Returns:
        Decoded text

    Raises:
        InvalidUrlEncoding: On malformed escapes or bytes that are not UTF-8
    """
    match = _MALFORMED_ESCAPE.search(value)
    if match:
        raise InvalidUrlEncoding(
            "Invalid URL encoding: Illegal hex characters in escape (%) "
            f"pattern at index {match.start()}"
        )

    try:
        raw = unquote_to_bytes(value.replace("+", " "))
        return raw.decode("utf-8")
    except UnicodeError as e:
        # str input is UTF-8 encoded first, so lone surrogates fail on encode
        raise InvalidUrlEncoding(f"Invalid URL encoding: {e}") from e


STRATEGIES: Dict[EncodingType, Callable[[str], str]] = {
    EncodingType.BASE64: decode_base64,
    EncodingType.URL: decode_url,
}


def attempt_decode(encoding: EncodingType, value: str) -> DecodeAttempt:
    """
    Run one strategy and capture its text or its error message.

    Args:
        encoding: Which strategy to run
        value: Encoded string

    Returns:
        DecodeAttempt with either text or error set
    """
    try:
        text = STRATEGIES[encoding](value)
    except DecoderError as e:
        return DecodeAttempt(encoding=encoding, success=False, error=str(e))
    return DecodeAttempt(encoding=encoding, success=True, text=text)
