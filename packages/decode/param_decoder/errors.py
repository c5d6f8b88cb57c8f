"""Error taxonomy for parameter decoding.

All errors derive from ValueError so callers that only care about
"bad input" can catch a single builtin type.
"""

from __future__ import annotations

from typing import Optional


class DecoderError(ValueError):
    """Base class for all decoding errors."""
    pass


class InvalidArgument(DecoderError):
    """Raised when the encoded parameter is None or blank."""
    pass


class InvalidBase64(DecoderError):
    """Raised when a value is not valid base64 or not UTF-8 once decoded."""
    pass


class InvalidUrlEncoding(DecoderError):
    """Raised when a value is not valid percent-encoding or not UTF-8 once decoded."""
    pass


class DecodeFailure(DecoderError):
    """
    Raised when neither base64 nor URL decoding produced usable text.

    Keeps the per-strategy reasons and the input preview so callers can
    report them without parsing the message.
    """

    def __init__(
        self,
        message: str,
        base64_error: Optional[str] = None,
        url_error: Optional[str] = None,
        preview: Optional[str] = None,
    ):
        super().__init__(message)
        self.base64_error = base64_error
        self.url_error = url_error
        self.preview = preview
