"""
Auto-detection of base64 vs. URL-encoded parameters.

Base64 is always tried first. Its alphabet is a subset of what is legal in
percent-encoded text, so an input valid in both forms is taken as base64.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from param_decoder.config import DecoderConfig
from param_decoder.decoding import strategies
from param_decoder.decoding.escapes import normalize_escapes
from param_decoder.decoding.strategies import (
    DecodeAttempt,
    EncodingType,
    attempt_decode,
)
from param_decoder.errors import DecodeFailure, InvalidArgument
from param_decoder.version import __version__

logger = logging.getLogger(__name__)

# Strategy order is part of the contract
DETECTION_ORDER = (EncodingType.BASE64, EncodingType.URL)

EMPTY_RESULT_MESSAGES: Dict[EncodingType, str] = {
    EncodingType.BASE64: "Base64 decoding produced empty result",
    EncodingType.URL: (
        "URL decoding produced empty result. "
        "The encoded parameter may be empty or contain only whitespace."
    ),
}


@dataclass
class DecodeResult:
    """Decoded text along with the encoding that produced it."""
    text: str
    encoding: EncodingType
    attempts: List[DecodeAttempt] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "encoding": self.encoding.value,
            "text": self.text,
            "attempts": [a.to_dict() for a in self.attempts],
            "version": __version__,
        }


def preview(text: str, length: int = 50, suffix: str = "...") -> str:
    """Truncate text to `length` characters, appending suffix if anything was cut."""
    if len(text) <= length:
        return text
    return text[:length] + suffix


class EncodingDetector:
    """
    Detects whether a parameter is base64 or URL encoded and decodes it.

    The detector holds no per-call state and can be shared across threads.
    """

    def __init__(self, config: Optional[DecoderConfig] = None):
        self.config = config or DecoderConfig()

    def auto_detect_and_decode(self, encoded: Optional[str]) -> str:
        """
        Decode a parameter without knowing its encoding.

        Args:
            encoded: Base64 or URL-encoded string

        Returns:
            Decoded, escape-normalized and trimmed text

        Raises:
            InvalidArgument: If encoded is None or blank
            DecodeFailure: If neither encoding applies
        """
        return self.detect(encoded).text

    def detect(self, encoded: Optional[str]) -> DecodeResult:
        """
        Decode a parameter and report which encoding matched.

        Raises the same errors as auto_detect_and_decode().
        """
        if encoded is None or not encoded.strip():
            raise InvalidArgument("Encoded parameter cannot be null or empty")

        trimmed = encoded.strip()
        attempts: List[DecodeAttempt] = []

        for encoding in DETECTION_ORDER:
            attempt = self._attempt(encoding, trimmed)
            attempts.append(attempt)
            if attempt.success:
                logger.info(f"Successfully decoded parameter using {encoding.value} encoding")
                return DecodeResult(text=attempt.text, encoding=encoding, attempts=attempts)
            if encoding is EncodingType.BASE64:
                logger.debug(f"Base64 decoding failed, attempting URL decoding: {attempt.error}")

        base64_error, url_error = (a.error for a in attempts)
        input_preview = preview(
            trimmed,
            length=self.config.preview_length,
            suffix=self.config.preview_suffix,
        )
        logger.error("Both base64 and URL decoding failed for input parameter")
        raise DecodeFailure(
            "Unable to decode parameter - neither base64 nor URL encoding format detected. "
            f"Base64 error: {base64_error}. URL error: {url_error}. "
            f"Input preview: {input_preview}",
            base64_error=base64_error,
            url_error=url_error,
            preview=input_preview,
        )

    def decode_base64(self, value: str) -> str:
        """Decode base64 to text, raising InvalidBase64 on failure."""
        return strategies.decode_base64(value)

    def decode_url(self, value: str) -> str:
        """Percent-decode to text, raising InvalidUrlEncoding on failure."""
        return strategies.decode_url(value)

    def _attempt(self, encoding: EncodingType, trimmed: str) -> DecodeAttempt:
        """Run one strategy; blank output counts as a failed attempt."""
        attempt = attempt_decode(encoding, trimmed)
        if not attempt.success:
            return attempt

        if not attempt.text.strip():
            if encoding is EncodingType.BASE64:
                logger.warning(
                    "Base64 decoding succeeded but produced empty result, "
                    "attempting URL decoding"
                )
            else:
                logger.error("URL decoding succeeded but produced empty result")
            return DecodeAttempt(
                encoding=encoding,
                success=False,
                error=EMPTY_RESULT_MESSAGES[encoding],
            )

        text = attempt.text
        if self.config.unescape:
            text = normalize_escapes(text)
        return DecodeAttempt(encoding=encoding, success=True, text=text.strip())


_default_detector = EncodingDetector()


def decode_auto(encoded: Optional[str]) -> str:
    """
    Decode a base64 or URL-encoded parameter, trying base64 first.

    Args:
        encoded: Encoded string

    Returns:
        Decoded text with escapes normalized and edges trimmed

    Raises:
        InvalidArgument: If encoded is None or blank
        DecodeFailure: If neither encoding applies
    """
    return _default_detector.auto_detect_and_decode(encoded)


def detect_encoding(encoded: Optional[str]) -> DecodeResult:
    """Like decode_auto(), but also report which encoding matched."""
    return _default_detector.detect(encoded)
