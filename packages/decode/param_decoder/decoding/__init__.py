"""Base64 / URL parameter decoding."""

from param_decoder.decoding.escapes import normalize_escapes, ESCAPE_SEQUENCES
from param_decoder.decoding.strategies import (
    decode_base64,
    decode_url,
    attempt_decode,
    DecodeAttempt,
    EncodingType,
)
from param_decoder.decoding.detector import (
    decode_auto,
    detect_encoding,
    preview,
    DecodeResult,
    EncodingDetector,
    DETECTION_ORDER,
)

__all__ = [
    # Escapes
    "normalize_escapes",
    "ESCAPE_SEQUENCES",
    # Strategies
    "decode_base64",
    "decode_url",
    "attempt_decode",
    "DecodeAttempt",
    "EncodingType",
    # Detection
    "decode_auto",
    "detect_encoding",
    "preview",
    "DecodeResult",
    "EncodingDetector",
    "DETECTION_ORDER",
]
