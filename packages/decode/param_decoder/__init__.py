"""Auto-detecting decoder for base64 and URL-encoded parameters."""

from param_decoder.version import __version__
from param_decoder.config import DecoderConfig, load_config
from param_decoder.errors import (
    DecoderError,
    InvalidArgument,
    InvalidBase64,
    InvalidUrlEncoding,
    DecodeFailure,
)
from param_decoder.decoding import (
    decode_auto,
    decode_base64,
    decode_url,
    detect_encoding,
    normalize_escapes,
    DecodeResult,
    EncodingDetector,
    EncodingType,
)

__all__ = [
    "__version__",
    "DecoderConfig",
    "load_config",
    "DecoderError",
    "InvalidArgument",
    "InvalidBase64",
    "InvalidUrlEncoding",
    "DecodeFailure",
    "decode_auto",
    "decode_base64",
    "decode_url",
    "detect_encoding",
    "normalize_escapes",
    "DecodeResult",
    "EncodingDetector",
    "EncodingType",
]
