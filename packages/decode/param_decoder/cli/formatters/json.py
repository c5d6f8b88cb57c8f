"""JSON output formatter."""

import json
from typing import Any, Dict

from param_decoder.decoding.detector import DecodeResult
from param_decoder.errors import DecodeFailure


def format_result(result: DecodeResult) -> str:
    """Render a successful decode as indented JSON."""
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


def format_failure(error: DecodeFailure) -> str:
    """
    Render a DecodeFailure with each strategy's reason broken out.

    Output is ASCII-escaped since the preview echoes raw input, which may
    hold lone surrogates from undecodable argv bytes.
    """
    payload: Dict[str, Any] = {
        "error": str(error),
        "base64_error": error.base64_error,
        "url_error": error.url_error,
        "preview": error.preview,
    }
    return json.dumps(payload, indent=2)
