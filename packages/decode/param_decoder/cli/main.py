"""Entry point for the param-decode command."""

import argparse
import logging
import sys
from typing import List, Optional

from param_decoder.config import load_config
from param_decoder.decoding.detector import EncodingDetector
from param_decoder.errors import DecodeFailure, InvalidArgument
from param_decoder.version import __version__
from param_decoder.cli.formatters.json import format_failure, format_result

EXIT_OK = 0
EXIT_DECODE_FAILURE = 1
EXIT_INVALID_ARGUMENT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="param-decode",
        description="Decode a base64 or URL-encoded parameter, detecting which one it is.",
    )
    parser.add_argument(
        "value", nargs="?", default="-",
        help="Encoded value; omit or pass '-' to read from stdin",
    )
    parser.add_argument(
        "--format", choices=["text", "json"], default="text",
        help="Output format (default: text)",
    )
    parser.add_argument("--config", help="Path to a YAML decoder config")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    value = sys.stdin.read() if args.value == "-" else args.value
    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT
    detector = EncodingDetector(config)

    try:
        result = detector.detect(value)
    except InvalidArgument as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT
    except DecodeFailure as e:
        if args.format == "json":
            print(format_failure(e))
        else:
            print(f"error: {e}", file=sys.stderr)
        return EXIT_DECODE_FAILURE

    if args.format == "json":
        print(format_result(result))
    else:
        print(result.text)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
