"""
Compass pins command line entry point.

Reads a pin document (or an array of them), validates it and prints the
normalized JSON using the stored document's field names.
"""

import argparse
import logging
import sys
from typing import List, Optional

from compass.config import Settings, settings
from compass.utils.pin_codec import DecodeError, EncodeError, decode_pin, decode_pins, encode_pin, encode_pins

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(app_settings: Settings = settings) -> None:
    """Configure root logging based on settings."""
    level_name = "DEBUG" if app_settings.debug else app_settings.log_level.upper()
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if app_settings.log_file:
        handlers.append(logging.FileHandler(app_settings.log_file))

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )


def _read_input(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def decode_command(args: argparse.Namespace) -> int:
    """Decode a pin document or pin array and print it re-encoded."""
    omit_absent = False if args.null_absent else None

    try:
        raw = _read_input(args.path)
    except OSError as e:
        logger.error(f"Cannot read {args.path}: {e}")
        return 1

    try:
        if raw.lstrip().startswith("["):
            pins = decode_pins(raw)
            output = encode_pins(pins, omit_absent=omit_absent, indent=args.indent)
            logger.info(f"Decoded {len(pins)} pins")
        else:
            pin = decode_pin(raw)
            output = encode_pin(pin, omit_absent=omit_absent, indent=args.indent)
            logger.info(f"Decoded pin {pin.id or '<no id>'}")
    except DecodeError as e:
        logger.error(f"Decode failed: {e}")
        return 1
    except EncodeError as e:
        logger.error(f"Encode failed: {e}")
        return 1

    print(output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compass",
        description=f"{settings.app_name} - pin document tools"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {settings.app_version}"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode = subparsers.add_parser("decode", help="Validate and normalize a pin document or array")
    decode.add_argument(
        "path",
        nargs="?",
        default=None,
        help="File to read, or '-' for stdin (default: stdin)"
    )
    decode.add_argument(
        "--null-absent",
        action="store_true",
        help="Write absent fields as null instead of omitting them"
    )
    decode.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent output JSON by this many spaces"
    )
    decode.set_defaults(func=decode_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(settings)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
