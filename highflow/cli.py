import argparse
import json
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from highflow.config import LOG_LEVELS, get_settings
from highflow.core.errors import DecodeError
from highflow.logging import create_logger, ring_buffer_events
from highflow.protocol.frame import Frame


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1
    parser = argparse.ArgumentParser(description="Decode a captured high flow NEXT settings frame.")
    parser.add_argument("frame", type=str, help="Path of the captured frame file.")
    parser.add_argument("--indent", type=int, default=settings.json_indent, help="JSON indentation.")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level, help="Log level of the decoder."
    )
    parser.add_argument("--trace", action="store_true", help="Print the decoder log events to stderr.")
    args = parser.parse_args(argv)

    logger = create_logger("highflow", settings.log_ring_size, args.log_level)
    try:
        frame = Frame.from_file(args.frame)
    except (DecodeError, OSError) as exc:
        print(f"Failed to decode {args.frame}: {exc}", file=sys.stderr)
        return 1
    finally:
        if args.trace:
            for event in ring_buffer_events(logger):
                print(json.dumps(event), file=sys.stderr)

    print(json.dumps(frame.as_dict(), indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
