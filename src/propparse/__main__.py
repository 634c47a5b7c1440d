"""
Command-line driver: parses a single property and prints its value.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .grammar import parse_property
from .types import ParseError

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="propparse",
        description='Parse a single `key: "value"` property.'
    )
    ap.add_argument(
        "source", nargs="?",
        help="property to parse; read from stdin if omitted"
    )
    ap.add_argument(
        "--raw", action="store_true", help="print only the parsed value"
    )
    ap.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    src = args.source
    if src is None:
        src = sys.stdin.read()
        if src.endswith("\r\n"):
            src = src[:-2]
        elif src.endswith("\n"):
            src = src[:-1]

    try:
        prop = parse_property(src)
    except ParseError as err:
        logger.error("invalid property: %s", err)
        return 1

    logger.debug(
        "key=%r value=%r span=%r text=%r",
        prop.key, prop.value, prop.span, prop.span.text(src)
    )
    if args.raw:
        print(prop.value)
    else:
        print("Hello, {}!".format(prop.value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
