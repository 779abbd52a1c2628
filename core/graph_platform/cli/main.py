"""
    Command-line entry point: run a graph script from a file or stdin.

        weighted-graph                 # read commands from standard input
        weighted-graph script.txt      # read commands from a file
"""
import argparse
import logging
import sys
from typing import List, Optional

from core.graph_platform.config import PlatformConfig
from core.graph_platform.core import GraphPlatform

from .command_processor import CommandProcessor

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weighted-graph",
        description="Run a weighted graph script. Reads standard input when no script is given.",
    )
    parser.add_argument("script", nargs="?", help="path of the script to run")
    parser.add_argument("--insertion-order", action="store_true",
                        help="list graph nodes in insertion order instead of alphabetically")
    parser.add_argument("--no-echo", action="store_true",
                        help="do not copy blank and comment lines to the output")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Returns:
        0 when every command succeeded, 1 otherwise (including an unreadable script).
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = PlatformConfig(
        node_listing_order="insertion" if args.insertion_order else "alphabetical",
        echo_comments=not args.no_echo,
    )
    processor = CommandProcessor(GraphPlatform(config), config)

    if args.script is None:
        failures = processor.run(sys.stdin, sys.stdout, sys.stderr)
    else:
        try:
            with open(args.script, encoding="ascii") as script:
                lines = script.readlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot open script: %s", e)
            sys.stderr.write(f"Cannot read from {args.script}\n")
            return 1
        failures = processor.run(lines, sys.stdout, sys.stderr)

    logger.debug("Script finished with %d failed command(s).", failures)
    return 0 if failures == 0 else 1
