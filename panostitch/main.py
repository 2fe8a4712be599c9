# panostitch/main.py
# Process entry point: parse the command line and hand the result on.
# The GUI and the batch stitcher are supplied by the caller as ``launch``.

from __future__ import annotations

import sys
from typing import Callable, List, Optional

from panostitch.cli.args import parse_args
from panostitch.cli.defaults import resolve_options
from panostitch.cli.help import format_version, print_help
from panostitch.models.args import Args
from panostitch.utils.logging_utils import build_logger, log_options

Launcher = Callable[[Args], int]


def main(argv: Optional[List[str]] = None, launch: Optional[Launcher] = None) -> int:
    """
    Returns the process exit code: 1 when the arguments are rejected,
    0 for --help / --version, otherwise whatever ``launch`` returns.
    """
    logger = build_logger()
    if argv is None:
        argv = sys.argv[1:]

    args = parse_args(argv)
    if args is None:
        logger.error("Run with --help for usage")
        return 1

    if args.print_help:
        print_help(logger)
        return 0
    if args.print_version:
        logger.info(format_version())
        return 0

    if launch is not None:
        return launch(args)

    # No front-end wired in: report what would have been run
    log_options(logger, resolve_options(args), "Parsed configuration (dry run)")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
