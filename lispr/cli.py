from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from lispr.config import get_history_path, get_log_level
from lispr.interpreter import Interpreter
from lispr.log import configure_logging
from lispr.repl import Repl

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lispr", description="A small S-expression interpreter.")
    parser.add_argument("-d", "--debug", action="store_true", help="log debugging output")
    parser.add_argument(
        "initfile",
        metavar="INITFILE",
        nargs="?",
        type=Path,
        default=None,
        help="scheme file to run on startup",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.debug else get_log_level())
    logger.debug("set options: %s", args)

    interp = Interpreter()
    if args.initfile is not None:
        try:
            interp.run_file(args.initfile)
        except OSError as why:
            logger.warning("%s", why)

    Repl(interp, initfile=args.initfile, histfile=get_history_path()).run()
    return 0
