from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

from lispr import LispValue
from lispr.evaluation.evaluator import evaluate
from lispr.reader.parser import read
from lispr.types.environment import Environment
from lispr.types.errors import EmptyExpression, ParseError, RunError
from lispr.types.value import to_serialized_text

logger = logging.getLogger(__name__)

ENV_FILE_HEADER = "; vim: set ft=scheme:"


def make_root_environment() -> Environment:
    """A fresh, empty top-level scope. Builtins live outside the environment."""
    return Environment()


def evaluate_source(code: str, env: Environment) -> LispValue:
    """Read one expression from `code` and evaluate it in `env`.

    The whole snippet must be readable; only its first expression is
    evaluated. Anything after it is ignored.
    """
    return evaluate(read(code), env)


class Interpreter:
    """
    Orchestrates reading and evaluating lispr code.
    Maintains a root Environment across calls.
    """

    def __init__(self):
        self.env: Environment = make_root_environment()

    def run(self, code: str) -> LispValue:
        return evaluate_source(code, self.env)

    def run_file(self, path: str | PathLike) -> None:
        """Evaluate a script one line at a time.

        Blank and comment-only lines are skipped. Any other error is logged
        with its file and line number and the run continues with the next line.
        A line that is not valid UTF-8 ends the run.
        """
        path = Path(path)
        logger.info("running %s", path)
        with path.open("rb") as f:
            for lineno, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError as err:
                    logger.warning("stopped reading %s:%d:\n  %s", path.name, lineno, err)
                    return
                try:
                    self.run(line)
                except EmptyExpression:
                    continue
                except ParseError as err:
                    logger.warning("parsing error in %s:%d:\n  %s", path.name, lineno, err)
                except (RunError, RecursionError) as err:
                    logger.warning("runtime error in %s:%d:\n  %s", path.name, lineno, err)

    def save_env(self, path: str | PathLike) -> None:
        """Write every top-level binding as a runnable (define ...) line."""
        path = Path(path)
        with path.open("w", encoding="utf-8") as f:
            f.write(ENV_FILE_HEADER + "\n")
            for name, value in self.env.vars.items():
                f.write(f"(define {name} {to_serialized_text(value)})\n")
        logger.info("saved %d bindings to %s", len(self.env.vars), path)
