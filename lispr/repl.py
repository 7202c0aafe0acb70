"""Interactive prompt for lispr.

Lines are evaluated one at a time against a single Interpreter so definitions
persist across inputs. A line starting with `>` is a meta command instead of
code:

    >env    list the names bound at top level
    >save   write the top-level bindings to the init file
"""

from __future__ import annotations

import logging
import readline
from pathlib import Path
from typing import Callable, Optional

from lispr.interpreter import Interpreter
from lispr.log import RESET
from lispr.types.errors import EmptyExpression, LisprError
from lispr.types.value import to_display_text

logger = logging.getLogger(__name__)

PROMPT = f"\x1b[1;94mlispr λ{RESET} "


class Repl:
    def __init__(
        self,
        interp: Interpreter,
        initfile: Optional[Path] = None,
        histfile: Optional[Path] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.interp = interp
        self.initfile = initfile
        self.histfile = histfile
        self.input_fn = input_fn
        self.output_fn = output_fn

    def command(self, cmd: str) -> str:
        match cmd:
            case "env":
                return ", ".join(str(name) for name in self.interp.env.names())
            case "save":
                if self.initfile is None:
                    return "no initfile set."
                try:
                    self.interp.save_env(self.initfile)
                except OSError as err:
                    logger.warning("%s", err)
                return ""
        return "invalid command"

    def handle_line(self, line: str) -> Optional[str]:
        """Evaluate or dispatch one input line; returns the text to show, if any."""
        if not line:
            return None
        if line.startswith(">") and len(line) > 1:
            return self.command(line[1:])
        try:
            return to_display_text(self.interp.run(line))
        except EmptyExpression:
            return None
        except (LisprError, RecursionError) as err:
            logger.error("%s", err)
            return None

    def _load_history(self) -> None:
        if self.histfile is None:
            return
        try:
            readline.read_history_file(self.histfile)
        except OSError as err:
            logger.warning("error opening history file: %s", err)

    def _save_history(self) -> None:
        if self.histfile is None:
            return
        try:
            readline.write_history_file(self.histfile)
        except OSError as err:
            logger.warning("error saving history file: %s", err)

    def run(self) -> None:
        self._load_history()
        while True:
            try:
                line = self.input_fn(PROMPT)
            except KeyboardInterrupt:
                self.output_fn("^C")
                continue
            except EOFError:
                self.output_fn("^D")
                break
            text = self.handle_line(line)
            if text is not None:
                self.output_fn(text)
        self._save_history()
