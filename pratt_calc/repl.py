# repl.py
"""Interactive shell around an ``Interpreter`` session."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory, History, InMemoryHistory

from pratt_calc import __version__
from pratt_calc.config import CalculatorSettings
from pratt_calc.errors import CalculatorError
from pratt_calc.interpreter import Interpreter
from pratt_calc.nodes import format_number

logger = logging.getLogger(__name__)

BANNER = """\
Welcome to Pratt Calculator!
This calculator uses Pratt parsing to understand the input,
and then a simple tree-walk interpreter to calculate the result.
Currently, it can handle:
    + (addition or prefix)
    - (subtraction or prefix)
    * (multiplication)
    / (division)
    ^ (exponentiation)
    ! (factorial)
as well as parentheses, and simple variable assignment (try `myvariable=3`).
Type :help for commands, Ctrl-D or :exit to quit."""

HELP_TEXT = """\
Calculator help:
Operators (loosest to tightest binding):
  =        assignment (right-assoc), returns the assigned value
  + -      addition, subtraction
  ^        exponentiation (right-assoc)
  * /      multiplication, division
  + -      prefix sign
  !        postfix factorial
Examples:
  x = 3
  2 ^ 3 ^ 2 -> 512
  -3! -> -(3!) == -6
  1 / 0 -> inf
Commands:
  :help           show this help
  :vars           list variables
  :tree <expr>    show the parse tree of <expr> without evaluating it
  :reset          forget all variables
  :history        show recent input lines
  :exit, :quit    exit"""

HISTORY_LIMIT = 50


class REPL:
    """Read-Eval-Print Loop for the calculator."""

    def __init__(self, settings: Optional[CalculatorSettings] = None):
        self.settings = settings or CalculatorSettings()
        self.interpreter = Interpreter()
        self.history: History = (
            FileHistory(self.settings.history_file)
            if self.settings.history_file
            else InMemoryHistory()
        )
        self.session: Optional[Any] = None

    def _process_command(self, line: str) -> Optional[str]:
        """Process commands starting with ':'. Returns response string if a command, else None."""
        s = line.strip()
        if not s.startswith(':'):
            return None
        body = s[1:].strip()
        if not body:
            return "No command specified. Use :help for available commands."
        parts = body.split(None, 1)
        cmd = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else ''
        return self._run_command(cmd, arg)

    def _run_command(self, cmd: str, arg: str) -> str:
        """Execute a colon command. Raises EOFError for exit/quit."""
        if cmd in {'exit', 'quit'}:
            raise EOFError()
        if cmd == 'help':
            return HELP_TEXT
        if cmd == 'vars':
            items = sorted(self.interpreter.env.items())
            if not items:
                return "(no variables)"
            return "\n".join(f"{k} = {format_number(v)}" for k, v in items)
        if cmd == 'tree':
            if not arg:
                return "Usage: :tree <expression>"
            try:
                return self.interpreter.to_tree_string(arg)
            except CalculatorError as e:
                return f"Error: {e}"
        if cmd == 'reset':
            count = len(self.interpreter.env)
            self.interpreter.evaluator.reset()
            return f"Cleared {count} variable(s)"
        if cmd == 'history':
            lines = self.history.get_strings()[-HISTORY_LIMIT:]
            if not lines:
                return "(no history)"
            return "\n".join(lines)
        return f"Unknown command: {cmd}"

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """Evaluate a single line (either command or expression). Returns (ok, output)."""
        cmd_out = self._process_command(line)
        if cmd_out is not None:
            return True, cmd_out
        try:
            result = self.interpreter.interpret(line)
            return True, format_number(result)
        except CalculatorError as e:
            return False, f"Error: {e}"

    def _completer(self) -> WordCompleter:
        words: List[str] = sorted(self.interpreter.env.keys())
        return WordCompleter(words, ignore_case=False)

    def repl_loop(self) -> None:
        """Interactive loop; ends on Ctrl-C, Ctrl-D or :exit."""
        if self.settings.show_banner:
            print(BANNER)
            print(f"Version {__version__}")
        if self.session is None:
            self.session = PromptSession(history=self.history)
        while True:
            try:
                line = self.session.prompt(self.settings.prompt, completer=self._completer())
            except (KeyboardInterrupt, EOFError):
                print("Quitting...")
                break
            if not line.strip():
                continue
            try:
                ok, out = self.evaluate_line(line)
            except EOFError:
                print("Quitting...")
                break
            if not ok:
                logger.info("Rejected input %r", line)
            print(out)
