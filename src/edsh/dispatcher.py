"""Resolve command lines to handlers and macros.

.. code-block:: text

    line
    └── tokenize
        └── name = first token, lower case
            ├── registered handler   handler(args, context)
            ├── macro                MacroBinder.invoke(name, args, context)
            └── unknown command

`Dispatcher.execute` raises typed errors and is used for nested execution
(macros, substitution). `Dispatcher.run` is the outer boundary: it never
raises and formats errors for the user.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
import logging

from edsh.errors import (MalformedInputError, RecursionDepthError, ShellArgumentError,
                         ShellError, UnknownCommandError)
from edsh.help import HelpIndex
from edsh.history import History
from edsh.macro import MacroBinder, MacroStore
from edsh.tokenizer import tokenize

MAX_DEPTH = 32

Handler = Callable[[List[str], object], Optional[str]]


@dataclass
class Outcome:
    output: str = ''
    error: str = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        return self.output if self.ok else self.error


class Dispatcher:
    def __init__(self, context, macros: MacroStore = None, history: History = None,
                 docs_dir=None, max_depth=MAX_DEPTH):
        self.context = context
        self.macros = macros
        self.history = history if history is not None else History()
        self.help = HelpIndex(self, docs_dir)
        self.binder = MacroBinder(macros, self)
        self.max_depth = max_depth
        self.depth = 0
        self.handlers: Dict[str, Handler] = {}

    def register(self, name: str, handler: Handler):
        self.handlers[name.lower()] = handler

    def is_macro(self, name: str) -> bool:
        return self.macros is not None and self.macros.exists(name)

    def names(self) -> List[str]:
        names = list(self.handlers)
        if self.macros is not None:
            names += [name for name in self.macros.names() if name not in names]
        return sorted(names)

    def execute(self, line: str) -> str:
        """Run a single command line and return its output.
        Raise a ShellError on failure.
        """
        if self.depth >= self.max_depth:
            raise RecursionDepthError(f'Maximum command depth exceeded ({self.max_depth})')

        tokens = tokenize(line)
        if not tokens:
            raise MalformedInputError('Invalid command format')

        name = tokens[0].lower()
        args = tokens[1:]
        logging.debug(f'execute [{self.depth}]: {name} {args}')

        self.history.begin(line.strip())
        self.depth += 1
        try:
            output = self._invoke(name, args)
        except ShellArgumentError as e:
            if e.help is None:
                e.help = self.help_text(name)
            self.history.end(error=str(e))
            raise
        except Exception as e:
            self.history.end(error=str(e))
            raise
        finally:
            self.depth -= 1

        output = '' if output is None else str(output)
        self.history.end(output=output)
        return output

    def _invoke(self, name: str, args: List[str]) -> Optional[str]:
        if name in self.handlers:
            return self.handlers[name](args, self.context)

        if self.is_macro(name):
            self.history.mark_macro()
            return self.binder.invoke(name, args, self.context)

        raise UnknownCommandError(f"Unknown command '{name}'")

    def help_text(self, name: str) -> str:
        """Return the documentation that accompanies an argument error.
        """
        try:
            return 'Documentation:\n' + self.help.lookup(name)
        except Exception as e:
            logging.debug(f'No help for {name}: {e}')
            return f"Use 'help {name}' for usage information."

    def run(self, line: str) -> Outcome:
        try:
            return Outcome(self.execute(line))
        except ShellArgumentError as e:
            return Outcome(error=f'Error: {e}\n\n{e.help}')
        except ShellError as e:
            return Outcome(error=f'Error: {e}')
        except Exception as e:
            logging.debug('Unexpected error', exc_info=True)
            return Outcome(error=f'Error: {type(e).__name__}: {e}')
        finally:
            self.depth = 0
