"""
A command language for editor hosts: tokenizer, selectors, variables, macros.
"""

# explicit API exposure
# "noqa" suppresses linting errors (flake8)
from edsh.context import Context  # noqa
from edsh.dispatcher import Dispatcher, Outcome  # noqa
from edsh.errors import ShellArgumentError, ShellError, ShellReferenceError  # noqa
from edsh.session import Session  # noqa
from edsh.tokenizer import tokenize  # noqa
from edsh.value import Value  # noqa
