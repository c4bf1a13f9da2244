"""Utils
- printing
- verbosity
- capturing output
"""
from contextlib import redirect_stdout
from io import StringIO
from termcolor import colored
from typing import Callable
import logging
import sys


colored_output = True


def bold(text: str) -> str:
    if not colored_output:
        return text
    return colored(text, attrs=['bold'])


def error(text: str) -> str:
    if not colored_output:
        return text
    return colored(text, 'red')


def set_verbosity(v: int):
    """Map a verbosity count to a logging level.
    0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
    """
    default_verbosity_level = 30
    verbosity_level = max(default_verbosity_level - v * 10, logging.DEBUG)

    logger = logging.getLogger()
    logger.setLevel(verbosity_level)


def log(*args, file=None, **kwds):
    """Print to stderr
    """
    if file is None:
        file = sys.stderr
    print(*args, file=file, **kwds)


def catch_output(arg: str, func: Callable, **func_kwds) -> str:
    """Run func while temporarily redirecting stdout.
    Then return the result from stdout.
    """
    out = StringIO()
    with redirect_stdout(out):
        func(arg, **func_kwds)
        result = out.getvalue()

    return result.rstrip('\n')
