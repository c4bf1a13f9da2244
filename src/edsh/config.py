from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import logging
import os

from edsh.dispatcher import MAX_DEPTH
from edsh.history import MAX_ENTRIES

ENV_MACROS = 'EDSH_MACROS'
ENV_DOCS = 'EDSH_DOCS'
ENV_MAX_DEPTH = 'EDSH_MAX_DEPTH'
ENV_MAX_HISTORY = 'EDSH_MAX_HISTORY'
ENV_NO_COLOR = 'EDSH_NO_COLOR'


@dataclass
class Config:
    macros_dir: Optional[Path] = None
    docs_dir: Optional[Path] = None
    max_depth: int = MAX_DEPTH
    max_history: int = MAX_ENTRIES
    colored_output: bool = True

    @staticmethod
    def from_env(environ=None) -> 'Config':
        """Read settings from environment variables, e.g.
        ```sh
        EDSH_MACROS=./macros EDSH_MAX_DEPTH=8 edsh
        ```
        """
        if environ is None:
            environ = os.environ

        config = Config()
        if environ.get(ENV_MACROS):
            config.macros_dir = Path(environ[ENV_MACROS])
        if environ.get(ENV_DOCS):
            config.docs_dir = Path(environ[ENV_DOCS])

        config.max_depth = read_int(environ, ENV_MAX_DEPTH, config.max_depth)
        config.max_history = read_int(environ, ENV_MAX_HISTORY, config.max_history)

        if environ.get(ENV_NO_COLOR):
            config.colored_output = False

        return config


def read_int(environ, key: str, default: int) -> int:
    if not environ.get(key):
        return default

    try:
        return int(environ[key])
    except ValueError:
        logging.warning(f'Ignoring {key}: expected an integer, got {environ[key]}')
        return default
