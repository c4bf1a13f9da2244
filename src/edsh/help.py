"""Documentation of commands and macros.

Sources, in order of priority:

1. A markdown file `<docs_dir>/<name>.md`
2. The docstring of a registered handler
3. The comment header of a macro
"""
from pathlib import Path
from typing import Optional
import inspect
import logging

from edsh.errors import NotFoundError


class HelpIndex:
    def __init__(self, dispatcher, docs_dir: Optional[Path] = None):
        self.dispatcher = dispatcher
        self.docs_dir = Path(docs_dir) if docs_dir else None

    def lookup(self, name: str) -> str:
        name = name.lower()

        if self.docs_dir is not None:
            path = self.docs_dir / f'{name}.md'
            if path.is_file():
                logging.debug(f'Help: {path}')
                return path.read_text(encoding='utf-8').strip()

        handler = self.dispatcher.handlers.get(name)
        if handler is not None:
            doc = inspect.getdoc(handler)
            if doc:
                return doc

        macros = self.dispatcher.macros
        if macros is not None and macros.exists(name):
            doc = macros.load(name).doc
            if doc.strip():
                return doc.strip()

        raise NotFoundError(f"No detailed help available for '{name}'")

    def summary(self, name: str) -> str:
        try:
            doc = self.lookup(name)
        except NotFoundError:
            return ''

        for line in doc.splitlines():
            line = line.strip().lstrip('#').strip()
            if line:
                return line
        return ''

    def overview(self) -> str:
        lines = ['Available commands:']
        for name in sorted(self.dispatcher.handlers):
            summary = self.summary(name)
            lines.append(f'  {name}: {summary}' if summary else f'  {name}')

        macros = self.dispatcher.macros
        names = macros.names() if macros is not None else []
        if names:
            lines.append('')
            lines.append('Macros:')
            for name in names:
                summary = macros.load(name).summary
                lines.append(f'  {name}: {summary}' if summary else f'  {name}')

        lines.append('')
        lines.append("Use 'help <command>' for detailed help on a specific command")
        return '\n'.join(lines)
