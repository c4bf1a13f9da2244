from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
import logging

MAX_ENTRIES = 1000


@dataclass(eq=False)
class Entry:
    command: str
    macro: bool = False
    parent: Optional['Entry'] = None
    output: str = None
    error: str = None
    timestamp: datetime = field(default_factory=datetime.now)
    children: List['Entry'] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        time = self.timestamp.strftime('%H:%M:%S')
        suffix = ' (macro)' if self.macro else ''
        status = '' if self.ok else ' [error]'
        return f'{time} {self.command}{suffix}{status}'


class History:
    """A log of executed commands.
    Commands that run inside a macro or substitution are nested in their parent entry.
    """

    def __init__(self, max_entries=MAX_ENTRIES):
        self.max_entries = max_entries
        self.entries: List[Entry] = []
        self._stack: List[Entry] = []

    def begin(self, command: str, macro=False) -> Entry:
        parent = self._stack[-1] if self._stack else None
        entry = Entry(command, macro, parent)

        if parent is None:
            self.entries.append(entry)
            if len(self.entries) > self.max_entries:
                self.entries.pop(0)
        else:
            parent.children.append(entry)

        self._stack.append(entry)
        return entry

    def end(self, output: str = None, error: str = None):
        if not self._stack:
            logging.warning('History: no command in progress')
            return

        entry = self._stack.pop()
        if output:
            entry.output = output
        if error:
            entry.error = error

    def mark_macro(self):
        if self._stack:
            self._stack[-1].macro = True

    def active(self) -> Optional[Entry]:
        """Return the top-level entry that is in progress.
        """
        return self._stack[0] if self._stack else None

    def recent(self, n: int = None) -> List[Entry]:
        if n is None:
            return list(self.entries)
        if n <= 0:
            return []
        return self.entries[-n:]

    def clear(self):
        self.entries.clear()
        self._stack.clear()
