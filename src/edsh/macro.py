"""Macros: stored scripts of command lines.

.. code-block:: sh

    # Create a platform at a position.
    # Usage: platform <name> pos=(x,y,z)
    create $1
    set-position $1 $pos

Leading comment lines form the documentation. An optional `Usage:` line
determines which arguments are required. Without it, every variable that
occurs in the body is required.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union
import logging
import re

from edsh.errors import NotFoundError, ShellArgumentError
from edsh.value import Value

SUFFIX = '.macro'
COMMENT = '#'
MAX_POSITIONAL = 9

ARGUMENT = re.compile(r'(?:([A-Za-z0-9_]+)=)?(.+)')
USAGE = re.compile(r'Usage:\s*(.*)', re.IGNORECASE)
POSITIONAL_PLACEHOLDER = re.compile(r'<[^<>]+>')
NAMED_PLACEHOLDER = re.compile(r'([A-Za-z0-9_]+)=.*')
VARIABLE = re.compile(r'\$([A-Za-z0-9_]+)')


@dataclass
class MacroDefinition:
    name: str
    header: List[str] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)

    @staticmethod
    def parse(name: str, text: str) -> 'MacroDefinition':
        header = []
        lines = text.splitlines()
        i = 0
        for i, line in enumerate(lines):
            stripped = line.strip()
            if stripped.startswith(COMMENT):
                header.append(strip_comment(stripped))
            elif stripped:
                break
        else:
            i = len(lines)

        return MacroDefinition(name, header, lines[i:])

    @property
    def usage(self) -> Optional[str]:
        for line in self.header:
            match = USAGE.match(line.strip())
            if match:
                return match.group(1).strip()
        return None

    @property
    def summary(self) -> str:
        for line in self.header:
            if line.strip() and not USAGE.match(line.strip()):
                return line.strip()
        return ''

    @property
    def doc(self) -> str:
        return '\n'.join(self.header)

    def commands(self) -> List[str]:
        """Return the executable lines, skipping blank lines and comments.
        """
        return [line.strip() for line in self.lines
                if line.strip() and not line.strip().startswith(COMMENT)]

    def required_args(self) -> List[str]:
        """Return the names of the variables that must be bound, without `$`.
        """
        if self.usage is not None:
            return required_args_from_usage(self.usage)

        names = []
        for line in self.commands():
            for name in VARIABLE.findall(line):
                if name not in names:
                    names.append(name)
        return names


def strip_comment(line: str) -> str:
    """Remove the `#` and a single space after it.
    """
    line = line[1:]
    if line.startswith(' '):
        line = line[1:]
    return line


def required_args_from_usage(usage: str) -> List[str]:
    """Map placeholders in a usage line to variable names.
    E.g. `name <a> [<b>] key=(...)` -> ['1', 'key']
    """
    names = []
    for i, token in enumerate(usage.split()[1:]):
        if token.startswith('['):
            # optional
            continue

        if POSITIONAL_PLACEHOLDER.fullmatch(token):
            names.append(str(i + 1))
            continue

        match = NAMED_PLACEHOLDER.fullmatch(token)
        if match:
            names.append(match.group(1))

    return names


################################################################################
# Stores
################################################################################


class MacroStore(ABC):
    @abstractmethod
    def names(self) -> List[str]:
        pass

    @abstractmethod
    def load(self, name: str) -> MacroDefinition:
        """Raise NotFoundError if there is no macro named `name`.
        """

    def exists(self, name: str) -> bool:
        try:
            self.load(name)
        except NotFoundError:
            return False
        return True


class MemoryMacroStore(MacroStore):
    def __init__(self, macros: Dict[str, str] = None):
        self.macros: Dict[str, str] = {}
        for name, text in (macros or {}).items():
            self.add(name, text)

    def add(self, name: str, text: str):
        self.macros[macro_name(name).lower()] = text

    def names(self) -> List[str]:
        return sorted(self.macros)

    def load(self, name: str) -> MacroDefinition:
        key = macro_name(name).lower()
        if key not in self.macros:
            raise NotFoundError(f'Macro {name} not found')

        return MacroDefinition.parse(key, self.macros[key])


class DirectoryMacroStore(MacroStore):
    """One file per macro, e.g. `macros/platform.macro`.
    Names are case-insensitive.
    """

    def __init__(self, path: Union[str, Path], suffix=SUFFIX):
        self.path = Path(path)
        self.suffix = suffix

    def _files(self) -> Dict[str, Path]:
        if not self.path.is_dir():
            return {}

        return {file.name[:-len(self.suffix)].lower(): file
                for file in sorted(self.path.iterdir())
                if file.is_file() and file.name.endswith(self.suffix)}

    def names(self) -> List[str]:
        return sorted(self._files())

    def load(self, name: str) -> MacroDefinition:
        key = macro_name(name, self.suffix).lower()
        files = self._files()
        if key not in files:
            raise NotFoundError(f'Macro {name} not found')

        logging.debug(f'Loading macro {files[key]}')
        return MacroDefinition.parse(key, files[key].read_text(encoding='utf-8'))


def macro_name(name: str, suffix=SUFFIX) -> str:
    if name.endswith(suffix):
        return name[:-len(suffix)]
    return name


################################################################################
# Binding
################################################################################


class MacroBinder:
    def __init__(self, store: MacroStore, dispatcher):
        self.store = store
        self.dispatcher = dispatcher

    def invoke(self, name: str, args: List[str], context) -> str:
        """Bind `args`, verify the required variables and run each line.
        Return the output of the last line.
        """
        definition = self.store.load(name)

        bind_arguments(args, context)
        verify_required_args(definition, context)

        result = ''
        for line in definition.commands():
            result = self.dispatcher.execute(line)

        return result


def bind_arguments(args: List[str], context):
    """Bind `value` or `name=value` arguments to `$1`..`$9` and `$name`.
    References are resolved against the caller's bindings, such that `inner $1`
    passes the current `$1` on.
    """
    if len(args) > MAX_POSITIONAL:
        logging.warning(f'Ignoring {len(args) - MAX_POSITIONAL} macro arguments')

    bindings = []
    for i, arg in enumerate(args[:MAX_POSITIONAL]):
        match = ARGUMENT.fullmatch(arg)
        if match is None:
            continue

        name, text = match.groups()
        if not name:
            # keep the token type of substitutions
            text = arg
        bindings.append((i + 1, name, context.resolve_value(text)))

    for i in range(1, MAX_POSITIONAL + 1):
        if context.has(str(i)):
            context.set(str(i), Value.null())

    for i, name, value in bindings:
        context.set(str(i), value)
        if name:
            context.set(name, value)


def verify_required_args(definition: MacroDefinition, context):
    missing = []
    for name in definition.required_args():
        value = context.lookup(name)
        if value is None or value.is_null:
            missing.append(f'${name}')

    if missing:
        raise ShellArgumentError(f'Missing required arguments for {definition.name}: '
                                 + ', '.join(missing))
