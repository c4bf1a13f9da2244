"""Variables and the pipeline result.

A Context lives as long as its session. Every command reads and writes it
through the methods below; the reserved key `~` always holds the result of the
most recent command.

.. code-block:: sh

    set $x 10          # scalar
    list ^Root/*       # ~ now holds the listed objects
    select $~          # reuse them

"""
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from edsh.errors import ShellArgumentError, ShellReferenceError
from edsh.tokenizer import is_substitution, substitution_body
from edsh.util import is_valid_identifier
from edsh.value import NULL, Kind, Value, default_name

LAST_RESULT = '~'
PREFIX = '$'


def strip_prefix(name: str) -> str:
    if name.startswith(PREFIX):
        return name[1:]
    return name


def reference_name(ref: str) -> Optional[str]:
    """Return the variable name of a reference such as `$x` or `$~`.
    Return None if `ref` is literal text.
    """
    if not ref.startswith(PREFIX):
        return None

    name = ref[1:]
    if name == LAST_RESULT or is_valid_identifier(name):
        return name
    return None


def is_reference(ref: str) -> bool:
    return reference_name(ref) is not None or is_substitution(ref)


class Context:
    def __init__(self, dispatcher=None, selectors=None, describe=default_name):
        """Substitution requires a dispatcher.
        Selector strings require a SelectorEngine.
        """
        self.dispatcher = dispatcher
        self.selectors = selectors
        self.describe = describe
        self._variables: Dict[str, Value] = {LAST_RESULT: NULL}

    ############################################################################
    # Bindings
    ############################################################################

    def get(self, name: str) -> Value:
        key = self._key(name)
        if key not in self._variables:
            raise ShellReferenceError(f'Variable ${key} not found')

        return self._variables[key]

    def lookup(self, name: str) -> Optional[Value]:
        if not name:
            return None
        return self._variables.get(strip_prefix(name))

    def set(self, name: str, value):
        key = self._key(name)
        value = Value.of(value)
        logging.debug(f'set ${key}: {value.kind.value}')
        self._variables[key] = value

    def unset(self, name: str):
        key = self._key(name)
        if key == LAST_RESULT:
            self._variables[key] = NULL
            return

        if key not in self._variables:
            raise ShellReferenceError(f'Variable ${key} not found')

        del self._variables[key]

    def has(self, name: str) -> bool:
        return bool(name) and strip_prefix(name) in self._variables

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def clear(self):
        """Remove all variables except for the last result.
        """
        last_result = self.get_last_result()
        self._variables.clear()
        self._variables[LAST_RESULT] = last_result

    def set_last_result(self, value):
        self._variables[LAST_RESULT] = Value.of(value)

    def get_last_result(self) -> Value:
        return self._variables[LAST_RESULT]

    def keys(self) -> List[str]:
        return list(self._variables)

    def items(self) -> Iterable[Tuple[str, Value]]:
        return list(self._variables.items())

    def _key(self, name: str) -> str:
        if not name or not strip_prefix(name):
            raise ShellArgumentError('Variable name cannot be empty')
        return strip_prefix(name)

    ############################################################################
    # Resolution
    ############################################################################

    def substitute(self, token: str) -> Value:
        """Run the command line inside `$( ... )` and return its result.
        """
        if self.dispatcher is None:
            raise ShellArgumentError(f'Command substitution is unavailable: {token}')

        inner = substitution_body(token)
        logging.debug(f'substitute: {inner}')
        # the printed text is discarded
        self.dispatcher.execute(inner)
        return self.get_last_result()

    def resolve_value(self, ref: str) -> Value:
        """Resolve a reference to a Value.
        Literal text is returned as a scalar.
        """
        if not ref:
            raise ShellArgumentError('Reference cannot be empty')

        if is_substitution(ref):
            return self.substitute(ref)

        name = reference_name(ref)
        if name is not None:
            return self.get(name)

        return Value.scalar(ref)

    def resolve_as_string(self, ref: str) -> str:
        if not ref:
            raise ShellArgumentError('Reference cannot be empty')

        if not is_reference(ref):
            return ref

        return self.resolve_value(ref).to_string(self.describe)

    def resolve_as_objects(self, ref: str) -> list:
        if not ref:
            raise ShellArgumentError('Reference cannot be empty')

        if not is_reference(ref):
            return self.select(ref)

        value = self.resolve_value(ref)
        if value.kind == Kind.OBJECTS:
            return list(value.items)
        elif value.kind == Kind.STRINGS:
            # e.g. the output of a command that prints selectors
            return self.select('\n'.join(value.items))

        raise ShellReferenceError(f'{ref} does not contain objects')

    def select(self, selector: str) -> list:
        if self.selectors is None:
            raise ShellArgumentError(f'Selectors are unavailable: {selector}')

        return self.selectors.select(selector, self)
