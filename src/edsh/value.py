"""Values that can be stored in a Context.

.. code-block:: text

    Value
    ├── null
    ├── scalar    text + inferred type (string, bool, int, float)
    ├── objects   ordered handles to host entities
    └── strings   ordered strings

"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Tuple
import re


class Kind(Enum):
    NULL = 'null'
    SCALAR = 'scalar'
    OBJECTS = 'objects'
    STRINGS = 'strings'


class ScalarType(Enum):
    STRING = 'string'
    BOOL = 'bool'
    INT = 'int'
    FLOAT = 'float'


INT = re.compile(r'[-+]?\d+')
FLOAT = re.compile(r'[-+]?(\d+\.\d*|\.\d+)([eE][-+]?\d+)?|[-+]?\d+[eE][-+]?\d+')
BOOLEANS = {'true': True, 'false': False}


def infer_type(text: str) -> ScalarType:
    if text.lower() in BOOLEANS:
        return ScalarType.BOOL
    if INT.fullmatch(text):
        return ScalarType.INT
    if FLOAT.fullmatch(text):
        return ScalarType.FLOAT
    return ScalarType.STRING


def default_name(obj) -> str:
    return str(getattr(obj, 'name', obj))


@dataclass(frozen=True)
class Value:
    kind: Kind
    text: str = None
    scalar_type: ScalarType = None
    items: Tuple[Any, ...] = ()

    @staticmethod
    def null() -> 'Value':
        return NULL

    @staticmethod
    def scalar(value) -> 'Value':
        """Store `value` as text and infer its type.
        """
        if isinstance(value, bool):
            return Value(Kind.SCALAR, str(value).lower(), ScalarType.BOOL)
        if isinstance(value, int):
            return Value(Kind.SCALAR, str(value), ScalarType.INT)
        if isinstance(value, float):
            return Value(Kind.SCALAR, repr(value), ScalarType.FLOAT)

        text = str(value)
        return Value(Kind.SCALAR, text, infer_type(text))

    @staticmethod
    def objects(items: Iterable) -> 'Value':
        return Value(Kind.OBJECTS, items=tuple(items))

    @staticmethod
    def strings(items: Iterable[str]) -> 'Value':
        return Value(Kind.STRINGS, items=tuple(str(s) for s in items))

    @staticmethod
    def of(value) -> 'Value':
        """Convert a Python value.
        A single non-scalar value is treated as an object handle.
        """
        if value is None:
            return NULL
        if isinstance(value, Value):
            return value
        if isinstance(value, (str, bool, int, float)):
            return Value.scalar(value)
        if isinstance(value, (list, tuple)):
            items = list(value)
            if items and all(isinstance(item, str) for item in items):
                return Value.strings(items)
            return Value.objects(items)

        return Value.objects([value])

    @property
    def is_null(self) -> bool:
        return self.kind == Kind.NULL

    @property
    def python(self):
        """Return the typed Python equivalent.
        """
        if self.kind == Kind.NULL:
            return None
        elif self.kind == Kind.SCALAR:
            if self.scalar_type == ScalarType.BOOL:
                return BOOLEANS[self.text.lower()]
            elif self.scalar_type == ScalarType.INT:
                return int(self.text)
            elif self.scalar_type == ScalarType.FLOAT:
                return float(self.text)
            return self.text
        elif self.kind in (Kind.OBJECTS, Kind.STRINGS):
            return list(self.items)

        raise NotImplementedError(self.kind)

    def to_string(self, describe: Callable[[Any], str] = default_name) -> str:
        if self.kind == Kind.NULL:
            return 'null'
        elif self.kind == Kind.SCALAR:
            return self.text
        elif self.kind == Kind.STRINGS:
            return '\n'.join(self.items)
        elif self.kind == Kind.OBJECTS:
            return '\n'.join(describe(item) for item in self.items)

        raise NotImplementedError(self.kind)

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        if self.kind == Kind.NULL:
            return 0
        elif self.kind == Kind.SCALAR:
            return 1
        return len(self.items)


NULL = Value(Kind.NULL)
