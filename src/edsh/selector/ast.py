"""
AST
---

Selector expressions.

.. code-block:: sh

    Selector
    ├── expression
    │   ├── Union
    │   ├── Intersection
    │   ├── ComponentFilter
    │   └── Reference
    │       ├── VariableRef       $x
    │       ├── InstanceIdRef     @&1234
    │       ├── TagRef            @#Player
    │       ├── QuickSearchRef    @@query
    │       ├── HierarchyPathRef  ^Root/**/Child
    │       └── TextRef           Assets/*.prefab
    └── RangeSpec                 #0..2,5

Each node evaluates to an ordered list of handles without duplicates.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
import re

from edsh.util import intersection, union, unique
from edsh.value import Kind

RANGE_TERM = re.compile(r'\s*(-?\d+)\s*(?:\.\.\s*(-?\d+))?\s*')


class Node(ABC):
    """A node of a selector AST.
    """

    @abstractmethod
    def run(self, engine, context=None) -> list:
        pass

    def __eq__(self, other) -> bool:
        return type(self) == type(other) and vars(self) == vars(other)

    def __repr__(self) -> str:
        args = ', '.join(repr(v) for v in vars(self).values())
        return f'{type(self).__name__}( {args} )'


class Reference(Node):
    def __init__(self, value):
        self.value = value


class VariableRef(Reference):
    def run(self, engine, context=None) -> list:
        if context is None:
            return []

        value = context.lookup(self.value)
        if value is None or value.kind != Kind.OBJECTS:
            return []

        return unique(value.items)


class InstanceIdRef(Reference):
    def run(self, engine, context=None) -> list:
        return unique(engine.host.find_by_instance_id(self.value))


class TagRef(Reference):
    def run(self, engine, context=None) -> list:
        return unique(engine.host.find_by_tag(self.value))


class QuickSearchRef(Reference):
    def run(self, engine, context=None) -> list:
        return unique(engine.host.quick_search(self.value))


class HierarchyPathRef(Reference):
    def run(self, engine, context=None) -> list:
        return engine.find_in_hierarchy(self.value)


class TextRef(Reference):
    def run(self, engine, context=None) -> list:
        return engine.find_assets(self.value)


class ComponentFilter(Node):
    def __init__(self, inner: Node, type_name: str):
        self.inner = inner
        self.type_name = type_name

    def run(self, engine, context=None) -> list:
        objects = self.inner.run(engine, context)
        return engine.filter_components(objects, self.type_name)


class Union(Node):
    def __init__(self, lhs: Node, rhs: Node):
        self.lhs = lhs
        self.rhs = rhs

    def run(self, engine, context=None) -> list:
        return union(self.lhs.run(engine, context), self.rhs.run(engine, context))


class Intersection(Node):
    def __init__(self, lhs: Node, rhs: Node):
        self.lhs = lhs
        self.rhs = rhs

    def run(self, engine, context=None) -> list:
        return intersection(self.lhs.run(engine, context),
                            self.rhs.run(engine, context))


class RangeSpec:
    """Indices and inclusive ranges, e.g. `0,2..4`.
    Malformed terms are ignored.
    """

    def __init__(self, terms: List[Tuple[int, Optional[int]]]):
        self.terms = terms

    @staticmethod
    def parse(text: str) -> 'RangeSpec':
        terms = []
        for term in text.split(','):
            match = RANGE_TERM.fullmatch(term)
            if match is None:
                continue

            start, end = match.groups()
            terms.append((int(start), None if end is None else int(end)))

        return RangeSpec(terms)

    def apply(self, items: list) -> list:
        indices = set()
        for start, end in self.terms:
            if end is None:
                if 0 <= start < len(items):
                    indices.add(start)
                continue

            indices.update(range(max(0, start), min(len(items) - 1, end) + 1))

        return [items[i] for i in sorted(indices)]

    def __eq__(self, other) -> bool:
        return isinstance(other, RangeSpec) and self.terms == other.terms

    def __repr__(self) -> str:
        return f'{type(self).__name__}( {self.terms} )'


class Selector(Node):
    """A single selector line.
    """

    def __init__(self, expression: Node, range_spec: RangeSpec = None):
        self.expression = expression
        self.range_spec = range_spec

    def run(self, engine, context=None) -> list:
        items = unique(self.expression.run(engine, context))
        if self.range_spec is None:
            return items

        return self.range_spec.apply(items)
