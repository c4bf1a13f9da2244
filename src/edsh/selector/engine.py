from typing import List
import logging

from edsh.errors import SelectorSyntaxError
from edsh.host import AssetStore, Host, TypeRegistry
from edsh.selector.glob import find_assets
from edsh.selector.parser import parse
from edsh.util import matches, unique

ANY_DEPTH = '**'


class SelectorEngine:
    """Evaluate selector strings against a host.

    Each line of the input is an independent selector. The results of all
    lines are combined and duplicates are removed.

    ```sh
    ^Root/**:Rigidbody & @#Player #0..2
    Assets/Prefabs/*.prefab
    ```
    """

    def __init__(self, host: Host, assets: AssetStore = None,
                 types: TypeRegistry = None):
        self.host = host
        self.assets = assets
        self.types = types

    def select(self, text: str, context=None) -> list:
        results = []
        for line in text.split('\n'):
            if not line.strip():
                continue

            try:
                selector = parse(line)
            except SelectorSyntaxError as e:
                logging.warning(f'Invalid selector `{line}`: {e}')
                continue

            logging.debug(f'Selector: {selector}')
            results.extend(selector.run(self, context))

        return unique(results)

    def find_in_hierarchy(self, path: str) -> list:
        """Match a `/`-separated path against the scene hierarchy.
        A segment `**` matches any depth, including the current level.
        """
        segments = [s for s in path.split('/') if s]
        if not segments:
            return []

        head, *tail = segments
        if head == ANY_DEPTH:
            current = self._closure(self.host.root_objects())
        else:
            current = [obj for obj in self.host.root_objects()
                       if matches(head, self.host.name(obj))]

        for segment in tail:
            if segment == ANY_DEPTH:
                current = self._closure(current)
                continue

            current = [child for obj in current
                       for child in self.host.children(obj)
                       if matches(segment, self.host.name(child))]

        return unique(current)

    def _closure(self, objects: list) -> list:
        return unique(o for obj in objects for o in self.host.descendants(obj))

    def find_assets(self, pattern: str) -> list:
        if self.assets is None:
            return []

        return find_assets(self.assets, pattern)

    def filter_components(self, objects: list, type_name: str) -> List:
        if self.types is None:
            type_handle = type_name
        else:
            type_handle = self.types.lookup(type_name)
            if type_handle is None:
                logging.debug(f'Unknown component type: {type_name}')
                return []

        return unique(component for obj in objects
                      for component in self.host.components(obj, type_handle))
