"""An in-memory editor host.

Used by the CLI (scenes loaded from JSON) and by the test suite.

.. code-block:: json

    {"scenes": [
        {"name": "Main", "objects": [
            {"name": "Root", "tag": "Player", "components": ["Rigidbody"],
             "children": [{"name": "Child"}]}
        ]}
    ]}

"""
from dataclasses import dataclass, field
from itertools import count
from json import loads
from pathlib import Path
from typing import Dict, Iterable, List, Optional
import logging

from edsh.host import Host, TypeRegistry
from edsh.util import unique

DEFAULT_TAG = 'Untagged'

_instance_ids = count(1000)


@dataclass(eq=False)
class Component:
    type_name: str
    owner: 'SceneObject' = None
    properties: dict = field(default_factory=dict)

    @property
    def name(self) -> str:
        if self.owner is None:
            return self.type_name
        return f'{self.owner.name} ({self.type_name})'


@dataclass(eq=False)
class SceneObject:
    name: str
    tag: str = DEFAULT_TAG
    children: List['SceneObject'] = field(default_factory=list)
    components: List[Component] = field(default_factory=list)
    parent: Optional['SceneObject'] = None
    instance_id: int = field(default_factory=lambda: next(_instance_ids))

    def add(self, *children: 'SceneObject') -> 'SceneObject':
        for child in children:
            child.parent = self
            self.children.append(child)
        return self

    def attach(self, *type_names: str) -> 'SceneObject':
        for type_name in type_names:
            self.components.append(Component(type_name, self))
        return self

    def __repr__(self):
        return f'{type(self).__name__}( {self.name} )'


@dataclass(eq=False)
class Scene:
    name: str
    roots: List[SceneObject] = field(default_factory=list)


class MemoryTypeRegistry(TypeRegistry):
    def __init__(self, names: Iterable[str] = ()):
        self.types: Dict[str, str] = {}
        for name in names:
            self.register(name)

    def register(self, name: str):
        self.types.setdefault(name.lower(), name)

    def lookup(self, name: str) -> Optional[str]:
        return self.types.get(name.lower())


class MemoryHost(Host):
    def __init__(self, scenes: List[Scene] = None):
        self.scenes = scenes if scenes is not None else []
        self.selection: List = []

    @staticmethod
    def from_dict(data) -> 'MemoryHost':
        if isinstance(data, list):
            data = {'scenes': [{'name': 'Scene', 'objects': data}]}

        scenes = []
        for item in data.get('scenes', []):
            roots = [build_object(o) for o in item.get('objects', [])]
            scenes.append(Scene(item.get('name', 'Scene'), roots))

        return MemoryHost(scenes)

    @staticmethod
    def from_file(filename: str) -> 'MemoryHost':
        logging.info(f'Loading scenes from {filename}')
        return MemoryHost.from_dict(loads(Path(filename).read_text()))

    def add_scene(self, name: str, *roots: SceneObject) -> Scene:
        scene = Scene(name, list(roots))
        self.scenes.append(scene)
        return scene

    def all_objects(self) -> List[SceneObject]:
        result = []
        for root in self.root_objects():
            result.extend(self.descendants(root))
        return result

    def type_registry(self, extra: Iterable[str] = ()) -> MemoryTypeRegistry:
        """Return a registry of all component types in the loaded scenes.
        """
        registry = MemoryTypeRegistry(extra)
        for obj in self.all_objects():
            for component in obj.components:
                registry.register(component.type_name)
        return registry

    ############################################################################
    # Host
    ############################################################################

    def root_objects(self) -> List[SceneObject]:
        return [root for scene in self.scenes for root in scene.roots]

    def children(self, obj) -> list:
        return list(getattr(obj, 'children', []))

    def name(self, obj) -> str:
        return str(getattr(obj, 'name', obj))

    def parent(self, obj):
        return getattr(obj, 'parent', None)

    def instance_id(self, obj) -> Optional[int]:
        return getattr(obj, 'instance_id', None)

    def find_by_instance_id(self, instance_id: int) -> list:
        for obj in self.all_objects():
            if obj.instance_id == instance_id:
                return [obj]
        return []

    def find_by_tag(self, tag: str) -> list:
        return [obj for obj in self.all_objects() if obj.tag == tag]

    def quick_search(self, query: str) -> list:
        query = query.strip().lower()
        if not query:
            return []
        return [obj for obj in self.all_objects() if query in obj.name.lower()]

    def components(self, obj, type_handle) -> list:
        if not isinstance(obj, SceneObject):
            return []
        key = str(type_handle).lower()
        return [c for c in obj.components if c.type_name.lower() == key]

    def component_names(self, obj) -> List[str]:
        return [c.type_name for c in getattr(obj, 'components', [])]

    def owner(self, obj):
        if isinstance(obj, Component):
            return obj.owner
        if isinstance(obj, SceneObject):
            return obj
        return None

    def get_selection(self) -> list:
        return list(self.selection)

    def set_selection(self, objects: list):
        self.selection = unique(objects)


def build_object(data: dict) -> SceneObject:
    if isinstance(data, str):
        data = {'name': data}

    obj = SceneObject(data['name'], data.get('tag', DEFAULT_TAG))
    if 'instance_id' in data:
        obj.instance_id = int(data['instance_id'])

    obj.attach(*data.get('components', []))
    obj.add(*(build_object(child) for child in data.get('children', [])))
    return obj
