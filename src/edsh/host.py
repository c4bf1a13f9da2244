"""Interfaces to the editor host.

The language core never touches host objects directly. Object handles are
opaque: they are compared by identity and described through `Host.name`.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

Handle = Any
TypeHandle = Any


class Host(ABC):
    """Scene graph and lookup capabilities of an editor.
    """

    @abstractmethod
    def root_objects(self) -> List[Handle]:
        """Return the root objects of all loaded scenes, in load order.
        """

    @abstractmethod
    def children(self, obj: Handle) -> List[Handle]:
        """Return the direct children of `obj` in declared order.
        """

    @abstractmethod
    def name(self, obj: Handle) -> str:
        pass

    def parent(self, obj: Handle) -> Optional[Handle]:
        return None

    def instance_id(self, obj: Handle) -> Optional[int]:
        return None

    def find_by_instance_id(self, instance_id: int) -> List[Handle]:
        return []

    def find_by_tag(self, tag: str) -> List[Handle]:
        return []

    def quick_search(self, query: str) -> List[Handle]:
        return []

    def components(self, obj: Handle, type_handle: TypeHandle) -> List[Handle]:
        """Return the components of type `type_handle` attached to `obj`.
        Objects that cannot hold components yield an empty list.
        """
        return []

    def component_names(self, obj: Handle) -> List[str]:
        return []

    def owner(self, obj: Handle) -> Optional[Handle]:
        """Return the selectable object that holds `obj`, e.g. the owner of a component.
        """
        return obj

    def get_selection(self) -> List[Handle]:
        return []

    def set_selection(self, objects: List[Handle]):
        raise NotImplementedError()

    def path(self, obj: Handle) -> str:
        """Return the hierarchy path of `obj`, e.g. `Root/Child`.
        """
        names = [self.name(obj)]
        parent = self.parent(obj)
        while parent is not None:
            names.insert(0, self.name(parent))
            parent = self.parent(parent)
        return '/'.join(names)

    def descendants(self, obj: Handle) -> List[Handle]:
        """Return `obj` followed by all its descendants, depth-first.
        """
        result = [obj]
        for child in self.children(obj):
            result.extend(self.descendants(child))
        return result


class TypeRegistry(ABC):
    @abstractmethod
    def lookup(self, name: str) -> Optional[TypeHandle]:
        """Find a component type by its case-insensitive name.
        """


class AssetStore(ABC):
    """A tree of directories and asset files, addressed by `/`-separated paths.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def load(self, path: str) -> Optional[Handle]:
        pass

    @abstractmethod
    def list_dir(self, path: str) -> Tuple[List[str], List[str]]:
        """Return the names of the subdirectories and files in `path`, sorted.
        The empty path denotes the root.
        """

    def search(self, query: str) -> List[Handle]:
        return []
