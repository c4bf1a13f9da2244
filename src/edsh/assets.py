"""Asset stores.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
import logging

from edsh.host import AssetStore


@dataclass(eq=False)
class Asset:
    path: str

    @property
    def name(self) -> str:
        return self.path.rsplit('/', 1)[-1]

    def __repr__(self):
        return f'{type(self).__name__}( {self.path} )'


def normalize(path: str) -> str:
    return '/'.join(part for part in path.replace('\\', '/').split('/') if part)


class MemoryAssetStore(AssetStore):
    def __init__(self, assets: Union[Dict[str, Any], Iterable[str]] = ()):
        if not isinstance(assets, dict):
            assets = {path: None for path in assets}

        self.assets = {}
        for path, obj in assets.items():
            path = normalize(path)
            self.assets[path] = obj if obj is not None else Asset(path)

    def exists(self, path: str) -> bool:
        return normalize(path) in self.assets

    def load(self, path: str):
        return self.assets.get(normalize(path))

    def list_dir(self, path: str) -> Tuple[List[str], List[str]]:
        prefix = normalize(path)
        if prefix:
            prefix += '/'

        dirs = set()
        files = set()
        for key in self.assets:
            if not key.startswith(prefix):
                continue

            head, *tail = key[len(prefix):].split('/')
            if tail:
                dirs.add(head)
            else:
                files.add(head)

        return sorted(dirs), sorted(files)

    def search(self, query: str) -> list:
        query = query.lower()
        return [self.assets[k] for k in sorted(self.assets)
                if query in k.rsplit('/', 1)[-1].lower()]


class FileSystemAssetStore(AssetStore):
    """Assets are the files below `root`.
    Each path maps to a single Asset instance, such that handles can be compared by identity.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root).resolve()
        self._handles: Dict[str, Asset] = {}

    def _resolve(self, path: str) -> Optional[Path]:
        """Return None for paths outside of `root`, e.g. `../secret`.
        """
        resolved = (self.root / normalize(path)).resolve()
        try:
            resolved.relative_to(self.root)
        except ValueError:
            logging.warning(f'Path is outside of the asset root: {path}')
            return None
        return resolved

    def exists(self, path: str) -> bool:
        resolved = self._resolve(path)
        return resolved is not None and resolved.is_file()

    def load(self, path: str):
        if not self.exists(path):
            return None

        path = self._resolve(path).relative_to(self.root).as_posix()
        if path not in self._handles:
            self._handles[path] = Asset(path)
        return self._handles[path]

    def list_dir(self, path: str) -> Tuple[List[str], List[str]]:
        directory = self._resolve(path)
        if directory is None or not directory.is_dir():
            return [], []

        dirs = []
        files = []
        try:
            for entry in directory.iterdir():
                if entry.is_dir():
                    dirs.append(entry.name)
                else:
                    files.append(entry.name)
        except OSError as e:
            logging.warning(f'Cannot list {directory}: {e}')

        return sorted(dirs), sorted(files)

    def search(self, query: str) -> list:
        query = query.lower()
        results = []
        for file in sorted(self.root.rglob('*')):
            if file.is_file() and query in file.name.lower():
                asset = self.load(file.relative_to(self.root).as_posix())
                if asset is not None:
                    results.append(asset)
        return results
