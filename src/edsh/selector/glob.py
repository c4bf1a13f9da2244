"""Asset path patterns.

.. code-block:: sh

    Assets/Prefabs/Player.prefab     # an existing path
    Assets/*/Player.*                # wildcards within a segment
    Assets/**/*.mat                  # any depth
    Assets/{Prefabs,Models}/*        # brace expansion
    Player                           # free-text search

"""
from typing import List
import logging

from edsh.assets import normalize
from edsh.host import AssetStore
from edsh.util import expand_braces, is_globbable, matches, unique

ANY_DEPTH = '**'


def find_assets(store: AssetStore, pattern: str) -> list:
    pattern = normalize(pattern.strip())
    if not pattern:
        return []

    if store.exists(pattern):
        return [store.load(pattern)]

    if not is_globbable(pattern):
        return unique(store.search(pattern))

    paths = []
    for expanded in expand_braces(pattern):
        if is_globbable(expanded):
            paths.extend(glob_paths(store, expanded))
        elif store.exists(expanded):
            paths.append(normalize(expanded))

    logging.debug(f'Asset pattern {pattern} matched {len(paths)} files')
    handles = (store.load(path) for path in paths)
    return unique(handle for handle in handles if handle is not None)


def glob_paths(store: AssetStore, pattern: str) -> List[str]:
    """Return the file paths that match `pattern`, in traversal order.
    Directories are listed in sorted order.
    """
    segments = [s for s in pattern.split('/') if s]
    return list(_glob(store, '', segments))


def _glob(store: AssetStore, directory: str, segments: List[str]):
    head, *tail = segments
    dirs, files = store.list_dir(directory)

    if head == ANY_DEPTH:
        if not tail:
            yield from _all_files(store, directory)
            return

        # zero or more directories
        yield from _glob(store, directory, tail)
        for name in dirs:
            yield from _glob(store, _join(directory, name), segments)
        return

    if not tail:
        for name in files:
            if matches(head, name):
                yield _join(directory, name)
        return

    for name in dirs:
        if matches(head, name):
            yield from _glob(store, _join(directory, name), tail)


def _all_files(store: AssetStore, directory: str):
    dirs, files = store.list_dir(directory)
    for name in files:
        yield _join(directory, name)

    for name in dirs:
        yield from _all_files(store, _join(directory, name))


def _join(directory: str, name: str) -> str:
    if not directory:
        return name
    return f'{directory}/{name}'
