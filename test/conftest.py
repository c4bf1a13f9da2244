from pytest import fixture

from edsh.assets import MemoryAssetStore
from edsh.macro import MemoryMacroStore
from edsh.memory import MemoryHost
from edsh.selector import SelectorEngine
from edsh.session import Session

SCENES = {'scenes': [
    {'name': 'Main', 'objects': [
        {'name': 'Root', 'tag': 'Player', 'components': ['Rigidbody'], 'instance_id': 1,
         'children': [
             {'name': 'A', 'components': ['Collider'], 'children': ['A1']},
             {'name': 'B', 'tag': 'Enemy', 'components': ['Rigidbody', 'Collider']},
         ]},
        {'name': 'Camera', 'instance_id': 42},
    ]},
    {'name': 'Other', 'objects': [
        {'name': 'Root', 'children': ['C']},
        'Light',
    ]},
]}

ASSETS = [
    'Assets/Prefabs/Player.prefab',
    'Assets/Prefabs/Enemy.prefab',
    'Assets/Materials/Red.mat',
    'Assets/Materials/Dark/Black.mat',
    'Assets/readme.txt',
]

MACROS = {
    'greet': '# Print a greeting.\n# Usage: greet <name>\necho hello $1\n',
    'pair': '# Two values.\n\necho $1 $name\n',
    'twice': '# Usage: twice <text>\n\n# first\necho $1\n\necho $1 $1\n',
    'loop': '# Calls itself.\nloop\n',
    'fail': 'echo start\nzzq\necho never\n',
}


def names(objects) -> list:
    return [obj.name for obj in objects]


@fixture
def host():
    return MemoryHost.from_dict(SCENES)


@fixture
def assets():
    return MemoryAssetStore(ASSETS)


@fixture
def engine(host, assets):
    return SelectorEngine(host, assets, host.type_registry())


@fixture
def macros():
    return MemoryMacroStore(MACROS)


@fixture
def session(host, assets, macros):
    return Session(host, assets, host.type_registry(), macros=macros)
