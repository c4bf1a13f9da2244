from edsh.assets import MemoryAssetStore
from edsh.context import Context
from edsh.memory import MemoryTypeRegistry
from edsh.selector import SelectorEngine
from edsh.selector.glob import glob_paths
from edsh.value import Value

from conftest import names


def paths(assets) -> list:
    return [asset.path for asset in assets]


def test_select_hierarchy_children(engine):
    assert names(engine.select('^Root/*')) == ['A', 'B', 'C']
    assert names(engine.select('^Root/A/*')) == ['A1']


def test_select_hierarchy_closure(engine):
    assert names(engine.select('^Root/**')) == ['Root', 'A', 'A1', 'B', 'Root', 'C']
    assert names(engine.select('^**')) == [
        'Root', 'A', 'A1', 'B', 'Camera', 'Root', 'C', 'Light']


def test_select_hierarchy_any_depth_then_name(engine):
    assert names(engine.select('^**/A1')) == ['A1']
    assert names(engine.select('^Root/**/A*')) == ['A', 'A1']


def test_select_hierarchy_wildcards(engine):
    assert names(engine.select('^R??t')) == ['Root', 'Root']
    assert names(engine.select('^*/B')) == ['B']
    assert engine.select('^Missing/*') == []
    assert engine.select('^root') == []


def test_select_lookups(engine):
    assert names(engine.select('@&42')) == ['Camera']
    assert names(engine.select('@&7')) == []
    assert names(engine.select('@#Enemy')) == ['B']
    assert names(engine.select('@@ame')) == ['Camera']


def test_intersection_is_idempotent(engine):
    expected = engine.select('^Root/**')
    assert engine.select('^Root/** & ^Root/**') == expected
    assert engine.select('^Root/** | ^Root/**') == expected


def test_set_operations(engine):
    assert names(engine.select('^Root/* | @#Player')) == ['A', 'B', 'C', 'Root']
    assert names(engine.select('^Root/** & @#Enemy')) == ['B']
    assert names(engine.select('@#Enemy | ^Root/* & @#Player')) == ['B']


def test_range(engine):
    assert names(engine.select('^Root/** #0..2')) == ['Root', 'A', 'A1']
    assert names(engine.select('^Root/** #5')) == ['C']
    assert names(engine.select('^Root/* #5')) == []
    assert names(engine.select('^Root/* #2,0')) == ['A', 'C']


def test_components(engine):
    assert names(engine.select('^Root:Rigidbody')) == ['Root (Rigidbody)']
    assert names(engine.select('^Root/**:collider')) == ['A (Collider)', 'B (Collider)']
    assert engine.select('^Root/**:Unknown') == []
    assert engine.select('^Camera:Rigidbody') == []


def test_components_without_registry(host):
    engine = SelectorEngine(host)
    assert names(engine.select('@#Enemy:Rigidbody')) == ['B (Rigidbody)']


def test_multiple_lines(engine):
    assert names(engine.select('@#Enemy\n\n^Root/*\n@#Player')) == ['B', 'A', 'C', 'Root']


def test_invalid_line_yields_nothing(engine):
    assert engine.select('a | | b') == []
    assert names(engine.select('a | | b\n@#Enemy')) == ['B']


def test_variable(engine, host):
    context = Context()
    objects = engine.select('^Root/*')
    context.set('x', Value.objects(objects))
    context.set('n', Value.scalar(3))

    assert engine.select('$x', context) == objects
    assert engine.select('$n', context) == []
    assert engine.select('$missing', context) == []
    assert engine.select('$x') == []
    assert names(engine.select('$x & ^**/A', context)) == ['A']


def test_assets_exact(engine, assets):
    assert engine.select('Assets/readme.txt') == [assets.load('Assets/readme.txt')]


def test_assets_glob(engine):
    assert paths(engine.select('Assets/Prefabs/*.prefab')) == [
        'Assets/Prefabs/Enemy.prefab', 'Assets/Prefabs/Player.prefab']
    assert paths(engine.select('Assets/**/*.mat')) == [
        'Assets/Materials/Red.mat', 'Assets/Materials/Dark/Black.mat']
    assert paths(engine.select('Assets/Materials/**')) == [
        'Assets/Materials/Red.mat', 'Assets/Materials/Dark/Black.mat']


def test_assets_braces(engine):
    assert paths(engine.select('Assets/{Prefabs,Materials}/P*')) == [
        'Assets/Prefabs/Player.prefab']


def test_assets_search(engine):
    assert paths(engine.select('player')) == ['Assets/Prefabs/Player.prefab']
    assert engine.select('nothing') == []


def test_glob_paths():
    store = MemoryAssetStore(['a/b/c/x.txt', 'a/x.txt', 'a/y.md'])
    assert glob_paths(store, 'a/**/x.txt') == ['a/x.txt', 'a/b/c/x.txt']
    assert glob_paths(store, 'a/*') == ['a/x.txt', 'a/y.md']
    assert glob_paths(store, '**') == ['a/x.txt', 'a/y.md', 'a/b/c/x.txt']


def test_type_registry():
    types = MemoryTypeRegistry(['Rigidbody'])
    assert types.lookup('rigidbody') == 'Rigidbody'
    assert types.lookup('Collider') is None
