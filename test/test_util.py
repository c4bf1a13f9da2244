import logging

from edsh.io_util import set_verbosity
from edsh.util import (crop, expand_braces, intersection, is_globbable, is_valid_identifier,
                       is_wildcard, matches, union, unique, wildcard_to_regex)


class Handle:
    """Compared by identity.
    """

    def __eq__(self, other):
        return True

    __hash__ = object.__hash__


def test_crop():
    assert crop('abc', 10) == 'abc'
    assert crop('a' * 20, 5) == 'aaaaa..'


def test_unique_by_identity():
    a, b = Handle(), Handle()
    assert a == b
    result = unique([a, b, a])
    assert len(result) == 2
    assert result[0] is a
    assert result[1] is b


def test_unique_unhashable():
    a, b = [1], [1]
    assert unique([a, a, b]) == [a, b]


def test_union():
    a, b, c = Handle(), Handle(), Handle()
    result = union([a, b], [c, a])
    assert [id(x) for x in result] == [id(a), id(b), id(c)]


def test_intersection():
    a, b, c = Handle(), Handle(), Handle()
    result = intersection([c, a, b], [b, c])
    assert [id(x) for x in result] == [id(c), id(b)]
    assert intersection([a], []) == []


def test_is_wildcard():
    assert is_wildcard('a*')
    assert is_wildcard('a?')
    assert not is_wildcard('a{b,c}')
    assert is_globbable('a{b,c}')
    assert not is_globbable('a{b')


def test_is_valid_identifier():
    assert is_valid_identifier('abc_1')
    assert is_valid_identifier('1')
    assert not is_valid_identifier('')
    assert not is_valid_identifier('a-b')
    assert not is_valid_identifier('a b')


def test_matches():
    assert matches('Root', 'Root')
    assert not matches('Root', 'root')
    assert matches('Root', 'root', ignore_case=True)
    assert matches('R*', 'Root')
    assert matches('R??t', 'Root')
    assert not matches('R?t', 'Root')
    assert matches('*.prefab', 'a.prefab')
    assert not matches('*.prefab', 'a.prefab.meta')
    assert matches('a.b', 'a.b')
    assert not matches('a.*', 'ab')


def test_wildcard_to_regex_is_cached():
    assert wildcard_to_regex('a*') is wildcard_to_regex('a*')


def test_expand_braces():
    assert expand_braces('{4..2}') == ['4', '3', '2']
    assert expand_braces('x_{a,b}') == ['x_a', 'x_b']
    assert expand_braces('{a') == ['{a']
    assert expand_braces('plain') == ['plain']


def test_set_verbosity():
    logger = logging.getLogger()
    level = logger.level
    try:
        set_verbosity(0)
        assert logger.level == logging.WARNING
        set_verbosity(1)
        assert logger.level == logging.INFO
        set_verbosity(5)
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(level)
