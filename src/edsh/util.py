from braceexpand import braceexpand, UnbalancedBracesError
from functools import lru_cache
from typing import Iterable, List, Pattern, TypeVar
import re

T = TypeVar('T')

WILDCARD_CHARS = '*?'
IDENTIFIER = re.compile(r'[A-Za-z0-9_]+')


def crop(s: str, n=100, suffix='..') -> str:
    margin = len(suffix)
    if len(s) <= n + margin:
        return s
    return s[:n] + suffix


def unique(items: Iterable[T]) -> List[T]:
    """Remove duplicates by object identity, preserving order.
    Handles are opaque and need not be hashable.
    """
    seen = set()
    result = []
    for item in items:
        if id(item) in seen:
            continue

        seen.add(id(item))
        result.append(item)
    return result


def union(a: Iterable[T], b: Iterable[T]) -> List[T]:
    return unique(list(a) + list(b))


def intersection(a: Iterable[T], b: Iterable[T]) -> List[T]:
    keys = {id(item) for item in b}
    return unique(item for item in a if id(item) in keys)


def is_wildcard(value: str) -> bool:
    return any(c in value for c in WILDCARD_CHARS)


def is_globbable(value: str) -> bool:
    return is_wildcard(value) or ('{' in value and '}' in value)


def is_valid_identifier(value: str) -> bool:
    return isinstance(value, str) and IDENTIFIER.fullmatch(value) is not None


@lru_cache(maxsize=None)
def wildcard_to_regex(pattern: str, ignore_case=False) -> Pattern:
    """Compile a pattern with `*` and `?` wildcards into an anchored regex.
    Compiled patterns are cached by pattern string.
    """
    regex = re.escape(pattern).replace(r'\*', '.*').replace(r'\?', '.')
    flags = re.IGNORECASE if ignore_case else 0
    return re.compile(f'^{regex}$', flags)


def matches(pattern: str, name: str, ignore_case=False) -> bool:
    if not is_wildcard(pattern):
        if ignore_case:
            return pattern.lower() == name.lower()
        return pattern == name

    return wildcard_to_regex(pattern, ignore_case).match(name) is not None


def expand_braces(value: str) -> List[str]:
    """Expand Bash-style braces, e.g.
    ```
    ranges_{1..3}
    options_{a,b,c}
    ```
    Unbalanced braces are kept as-is.
    """
    try:
        return list(braceexpand(value))
    except UnbalancedBracesError:
        return [value]
