r"""Split a command line into argument tokens.

.. code-block:: sh

    create Foo --with Rigidbody,Collider   # 4 tokens
    select "My Object"                     # quotes are consumed
    set $x $(list Foo)                     # substitution is a single token
    echo a\ b                              # backslash escapes the space

Unterminated quotes and substitutions are closed implicitly at the end of the
line. A trailing backslash is kept as a literal character.
"""
from typing import List

ESCAPE = '\\'
QUOTE = '"'
SUBSTITUTION_PREFIX = '$('
SUBSTITUTION_SUFFIX = ')'


class Substitution(str):
    """A `$( ... )` token. It compares equal to its plain text.
    """

    @property
    def inner(self) -> str:
        return substitution_body(self)


def is_substitution(token: str) -> bool:
    """Only unquoted, unescaped `$( ... )` spans are substitutions.
    Quoted text such as `"$(a)"` is a plain str.
    """
    return isinstance(token, Substitution)


def substitution_body(token: str) -> str:
    """Return the command line inside `$( ... )`.
    """
    body = token[len(SUBSTITUTION_PREFIX):]
    if body.endswith(SUBSTITUTION_SUFFIX) and is_balanced(token):
        body = body[:-1]
    return body


def is_balanced(token: str) -> bool:
    depth = 0
    escaped = False
    for c in token:
        if escaped:
            escaped = False
        elif c == ESCAPE:
            escaped = True
        elif c == '(':
            depth += 1
        elif c == ')':
            depth -= 1
    return depth == 0


def tokenize(line: str) -> List[str]:
    tokens = []
    current = []
    quoted = False
    escaped = False
    depth = 0

    def flush():
        if current:
            tokens.append(''.join(current))
            current.clear()

    i = 0
    n = len(line)
    while i < n:
        c = line[i]

        if depth:
            # inside a substitution everything is kept verbatim
            current.append(c)
            if escaped:
                escaped = False
            elif c == ESCAPE:
                escaped = True
            elif c == '(':
                depth += 1
            elif c == ')':
                depth -= 1
                if depth == 0:
                    tokens.append(Substitution(''.join(current)))
                    current.clear()

        elif escaped:
            current.append(c)
            escaped = False

        elif c == ESCAPE:
            escaped = True

        elif c == QUOTE:
            quoted = not quoted

        elif not quoted and line.startswith(SUBSTITUTION_PREFIX, i):
            flush()
            current.extend(SUBSTITUTION_PREFIX)
            depth = 1
            i += 1

        elif c.isspace() and not quoted:
            flush()

        else:
            current.append(c)

        i += 1

    if escaped and not depth:
        current.append(ESCAPE)

    if depth:
        tokens.append(Substitution(''.join(current)))
    else:
        flush()

    return tokens
