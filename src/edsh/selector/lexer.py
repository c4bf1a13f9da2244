import ply.lex as lex
from edsh.errors import SelectorSyntaxError

tokens = (
    'UNION',  # |
    'INTERSECTION',  # &
    'COMPONENT',  # :Rigidbody
    'RANGE',  # #0..2,5

    'VARIABLE',  # $x
    'INSTANCE_ID',  # @&1234
    'TAG',  # @#Player
    'QUICK_SEARCH',  # @@some query
    'PATH',  # ^Root/**/Child
    'TEXT',  # Assets/Prefabs/*.prefab
)

_lexer = None


def main():
    """
    Token regexes are defined with the prefix `t_`.
    From ply docs:

    * functions are matched in order of specification
    * strings are sorted by regular expression length

    Note that ply compiles regexes in verbose mode, hence `#` and spaces are escaped.
    """

    t_ignore = ' \t'

    def t_INSTANCE_ID(t):
        r'@&-?\d+'
        t.value = int(t.value[2:])
        return t

    def t_TAG(t):
        r'@\#[^\s|&:\#]+'
        t.value = t.value[2:]
        return t

    def t_QUICK_SEARCH(t):
        r'@@[^\#\n]*'
        # the query extends to the end of the expression
        t.value = t.value[2:].strip()
        return t

    def t_VARIABLE(t):
        r'\$[A-Za-z0-9_~]+'
        t.value = t.value[1:]
        return t

    def t_PATH(t):
        r'\^[^|&:\#\n]*'
        t.value = t.value[1:].rstrip()
        return t

    def t_COMPONENT(t):
        r':[\ \t]*[A-Za-z_][A-Za-z0-9_.]*'
        t.value = t.value[1:].strip()
        return t

    def t_RANGE(t):
        r'\#[^\n]*'
        t.value = t.value[1:]
        return t

    def t_UNION(t):
        r'\|'
        return t

    def t_INTERSECTION(t):
        r'&'
        return t

    def t_TEXT(t):
        r'[^\s|&:\#$@^][^|&:\#\n]*'
        t.value = t.value.rstrip()
        return t

    def t_error(t):
        t.lexer.skip(1)
        raise SelectorSyntaxError(f'Illegal character: `{t.value[0]}`')

    return lex.lex()


def lexer():
    """Return a fresh copy of the (cached) lexer.
    """
    global _lexer
    if _lexer is None:
        _lexer = main()

    return _lexer.clone()


def tokenize(data: str):
    tokenizer = lexer()
    tokenizer.input(data)

    while True:
        token = tokenizer.token()
        if not token:
            break

        yield token
