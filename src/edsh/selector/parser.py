"""
Parser
------

Grammar of a single selector line.

.. code-block:: sh

    selector
    ├── expression RANGE
    └── expression
        ├── expression UNION term
        └── term
            ├── term INTERSECTION factor
            └── factor
                ├── factor COMPONENT
                └── primary

Precedence follows from the nesting: `:Type` binds tighter than `&`, which
binds tighter than `|`.
"""
from ply import yacc
import logging

from edsh.errors import SelectorSyntaxError
from edsh.selector.ast import (ComponentFilter, HierarchyPathRef, InstanceIdRef,
                               Intersection, QuickSearchRef, RangeSpec, Selector,
                               TagRef, TextRef, Union, VariableRef)
from edsh.selector.lexer import lexer, tokens

_parser = None


def main():
    """Implement ply methods to build a parser.
    """
    _ply_constants = tokens
    start = 'selector'

    def p_selector_range(p):
        'selector : expression RANGE'
        p[0] = Selector(p[1], RangeSpec.parse(p[2]))

    def p_selector(p):
        'selector : expression'
        p[0] = Selector(p[1])

    def p_expression_union(p):
        'expression : expression UNION term'
        p[0] = Union(p[1], p[3])

    def p_expression(p):
        'expression : term'
        p[0] = p[1]

    def p_term_intersection(p):
        'term : term INTERSECTION factor'
        p[0] = Intersection(p[1], p[3])

    def p_term(p):
        'term : factor'
        p[0] = p[1]

    def p_factor_component(p):
        'factor : factor COMPONENT'
        p[0] = ComponentFilter(p[1], p[2])

    def p_factor(p):
        'factor : primary'
        p[0] = p[1]

    def p_variable(p):
        'primary : VARIABLE'
        p[0] = VariableRef(p[1])

    def p_instance_id(p):
        'primary : INSTANCE_ID'
        p[0] = InstanceIdRef(p[1])

    def p_tag(p):
        'primary : TAG'
        p[0] = TagRef(p[1])

    def p_quick_search(p):
        'primary : QUICK_SEARCH'
        p[0] = QuickSearchRef(p[1])

    def p_path(p):
        'primary : PATH'
        p[0] = HierarchyPathRef(p[1])

    def p_text(p):
        'primary : TEXT'
        p[0] = TextRef(p[1])

    def p_error(p):
        if p is None:
            raise SelectorSyntaxError('Unexpected end of selector')

        raise SelectorSyntaxError(f'Unexpected token: `{p.value}`')

    return yacc.yacc(debug=False, write_tables=False,
                     errorlog=yacc.NullLogger())


def parser():
    global _parser
    if _parser is None:
        logging.debug('Building selector parser')
        _parser = main()

    return _parser


def parse(line: str) -> Selector:
    """Parse a single selector line.
    Raise SelectorSyntaxError for invalid input.
    """
    if not line.strip():
        raise SelectorSyntaxError('Empty selector')

    return parser().parse(line, lexer=lexer())
