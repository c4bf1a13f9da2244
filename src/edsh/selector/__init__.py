from edsh.selector.engine import SelectorEngine
from edsh.selector.parser import parse
