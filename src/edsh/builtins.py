"""Commands that operate on the shell itself.

Each handler has the signature `(args, context)`. The docstring of a handler is
its help text.
"""
from typing import List
import inspect

from edsh.context import LAST_RESULT, Context, strip_prefix
from edsh.errors import NotFoundError, ShellArgumentError
from edsh.io_util import bold
from edsh.tokenizer import is_substitution
from edsh.util import crop, is_valid_identifier
from edsh.value import Kind, ScalarType, Value


def do_set(args: List[str], context: Context) -> str:
    """Set a variable.

    Usage:
      set <$name> <value>
      set <$name> $other
      set <$name> $(command)
      set <$name> --objects <selector>

    Plain values are stored as a string, bool, int or float.
    """
    if len(args) < 2:
        raise ShellArgumentError('Variable name and value required')

    name = variable_name(args[0], context)

    if args[1] == '--objects':
        if len(args) < 3:
            raise ShellArgumentError('Selector required')
        value = Value.objects(context.resolve_as_objects(args[2]))
    elif len(args) == 2:
        value = context.resolve_value(args[1])
    else:
        value = Value.scalar(' '.join(context.resolve_as_string(arg) for arg in args[1:]))

    context.set(name, value)
    context.set_last_result(value)
    return f'Set ${name} = {format_value(value, context)}'


def do_unset(args: List[str], context: Context) -> str:
    """Remove one or more variables.

    Usage: unset <$name> [<$name> ...]
    """
    if not args:
        raise ShellArgumentError('Variable name required')

    names = [variable_name(arg, context) for arg in args]
    for name in names:
        context.unset(name)

    return 'Removed ' + ', '.join(f'${name}' for name in names)


def do_vars(args: List[str], context: Context) -> str:
    """List all variables.
    """
    lines = []
    for name, value in sorted(context.items()):
        lines.append(f'${name} = {crop(format_value(value, context), 60)}')

    context.set_last_result(Value.strings(sorted(context.keys())))
    return '\n'.join(lines)


def do_clear(args: List[str], context: Context) -> str:
    """Remove all variables except for the last result `$~`.
    """
    context.clear()
    return 'Cleared all variables'


def do_echo(args: List[str], context: Context) -> str:
    """Print the arguments. References are resolved.

    Usage: echo <text> [<text> ...]
    """
    text = ' '.join(context.resolve_as_string(arg) for arg in args)
    context.set_last_result(Value.scalar(text) if text else Value.null())
    return text


def do_help(args: List[str], context: Context) -> str:
    """Show documentation.

    Usage: help [command]
    """
    index = context.dispatcher.help
    if not args:
        return index.overview()

    name = context.resolve_as_string(args[0]).lower()
    try:
        return index.lookup(name)
    except NotFoundError as e:
        raise ShellArgumentError(f"{e}\nTry 'help' for a list of commands")


def do_macro(args: List[str], context: Context) -> str:
    """Run or list macros.

    Usage:
      macro --list
      macro --help
      macro <name> [[<name>=]<arg> ...]

    Positional arguments are bound to $1, $2, .. and named arguments to $name.

    Example:
      macro platform name=Floor pos=(1,0,1)
    """
    if not args:
        raise ShellArgumentError('Please specify a macro name')

    dispatcher = context.dispatcher
    if args[0] == '--help':
        return inspect.getdoc(do_macro)

    if args[0] == '--list':
        names = dispatcher.macros.names() if dispatcher.macros else []
        context.set_last_result(Value.strings(names))
        if not names:
            return 'No macros found'

        lines = [bold('Available macros:')]
        for name in names:
            summary = dispatcher.macros.load(name).summary
            lines.append(f'  {name}: {summary}' if summary else f'  {name}')
        return '\n'.join(lines)

    if dispatcher.macros is None:
        raise ShellArgumentError('No macros are available')

    return dispatcher.binder.invoke(args[0], args[1:], context)


def do_history(args: List[str], context: Context) -> str:
    """Show recently executed commands.

    Usage: history [n]
    """
    n = None
    if args:
        try:
            n = int(context.resolve_as_string(args[0]))
        except ValueError:
            raise ShellArgumentError(f'Expected a number: {args[0]}')

    history = context.dispatcher.history
    # exclude the current command
    entries = [entry for entry in history.recent() if entry is not history.active()]
    if n is not None:
        entries = entries[-n:] if n > 0 else []

    context.set_last_result(Value.strings(entry.command for entry in entries))
    return '\n'.join(str(entry) for entry in entries)


def variable_name(arg: str, context: Context) -> str:
    """Return the name of a variable argument such as `$x`.
    """
    if is_substitution(arg):
        # the name itself is computed
        arg = context.resolve_as_string(arg)

    name = strip_prefix(arg)
    if name != LAST_RESULT and not is_valid_identifier(name):
        raise ShellArgumentError(f'Invalid variable name: {arg}')
    return name


def format_value(value: Value, context: Context) -> str:
    if value.kind == Kind.NULL:
        return 'null'
    elif value.kind == Kind.SCALAR:
        if value.scalar_type == ScalarType.STRING:
            return f'"{value.text}"'
        return value.text
    elif value.kind == Kind.STRINGS:
        return '[' + ', '.join(f'"{item}"' for item in value.items) + ']'
    elif value.kind == Kind.OBJECTS:
        return '[' + ', '.join(context.describe(item) for item in value.items) + ']'

    raise NotImplementedError(value.kind)


BUILTINS = {
    'set': do_set,
    'unset': do_unset,
    'vars': do_vars,
    'clear': do_clear,
    'echo': do_echo,
    'help': do_help,
    'macro': do_macro,
    'history': do_history,
}


def register(dispatcher):
    for name, handler in BUILTINS.items():
        dispatcher.register(name, handler)
