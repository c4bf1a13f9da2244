"""Commands that query or change the editor host.
"""
from typing import List

from edsh.context import Context
from edsh.errors import ShellArgumentError
from edsh.util import matches, unique
from edsh.value import Value

FORMATS = {
    'default': 'default',
    'instance-id': 'instance-id',
    'instanceid': 'instance-id',
    'path': 'path',
    'full': 'full',
}


def do_list(args: List[str], context: Context) -> str:
    """List objects.

    Usage: list <selector> [--format default|instance-id|path|full] [--filter <pattern>] [--components]

    Options:
      --format      Show names, instance ids (@&id) or hierarchy paths
      --filter      Keep objects whose name matches a wildcard pattern
      --components  Show the attached component types

    Example:
      list ^Root/** --filter Enemy* --format path
    """
    selector = None
    fmt = 'default'
    pattern = None
    show_components = False

    i = 0
    while i < len(args):
        arg = args[i]
        if arg == '--format':
            i += 1
            if i < len(args):
                fmt = FORMATS.get(context.resolve_as_string(args[i]).lower(), 'default')
        elif arg == '--filter':
            i += 1
            if i < len(args):
                pattern = context.resolve_as_string(args[i])
        elif arg == '--components':
            show_components = True
        elif selector is None:
            selector = arg
        i += 1

    if selector is None:
        raise ShellArgumentError('Selector required')

    host = context.selectors.host
    objects = context.resolve_as_objects(selector)
    if pattern:
        objects = [obj for obj in objects
                   if matches(pattern, host.name(obj), ignore_case=True)]

    lines = []
    for obj in objects:
        if fmt == 'instance-id':
            lines.append(f'@&{host.instance_id(obj)}')
            continue

        info = host.path(obj) if fmt in ('path', 'full') else host.name(obj)
        if show_components or fmt == 'full':
            info += ' [' + ', '.join(host.component_names(obj)) + ']'
        lines.append(info)

    context.set_last_result(Value.objects(objects))
    return '\n'.join(sorted(lines))


def do_select(args: List[str], context: Context) -> str:
    """Select objects in the editor.

    Usage: select <selector> [--add] [--children]

    Options:
      --add       Extend the current selection
      --children  Include all descendants
    """
    additive = False
    children = False
    objects = None

    for arg in args:
        if arg == '--add':
            additive = True
        elif arg == '--children':
            children = True
        elif objects is None:
            objects = context.resolve_as_objects(arg)

    if objects is None:
        raise ShellArgumentError('Selector required')

    host = context.selectors.host
    if children:
        objects = unique(o for obj in objects for o in host.descendants(obj))

    # components select their owner
    objects = [host.owner(obj) for obj in objects]
    objects = [obj for obj in objects if obj is not None]

    if additive:
        objects = host.get_selection() + objects

    host.set_selection(unique(objects))
    selection = host.get_selection()
    context.set_last_result(Value.objects(selection))
    return f'Selected {len(selection)} object(s)'


COMMANDS = {
    'list': do_list,
    'select': do_select,
}


def register(dispatcher):
    for name, handler in COMMANDS.items():
        dispatcher.register(name, handler)
