from pytest import raises

from edsh.errors import NotFoundError, ShellArgumentError
from edsh.macro import (DirectoryMacroStore, MacroDefinition, MemoryMacroStore,
                        required_args_from_usage)
from edsh.value import Value


def test_parse_definition():
    text = '#Summary line\n# Usage: make <a> b=(x)\n\ncreate $1\n# note\nset $b 1\n'
    definition = MacroDefinition.parse('make', text)

    assert definition.header == ['Summary line', 'Usage: make <a> b=(x)']
    assert definition.summary == 'Summary line'
    assert definition.usage == 'make <a> b=(x)'
    assert definition.commands() == ['create $1', 'set $b 1']


def test_parse_definition_without_header():
    definition = MacroDefinition.parse('m', 'echo $1 $x\necho $x $2')
    assert definition.header == []
    assert definition.usage is None
    assert definition.summary == ''
    assert definition.required_args() == ['1', 'x', '2']


def test_parse_definition_only_comments():
    definition = MacroDefinition.parse('m', '# only docs\n')
    assert definition.header == ['only docs']
    assert definition.commands() == []


def test_required_args_from_usage():
    assert required_args_from_usage('m <a> <b>') == ['1', '2']
    assert required_args_from_usage('m <a> [<b>] size=(x,y)') == ['1', 'size']
    assert required_args_from_usage('m [name=(x)]') == []
    assert required_args_from_usage('m') == []


def test_usage_overrides_body():
    definition = MacroDefinition.parse('m', '# Usage: m <a>\necho $1 $2 $other')
    assert definition.required_args() == ['1']


def test_memory_store():
    store = MemoryMacroStore({'Greet': 'echo hi'})
    assert store.names() == ['greet']
    assert store.exists('GREET')
    assert store.exists('greet.macro')
    assert not store.exists('other')

    with raises(NotFoundError):
        store.load('other')


def test_directory_store(tmp_path):
    (tmp_path / 'Platform.macro').write_text('# Make a platform.\ncreate $1\n')
    (tmp_path / 'notes.txt').write_text('ignored')

    store = DirectoryMacroStore(tmp_path)
    assert store.names() == ['platform']
    assert store.load('platform').commands() == ['create $1']
    assert store.load('PLATFORM.macro').summary == 'Make a platform.'

    with raises(NotFoundError):
        store.load('notes')

    assert DirectoryMacroStore(tmp_path / 'missing').names() == []


def test_invoke_binds_positional_and_named(session):
    context = session.context
    session.dispatcher.macros.add('show', 'echo $1 $name')

    assert session.execute('show foo name=bar') == 'foo bar'
    assert context.get('1') == Value.scalar('foo')
    assert context.get('name') == Value.scalar('bar')
    assert context.get('2') == Value.scalar('bar')
    for i in range(3, 10):
        assert not context.has(str(i))


def test_invoke_clears_previous_positionals(session):
    context = session.context
    session.execute('pair a name=b')
    assert context.get('2') == Value.scalar('b')

    session.execute('greet x')
    assert context.get('1') == Value.scalar('x')
    assert context.get('2').is_null


def test_invoke_missing_argument(session):
    history = session.history
    with raises(ShellArgumentError) as e:
        session.execute('greet')

    assert '$1' in str(e.value)
    # no line was executed
    assert history.entries[-1].children == []


def test_invoke_aggregates_missing_arguments(session):
    with raises(ShellArgumentError) as e:
        session.execute('pair')

    assert '$1, $name' in str(e.value)


def test_invoke_missing_argument_is_not_satisfied_by_null(session):
    session.context.set('name', None)
    with raises(ShellArgumentError):
        session.execute('pair a')


def test_invoke_returns_last_line(session):
    assert session.execute('twice hi') == 'hi hi'
    assert len(session.history.entries[-1].children) == 2


def test_invoke_fails_fast(session):
    session.run('fail')
    entry = session.history.entries[-1]
    assert [child.command for child in entry.children] == ['echo start', 'zzq']
    assert not entry.ok


def test_invoke_resolves_reference_arguments(session):
    context = session.context
    context.set('who', 'world')
    assert session.execute('greet $who') == 'hello world'
    assert session.execute('greet $(echo nested)') == 'hello nested'


def test_invoke_passes_positionals_to_nested_macro(session):
    macros = session.dispatcher.macros
    macros.add('inner', '# Usage: inner <x>\necho got $1')
    macros.add('outer', 'inner $1')
    macros.add('swap', 'show $2 $1')
    macros.add('show', 'echo $1 $2')

    assert session.execute('outer hello') == 'got hello'
    assert session.execute('swap a b') == 'b a'


def test_invoke_quoted_substitution_argument(session):
    assert session.execute('greet "$(zzq)"') == 'hello $(zzq)'


def test_invoke_ignores_extra_arguments(session):
    args = ' '.join(str(i) for i in range(1, 12))
    session.execute(f'greet {args}')
    assert session.context.get('9') == Value.scalar(9)
    assert not session.context.has('10')


def test_invoke_unknown_macro(session):
    with raises(NotFoundError):
        session.dispatcher.binder.invoke('missing', [], session.context)
