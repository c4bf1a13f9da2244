from argparse import ArgumentParser, RawDescriptionHelpFormatter
from cmd import Cmd
from pathlib import Path
from typing import List
import logging
import sys

from edsh import io_util
from edsh.assets import FileSystemAssetStore, MemoryAssetStore
from edsh.config import Config
from edsh.dispatcher import Outcome
from edsh.io_util import bold, log
from edsh.memory import MemoryHost
from edsh.session import Session

default_prompt = '$ '

description = 'If no positional arguments are given then an interactive subshell is started.'
epilog = f"""
--------------------------------------------------------------------------------
{bold('Selectors')}
    $var          objects stored in a variable
    @&1234        instance id
    @#Player      tag
    @@query       quick search
    ^Root/**/Cam  hierarchy path, with wildcards
    Assets/*.mat  asset path or search query
    A | B, A & B  union, intersection
    A:Rigidbody   components
    A #0..2,5     indices

{bold('Variables')}
    set $x 10
    set $objs --objects ^Root/*
    echo $(list ^Root/*)
"""


class Shell(Cmd):
    """A REPL for a Session.
    """
    prompt = default_prompt
    intro = "Type 'help' for a list of commands"

    def __init__(self, session: Session, **kwds):
        super().__init__(**kwds)
        self.session = session
        self.failed = False

    def onecmd(self, line: str) -> bool:
        if line == 'EOF':
            logging.debug('Aborting: received EOF')
            print()
            return True

        if line.strip() in ('exit', 'quit'):
            return True

        if not line.strip():
            return False

        self.show(self.session.run(line))
        return False

    def show(self, outcome: Outcome):
        if outcome.ok:
            if outcome.output:
                print(outcome.output)
            return

        self.failed = True
        log(io_util.error(outcome.error))

    def completenames(self, text, *ignored):
        return [name for name in self.session.dispatcher.names() if name.startswith(text)]

    def completedefault(self, text, line, begidx, endidx):
        context = self.session.context
        if text.startswith('$'):
            return [f'${k}' for k in context.keys() if f'${k}'.startswith(text)]
        return []


def run_command(command: str, shell: Shell, strict=False) -> bool:
    """Run a newline-separated string of commands.
    Lines that start with `#` are ignored.

    Parameters
    ----------
        strict : bool
            Stop at the first command that fails.
    """
    ok = True
    for line in command.splitlines():
        if not line.strip() or line.strip().startswith('#'):
            continue

        outcome = shell.session.run(line)
        shell.show(outcome)
        if not outcome.ok:
            ok = False
            if strict:
                break

    return ok


def run_interactively(shell: Shell):
    while True:
        try:
            shell.cmdloop()
            return
        except KeyboardInterrupt:
            print('\nKeyboardInterrupt')
            shell.intro = ''


def add_cli_args(parser: ArgumentParser):
    parser.add_argument('cmd', nargs='*',
                        help='A newline-separated list of commands')
    parser.add_argument('-f', '--file',
                        help='Read and run FILE as a list of commands')
    parser.add_argument('--macros',
                        help='Directory with .macro files')
    parser.add_argument('--docs',
                        help='Directory with markdown documentation per command')
    parser.add_argument('--scene', action='append', default=[],
                        help='Load a JSON scene description')
    parser.add_argument('--assets',
                        help='Use the files in ASSETS as asset store')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase verbosity')


def build_session(args, config: Config = None) -> Session:
    if config is None:
        config = Config.from_env()

    if args.macros:
        config.macros_dir = Path(args.macros)
    if args.docs:
        config.docs_dir = Path(args.docs)

    host = MemoryHost()
    for filename in args.scene:
        host.scenes.extend(MemoryHost.from_file(filename).scenes)

    assets = FileSystemAssetStore(args.assets) if args.assets else MemoryAssetStore()
    return Session(host, assets, host.type_registry(), config=config)


def main(argv: List[str] = None) -> int:
    parser = ArgumentParser(description=description, epilog=epilog,
                            formatter_class=RawDescriptionHelpFormatter)
    add_cli_args(parser)
    args = parser.parse_args(argv)

    io_util.set_verbosity(args.verbose)
    config = Config.from_env()
    io_util.colored_output = config.colored_output
    logging.info(f'args: {args}')

    shell = Shell(build_session(args, config))

    if args.cmd or args.file is not None:
        # compile mode
        ok = True
        if args.file is not None:
            ok = run_command(Path(args.file).read_text(), shell, strict=True)

        if ok and args.cmd:
            ok = run_command(' '.join(args.cmd), shell, strict=True)

        return 0 if ok else 1

    run_interactively(shell)
    return 0


if __name__ == '__main__':
    sys.exit(main())
