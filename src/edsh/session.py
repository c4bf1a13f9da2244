from typing import Callable, Dict

from edsh import builtins, commands
from edsh.config import Config
from edsh.context import Context
from edsh.dispatcher import Dispatcher, Handler, Outcome
from edsh.history import History
from edsh.host import AssetStore, Host, TypeRegistry
from edsh.macro import DirectoryMacroStore, MacroStore
from edsh.selector import SelectorEngine


class Session:
    """All state of a single editor connection.

    ```py
    session = Session(host, assets=assets, types=types)
    session.run('list ^Root/*')
    ```
    """

    def __init__(self, host: Host, assets: AssetStore = None, types: TypeRegistry = None,
                 macros: MacroStore = None, config: Config = None,
                 handlers: Dict[str, Handler] = None):
        self.config = config if config is not None else Config()
        self.host = host

        if macros is None and self.config.macros_dir is not None:
            macros = DirectoryMacroStore(self.config.macros_dir)

        self.selectors = SelectorEngine(host, assets, types)
        self.context = Context(selectors=self.selectors, describe=host.name)
        self.history = History(self.config.max_history)
        self.dispatcher = Dispatcher(self.context, macros, self.history,
                                     docs_dir=self.config.docs_dir,
                                     max_depth=self.config.max_depth)
        self.context.dispatcher = self.dispatcher

        builtins.register(self.dispatcher)
        commands.register(self.dispatcher)
        for name, handler in (handlers or {}).items():
            self.register(name, handler)

    def register(self, name: str, handler: Callable):
        self.dispatcher.register(name, handler)

    def run(self, line: str) -> Outcome:
        return self.dispatcher.run(line)

    def execute(self, line: str) -> str:
        return self.dispatcher.execute(line)
