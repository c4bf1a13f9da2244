class ShellError(RuntimeError):
    kind = 'error'


class MalformedInputError(ShellError):
    kind = 'malformed-input'


class UnknownCommandError(ShellError):
    kind = 'unknown-command'


class NotFoundError(ShellError):
    kind = 'not-found'


class ShellArgumentError(ShellError):
    """Invalid arguments for a command.
    The dispatcher attaches documentation to `help` before the error is shown.
    """
    kind = 'argument-error'

    def __init__(self, *args, help: str = None):
        super().__init__(*args)
        self.help = help


class ShellReferenceError(ShellArgumentError):
    """A variable is absent or holds the wrong kind of value.
    """
    kind = 'reference-error'


class RecursionDepthError(ShellError):
    kind = 'recursion-depth'


class SelectorSyntaxError(ShellError):
    kind = 'selector-syntax'
