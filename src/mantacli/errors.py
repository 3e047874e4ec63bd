## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class MantaCliError(Exception):
    """Base class for all errors raised by mantacli."""
    pass

class OptionsContractError(MantaCliError, TypeError):
    """Caller handed over a malformed `CommandSpec`; a bug, not user input."""
    pass

class BinEnvError(MantaCliError, ValueError):
    pass


class CommandExit(MantaCliError):
    """Request to terminate the process once `output` has been printed."""
    def __init__(self, output: str = "", *, exit_code: int = 0):
        super().__init__(output)
        self.output = output
        self.exit_code = exit_code

class UsageError(CommandExit):
    def __init__(self, message: str, usage_text: str = ""):
        super().__init__(f"{message}\n{usage_text}" if usage_text else message, exit_code=1)
        self.message = message
        self.usage_text = usage_text

    def __str__(self) -> str:
        return self.message
