## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# mantacli — Helpers shared by every command: environment checks, usage, version and completion.
#

import os
import sys
import posixpath
from typing import NoReturn
from importlib.metadata import version, PackageNotFoundError

from click.shell_completion import shell_complete

from .errors import BinEnvError, CommandExit, UsageError
from .parser import Options, OptionParser, completion_var


try:
    __version__ = version('mantacli')
except PackageNotFoundError:
    __version__ = '0.0.0+unknown'


def check_bin_env(opts: Options) -> None:
    """Reject options that cannot reach the store: url, account and (unless signing is off) a key."""
    if not opts.get('url'):
        raise BinEnvError("url is a required argument")
    if not opts.get('account'):
        raise BinEnvError("account is a required argument")
    if not opts.get('key_id') and not opts.get('no_auth'):
        raise BinEnvError("key-id is a required argument")


def usage(parser: OptionParser, message: str | None, hint: str = '', *, name: str | None = None) -> NoReturn:
    prog = name or os.path.basename(sys.argv[0])
    text = f"usage: {prog} [OPTIONS] {hint}".rstrip() + "\noptions:\n" + parser.help_text(prog)
    if message:
        raise UsageError(message, text)
    raise CommandExit(text)


def version_check_print_and_exit(opts: Options) -> None:
    if opts.get('version'):
        raise CommandExit(__version__)


def completion_check_print_and_exit(opts: Options, parser: OptionParser, name: str, arg_types: list[str] | None) -> None:
    if opts.get('completion'):
        raise CommandExit(parser.completion_source(name, arg_types))


def answer_completion_request(parser: OptionParser, name: str, arg_types: list[str] | None) -> None:
    """Serve the callback made by an installed completion script, e.g. `_MLS_COMPLETE=bash_complete`."""
    var = completion_var(name)
    if not (instruction := os.environ.get(var)):
        return
    exit_code = shell_complete(parser.command(name, arg_types), {}, name, var, instruction)
    raise CommandExit(exit_code=exit_code)


def resolve_path(path: str, account: str | None) -> str:
    """Expand a leading `~~` to the account's root and normalize the result."""
    if account and (path == '~~' or path.startswith('~~/')):
        path = '/' + account + path[2:]
    resolved = posixpath.normpath(path)
    # normpath keeps a leading `//`.
    return '/' + resolved.lstrip('/') if resolved.startswith('//') else resolved
