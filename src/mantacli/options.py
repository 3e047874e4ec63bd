## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# mantacli — Shared option handling for the family of remote object-store commands.
#

import sys
import logging
from typing import Callable
from dataclasses import dataclass

import click

from .errors import CommandExit, OptionsContractError
from .parser import Options, OptionParser
from .logger import TRACE, setup_logger
from . import common


PATHS_HINT = 'path...'
_PARSER_METHODS = ('parse', 'help_text', 'command', 'completion_source')


@dataclass(frozen=True)
class CommandSpec:
    """How one command wants its argv parsed.

    `parse_cmd_options(opts, parser)` runs after the shared checks and may mutate `opts`;
    whatever it returns (or `opts` itself, when it returns None) is the final result.
    `arg_types` names the kind of each positional argument for shell completion.
    """
    name: str
    parser: OptionParser
    parse_cmd_options: Callable[[Options, OptionParser], Options | None]
    log: logging.Logger
    arg_types: list[str] | tuple[str, ...] | None = None


def _check_spec(spec: CommandSpec) -> None:
    if not isinstance(spec, CommandSpec):
        raise OptionsContractError(f"spec (CommandSpec) is required, got `{type(spec).__name__}`.")
    if not isinstance(spec.name, str) or not spec.name:
        raise OptionsContractError("spec.name (non-empty string) is required.")
    for method in _PARSER_METHODS:
        if not callable(getattr(spec.parser, method, None)):
            raise OptionsContractError(f"spec.parser (object with a `{method}` method) is required.")
    if not getattr(spec.parser, 'common', True):
        raise OptionsContractError("spec.parser must include the common options.")
    if spec.arg_types is not None:
        if not isinstance(spec.arg_types, (list, tuple)) or not all(isinstance(t, str) for t in spec.arg_types):
            raise OptionsContractError("spec.arg_types must be a list of strings.")
    if not callable(spec.parse_cmd_options):
        raise OptionsContractError("spec.parse_cmd_options (callable) is required.")
    if not isinstance(spec.log, logging.Logger):
        raise OptionsContractError("spec.log (logging.Logger) is required.")


def build_options(spec: CommandSpec, argv: list[str] | None = None) -> Options:
    """Parse the common command options and then the command-specific ones via `spec.parse_cmd_options`.

    Every user-facing failure, and every informational exit (help, version, completion), is raised
    as `CommandExit`; `UsageError` for the failures. Contract violations raise `OptionsContractError`.
    """
    _check_spec(spec)
    parser, log = spec.parser, spec.log
    arg_types = list(spec.arg_types) if spec.arg_types is not None else None
    common.answer_completion_request(parser, spec.name, arg_types)

    try:
        opts = parser.parse(sys.argv[1:] if argv is None else argv)
        common.check_bin_env(opts)
    except Exception as exc:
        message = exc.format_message() if isinstance(exc, click.ClickException) else str(exc)
        common.usage(parser, message or type(exc).__name__, PATHS_HINT, name=spec.name)

    setup_logger(opts, log)
    log.log(TRACE, "parsed options for %s: %r", spec.name, opts)

    if opts.get('help'):
        common.usage(parser, None, PATHS_HINT, name=spec.name)

    common.version_check_print_and_exit(opts)
    common.completion_check_print_and_exit(opts, parser, spec.name, arg_types)

    if len(opts.get('args') or ()) < 1:
        common.usage(parser, 'path required', PATHS_HINT, name=spec.name)

    opts.paths = list(opts.args)

    opts.headers = {}
    for raw in opts.get('header') or ():
        if ':' not in raw:
            common.usage(parser, 'header must be in the form of "[header]: value"', PATHS_HINT, name=spec.name)
        # Only the value is stripped; the name is kept exactly as typed.
        key, value = raw.split(':', 1)
        opts.headers[key] = value.strip()
    log.debug("%s: %d path(s), headers %r", spec.name, len(opts.paths), opts.headers)

    result = spec.parse_cmd_options(opts, parser)
    return opts if result is None else result


def parse_options(spec: CommandSpec, argv: list[str] | None = None) -> Options:
    """Process-level entry point: like `build_options`, but prints and exits instead of raising."""
    try:
        return build_options(spec, argv)
    except CommandExit as exc:
        if exc.output:
            click.echo(exc.output, err=exc.exit_code != 0)
        sys.exit(exc.exit_code)
