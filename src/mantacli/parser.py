## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# mantacli — Shared option handling for the family of remote object-store commands.
#

import click
from click.shell_completion import CompletionItem, get_completion_class

from .errors import OptionsContractError


class Options(dict):
    """Parsed options; every key is also readable and writable as an attribute.

    Names of `dict` attributes (`copy`, `items`, `get`, ...) resolve to the methods, so
    `OptionParser` refuses options that would be stored under such a name.
    """

    def __getattr__(self, name: str):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value) -> None:
        self[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self[name]
        except KeyError:
            raise AttributeError(name) from None


def _split_commas(ctx: click.Context, param: click.Parameter, value: str | None) -> list[str] | None:
    if not value: return None
    return [part.strip() for part in value.split(',') if part.strip()]

def common_options() -> list[click.Option]:
    """Options understood by every command, bound to the `MANTA_*` environment where relevant."""
    return [
        click.Option(['-h', '--help'], is_flag=True, help='Print this help and exit.'),
        click.Option(['--version'], is_flag=True, help='Print version and exit.'),
        click.Option(['-v', '--verbose'], count=True, help='Verbose trace logging; repeat for trace level.'),
        click.Option(['-a', '--account'], envvar='MANTA_USER', show_envvar=True, metavar='ACCOUNT',
                     help='Account (login name).'),
        click.Option(['--user'], envvar='MANTA_SUBUSER', show_envvar=True, metavar='USER',
                     help='Account sub-user login name.'),
        click.Option(['--role'], envvar='MANTA_ROLE', show_envvar=True, metavar='ROLE,ROLE,...',
                     callback=_split_commas, help='Assume one or more roles (comma-separated).'),
        click.Option(['-k', '--key-id'], envvar='MANTA_KEY_ID', show_envvar=True, metavar='FINGERPRINT',
                     help='SSH key fingerprint.'),
        click.Option(['-u', '--url'], envvar='MANTA_URL', show_envvar=True, metavar='URL',
                     help='Object store URL.'),
        click.Option(['-i', '--insecure'], is_flag=True, envvar='MANTA_TLS_INSECURE', show_envvar=True,
                     help='Do not validate the server TLS certificate.'),
        click.Option(['--no-auth'], is_flag=True, envvar='MANTA_NO_AUTH', show_envvar=True,
                     help='Do not sign requests; no key is needed.'),
        click.Option(['-H', '--header'], multiple=True, metavar='HEADER',
                     help='HTTP header to include, as "Name: value"; repeatable.'),
        click.Option(['--completion'], is_flag=True, hidden=True, help='Print shell completion code and exit.'),
    ]


def _complete_positional(arg_types: list[str]):
    # The n-th positional uses arg_types[n]; the last type repeats for any further ones.
    def complete(ctx: click.Context, param: click.Parameter, incomplete: str) -> list[CompletionItem]:
        if not arg_types: return []
        done = len(ctx.params.get('args') or ())
        kind = arg_types[min(done, len(arg_types) - 1)]
        if kind == 'file': return [CompletionItem(incomplete, type='file')]
        if kind == 'dir': return [CompletionItem(incomplete, type='dir')]
        return []
    return complete


class OptionParser:
    """Option schema for one command: the common options, then the command's own.

    `common=False` leaves out the shared options; such a parser is only for calling `parse()`
    directly, since `build_options` needs url, account and key settings.
    """

    def __init__(self, options: list[click.Option] | None = None, *, common: bool = True):
        self.common = common
        self.options = [*(common_options() if common else []), *(options or [])]
        for opt in self.options:
            if opt.name and hasattr(Options, opt.name):
                raise OptionsContractError(f"Option `{opt.name}` would be hidden by `Options.{opt.name}`; rename it.")

    def command(self, name: str = '', arg_types: list[str] | None = None) -> click.Command:
        paths = click.Argument(['args'], nargs=-1, shell_complete=_complete_positional(list(arg_types or [])))
        return click.Command(name or None, params=[*self.options, paths], add_help_option=False)

    def parse(self, argv: list[str]) -> Options:
        cmd = self.command()
        ctx = cmd.make_context(None, list(argv))
        opts = Options(ctx.params)
        opts.args = list(ctx.params.get('args') or ())
        return opts

    def help_text(self, name: str = '') -> str:
        cmd = self.command(name)
        ctx = click.Context(cmd, info_name=name or None)
        rows = [rv for p in cmd.get_params(ctx) if (rv := p.get_help_record(ctx)) is not None]
        if not rows: return ''
        formatter = ctx.make_formatter()
        with formatter.indentation():
            formatter.write_dl(rows)
        return formatter.getvalue().rstrip()

    def completion_source(self, name: str, arg_types: list[str] | None = None, shell: str = 'bash') -> str:
        if (cls := get_completion_class(shell)) is None:
            raise click.UsageError(f"Shell `{shell}` is not supported for completion.")
        return cls(self.command(name, arg_types), {}, name, completion_var(name)).source()


def completion_var(name: str) -> str:
    """Environment variable through which the shell asks `name` for completions."""
    return f"_{name}_COMPLETE".replace('-', '_').replace('.', '_').upper()
