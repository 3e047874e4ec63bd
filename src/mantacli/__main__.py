## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# mantacli — `mresolve`, resolve object paths against the configured account.
#

import json

import click

from .parser import Options, OptionParser
from .logger import create_logger
from .common import resolve_path
from .options import CommandSpec, parse_options


NAME = 'mresolve'


def _parse_cmd_options(opts: Options, parser: OptionParser) -> Options:
    opts.paths = [resolve_path(p, opts.account) for p in opts.paths]
    return opts


def make_spec() -> CommandSpec:
    parser = OptionParser([
        click.Option(['-j', '--json'], is_flag=True, help='Print resolved options as a JSON object.'),
    ])
    return CommandSpec(name=NAME, parser=parser, parse_cmd_options=_parse_cmd_options,
                       log=create_logger(NAME), arg_types=['mpath'])


def main(argv: list[str] | None = None) -> None:
    opts = parse_options(make_spec(), argv)
    if opts.json:
        summary = {k: opts.get(k) for k in ('paths', 'headers', 'account', 'url')}
        click.echo(json.dumps(summary, indent=2, sort_keys=True))
    else:
        for path in opts.paths:
            click.echo(path)


if __name__ == "__main__":
    main()
