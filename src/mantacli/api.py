## mantacli — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .errors import *
from .parser import Options, OptionParser, common_options, completion_var
from .logger import TRACE, create_logger, setup_logger
from .common import __version__, check_bin_env, usage, resolve_path
from .options import CommandSpec, build_options, parse_options
