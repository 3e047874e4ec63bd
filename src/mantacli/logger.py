## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import os
import sys
import logging

from .parser import Options


TRACE = 5
logging.addLevelName(TRACE, 'TRACE')

_LEVELS = {
    'trace': TRACE, 'debug': logging.DEBUG, 'info': logging.INFO,
    'warn': logging.WARNING, 'warning': logging.WARNING,
    'error': logging.ERROR, 'fatal': logging.CRITICAL, 'critical': logging.CRITICAL,
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
SOURCE_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s (%(filename)s:%(lineno)d) %(message)s"


def create_logger(name: str, stream=None) -> logging.Logger:
    """Logger for one command, writing to stderr at the level named by `LOG_LEVEL`."""
    log = logging.getLogger(name)
    if log.handlers:
        return log
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    log.addHandler(handler)
    log.propagate = False

    level_name = os.environ.get('LOG_LEVEL', 'info')
    log.setLevel(_LEVELS.get(level_name.strip().lower(), logging.INFO))
    if level_name.strip().lower() not in _LEVELS:
        log.warning("Unknown LOG_LEVEL `%s`, using `info` instead.", level_name)
    return log


def setup_logger(opts: Options, log: logging.Logger) -> None:
    verbose = opts.get('verbose') or 0
    if verbose < 1:
        return
    log.setLevel(TRACE if verbose > 1 else logging.DEBUG)
    # Verbose output also reports where each record came from.
    for handler in log.handlers:
        handler.setFormatter(logging.Formatter(SOURCE_LOG_FORMAT))
