# logger.py
import logging
import sys
import os

import colorlog

from .. import constants

CONSOLE_FORMAT = '[%(levelname).4s] %(name)s: %(message)s'
COLOR_FORMAT = '%(log_color)s[%(levelname).4s]%(reset)s %(cyan)s%(name)s%(reset)s: %(message)s'
FILE_FORMAT = '%(asctime)s [%(levelname).4s] %(name)s: %(message)s'

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}


def setup_logger(debug: bool = False, module_levels: dict | None = None, log_file: str | None = None):
    """
    Configure the root logger for an application embedding bluecache.

    Handlers are attached once; later calls only adjust levels.

    Args:
        debug: Enable debug logging level
        module_levels: Per-module log levels, e.g. {"proxy": "DEBUG"}
        log_file: Optional path of a log file to write alongside the console
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    if not root.handlers:
        root.addHandler(_console_handler())
        if log_file:
            _attach_file_handler(root, log_file)

    _apply_module_levels(module_levels)


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    # NO_COLOR: https://no-color.org/
    if sys.stderr.isatty() and not os.environ.get("NO_COLOR"):
        handler.setFormatter(colorlog.ColoredFormatter(COLOR_FORMAT, log_colors=LOG_COLORS, reset=True))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _attach_file_handler(root: logging.Logger, log_file: str) -> None:
    try:
        handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    except OSError as e:
        logging.error(f"Failed to create log file handler for '{log_file}': {e}")
        return
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    root.addHandler(handler)
    logging.info(f"Logging to file: {log_file}")


def _apply_module_levels(module_levels: dict | None):
    """Apply per-module logger levels from mapping or env var BLUECACHE_LOG_LEVELS.

    module_levels format: {"bluecache.cache.proxy": "DEBUG", "bluecache.abstractions": "INFO"}
    Env var example: BLUECACHE_LOG_LEVELS="proxy=DEBUG,abstractions=INFO"
    """
    if module_levels is None:
        module_levels = parse_module_levels(os.environ.get(constants.LOG_LEVELS_ENV, ""))

    for name, lvl_str in module_levels.items():
        lvl = lvl_str.upper()
        if lvl not in constants.VALID_LOG_LEVELS:
            logging.getLogger(__name__).warning(f"Ignoring invalid log level '{lvl_str}' for '{name}'")
            continue
        logging.getLogger(_normalize_module_name(name)).setLevel(getattr(logging, lvl))


def parse_module_levels(raw: str) -> dict:
    """Parse a 'name=LEVEL,name=LEVEL' string into a mapping, skipping malformed pairs."""
    module_levels = {}
    for pair in raw.split(','):
        pair = pair.strip()
        if not pair or '=' not in pair:
            continue
        name, lvl = pair.split('=', 1)
        module_levels[name.strip()] = lvl.strip().upper()
    return module_levels


def _normalize_module_name(name: str) -> str:
    """Expand an alias, strip a trailing '.*', and prefix known bluecache top modules."""
    name = constants.LOG_ALIAS_MAP.get(name, name).removesuffix('.*')
    if name.split('.', 1)[0] in constants.KNOWN_TOP_MODULES:
        return f'bluecache.{name}'
    return name
