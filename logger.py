"""File logging for greg.

The terminal belongs to curses while the editor runs, so records only ever go
to a log file under the config directory.
"""
import logging

import config_paths

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level="WARNING", log_path=None):
    log_path = log_path or config_paths.LOG_PATH
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(numeric_level)
    for handler in list(root.handlers):
        if getattr(handler, "_greg_handler", False):
            root.removeHandler(handler)
            handler.close()

    try:
        handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler._greg_handler = True
    root.addHandler(handler)
    return handler
