import json
import logging
import os

logger = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "greg")
HISTORY_PATH = os.path.join(CONFIG_DIR, "history.log")
LOG_PATH = os.path.join(CONFIG_DIR, "greg.log")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
COLUMN_WIDTH_DEFAULT = (3, 20)
HEADERS_DEFAULT = 0
UNDO_MAX_DEPTH_DEFAULT = 50
LOG_LEVEL_DEFAULT = "WARNING"


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _positive_int(value):
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def load_config():
    cfg = {
        "COLUMN_WIDTH": COLUMN_WIDTH_DEFAULT,
        "HEADERS": HEADERS_DEFAULT,
        "UNDO_MAX_DEPTH": UNDO_MAX_DEPTH_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_JSON, exc)
        return cfg
    if not isinstance(data, dict):
        return cfg

    width = data.get("column_width")
    if (
        isinstance(width, list)
        and len(width) == 2
        and all(_positive_int(v) for v in width)
        and width[0] <= width[1]
    ):
        cfg["COLUMN_WIDTH"] = (width[0], width[1])

    headers = data.get("headers")
    if isinstance(headers, int) and not isinstance(headers, bool) and headers >= 0:
        cfg["HEADERS"] = headers

    depth = data.get("undo_max_depth")
    if _positive_int(depth):
        cfg["UNDO_MAX_DEPTH"] = depth

    level = data.get("log_level")
    if isinstance(level, str) and level.strip():
        cfg["LOG_LEVEL"] = level.strip().upper()

    return cfg
