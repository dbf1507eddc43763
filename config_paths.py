import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "fruitcat")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "fruitcat.log")

# default settings
CATALOGUE_PATH_DEFAULT = "fruits.json"
STATUS_SECONDS_DEFAULT = 3
LOG_LEVEL_DEFAULT = "INFO"


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def load_config():
    cfg = {
        "CATALOGUE_PATH": CATALOGUE_PATH_DEFAULT,
        "STATUS_SECONDS": STATUS_SECONDS_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return cfg

    if not isinstance(data, dict):
        return cfg

    path = data.get("catalogue_path")
    if isinstance(path, str) and path.strip():
        cfg["CATALOGUE_PATH"] = os.path.expanduser(path.strip())

    seconds = data.get("status_seconds")
    if isinstance(seconds, (int, float)) and not isinstance(seconds, bool) and seconds > 0:
        cfg["STATUS_SECONDS"] = seconds

    level = data.get("log_level")
    if isinstance(level, str) and level.strip():
        cfg["LOG_LEVEL"] = level.strip().upper()

    return cfg
