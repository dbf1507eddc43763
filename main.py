import sys
import os
import curses
import locale

from _version import __version__
from catalogue_store import CatalogueStore
from config_paths import LOG_PATH, ensure_config_dirs, load_config
from errors import CatalogueIOError
from logger import get_logger, resolve_level, setup_logging

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator
from app_state import AppState

USAGE = (
    "fruitcat - terminal fruit catalogue editor\n\nUsage:\n  fruitcat [path]\n  fruitcat -v\n  fruitcat -h\n"
)


def _init_logging(cfg):
    try:
        ensure_config_dirs()
        path = LOG_PATH
    except OSError:
        path = None
    setup_logging(resolve_level(cfg.get("LOG_LEVEL")), path)


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args:
        print(USAGE)
        return

    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    cfg = load_config()
    _init_logging(cfg)
    logger = get_logger("fruitcat")

    path = args[0] if args else cfg["CATALOGUE_PATH"]
    try:
        store = CatalogueStore(path)
    except CatalogueIOError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    records = store.load_or_default()
    logger.info("starting with %d fruits (%s)", len(records), path)

    def curses_main(stdscr):
        state = AppState(records, path, store)
        Orchestrator(stdscr, state, cfg).run()

    # lets get_wch decode UTF-8 input
    locale.setlocale(locale.LC_ALL, "")
    curses.wrapper(curses_main)


if __name__ == "__main__":
    main()
