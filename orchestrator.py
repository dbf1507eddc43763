# ~/Apps/fruitcat/orchestrator.py
import curses
import os

from catalogue_view import CatalogueView
from errors import CatalogueIOError
from event_dispatcher import QUIT, SAVE, handle_key
from logger import get_logger
from screen_layout import ScreenLayout

logger = get_logger(__name__)


def save_catalogue(state, store, status_seconds=3) -> bool:
    if store is None:
        state.set_error("Failed to save: no catalogue file")
        return False
    try:
        store.save(state.records)
    except CatalogueIOError as e:
        state.set_error(f"Failed to save: {e}")
        return False
    state.mark_saved()
    fname = os.path.basename(store.path) if store.path else ""
    state.set_status(f"Saved {fname}" if fname else "Saved", status_seconds)
    return True


class Orchestrator:
    def __init__(self, stdscr, app_state, config=None):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        # wake periodically so timed status messages expire on screen
        self.stdscr.timeout(500)

        self.state = app_state
        self.config = config or {}
        self.status_seconds = self.config.get("STATUS_SECONDS", 3)
        self._build_view()

    def _build_view(self):
        self.layout = ScreenLayout(self.stdscr)
        self.view = CatalogueView(self.layout)

    def redraw(self):
        self.view.draw(self.state)

    def _read_key(self):
        # get_wch decodes multibyte input; it raises on timeout instead of -1
        try:
            return self.stdscr.get_wch()
        except curses.error:
            return -1

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self._read_key()

            if ch == curses.KEY_RESIZE:
                self.stdscr.clear()
                self.stdscr.refresh()
                self._build_view()
                self.redraw()
                continue

            outcome = handle_key(self.state, ch)
            if outcome == QUIT:
                logger.info("quit")
                break
            if outcome == SAVE:
                save_catalogue(self.state, self.state.store, self.status_seconds)

            self.redraw()
