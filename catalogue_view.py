# ~/Apps/fruitcat/catalogue_view.py
import curses

from app_state import AppMode
from modal_editor import InputField
from shortcut_help_handler import ShortcutHelpHandler
from status_bar import render_status


def list_title(state):
    if state.is_filtering():
        return (
            f"Fruits (filtered: {state.display_length()}/{len(state.records)})"
            " [/] search [a] add [e] edit [d] delete [Esc] clear"
        )
    return "Fruits [j/k] navigate [a] add [e] edit [d] delete [/] search [?] help"


def detail_lines(state):
    if not state.records:
        return "Details", ["No fruits available"]
    fruit = state.selected_fruit()
    if fruit is None:
        return "Details", ["Select a fruit"]
    lines = [
        f"Name: {fruit.name}",
        "",
        "Dimensions:",
        f"  Length: {fruit.length:g}",
        f"  Width : {fruit.width:g}",
        f"  Height: {fruit.height:g}",
        "",
        f"Volume: {fruit.volume:.2f}",
    ]
    return f"Details [{state.selected_index + 1}]", lines


def overlay_kind(state):
    """Which overlay to draw on top of the panes, highest priority first."""
    if state.error_message:
        return "error"
    if state.mode == AppMode.CONFIRM_DELETE:
        return "confirm_delete"
    if state.mode == AppMode.FILTER:
        return "filter"
    if state.mode in (AppMode.ADD_FRUIT, AppMode.EDIT_FRUIT) and state.modal:
        return "modal"
    if state.mode == AppMode.HELP:
        return "help"
    return None


def status_context(state):
    return {
        "status_msg": state.current_status(),
        "mode": state.mode.value,
        "file_path": state.file_path,
        "shown": state.display_length(),
        "total": len(state.records),
        "dirty": state.dirty,
        "filter_query": state.filter_query,
    }


class CatalogueView:
    PAIR_SELECTED = 1
    PAIR_FOCUS = 2
    PAIR_ERROR = 3

    def __init__(self, layout):
        self.layout = layout
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_SELECTED, curses.COLOR_BLACK, curses.COLOR_WHITE)
            curses.init_pair(self.PAIR_FOCUS, curses.COLOR_YELLOW, -1)
            curses.init_pair(self.PAIR_ERROR, curses.COLOR_RED, -1)
        except curses.error:
            pass
        self.list_offset = 0

    # ---------- helpers ----------
    @staticmethod
    def _put(win, y, x, text, attr=0):
        h, w = win.getmaxyx()
        if y < 0 or y >= h or x >= w:
            return
        try:
            win.addnstr(y, x, text, max(0, w - x - 1), attr)
        except curses.error:
            pass

    def _boxed(self, win, title):
        win.erase()
        try:
            win.box()
        except curses.error:
            pass
        if title:
            self._put(win, 0, 2, f" {title} ")

    def _popup(self, pct_w, pct_h, title, min_h=3):
        h, w, y, x = self.layout.centered(pct_w, pct_h, min_h=min_h)
        win = curses.newwin(h, w, y, x)
        win.leaveok(True)
        self._boxed(win, title)
        return win

    # ---------- panes ----------
    def draw(self, state):
        self._draw_list(state)
        self._draw_details(state)
        self._draw_status(state)

        kind = overlay_kind(state)
        if kind == "error":
            self._draw_error(state.error_message)
        elif kind == "confirm_delete":
            self._draw_confirm_delete(state)
        elif kind == "filter":
            self._draw_filter(state)
        elif kind == "modal":
            self._draw_modal(state)
        elif kind == "help":
            self._draw_help()
        curses.doupdate()

    def _draw_list(self, state):
        win = self.layout.list_win
        self._boxed(win, list_title(state))
        h, w = win.getmaxyx()
        rows = max(1, h - 2)

        if state.selected_index < self.list_offset:
            self.list_offset = state.selected_index
        elif state.selected_index >= self.list_offset + rows:
            self.list_offset = state.selected_index - rows + 1

        fruits = state.display_fruits()
        for i, fruit in enumerate(fruits[self.list_offset : self.list_offset + rows]):
            idx = self.list_offset + i
            selected = idx == state.selected_index
            prefix = ">> " if selected else "   "
            attr = curses.color_pair(self.PAIR_SELECTED) if selected else 0
            self._put(win, 1 + i, 1, f"{prefix}{fruit.name}".ljust(w - 3), attr)
        win.noutrefresh()

    def _draw_details(self, state):
        win = self.layout.details_win
        title, lines = detail_lines(state)
        self._boxed(win, title)
        for i, line in enumerate(lines):
            self._put(win, 1 + i, 2, line)
        win.noutrefresh()

    def _draw_status(self, state):
        win = self.layout.status_win
        win.erase()
        _, w = win.getmaxyx()
        self._put(win, 0, 0, render_status(status_context(state), w), curses.A_REVERSE)
        win.noutrefresh()

    # ---------- overlays ----------
    def _draw_error(self, message):
        win = self._popup(70, 20, "Error", min_h=5)
        h, _ = win.getmaxyx()
        self._put(win, h // 2, 2, message, curses.color_pair(self.PAIR_ERROR))
        win.noutrefresh()

    def _draw_confirm_delete(self, state):
        win = self._popup(50, 15, "Confirm Delete", min_h=6)
        fruit = state.selected_fruit()
        what = f"'{fruit.name}'" if fruit else "this fruit"
        self._put(win, 1, 2, f"Are you sure you want to delete {what}?")
        self._put(win, 3, 2, "[Y]es  [N]o")
        win.noutrefresh()

    def _draw_filter(self, state):
        win = self._popup(60, 10, "Search")
        self._put(win, 1, 2, f"> {state.filter_query}")
        win.noutrefresh()

    def _draw_modal(self, state):
        modal = state.modal
        title = "Add Fruit" if state.mode == AppMode.ADD_FRUIT else "Edit Fruit"
        win = self._popup(60, 50, title, min_h=len(InputField) * 2 + 6)
        focus_attr = curses.color_pair(self.PAIR_FOCUS) | curses.A_BOLD
        row = 2
        for field in InputField:
            focused = field == modal.focused_field
            marker = ">" if focused else " "
            text = f"{marker} {field.value:<7} {modal.buffer(field)}"
            self._put(win, row, 2, text, focus_attr if focused else 0)
            row += 2
        self._put(win, row, 2, "[Tab] next  [S-Tab] prev  [Enter] save  [Esc] cancel")
        if modal.error:
            self._put(win, row + 2, 2, modal.error, curses.color_pair(self.PAIR_ERROR))
        win.noutrefresh()

    def _draw_help(self):
        lines = ShortcutHelpHandler.get_lines()
        win = self._popup(60, 80, "Help", min_h=len(lines) + 2)
        for i, line in enumerate(lines):
            self._put(win, 1 + i, 2, line)
        win.noutrefresh()
