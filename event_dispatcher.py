# ~/Apps/fruitcat/event_dispatcher.py
import curses

from app_state import AppMode, AppState
from errors import ValidationError
from logger import get_logger

logger = get_logger(__name__)

# character keys arrive as one-char strings, curses function keys as ints
KEY_ESC = "\x1b"
KEY_TAB = "\t"
KEY_CTRL_S = "\x13"
KEY_CTRL_X = "\x18"
ENTER_KEYS = ("\n", "\r", curses.KEY_ENTER)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, "\x7f", "\b")
SHIFT_TAB_KEYS = (curses.KEY_BTAB,)

QUIT = "quit"
SAVE = "save"

UNSAVED_CHANGES_MSG = (
    "Unsaved changes! Press Ctrl+S to save, q to dismiss, or Ctrl+X to discard and quit"
)


def _normalize_key(ch):
    """Accept getch() ints and get_wch() strings alike."""
    if isinstance(ch, int) and 0 <= ch < 256:
        return chr(ch)
    return ch


def _is_printable(key) -> bool:
    return isinstance(key, str) and len(key) == 1 and key.isprintable()


def handle_key(state: AppState, ch):
    """Apply one key press to ``state``.

    Returns ``"quit"`` when the caller should exit, ``"save"`` when it
    should persist the catalogue, else ``None``.
    """
    if ch == -1:
        return None
    key = _normalize_key(ch)

    mode = state.mode
    if mode == AppMode.NORMAL:
        return _handle_normal(state, key)
    if mode == AppMode.FILTER:
        _handle_filter(state, key)
    elif mode == AppMode.CONFIRM_DELETE:
        _handle_confirm_delete(state, key)
    elif mode in (AppMode.ADD_FRUIT, AppMode.EDIT_FRUIT):
        _handle_modal(state, key)
    elif mode == AppMode.HELP:
        _handle_help(state, key)
    return None


# ---------- normal ----------
def _handle_quit(state: AppState):
    if state.error_message is not None:
        # dismissing the message counts as the key press
        state.clear_error()
        return None
    if state.dirty:
        state.set_error(UNSAVED_CHANGES_MSG)
        return None
    return QUIT


def _handle_normal(state: AppState, key):
    if key in ("q", KEY_ESC):
        return _handle_quit(state)

    if key == KEY_CTRL_X:
        if state.error_message == UNSAVED_CHANGES_MSG:
            logger.warning("quitting with unsaved changes")
            return QUIT
        return _handle_quit(state)

    if key == KEY_CTRL_S:
        return SAVE

    if key in (curses.KEY_UP, "k"):
        state.select_previous()
    elif key in (curses.KEY_DOWN, "j"):
        state.select_next()
    elif key == "/":
        state.enter_mode(AppMode.FILTER)
    elif key == "a":
        state.open_add_modal()
    elif key == "e":
        state.open_edit_modal()
    elif key == "d":
        state.enter_mode(AppMode.CONFIRM_DELETE)
    elif key == "?":
        state.enter_mode(AppMode.HELP)
    return None


# ---------- filter ----------
def _handle_filter(state: AppState, key):
    if key == KEY_ESC:
        state.clear_filter()
        state.enter_mode(AppMode.NORMAL)
    elif key in ENTER_KEYS:
        state.enter_mode(AppMode.NORMAL)
    elif key in BACKSPACE_KEYS:
        state.update_filter(state.filter_query[:-1])
    elif _is_printable(key):
        state.update_filter(state.filter_query + key)


# ---------- confirm delete ----------
def _handle_confirm_delete(state: AppState, key):
    if key == "y":
        index = state.selected_fruit_index()
        state.clear_error()
        if index is not None:
            try:
                state.delete_fruit(index)
            except ValidationError as exc:
                state.set_error(str(exc))
        state.enter_mode(AppMode.NORMAL)
    elif key in ("n", KEY_ESC):
        state.clear_error()
        state.enter_mode(AppMode.NORMAL)


# ---------- add / edit ----------
def _commit_modal(state: AppState):
    modal = state.modal
    try:
        fruit = modal.validate_and_build()
        if state.mode == AppMode.ADD_FRUIT:
            state.add_fruit(fruit)
        else:
            state.update_fruit(modal.target_index, fruit)
    except ValidationError as exc:
        modal.error = str(exc)
        return
    state.close_modal()


def _handle_modal(state: AppState, key):
    modal = state.modal
    if key in (KEY_ESC, "q"):
        state.close_modal()
    elif key == KEY_TAB:
        modal.next_field()
    elif key in SHIFT_TAB_KEYS:
        modal.prev_field()
    elif key in ENTER_KEYS:
        _commit_modal(state)
    elif key in BACKSPACE_KEYS:
        modal.backspace()
    elif _is_printable(key):
        modal.insert_char(key)


# ---------- help ----------
def _handle_help(state: AppState, key):
    if key in (KEY_ESC, "q", "?") or key in ENTER_KEYS:
        state.enter_mode(AppMode.NORMAL)
