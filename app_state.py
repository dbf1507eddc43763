import time
from enum import Enum
from typing import Optional

from errors import RecordIndexError
from fruit_record import FruitRecord
from logger import get_logger
from modal_editor import ModalEditor

logger = get_logger(__name__)


class AppMode(Enum):
    NORMAL = "normal"
    FILTER = "filter"
    CONFIRM_DELETE = "confirm_delete"
    ADD_FRUIT = "add_fruit"
    EDIT_FRUIT = "edit_fruit"
    HELP = "help"


MODAL_MODES = (AppMode.ADD_FRUIT, AppMode.EDIT_FRUIT)


class AppState:
    def __init__(self, records, file_path=None, store=None):
        self.file_path = file_path
        self.store = store

        self.records: list[FruitRecord] = list(records or [])
        self.selected_index = 0
        self.dirty = False

        self.filter_query = ""
        self.filtered_indices: list[int] = list(range(len(self.records)))

        self.error_message: Optional[str] = None
        self.status_msg: Optional[str] = None
        self.status_msg_until = 0.0

        self._mode = AppMode.NORMAL
        self._modal: Optional[ModalEditor] = None

    # ---------- mode ----------
    @property
    def mode(self) -> AppMode:
        return self._mode

    @property
    def modal(self) -> Optional[ModalEditor]:
        return self._modal

    def enter_mode(self, mode: AppMode):
        if mode in MODAL_MODES:
            raise ValueError(f"{mode.value} requires a modal editor")
        if mode != self._mode:
            logger.debug("mode %s -> %s", self._mode.value, mode.value)
        self._mode = mode
        self._modal = None

    def open_add_modal(self) -> ModalEditor:
        self._modal = ModalEditor()
        self._mode = AppMode.ADD_FRUIT
        logger.debug("mode -> %s", self._mode.value)
        return self._modal

    def open_edit_modal(self) -> Optional[ModalEditor]:
        index = self.selected_fruit_index()
        if index is None:
            return None
        self._modal = ModalEditor.from_fruit(self.records[index], index)
        self._mode = AppMode.EDIT_FRUIT
        logger.debug("mode -> %s (record %d)", self._mode.value, index)
        return self._modal

    def close_modal(self):
        self.enter_mode(AppMode.NORMAL)

    # ---------- view ----------
    def is_filtering(self) -> bool:
        return bool(self.filter_query)

    def display_length(self) -> int:
        return len(self.filtered_indices) if self.is_filtering() else len(self.records)

    def display_fruits(self) -> list[FruitRecord]:
        if self.is_filtering():
            return [self.records[i] for i in self.filtered_indices]
        return list(self.records)

    def resolve_index(self, view_index: int) -> Optional[int]:
        """Map a position in the displayed list to an index into ``records``."""
        if view_index < 0 or view_index >= self.display_length():
            return None
        if self.is_filtering():
            return self.filtered_indices[view_index]
        return view_index

    def selected_fruit_index(self) -> Optional[int]:
        return self.resolve_index(self.selected_index)

    def selected_fruit(self) -> Optional[FruitRecord]:
        index = self.selected_fruit_index()
        return self.records[index] if index is not None else None

    # ---------- selection ----------
    def select_previous(self):
        if self.display_length() > 0 and self.selected_index > 0:
            self.selected_index -= 1

    def select_next(self):
        n = self.display_length()
        if n > 0 and self.selected_index < n - 1:
            self.selected_index += 1

    def _clamp_selection(self):
        n = self.display_length()
        self.selected_index = min(self.selected_index, max(0, n - 1))

    # ---------- filtering ----------
    def _rescan(self):
        if not self.filter_query:
            self.filtered_indices = list(range(len(self.records)))
            return
        query = self.filter_query
        self.filtered_indices = [
            i for i, fruit in enumerate(self.records) if query in fruit.name.lower()
        ]

    def update_filter(self, query: str):
        self.filter_query = query.lower()
        self._rescan()
        self.selected_index = 0

    def clear_filter(self):
        # keep the same record selected once the full list is back
        index = self.selected_fruit_index()
        self.filter_query = ""
        self._rescan()
        if index is not None:
            self.selected_index = index
        self._clamp_selection()

    # ---------- records ----------
    def _check_index(self, index: int):
        if index < 0 or index >= len(self.records):
            raise RecordIndexError("Invalid fruit index")

    def add_fruit(self, fruit: FruitRecord):
        self.records.append(fruit)
        self.dirty = True
        self._rescan()
        logger.info("added %s", fruit.name)

    def update_fruit(self, index: int, fruit: FruitRecord):
        self._check_index(index)
        self.records[index] = fruit
        self.dirty = True
        self._rescan()
        self._clamp_selection()
        logger.info("updated record %d -> %s", index, fruit.name)

    def delete_fruit(self, index: int):
        self._check_index(index)
        removed = self.records.pop(index)
        self.dirty = True
        self._rescan()
        self._clamp_selection()
        logger.info("deleted %s", removed.name)

    def mark_saved(self):
        self.dirty = False

    # ---------- messages ----------
    def set_error(self, msg: str):
        self.error_message = msg

    def clear_error(self):
        self.error_message = None

    def set_status(self, msg: str, seconds: float = 3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def current_status(self, now: Optional[float] = None) -> Optional[str]:
        now = time.time() if now is None else now
        if self.status_msg and now < self.status_msg_until:
            return self.status_msg
        return None
