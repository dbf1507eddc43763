import math
from enum import Enum
from typing import Optional

from errors import ValidationError
from fruit_record import FruitRecord


class InputField(Enum):
    NAME = "Name"
    LENGTH = "Length"
    WIDTH = "Width"
    HEIGHT = "Height"

    def next(self) -> "InputField":
        order = list(InputField)
        return order[(order.index(self) + 1) % len(order)]

    def prev(self) -> "InputField":
        order = list(InputField)
        return order[(order.index(self) - 1) % len(order)]

    @property
    def numeric(self) -> bool:
        return self is not InputField.NAME


_NUMERIC_CHARS = set("0123456789.")


def _format_dimension(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


class ModalEditor:
    """Field buffers, focus and validation for the add/edit fruit form."""

    def __init__(self, target_index: Optional[int] = None):
        self.buffers: dict[InputField, str] = {field: "" for field in InputField}
        self.focused_field = InputField.NAME
        self.error: Optional[str] = None
        # absolute record index replaced on commit; None when adding
        self.target_index = target_index

    @classmethod
    def from_fruit(cls, fruit: FruitRecord, target_index: int) -> "ModalEditor":
        editor = cls(target_index=target_index)
        editor.buffers[InputField.NAME] = fruit.name
        editor.buffers[InputField.LENGTH] = _format_dimension(fruit.length)
        editor.buffers[InputField.WIDTH] = _format_dimension(fruit.width)
        editor.buffers[InputField.HEIGHT] = _format_dimension(fruit.height)
        return editor

    # ---------- buffers ----------
    def buffer(self, field: InputField) -> str:
        return self.buffers[field]

    @property
    def name(self) -> str:
        return self.buffers[InputField.NAME]

    @property
    def length(self) -> str:
        return self.buffers[InputField.LENGTH]

    @property
    def width(self) -> str:
        return self.buffers[InputField.WIDTH]

    @property
    def height(self) -> str:
        return self.buffers[InputField.HEIGHT]

    # ---------- editing ----------
    def next_field(self):
        self.focused_field = self.focused_field.next()

    def prev_field(self):
        self.focused_field = self.focused_field.prev()

    def insert_char(self, ch: str) -> bool:
        field = self.focused_field
        if field.numeric and ch not in _NUMERIC_CHARS:
            return False
        self.buffers[field] += ch
        self.error = None
        return True

    def backspace(self):
        field = self.focused_field
        self.buffers[field] = self.buffers[field][:-1]

    def clear_error(self):
        self.error = None

    # ---------- validation ----------
    def _fail(self, message: str):
        self.error = message
        raise ValidationError(message)

    def _parse_dimension(self, field: InputField) -> float:
        try:
            value = float(self.buffers[field])
        except ValueError:
            value = math.nan
        if not math.isfinite(value):
            self._fail(f"{field.value} must be a valid number")
        return value

    def validate_and_build(self) -> FruitRecord:
        name = self.name.strip()
        if not name:
            self._fail("Name cannot be empty")

        length = self._parse_dimension(InputField.LENGTH)
        width = self._parse_dimension(InputField.WIDTH)
        height = self._parse_dimension(InputField.HEIGHT)

        if length <= 0 or width <= 0 or height <= 0:
            self._fail("All dimensions must be positive")

        return FruitRecord(name=name, length=length, width=width, height=height)
