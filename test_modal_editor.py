import pytest

from errors import ValidationError
from fruit_record import FruitRecord
from modal_editor import InputField, ModalEditor


def _editor(name="Apple", length="1", width="2", height="3"):
    editor = ModalEditor()
    editor.buffers[InputField.NAME] = name
    editor.buffers[InputField.LENGTH] = length
    editor.buffers[InputField.WIDTH] = width
    editor.buffers[InputField.HEIGHT] = height
    return editor


def test_field_cycle():
    assert InputField.NAME.next() is InputField.LENGTH
    assert InputField.HEIGHT.next() is InputField.NAME
    assert InputField.NAME.prev() is InputField.HEIGHT
    assert InputField.WIDTH.prev() is InputField.LENGTH


def test_new_editor_is_empty_and_focused_on_name():
    editor = ModalEditor()
    assert editor.focused_field is InputField.NAME
    assert all(editor.buffer(f) == "" for f in InputField)
    assert editor.error is None
    assert editor.target_index is None


def test_numeric_fields_drop_other_characters():
    editor = ModalEditor()
    editor.next_field()
    for ch in "1a.5-x":
        editor.insert_char(ch)
    assert editor.length == "1.5"


def test_name_field_accepts_anything():
    editor = ModalEditor()
    for ch in "Kiwi 2!":
        editor.insert_char(ch)
    assert editor.name == "Kiwi 2!"


def test_backspace_edits_focused_buffer_only():
    editor = _editor()
    editor.focused_field = InputField.WIDTH
    editor.backspace()
    editor.backspace()
    assert editor.width == ""
    assert editor.name == "Apple"


def test_accepted_character_clears_error():
    editor = _editor(name="")
    with pytest.raises(ValidationError):
        editor.validate_and_build()
    assert editor.error == "Name cannot be empty"
    editor.insert_char("A")
    assert editor.error is None


def test_from_fruit_prefills_buffers():
    editor = ModalEditor.from_fruit(FruitRecord("Lemon", 7.0, 5.5, 0.25), 3)
    assert editor.name == "Lemon"
    assert editor.length == "7"
    assert editor.width == "5.5"
    assert editor.height == "0.25"
    assert editor.target_index == 3


def test_valid_input_builds_record():
    fruit = _editor(name="  Apple ", length="1.5", width="2", height="3.25").validate_and_build()
    assert fruit == FruitRecord("Apple", 1.5, 2.0, 3.25)


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"name": "   "}, "Name cannot be empty"),
        ({"length": ""}, "Length must be a valid number"),
        ({"width": "1..2"}, "Width must be a valid number"),
        ({"height": "."}, "Height must be a valid number"),
        ({"length": "x", "height": "y"}, "Length must be a valid number"),
        ({"length": "0"}, "All dimensions must be positive"),
        ({"width": "-1"}, "All dimensions must be positive"),
        ({"height": "nan"}, "Height must be a valid number"),
    ],
)
def test_invalid_input_sets_error_and_keeps_buffers(kwargs, message):
    editor = _editor(**kwargs)
    before = dict(editor.buffers)
    with pytest.raises(ValidationError, match=message):
        editor.validate_and_build()
    assert editor.error == message
    assert editor.buffers == before
