import unittest

from app_state import AppMode, AppState
from errors import RecordIndexError, ValidationError
from fruit_record import FruitRecord


def _fruits(*names):
    return [FruitRecord(n, 1.0, 2.0, 3.0) for n in names]


class SelectionTests(unittest.TestCase):
    def test_next_then_previous_restores_index(self):
        state = AppState(_fruits("Apple", "Banana", "Cherry"))
        state.selected_index = 1
        state.select_next()
        state.select_previous()
        self.assertEqual(state.selected_index, 1)

    def test_selection_clamps_at_boundaries(self):
        state = AppState(_fruits("Apple", "Banana"))
        state.select_previous()
        self.assertEqual(state.selected_index, 0)
        state.select_next()
        state.select_next()
        self.assertEqual(state.selected_index, 1)

    def test_selection_noop_when_empty(self):
        state = AppState([])
        state.select_next()
        state.select_previous()
        self.assertEqual(state.selected_index, 0)
        self.assertIsNone(state.selected_fruit())
        self.assertIsNone(state.selected_fruit_index())

    def test_selection_uses_filtered_length(self):
        state = AppState(_fruits("Apple", "Banana", "Pineapple", "Cherry"))
        state.update_filter("apple")
        state.select_next()
        state.select_next()
        self.assertEqual(state.selected_index, 1)
        self.assertEqual(state.selected_fruit().name, "Pineapple")
        self.assertEqual(state.selected_fruit_index(), 2)


class FilterTests(unittest.TestCase):
    def test_filter_is_case_insensitive_and_ordered(self):
        state = AppState(_fruits("Apple", "banana", "PINEAPPLE", "Grape"))
        state.selected_index = 2
        state.update_filter("ApP")
        self.assertEqual(state.filter_query, "app")
        self.assertEqual(state.filtered_indices, [0, 2])
        self.assertEqual([f.name for f in state.display_fruits()], ["Apple", "PINEAPPLE"])
        self.assertEqual(state.selected_index, 0)

    def test_filter_without_matches(self):
        state = AppState(_fruits("Apple", "Banana"))
        state.update_filter("kiwi")
        self.assertEqual(state.display_fruits(), [])
        self.assertIsNone(state.selected_fruit())

    def test_clear_filter_restores_full_list(self):
        fruits = _fruits("Apple", "Banana", "Cherry")
        state = AppState(fruits)
        state.update_filter("an")
        state.clear_filter()
        self.assertFalse(state.is_filtering())
        self.assertEqual(state.filtered_indices, [0, 1, 2])
        self.assertEqual(state.display_fruits(), fruits)

    def test_clear_filter_keeps_selected_record(self):
        state = AppState(_fruits("Apple", "Banana", "Pineapple", "Cherry"))
        state.update_filter("apple")
        state.select_next()
        state.clear_filter()
        self.assertEqual(state.selected_index, 2)
        self.assertEqual(state.selected_fruit().name, "Pineapple")

    def test_clear_filter_without_matches_selects_first(self):
        state = AppState(_fruits("Apple", "Banana"))
        state.update_filter("kiwi")
        state.clear_filter()
        self.assertEqual(state.selected_index, 0)

    def test_filter_follows_record_changes(self):
        state = AppState(_fruits("Apple", "Banana"))
        state.update_filter("an")
        state.add_fruit(FruitRecord("Mango", 1, 1, 1))
        self.assertEqual(state.filtered_indices, [1, 2])
        state.update_fruit(1, FruitRecord("Kiwi", 1, 1, 1))
        self.assertEqual(state.filtered_indices, [2])
        self.assertEqual(state.selected_index, 0)


class RecordTests(unittest.TestCase):
    def test_add_then_delete_restores_records(self):
        fruits = _fruits("Apple", "Banana")
        state = AppState(fruits)
        state.add_fruit(FruitRecord("Cherry", 1, 1, 1))
        self.assertTrue(state.dirty)
        state.delete_fruit(2)
        self.assertEqual(state.records, fruits)
        self.assertTrue(state.dirty)

    def test_update_replaces_in_place(self):
        state = AppState(_fruits("Apple", "Banana"))
        kiwi = FruitRecord("Kiwi", 4, 5, 6)
        state.update_fruit(1, kiwi)
        self.assertEqual(state.records[1], kiwi)
        self.assertTrue(state.dirty)

    def test_out_of_range_index_fails_without_mutation(self):
        fruits = _fruits("Apple")
        state = AppState(fruits)
        with self.assertRaises(RecordIndexError):
            state.update_fruit(1, FruitRecord("Kiwi", 1, 1, 1))
        with self.assertRaises(ValidationError):
            state.delete_fruit(5)
        with self.assertRaises(RecordIndexError):
            state.delete_fruit(-1)
        self.assertEqual(state.records, fruits)
        self.assertFalse(state.dirty)

    def test_delete_last_clamps_selection(self):
        state = AppState(_fruits("Apple", "Banana", "Cherry"))
        state.selected_index = 2
        state.delete_fruit(2)
        self.assertEqual(state.selected_index, 1)
        state.delete_fruit(1)
        state.delete_fruit(0)
        self.assertEqual(state.selected_index, 0)
        self.assertEqual(state.records, [])


class ModeTests(unittest.TestCase):
    def test_modal_present_only_in_add_and_edit(self):
        state = AppState(_fruits("Apple"))
        self.assertEqual(state.mode, AppMode.NORMAL)
        self.assertIsNone(state.modal)

        state.open_add_modal()
        self.assertEqual(state.mode, AppMode.ADD_FRUIT)
        self.assertIsNotNone(state.modal)

        state.enter_mode(AppMode.HELP)
        self.assertIsNone(state.modal)

        state.open_edit_modal()
        self.assertEqual(state.mode, AppMode.EDIT_FRUIT)
        self.assertEqual(state.modal.name, "Apple")
        self.assertEqual(state.modal.target_index, 0)

        state.close_modal()
        self.assertEqual(state.mode, AppMode.NORMAL)
        self.assertIsNone(state.modal)

    def test_enter_mode_rejects_modal_modes(self):
        state = AppState([])
        with self.assertRaises(ValueError):
            state.enter_mode(AppMode.EDIT_FRUIT)

    def test_edit_without_selection_stays_normal(self):
        state = AppState([])
        self.assertIsNone(state.open_edit_modal())
        self.assertEqual(state.mode, AppMode.NORMAL)


class MessageTests(unittest.TestCase):
    def test_error_slot(self):
        state = AppState([])
        state.set_error("boom")
        self.assertEqual(state.error_message, "boom")
        state.clear_error()
        self.assertIsNone(state.error_message)

    def test_status_expires(self):
        state = AppState([])
        state.set_status("Saved", 3)
        until = state.status_msg_until
        self.assertEqual(state.current_status(until - 1), "Saved")
        self.assertIsNone(state.current_status(until + 1))


if __name__ == "__main__":
    unittest.main()
