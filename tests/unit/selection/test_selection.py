"""Tests for single/multiple selection policy.

Covers insertion-order toggling, collapse-to-None, disabled immutability,
and defensive value normalization.
"""

from __future__ import annotations

import itertools
import unittest

from selectdropdown.options import Option
from selectdropdown.selection import is_selected, normalize_value, remove, selected_options, toggle

ONE = Option(id=1, label="One")
TWO = Option(id=2, label="Two")
THREE = Option(id=3, label="Three")
LOCKED = Option(id=9, label="Locked", disabled=True)


class SingleModeTests(unittest.TestCase):
    def test_toggle_replaces_value_and_requests_close(self) -> None:
        result = toggle(ONE, False, TWO)
        self.assertEqual(result.value, TWO)
        self.assertTrue(result.changed)
        self.assertTrue(result.close_requested)
        self.assertTrue(result.clear_query_requested)

    def test_reselecting_same_option_replaces_value_and_closes(self) -> None:
        relabelled = Option(id=1, label="One (renamed)")
        result = toggle(ONE, False, relabelled)
        self.assertIs(result.value, relabelled)
        self.assertTrue(result.changed)
        self.assertTrue(result.close_requested)
        self.assertTrue(toggle(ONE, False, ONE).changed)

    def test_remove_always_clears(self) -> None:
        result = remove(ONE, False, TWO)
        self.assertIsNone(result.value)
        self.assertTrue(result.changed)
        self.assertFalse(remove(None, False, ONE).changed)


class MultipleModeTests(unittest.TestCase):
    def test_toggle_appends_in_selection_order(self) -> None:
        value = toggle(None, True, THREE).value
        value = toggle(value, True, ONE).value
        self.assertEqual(value, (THREE, ONE))
        self.assertFalse(toggle(value, True, TWO).close_requested)

    def test_reselecting_after_removal_goes_last(self) -> None:
        value = (ONE, TWO)
        value = toggle(value, True, ONE).value
        value = toggle(value, True, ONE).value
        self.assertEqual(value, (TWO, ONE))

    def test_removing_last_selection_collapses_to_none(self) -> None:
        self.assertIsNone(toggle((ONE,), True, ONE).value)
        self.assertIsNone(remove((ONE,), True, ONE).value)

    def test_select_select_remove_keeps_remaining_order(self) -> None:
        value = toggle(None, True, ONE).value
        value = toggle(value, True, TWO).value
        result = remove(value, True, ONE)
        self.assertEqual(result.value, (TWO,))

    def test_remove_of_unselected_option_is_no_change(self) -> None:
        result = remove((ONE,), True, TWO)
        self.assertFalse(result.changed)
        self.assertEqual(result.value, (ONE,))

    def test_any_toggle_sequence_keeps_ids_unique(self) -> None:
        for sequence in itertools.product((ONE, TWO, THREE), repeat=4):
            value = None
            for option in sequence:
                value = toggle(value, True, option).value
            ids = [option.id for option in selected_options(value)]
            self.assertEqual(len(ids), len(set(ids)))

    def test_toggle_wraps_single_option_value(self) -> None:
        self.assertEqual(toggle(ONE, True, TWO).value, (ONE, TWO))


class DisabledOptionTests(unittest.TestCase):
    def test_disabled_option_never_changes_value(self) -> None:
        for current in (None, ONE, (ONE, TWO)):
            for multiple in (False, True):
                for operation in (toggle, remove):
                    result = operation(current, multiple, LOCKED)
                    self.assertIs(result.value, current)
                    self.assertFalse(result.changed)
                    self.assertFalse(result.close_requested)


class NormalizeValueTests(unittest.TestCase):
    def test_single_option_in_multiple_mode_is_wrapped(self) -> None:
        self.assertEqual(normalize_value(ONE, True), (ONE,))

    def test_list_in_single_mode_takes_first(self) -> None:
        self.assertEqual(normalize_value([TWO, ONE], False), TWO)

    def test_duplicates_and_junk_are_dropped(self) -> None:
        duplicate = Option(id=1, label="One again")
        self.assertEqual(normalize_value([ONE, "junk", duplicate, TWO], True), (ONE, TWO))

    def test_empty_and_unknown_shapes_become_none(self) -> None:
        self.assertIsNone(normalize_value([], True))
        self.assertIsNone(normalize_value(None, False))
        self.assertIsNone(normalize_value("one", True))

    def test_is_selected_matches_by_id(self) -> None:
        self.assertTrue(is_selected((ONE, TWO), Option(id=2, label="renamed")))
        self.assertFalse(is_selected(None, ONE))
