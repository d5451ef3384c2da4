import unittest

from scaleviz.diagrams.fretboard import DROP_D, STANDARD, Tuning, map_fretboard
from scaleviz.diagrams.keyboard import map_keyboard
from scaleviz.diagrams.linear import build_linear_view
from scaleviz.theory.modes import MODE_NAMES
from scaleviz.theory.note_utils import PITCH_CLASS_NAMES, InvalidInput
from scaleviz.theory.scale import build_scale


class LinearViewTests(unittest.TestCase):
    def test_c_ionian_labels_and_markers(self) -> None:
        view = build_linear_view(build_scale("C", "ionian"))
        self.assertEqual([l.pitch_class for l in view.labels], ["C", "D", "E", "F", "G", "A", "B", "C"])
        self.assertEqual([l.degree_label for l in view.labels][:7], ["I", "ii", "iii", "IV", "V", "vi", "vii°"])
        self.assertEqual(view.labels[7].degree_label, "I")
        self.assertEqual([m.label for m in view.markers], ["1", "1", "1/2", "1", "1", "1", "1/2"])
        self.assertEqual(view.markers[2].kind, "half")
        self.assertEqual(view.markers[0].kind, "whole")

    def test_roles(self) -> None:
        view = build_linear_view(build_scale("E", "phrygian"))
        self.assertTrue(view.labels[0].is_root)
        self.assertTrue(view.labels[7].is_root)
        self.assertTrue(view.labels[2].is_third)
        self.assertTrue(view.labels[4].is_fifth)
        self.assertFalse(any(l.is_third or l.is_fifth for l in (view.labels[1], view.labels[3])))


class FretboardTests(unittest.TestCase):
    def setUp(self) -> None:
        self.scale = build_scale("C", "ionian")

    def test_shape(self) -> None:
        grid = map_fretboard(self.scale, "C", STANDARD)
        self.assertEqual(len(grid), 6)
        self.assertTrue(all(len(row) == 12 for row in grid))

    def test_high_e_is_rendered_first(self) -> None:
        grid = map_fretboard(self.scale, "C", STANDARD)
        cell = grid[0][0]
        self.assertEqual(cell.pitch_class, "E")
        self.assertTrue(cell.in_scale)
        self.assertFalse(cell.is_root)
        self.assertTrue(cell.is_third)
        self.assertEqual([row[0].open_note for row in grid], ["E", "B", "G", "D", "A", "E"])

    def test_frets_walk_the_alphabet(self) -> None:
        grid = map_fretboard(self.scale, "C", STANDARD)
        self.assertEqual(grid[1][1].pitch_class, "C")
        self.assertTrue(grid[1][1].is_root)
        self.assertEqual(grid[0][2].pitch_class, "F#")
        self.assertFalse(grid[0][2].in_scale)
        self.assertEqual(grid[0][3].pitch_class, "G")
        self.assertTrue(grid[0][3].is_fifth)

    def test_drop_d_low_string(self) -> None:
        grid = map_fretboard(self.scale, "C", DROP_D)
        self.assertEqual(grid[5][0].pitch_class, "D")
        self.assertEqual(grid[5][2].pitch_class, "E")

    def test_flags_match_scale_for_every_cell(self) -> None:
        for mode in MODE_NAMES:
            scale = build_scale("G", mode)
            for row in map_fretboard(scale, "G", STANDARD):
                for cell in row:
                    self.assertEqual(cell.in_scale, cell.pitch_class in scale.notes)
                    self.assertEqual(cell.is_root, cell.pitch_class == "G")

    def test_plain_sequence_tuning(self) -> None:
        grid = map_fretboard(self.scale, "C", ["E", "A", "D", "G", "B", "E"])
        self.assertEqual(grid, map_fretboard(self.scale, "C", STANDARD))

    def test_bad_tuning(self) -> None:
        with self.assertRaises(InvalidInput):
            map_fretboard(self.scale, "C", ["E", "A", "D", "G", "B"])
        with self.assertRaises(InvalidInput):
            Tuning.of("bad", ["E", "A", "D", "G", "Bb", "E"])

    def test_custom_fret_count(self) -> None:
        grid = map_fretboard(self.scale, "C", STANDARD, num_frets=15)
        self.assertEqual(grid[0][12].pitch_class, "E")
        self.assertEqual(len(grid[0]), 15)


class KeyboardTests(unittest.TestCase):
    def test_thirty_six_keys_for_any_scale(self) -> None:
        for root in PITCH_CLASS_NAMES:
            for mode in MODE_NAMES:
                self.assertEqual(len(map_keyboard(build_scale(root, mode), root)), 36)

    def test_black_keys_follow_sharps(self) -> None:
        keys = map_keyboard(build_scale("C", "ionian"), "C")
        for key in keys:
            self.assertEqual(key.is_black, "#" in key.pitch_class)
            self.assertEqual(key.pitch_class, PITCH_CLASS_NAMES[key.position % 12])

    def test_octaves_repeat(self) -> None:
        keys = map_keyboard(build_scale("D", "dorian"), "D")
        self.assertEqual(keys[2].pitch_class, "D")
        self.assertEqual(keys[14].pitch_class, "D")
        self.assertEqual(keys[14].octave_offset, 1)
        self.assertTrue(keys[2].is_root and keys[14].is_root and keys[26].is_root)
        self.assertFalse(keys[1].in_scale)


if __name__ == "__main__":
    unittest.main()
