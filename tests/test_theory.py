import unittest

from scaleviz.theory.modes import MODE_NAMES, MODES, get_mode, list_modes
from scaleviz.theory.note_utils import (
    PITCH_CLASS_NAMES,
    InvalidInput,
    is_accidental,
    note_name_to_midi,
    pc_index,
    shift_note,
)
from scaleviz.theory.scale import build_scale, note_roles


class NoteUtilsTests(unittest.TestCase):
    def test_alphabet_is_twelve_sharps(self) -> None:
        self.assertEqual(len(PITCH_CLASS_NAMES), 12)
        self.assertFalse(any("b" in n for n in PITCH_CLASS_NAMES))

    def test_shift_wraps(self) -> None:
        self.assertEqual(shift_note("B", 1), "C")
        self.assertEqual(shift_note("E", 12), "E")
        self.assertEqual(shift_note("C", -1), "B")

    def test_flats_are_rejected(self) -> None:
        with self.assertRaises(InvalidInput):
            pc_index("Bb")
        with self.assertRaises(ValueError):
            pc_index("H")

    def test_midi(self) -> None:
        self.assertEqual(note_name_to_midi("C", 4), 60)
        self.assertEqual(note_name_to_midi("A", 4), 69)
        with self.assertRaises(InvalidInput):
            note_name_to_midi("C", 12)

    def test_accidentals(self) -> None:
        self.assertEqual([n for n in PITCH_CLASS_NAMES if is_accidental(n)], ["C#", "D#", "F#", "G#", "A#"])


class ModeTableTests(unittest.TestCase):
    def test_seven_modes(self) -> None:
        self.assertEqual(
            MODE_NAMES,
            ("ionian", "dorian", "phrygian", "lydian", "mixolydian", "aeolian", "locrian"),
        )
        self.assertEqual(len(list_modes()), 7)

    def test_each_mode_is_well_formed(self) -> None:
        for mode in MODES.values():
            with self.subTest(mode=mode.name):
                self.assertEqual(len(mode.steps), 7)
                self.assertEqual(sum(mode.steps), 12)
                self.assertTrue(set(mode.steps) <= {1, 2})
                self.assertEqual(len(mode.degree_labels), 7)

    def test_lookup_is_case_insensitive(self) -> None:
        self.assertIs(get_mode(" Dorian "), MODES["dorian"])

    def test_unknown_mode(self) -> None:
        with self.assertRaises(InvalidInput):
            get_mode("hypoionian")

    def test_table_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            MODES["blues"] = MODES["ionian"]  # type: ignore[index]


class BuildScaleTests(unittest.TestCase):
    def test_every_root_and_mode_closes_at_the_octave(self) -> None:
        for root in PITCH_CLASS_NAMES:
            for mode in MODE_NAMES:
                with self.subTest(root=root, mode=mode):
                    scale = build_scale(root, mode)
                    self.assertEqual(len(scale), 8)
                    self.assertEqual(scale[0], root)
                    self.assertEqual(scale[7], root)
                    self.assertEqual(len(set(scale.notes[:7])), 7)

    def test_pure(self) -> None:
        self.assertEqual(build_scale("F#", "lydian"), build_scale("F#", "lydian"))

    def test_c_ionian(self) -> None:
        scale = build_scale("C", "ionian")
        self.assertEqual(list(scale), ["C", "D", "E", "F", "G", "A", "B", "C"])
        self.assertEqual(list(scale.degree_labels), ["I", "ii", "iii", "IV", "V", "vi", "vii°"])
        self.assertEqual(list(scale.steps), [2, 2, 1, 2, 2, 2, 1])

    def test_a_aeolian(self) -> None:
        self.assertEqual(list(build_scale("A", "aeolian")), ["A", "B", "C", "D", "E", "F", "G", "A"])

    def test_d_dorian(self) -> None:
        self.assertEqual(list(build_scale("D", "dorian")), ["D", "E", "F", "G", "A", "B", "C", "D"])

    def test_wraps_past_b(self) -> None:
        self.assertEqual(list(build_scale("B", "locrian")), ["B", "C", "D", "E", "F", "G", "A", "B"])

    def test_third_and_fifth_are_scale_tones(self) -> None:
        scale = build_scale("B", "locrian")
        self.assertEqual(scale.third, "D")
        self.assertEqual(scale.fifth, "F")

    def test_mode_name_is_normalized(self) -> None:
        scale = build_scale("E", " Phrygian ")
        self.assertEqual(scale.mode.name, "phrygian")
        self.assertEqual(list(scale), list(build_scale("E", "phrygian")))

    def test_invalid_inputs(self) -> None:
        with self.assertRaises(InvalidInput):
            build_scale("Db", "ionian")
        with self.assertRaises(InvalidInput):
            build_scale("C", "major")

    def test_root_never_doubles_as_third(self) -> None:
        for root in PITCH_CLASS_NAMES:
            for mode in MODE_NAMES:
                scale = build_scale(root, mode)
                for note in PITCH_CLASS_NAMES:
                    roles = note_roles(note, scale, root)
                    self.assertFalse(roles.is_root and roles.is_third, (root, mode, note))

    def test_note_roles_needs_five_notes(self) -> None:
        with self.assertRaises(InvalidInput):
            note_roles("C", ["C", "D", "E", "F"], "C")


if __name__ == "__main__":
    unittest.main()
