import unittest

from music_theory_data.midi import (
    note_name_and_interval_to_midi,
    note_name_to_midi,
    root_integer_and_interval_to_midi,
    root_midi_and_interval_to_midi,
)


class TestMidi(unittest.TestCase):
    def test_root_integer_and_interval(self):
        self.assertEqual(root_integer_and_interval_to_midi(0, "1"), 60)
        self.assertEqual(root_integer_and_interval_to_midi(0, "5"), 67)
        self.assertEqual(root_integer_and_interval_to_midi(0, "9"), 74)
        self.assertEqual(root_integer_and_interval_to_midi(2, "♭3", 3), 53)

    def test_root_integer_rejects_bad_input(self):
        self.assertIsNone(root_integer_and_interval_to_midi(0, "zz"))
        self.assertIsNone(root_integer_and_interval_to_midi(12, "1"))
        self.assertIsNone(root_integer_and_interval_to_midi(0, "1", 10))

    def test_root_midi_and_interval(self):
        self.assertEqual(root_midi_and_interval_to_midi(60, "8"), 72)
        self.assertEqual(root_midi_and_interval_to_midi(60, "𝄫1"), 58)
        self.assertIsNone(root_midi_and_interval_to_midi(127, "2"))
        self.assertIsNone(root_midi_and_interval_to_midi(60, "x"))

    def test_note_name(self):
        self.assertEqual(note_name_to_midi("C"), 60)
        self.assertEqual(note_name_to_midi("A"), 69)
        self.assertEqual(note_name_to_midi("Bb", 3), 58)
        self.assertEqual(note_name_to_midi("B♯"), 60)
        self.assertEqual(note_name_to_midi("C", -1), 0)
        self.assertIsNone(note_name_to_midi("H"))
        self.assertIsNone(note_name_to_midi("C", 10))

    def test_note_name_and_interval(self):
        self.assertEqual(note_name_and_interval_to_midi("A", "3"), 73)
        self.assertEqual(note_name_and_interval_to_midi("D", "♭7", 2), 48)
        self.assertEqual(note_name_and_interval_to_midi("C", "15"), 84)
        self.assertIsNone(note_name_and_interval_to_midi("X", "3"))
        self.assertIsNone(note_name_and_interval_to_midi("C", "16"))


if __name__ == "__main__":
    unittest.main()
