import unittest

from pydantic import ValidationError

from music_theory_data.intervals import (
    filter_out_octave,
    get_interval_number,
    interval_to_integer,
    normalize_compound_interval,
    normalize_compound_intervals,
    normalize_interval,
    normalize_intervals,
    normalize_simple_interval,
    normalize_simple_intervals,
    to_sorted_intervals,
    transform_intervals,
)
from music_theory_data.models import TransformOptions
from music_theory_data.note_labels import FLAT_INTERVAL_TEMPLATE, INTERVAL_TO_INTEGER


class TestNormalizeInterval(unittest.TestCase):
    def test_quality_codes(self):
        self.assertEqual(normalize_interval("M3"), "3")
        self.assertEqual(normalize_interval("m3"), "♭3")
        self.assertEqual(normalize_interval("P5"), "5")
        self.assertEqual(normalize_interval("d5"), "♭5")
        self.assertEqual(normalize_interval("A4"), "♯4")
        self.assertEqual(normalize_interval("AA4"), "𝄪4")
        self.assertEqual(normalize_interval("dd5"), "𝄫5")
        self.assertEqual(normalize_interval("A11"), "♯11")
        self.assertEqual(normalize_interval("m13"), "♭13")

    def test_ascii_accidentals(self):
        self.assertEqual(normalize_interval("b3"), "♭3")
        self.assertEqual(normalize_interval("bb7"), "𝄫7")
        self.assertEqual(normalize_interval("#4"), "♯4")
        self.assertEqual(normalize_interval("##4"), "𝄪4")
        self.assertEqual(normalize_interval("x4"), "𝄪4")
        self.assertEqual(normalize_interval("b9"), "♭9")

    def test_cancelling_accidentals(self):
        self.assertEqual(normalize_interval("b#3"), "3")

    def test_canonical_tokens_are_unchanged(self):
        self.assertEqual(normalize_interval("♮3"), "♮3")
        self.assertEqual(normalize_interval("♭7"), "♭7")
        self.assertEqual(normalize_interval("15"), "15")
        for interval in INTERVAL_TO_INTEGER:
            self.assertEqual(normalize_interval(interval), interval)

    def test_invalid_values(self):
        for value in ["", "M 3", "invalid", "b", "16", "0", "bbb3", " 3", "3 ", "3\n", "b7\n", "b3\t", "\n3"]:
            self.assertIsNone(normalize_interval(value), value)

    def test_normalize_intervals_drops_failures(self):
        self.assertEqual(
            normalize_intervals(["M3", "b7", "invalid", "P5", "x4", "8"]),
            ["3", "♭7", "5", "𝄪4", "8"],
        )
        self.assertEqual(normalize_intervals(["3\n", "b7\n", "5"]), ["5"])

    def test_simple_and_compound(self):
        self.assertEqual(normalize_simple_interval("b3"), "♭3")
        self.assertEqual(normalize_simple_interval("8"), "8")
        self.assertIsNone(normalize_simple_interval("9"))
        self.assertIsNone(normalize_simple_interval("b9"))
        self.assertIsNone(normalize_compound_interval("M3"))
        self.assertEqual(normalize_compound_interval("9"), "9")
        self.assertEqual(normalize_compound_interval("b9"), "♭9")
        self.assertEqual(normalize_simple_intervals(["3", "9", "b5"]), ["3", "♭5"])
        self.assertEqual(normalize_compound_intervals(["3", "9", "#11"]), ["9", "♯11"])


class TestIntervalTables(unittest.TestCase):
    def test_semitones(self):
        self.assertEqual(interval_to_integer("1"), 0)
        self.assertEqual(interval_to_integer("𝄫1"), -2)
        self.assertEqual(interval_to_integer("𝄪8"), 14)
        self.assertEqual(interval_to_integer("♯11"), 18)
        self.assertEqual(interval_to_integer("♮3"), 4)
        self.assertEqual(interval_to_integer("𝄪15"), 26)
        self.assertIsNone(interval_to_integer("16"))

    def test_template_has_one_spelling_per_semitone(self):
        self.assertEqual([INTERVAL_TO_INTEGER[i] for i in FLAT_INTERVAL_TEMPLATE], list(range(12)))

    def test_interval_number(self):
        self.assertEqual(get_interval_number("𝄫7"), 7)
        self.assertEqual(get_interval_number("♯11"), 11)
        self.assertIsNone(get_interval_number("♭"))
        self.assertIsNone(get_interval_number("7\n"))


class TestTransformIntervals(unittest.TestCase):
    def test_no_options_returns_copy(self):
        intervals = ["1", "3", "5"]
        result = transform_intervals(intervals)
        self.assertEqual(result, intervals)
        self.assertIsNot(result, intervals)

    def test_filter_out_octave(self):
        self.assertEqual(filter_out_octave(["1", "3", "8", "♮8"]), ["1", "3"])
        self.assertEqual(
            transform_intervals(["1", "2", "8"], {"filter_out_octave": True}),
            ["1", "2"],
        )

    def test_transformations(self):
        self.assertEqual(
            transform_intervals(["1", "2", "♭3", "4", "♯4", "6"], {"interval_transformation": "simpleToExtension"}),
            ["1", "9", "♭3", "11", "♯11", "13"],
        )
        self.assertEqual(
            transform_intervals(["♭9", "♯11", "13"], {"interval_transformation": "extensionToSimple"}),
            ["♭2", "♯4", "6"],
        )
        self.assertEqual(
            transform_intervals(["1", "3", "5", "7"], {"interval_transformation": "simpleToCompound"}),
            ["1", "10", "12", "14"],
        )
        self.assertEqual(
            transform_intervals(["10", "♭14", "8"], {"interval_transformation": "compoundToSimple"}),
            ["3", "♭7", "8"],
        )

    def test_double_accidentals_pass_through(self):
        self.assertEqual(
            transform_intervals(["𝄫2"], {"interval_transformation": "simpleToExtension"}),
            ["𝄫2"],
        )

    def test_sort_is_stable_with_unknown_last(self):
        self.assertEqual(
            to_sorted_intervals(["5", "bogus", "♭3", "9", "1", "♯2"]),
            ["1", "♭3", "♯2", "5", "9", "bogus"],
        )
        once = to_sorted_intervals(["7", "1", "3"])
        self.assertEqual(to_sorted_intervals(once), once)

    def test_sort_after_transformation(self):
        self.assertEqual(
            transform_intervals(["2", "7", "1"], {"interval_transformation": "simpleToExtension", "should_sort": True}),
            ["1", "7", "9"],
        )

    def test_rotate_left(self):
        options = TransformOptions(rotate_left=1)
        self.assertEqual(transform_intervals(["1", "3", "5"], options), ["3", "5", "1"])
        self.assertEqual(transform_intervals(["1", "3", "5"], {"rotate_left": -1}), ["5", "1", "3"])
        self.assertEqual(transform_intervals([], {"rotate_left": 3}), [])

    def test_camel_case_option_keys(self):
        self.assertEqual(len(transform_intervals(["1"], {"fillChromatic": True})), 12)
        self.assertEqual(
            transform_intervals(["3", "1"], {"shouldSort": True, "rotateLeft": 1}),
            ["3", "1"],
        )
        self.assertTrue(TransformOptions.model_validate({"rotateToRootInteger0": True}).rotate_to_root_integer_0)

    def test_unknown_option_keys_are_rejected(self):
        with self.assertRaises(ValidationError):
            transform_intervals(["1"], {"fill_chromatc": True})
        with self.assertRaises(ValidationError):
            TransformOptions(sortIntervals=True)

    def test_unknown_tokens_do_not_fail(self):
        self.assertEqual(
            transform_intervals(["1", "zz"], {"interval_transformation": "simpleToCompound"}),
            ["1", "zz"],
        )


class TestFillChromatic(unittest.TestCase):
    def test_empty_fill_is_template(self):
        self.assertEqual(transform_intervals([], {"fill_chromatic": True}), list(FLAT_INTERVAL_TEMPLATE))

    def test_slot_k_holds_semitone_k(self):
        filled = transform_intervals(["1", "♯2", "3", "♯4", "5", "6", "7", "8"], {"fill_chromatic": True})
        self.assertEqual(len(filled), 12)
        for slot, interval in enumerate(filled):
            self.assertEqual(INTERVAL_TO_INTEGER[interval] % 12, slot)
        self.assertEqual(filled[3], "♯2")
        self.assertEqual(filled[6], "♯4")

    def test_input_overrides_most_similar_scale(self):
        filled = transform_intervals(
            ["1", "3", "5", "♭7", "9", "11", "13"],
            {"fill_chromatic": True, "most_similar_scale": "mixolydian"},
        )
        self.assertEqual(filled, ["1", "♭2", "9", "♭3", "3", "11", "♭5", "5", "♭6", "13", "♭7", "7"])

    def test_fill_then_transform(self):
        filled = transform_intervals(
            ["1", "♭3", "5"],
            {"fill_chromatic": True, "interval_transformation": "simpleToExtension"},
        )
        self.assertEqual(filled, ["1", "♭9", "9", "♭3", "3", "11", "♭5", "5", "♭13", "13", "♭7", "7"])

    def test_root_equivalents_other_than_unison_are_ignored(self):
        filled = transform_intervals(["1", "8", "15", "𝄫2"], {"fill_chromatic": True})
        self.assertEqual(filled, list(FLAT_INTERVAL_TEMPLATE))

    def test_unknown_most_similar_scale_is_ignored(self):
        filled = transform_intervals(["♯4"], {"fill_chromatic": True, "most_similar_scale": "nope"})
        self.assertEqual(filled[6], "♯4")

    def test_sort_is_ignored(self):
        filled = transform_intervals(["♯4"], {"fill_chromatic": True, "should_sort": True})
        self.assertEqual(filled[6], "♯4")

    def test_rotation_to_root(self):
        base = transform_intervals([], {"fill_chromatic": True})
        rotated = transform_intervals(
            [],
            {"fill_chromatic": True, "rotate_to_root_integer_0": True, "root_note_integer": 2},
        )
        self.assertEqual(rotated, base[-2:] + base[:-2])

    def test_rotation_composes_additively(self):
        one_step = transform_intervals([], {"fill_chromatic": True, "rotate_left": 3})
        combined = transform_intervals(
            [],
            {"fill_chromatic": True, "rotate_left": 5, "rotate_to_root_integer_0": True, "root_note_integer": 2},
        )
        self.assertEqual(one_step, combined)

    def test_root_rotation_needs_root_integer(self):
        filled = transform_intervals([], {"fill_chromatic": True, "rotate_to_root_integer_0": True})
        self.assertEqual(filled, list(FLAT_INTERVAL_TEMPLATE))


if __name__ == "__main__":
    unittest.main()
