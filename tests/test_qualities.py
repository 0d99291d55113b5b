import unittest

from music_theory_data.catalog import NOTE_COLLECTIONS
from music_theory_data.intervals import normalize_intervals
from music_theory_data.qualities import (
    get_intervals_from_qualities,
    get_qualities_from_collection,
    get_qualities_from_collection_key,
    get_qualities_from_intervals,
)

PLAIN_QUALITIES = ["P1", "m2", "M2", "m3", "M3", "P4", "d5", "P5", "m6", "M6", "m7", "M7"]


class TestQualities(unittest.TestCase):
    def test_from_intervals(self):
        self.assertEqual(get_qualities_from_intervals(["1", "♭3", "5", "♭7"]), ["P1", "m3", "P5", "m7"])
        self.assertEqual(get_qualities_from_intervals(["1", "♯4", "𝄫7", "♮3"]), ["P1", "A4", "d7", "M3"])

    def test_unknown_intervals_are_dropped(self):
        self.assertEqual(get_qualities_from_intervals(["1", "zz", "5"]), ["P1", "P5"])

    def test_ionian_fill(self):
        self.assertEqual(get_qualities_from_collection_key("ionian", {"fill_chromatic": True}), PLAIN_QUALITIES)

    def test_dominant13_fill_uses_mixolydian(self):
        self.assertEqual(NOTE_COLLECTIONS["dominant13"].most_similar_scale, "mixolydian")
        self.assertEqual(
            get_qualities_from_collection_key("dominant13", {"fill_chromatic": True}),
            ["P1", "m2", "M9", "m3", "M3", "P11", "d5", "P5", "m6", "M13", "m7", "M7"],
        )

    def test_dominant13_fill_with_extensions(self):
        self.assertEqual(
            get_qualities_from_collection(
                NOTE_COLLECTIONS["dominant13"],
                {"fill_chromatic": True, "interval_transformation": "simpleToExtension"},
            ),
            ["P1", "m9", "M9", "m3", "M3", "P11", "d5", "P5", "m13", "M13", "m7", "M7"],
        )

    def test_most_similar_scale_only_applies_to_fill(self):
        self.assertEqual(
            get_qualities_from_collection_key("dominant7"),
            ["P1", "M3", "P5", "m7"],
        )

    def test_normalized_extensions_back_to_simple(self):
        intervals = normalize_intervals(["1", "b3", "5", "b7", "b13", "15"])
        self.assertEqual(intervals, ["1", "♭3", "5", "♭7", "♭13", "15"])
        self.assertEqual(
            get_qualities_from_intervals(
                intervals,
                {"fill_chromatic": True, "interval_transformation": "extensionToSimple"},
            ),
            PLAIN_QUALITIES,
        )

    def test_unknown_key(self):
        self.assertEqual(get_qualities_from_collection_key("nope"), [])

    def test_intervals_from_qualities(self):
        self.assertEqual(get_intervals_from_qualities(["P1", "m3", "P5", "m7"]), ["1", "♭3", "5", "♭7"])
        self.assertEqual(get_intervals_from_qualities(["A11", "dd5", "bogus"]), ["♯11", "𝄫5"])

    def test_quality_round_trip_for_template(self):
        self.assertEqual(get_qualities_from_intervals(get_intervals_from_qualities(PLAIN_QUALITIES)), PLAIN_QUALITIES)


if __name__ == "__main__":
    unittest.main()
