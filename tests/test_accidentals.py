import unittest

from music_theory_data.accidentals import (
    normalize_accidental_string,
    parse_accidental_run,
    render_accidentals,
)


class TestParseAccidentalRun(unittest.TestCase):
    def test_empty_run_is_natural(self):
        self.assertEqual(parse_accidental_run(""), 0)

    def test_ascii_and_unicode_symbols(self):
        self.assertEqual(parse_accidental_run("#"), 1)
        self.assertEqual(parse_accidental_run("♯"), 1)
        self.assertEqual(parse_accidental_run("b"), -1)
        self.assertEqual(parse_accidental_run("♭"), -1)
        self.assertEqual(parse_accidental_run("x"), 2)
        self.assertEqual(parse_accidental_run("X"), 2)
        self.assertEqual(parse_accidental_run("𝄪"), 2)
        self.assertEqual(parse_accidental_run("𝄫"), -2)

    def test_runs_accumulate(self):
        self.assertEqual(parse_accidental_run("##"), 2)
        self.assertEqual(parse_accidental_run("bb"), -2)
        self.assertEqual(parse_accidental_run("♭𝄫"), -3)
        self.assertEqual(parse_accidental_run("x#"), 3)

    def test_mixed_runs_cancel(self):
        self.assertEqual(parse_accidental_run("b#"), 0)
        self.assertEqual(parse_accidental_run("#b"), 0)
        self.assertEqual(parse_accidental_run("♯♭♭"), -1)

    def test_foreign_characters_fail(self):
        self.assertIsNone(parse_accidental_run("M"))
        self.assertIsNone(parse_accidental_run("b "))
        self.assertIsNone(parse_accidental_run("♮"))
        self.assertIsNone(parse_accidental_run("#q"))


class TestRenderAccidentals(unittest.TestCase):
    def test_render(self):
        self.assertEqual(render_accidentals(0), "")
        self.assertEqual(render_accidentals(1), "♯")
        self.assertEqual(render_accidentals(-1), "♭")
        self.assertEqual(render_accidentals(2), "𝄪")
        self.assertEqual(render_accidentals(-2), "𝄫")

    def test_doubles_come_first(self):
        self.assertEqual(render_accidentals(3), "𝄪♯")
        self.assertEqual(render_accidentals(-3), "𝄫♭")
        self.assertEqual(render_accidentals(4), "𝄪𝄪")

    def test_normalize_accidental_string(self):
        self.assertEqual(normalize_accidental_string("bb"), "𝄫")
        self.assertEqual(normalize_accidental_string("##"), "𝄪")
        self.assertEqual(normalize_accidental_string("b#"), "")
        self.assertIsNone(normalize_accidental_string("?"))


if __name__ == "__main__":
    unittest.main()
