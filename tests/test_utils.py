import unittest

from music_theory_data.utils import rotate_left, rotate_to_start_with, summarize_text


class TestRotateLeft(unittest.TestCase):
    def test_basic(self):
        self.assertEqual(rotate_left([1, 2, 3, 4], 1), [2, 3, 4, 1])
        self.assertEqual(rotate_left([1, 2, 3, 4], -1), [4, 1, 2, 3])
        self.assertEqual(rotate_left((1, 2, 3), 0), [1, 2, 3])

    def test_steps_wrap_around(self):
        self.assertEqual(rotate_left([1, 2, 3], 4), [2, 3, 1])
        self.assertEqual(rotate_left([1, 2, 3], -7), [3, 1, 2])
        self.assertEqual(rotate_left([1, 2, 3], 3), [1, 2, 3])

    def test_inverse(self):
        items = list("abcdefg")
        for steps in range(-20, 21):
            self.assertEqual(rotate_left(rotate_left(items, steps), -steps), items, steps)

    def test_composition(self):
        items = list(range(12))
        for a, b in [(3, 5), (-4, 9), (13, -1), (0, 25)]:
            self.assertEqual(rotate_left(rotate_left(items, a), b), rotate_left(items, a + b))

    def test_empty(self):
        self.assertEqual(rotate_left([], 5), [])
        self.assertEqual(rotate_left([], -1), [])

    def test_input_is_not_modified(self):
        items = [1, 2, 3]
        result = rotate_left(items, 1)
        self.assertEqual(items, [1, 2, 3])
        self.assertIsNot(result, items)


class TestRotateToStartWith(unittest.TestCase):
    def test_rotates_to_first_occurrence(self):
        self.assertEqual(rotate_to_start_with(["C", "D", "E", "F"], "E"), ["E", "F", "C", "D"])
        self.assertEqual(rotate_to_start_with(["a", "b", "a"], "a"), ["a", "b", "a"])

    def test_missing_element_raises(self):
        with self.assertRaises(ValueError):
            rotate_to_start_with(["C", "D"], "G")
        with self.assertRaises(ValueError):
            rotate_to_start_with([], "C")


class TestSummarizeText(unittest.TestCase):
    def test_short_text(self):
        self.assertEqual(summarize_text("major", 10), "major")

    def test_long_text(self):
        self.assertEqual(summarize_text("abcdef", 3), "abc...(truncated)")


if __name__ == "__main__":
    unittest.main()
