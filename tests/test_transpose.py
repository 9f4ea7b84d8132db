import unittest
from pathlib import Path
import sys

DIR = Path(__file__).parent if "__file__" in locals() else Path.cwd()
sys.path.append(str(DIR / "../src"))

import quinta as qt  # noqa: E402


class TestTranspose(unittest.TestCase):
    def test_transpose(self):
        testData = (
            ("C4", "3M", "E4"),
            ("C4", "M3", "E4"),
            ("E4", "3m", "G4"),
            ("C", "5P", "G"),
            ("Bb3", "2M", "C4"),
            ("C4", "-5P", "F3"),
            ("C#4", "3M", "E#4"),
            ("Cb4", "-2m", "Bb3"),
            ("G4", "8P", "G5"),
        )
        for a, b, ans in testData:
            with self.subTest(a=a, b=b):
                self.assertEqual(qt.transpose(a, b), ans)
                self.assertEqual(qt.transpose(b, a), ans)

    def test_values(self):
        self.assertEqual(qt.transpose((0, 4), (4, -2, 1)), "E4")
        self.assertEqual(qt.transpose(qt.Note(0, 4), "3M"), "E4")
        self.assertEqual(qt.transposeValue("C4", "3M"), qt.Note(4, 2))

    def test_invalid(self):
        testData = (
            ("C4", "D4"),
            ("C", "D4"),
            ("3M", "3M"),
            ("H9", "3M"),
            ("C4", None),
            (60, "3M"),
        )
        for a, b in testData:
            with self.subTest(a=a, b=b):
                self.assertIsNone(qt.transpose(a, b))
                self.assertIsNone(qt.transposeValue(a, b))

    def test_transposer(self):
        up = qt.transposer("3M")
        self.assertEqual([up(n) for n in ("C4", "D4", "Bb")], ["E4", "F#4", "D"])
        self.assertIsNone(up("5P"))
        self.assertEqual(qt.transposer("C4")("5P"), "G4")
        self.assertIsNone(qt.transposer("H9")("C4"))
        self.assertIsNot(qt.transposer("3M"), up)

    def test_transposeBy(self):
        m3 = qt.parseInterval("3m")
        self.assertEqual(qt.transposeBy(m3, qt.PitchClass(0)), qt.PitchClass(-3))
        self.assertEqual(qt.transposeBy(m3, qt.Note(0, 4)), qt.Note(-3, 6))
        with self.assertRaises(TypeError):
            qt.transposeBy(m3, (0, 4))

    def test_interval_sum(self):
        testData = (
            ("3M", "3m", "5P"),
            ("5P", "4P", "8P"),
            ("-5P", "3M", "-3m"),
            ("3M", "-3M", "1P"),
            ("-8P", "-3M", "-10M"),
        )
        for a, b, ans in testData:
            with self.subTest(a=a, b=b):
                ia = qt.parseInterval(a)
                ib = qt.parseInterval(b)
                self.assertEqual(qt.renderPitch(qt.transposeBy(ia, ib)), ans)
                self.assertEqual(qt.renderPitch(ia + ib), ans)

    def test_octaves(self):
        self.assertEqual(qt.octaves(2), qt.Interval(0, 2, 1))
        self.assertEqual(qt.renderPitch(qt.octaves(-1)), "-8P")
        self.assertEqual(qt.renderPitch(qt.octaves(0)), "1P")
        self.assertEqual(qt.transpose("C4", qt.octaves(-2)), "C2")
        with self.assertRaises(TypeError):
            qt.octaves(1.5)


if __name__ == "__main__":
    unittest.main()
