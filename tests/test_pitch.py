import unittest
from pathlib import Path
import copy
import pickle
import sys

DIR = Path(__file__).parent if "__file__" in locals() else Path.cwd()
sys.path.append(str(DIR / "../src"))

import quinta as qt  # noqa: E402


class TestConstants(unittest.TestCase):
    def test_values(self):
        self.assertEqual(list(map(int, qt.FIFTHS)), [0, 2, 4, -1, 1, 3, 5])
        self.assertEqual(list(map(int, qt.STEPS)), [3, 0, 4, 1, 5, 2, 6])
        self.assertEqual(list(map(int, qt.FIFTH_OCTS)), [0, 1, 2, -1, 0, 1, 2])

    def test_readonly(self):
        for table in (qt.FIFTHS, qt.STEPS, qt.FIFTH_OCTS):
            with self.assertRaises(ValueError):
                table[0] = 1

    def test_steps_invert_fifths(self):
        for step in range(7):
            self.assertEqual(qt.decodeStep(int(qt.FIFTHS[step])), step)


class TestEncode(unittest.TestCase):
    def test_pitch_class(self):
        testData = (
            ((0, 0), qt.PitchClass(0)),  # C
            ((0, 1), qt.PitchClass(7)),  # C#
            ((3, 0), qt.PitchClass(-1)),  # F
            ((6, -1), qt.PitchClass(-2)),  # Bb
            ((1, -2), qt.PitchClass(-12)),  # Dbb
        )
        for args, ans in testData:
            with self.subTest(args=args):
                self.assertEqual(qt.encode(*args), ans)

    def test_note(self):
        testData = (
            ((0, 0, 4), qt.Note(0, 4)),  # C4
            ((5, 0, 4), qt.Note(3, 3)),  # A4
            ((0, 1, 4), qt.Note(7, 0)),  # C#4
            ((6, -1, 3), qt.Note(-2, 5)),  # Bb3
        )
        for args, ans in testData:
            with self.subTest(args=args):
                self.assertEqual(qt.encode(*args), ans)

    def test_interval(self):
        testData = (
            ((2, 0, 0, 1), qt.Interval(4, -2, 1)),  # 3M
            ((4, 0, 0, -1), qt.Interval(-1, 0, -1)),  # -5P
            ((0, 0, 1, 1), qt.Interval(0, 1, 1)),  # 8P
            ((0, 0, 0, 5), qt.Interval(0, 0, 1)),  # direction is reduced to its sign
            ((0, 0, 1, -3), qt.Interval(0, -1, -1)),
        )
        for args, ans in testData:
            with self.subTest(args=args):
                self.assertEqual(qt.encode(*args), ans)

    def test_invalid(self):
        for args in ((7, 0), (-1, 0), (1.5, 0), ("C", 0), (0, 0.5), (0, 0, "4")):
            with self.subTest(args=args):
                self.assertIsNone(qt.encode(*args))


class TestDecode(unittest.TestCase):
    def test_decode(self):
        testData = (
            (qt.PitchClass(7), (0, 1, None, None)),
            ((7,), (0, 1, None, None)),
            (qt.Note(0, 4), (0, 0, 4, None)),
            ([3, 3], (5, 0, 4, None)),
            (qt.Note(-12, 10), (1, -2, 3, None)),
            (qt.Interval(4, -2, 1), (2, 0, 0, 1)),
        )
        for p, ans in testData:
            with self.subTest(p=p):
                self.assertEqual(qt.decode(p), ans)

    def test_decoded_fields(self):
        d = qt.decode(qt.Note(-2, 5))
        self.assertEqual((d.step, d.alt, d.oct, d.dir), (6, -1, 3, None))

    def test_invalid(self):
        for src in ("C4", None, (), (0, 0, 2), (0, 1, 2, 3), (0.5,)):
            with self.subTest(src=src):
                self.assertIsNone(qt.decode(src))

    def test_round_trip(self):
        for step in range(7):
            for alt in range(-4, 5):
                for o in range(-2, 9):
                    with self.subTest(step=step, alt=alt, oct=o):
                        self.assertEqual(
                            qt.decode(qt.encode(step, alt, o)), (step, alt, o, None)
                        )
                        self.assertEqual(
                            qt.decode(qt.encode(step, alt, o, 1)), (step, alt, o, 1)
                        )

    def test_reencode(self):
        for f in range(-30, 31):
            self.assertEqual(qt.encode(*qt.decode(qt.PitchClass(f))), qt.PitchClass(f))
            for o in range(-5, 6):
                n = qt.Note(f, o)
                self.assertEqual(qt.encode(*qt.decode(n)), n)
                i = qt.Interval(f, o, 1)
                self.assertEqual(qt.encode(*qt.decode(i)), i)

    def test_large_values(self):
        p = qt.encode(4, 1000, -5000)
        self.assertEqual(qt.decode(p), (4, 1000, -5000, None))


class TestPitchTypes(unittest.TestCase):
    def test_slots(self):
        for t in (qt.Pitch, qt.PitchClass, qt.Note, qt.Interval):
            self.assertNotIn("__dict__", dir(t))
        with self.assertRaises(AttributeError):
            qt.Note(0, 4).x = 1  # type: ignore

    def test_constructor_errors(self):
        with self.assertRaises(ValueError):
            qt.Interval(0, 0, 0)
        with self.assertRaises(TypeError):
            qt.Note(0.5, 1)
        with self.assertRaises(TypeError):
            qt.PitchClass(True)

    def test_equality(self):
        self.assertEqual(qt.Note(0, 4), qt.Note(0, 4))
        self.assertEqual(hash(qt.Note(0, 4)), hash(qt.Note(0, 4)))
        self.assertNotEqual(qt.Note(0, 4), qt.Note(0, 5))
        self.assertNotEqual(qt.PitchClass(0), qt.Note(0, 0))
        self.assertNotEqual(qt.Note(0, 4), qt.Interval(0, 4, 1))
        self.assertNotEqual(qt.Note(0, 4), (0, 4))
        self.assertEqual(len({qt.Note(0, 4), qt.Note(0, 4), qt.PitchClass(0)}), 2)

    def test_tuple_behavior(self):
        i = qt.Interval(4, -2, 1)
        self.assertEqual(tuple(i), (4, -2, 1))
        self.assertEqual(i.astuple(), (4, -2, 1))
        self.assertEqual(len(i), 3)
        self.assertEqual(i[1], -2)
        self.assertEqual(len(qt.PitchClass(3)), 1)

    def test_fromTuple(self):
        testData = (
            ((0,), qt.PitchClass(0)),
            ([0, 4], qt.Note(0, 4)),
            ((0, 0, 1), qt.Interval(0, 0, 1)),
            ((0, 0, -1), qt.Interval(0, 0, -1)),
        )
        for src, ans in testData:
            with self.subTest(src=src):
                self.assertEqual(qt.Pitch.fromTuple(src), ans)
        for src in ((0, 0, 2), (), (0, 1, 2, 3), ("a",), (True,), "C4", 5, None):
            with self.subTest(src=src):
                self.assertIsNone(qt.Pitch.fromTuple(src))
        n = qt.Note(0, 4)
        self.assertIs(qt.Pitch.fromTuple(n), n)

    def test_predicates(self):
        self.assertTrue(qt.isPitch((0,)))
        self.assertFalse(qt.isPitch("C"))
        self.assertTrue(qt.isPitchClass(qt.PitchClass(0)))
        self.assertFalse(qt.isPitchClass((0, 4)))
        self.assertTrue(qt.isNote((0, 4)))
        self.assertTrue(qt.hasOctave((0, 4)))
        self.assertTrue(qt.hasOctave((0, 4, 1)))
        self.assertFalse(qt.hasOctave((0,)))
        self.assertTrue(qt.isInterval(qt.Interval(0, 0, 1)))
        self.assertFalse(qt.isInterval((0, 4)))

    def test_match(self):
        match qt.parsePitch("C#4"):
            case qt.Note(f, o):
                self.assertEqual((f, o), (7, 0))
            case _:
                self.fail("`C#4` should be matched as a note")
        match qt.parsePitch("-5P"):
            case qt.Interval(f, o, d):
                self.assertEqual((f, o, d), (-1, 0, -1))
            case _:
                self.fail("`-5P` should be matched as an interval")

    def test_derived(self):
        n = qt.parseNote("Bb3")
        self.assertEqual((n.step, n.alt, n.oct), (6, -1, 3))
        pc = qt.PitchClass(14)
        self.assertEqual((pc.step, pc.alt, pc.oct), (0, 2, None))
        i = qt.parseInterval("-9m")
        self.assertEqual(i.dir, -1)
        self.assertEqual(i.number, 9)
        self.assertEqual(i.quality, "m")

    def test_str(self):
        self.assertEqual(str(qt.Note(0, 4)), "C4")
        self.assertEqual(str(qt.PitchClass(-2)), "Bb")
        self.assertEqual(str(qt.Interval(-1, 0, -1)), "-5P")
        self.assertEqual(repr(qt.Note(7, 0)), 'Note("C#4")')

    def test_copy_pickle(self):
        for p in (qt.PitchClass(3), qt.Note(0, 4), qt.Interval(4, -2, 1)):
            with self.subTest(p=p):
                self.assertIs(copy.copy(p), p)
                self.assertIs(copy.deepcopy(p), p)
                self.assertEqual(pickle.loads(pickle.dumps(p)), p)

    def test_add(self):
        c4 = qt.Note(0, 4)
        m3 = qt.parseInterval("3M")
        self.assertEqual(c4 + m3, qt.Note(4, 2))
        self.assertEqual(m3 + c4, qt.Note(4, 2))
        self.assertEqual(str(m3 + qt.parseInterval("3m")), "5P")
        with self.assertRaises(TypeError):
            c4 + qt.PitchClass(0)
        with self.assertRaises(TypeError):
            c4 + 1


if __name__ == "__main__":
    unittest.main()
