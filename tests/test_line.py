import io
import unittest

from picross.core.exceptions import CellAlreadySolvedError, HintOverflowError
from picross.core.models import Window
from picross.engine.line import Line, LineConfig
from picross.utils.pretty import format_line, format_window, pretty_print_line


class LineConfigTests(unittest.TestCase):
    def test_rejects_non_positive_length(self) -> None:
        with self.assertRaises(ValueError):
            LineConfig(hints=[1], length=0)

    def test_rejects_non_integer_length(self) -> None:
        with self.assertRaises(ValueError):
            LineConfig(hints=[1], length=4.0)

    def test_rejects_non_positive_hint(self) -> None:
        with self.assertRaises(ValueError):
            LineConfig(hints=[2, 0], length=5)

    def test_hints_are_copied(self) -> None:
        hints = [1, 2]
        config = LineConfig(hints=hints, length=5)
        hints.append(3)
        self.assertEqual(config.hints, [1, 2])


class LineTests(unittest.TestCase):
    def test_initial_windows(self) -> None:
        line = Line(LineConfig(hints=[2, 4], length=10))
        self.assertEqual(line.initial_windows(), [Window(0, 5), Window(3, 7)])
        self.assertEqual(line.length, 10)
        self.assertEqual(line.pattern(), "." * 10)

    def test_overflowing_hints_fail_on_construction(self) -> None:
        with self.assertRaises(HintOverflowError):
            Line(LineConfig(hints=[3, 7], length=10))

    def test_mark_cells(self) -> None:
        line = Line(LineConfig(hints=[2], length=4))
        line.mark_filled(1)
        line.mark_empty(3)
        self.assertEqual(line.pattern(), ".#.X")
        with self.assertRaises(CellAlreadySolvedError):
            line.mark_empty(1)
        with self.assertRaises(IndexError):
            line.cell(4)

    def test_split_around_empty_cells(self) -> None:
        line = Line(LineConfig(hints=[2], length=10))
        line.mark_empty(1)
        line.mark_empty(6)
        self.assertEqual(line.split(Window(0, 10), 2), [Window(2, 4), Window(7, 3)])

    def test_adjacent_filled_pair(self) -> None:
        line = Line.from_pattern([3], "0FF00")
        self.assertTrue(line.is_valid(Window(0, 5), 3))
        self.assertEqual(line.split(Window(0, 5), 3), [Window(0, 4)])

    def test_filled_cells_too_far_apart(self) -> None:
        line = Line.from_pattern([3], "F00F0")
        self.assertFalse(line.is_valid(Window(0, 5), 3))

    def test_refine_replaces_windows(self) -> None:
        line = Line.from_pattern([2], ".X....X...")
        hint = line.hints[0]
        self.assertFalse(hint.is_feasible(line.cells))

        refined = hint.refine(line.cells)
        self.assertEqual(refined, [Window(2, 4), Window(7, 3)])
        self.assertEqual(hint.windows, refined)
        self.assertTrue(hint.is_feasible(line.cells))
        self.assertEqual(line.initial_windows(), [Window(0, 10)])

        self.assertEqual(hint.refine(line.cells), refined)

    def test_refine_to_nothing(self) -> None:
        line = Line.from_pattern([2], "XFFFX")
        hint = line.hints[0]
        self.assertEqual(hint.refine(line.cells), [])
        self.assertFalse(hint.is_feasible(line.cells))


class PrettyTests(unittest.TestCase):
    def test_format_line(self) -> None:
        line = Line.from_pattern([1], "0F-x#?")
        self.assertEqual(format_line(line.cells), ".#XX#.")

    def test_format_window(self) -> None:
        self.assertEqual(format_window(Window(2, 3), 7), "  ===  ")
        self.assertEqual(format_window(Window(0, 0), 3), "   ")

    def test_pretty_print_line(self) -> None:
        line = Line.from_pattern([1, 2], "..X...")
        stream = io.StringIO()
        pretty_print_line(line, label="row 0", stream=stream)
        output = stream.getvalue().splitlines()
        self.assertEqual(output[0], "row 0")
        self.assertEqual(output[1], "  ..X...")
        self.assertEqual(output[2], "hint 1: 1 window(s)")
        self.assertIn("offset=0 length=3", output[3])
        self.assertEqual(output[4], "hint 2: 1 window(s)")
        self.assertIn("offset=2 length=4", output[5])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
