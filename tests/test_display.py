import unittest

from display import CLEAR_SCREEN, TITLE, Screen, render_board, render_cell, render_frame


class TestRenderBoard(unittest.TestCase):
    def test_renders_empty_solver_and_given_cells(self) -> None:
        self.assertEqual(render_cell(0, False), "[ ]")
        self.assertEqual(render_cell(0, True), "[ ]")
        self.assertEqual(render_cell(4, False), "[4]")
        self.assertEqual(render_cell(4, True), "[\x1b[93m4\x1b[0m]")
        self.assertEqual(render_cell(4, True, color=False), "[4]")

    def test_renders_nine_rows_of_nine_cells(self) -> None:
        grid = [0] * 81
        mask = [False] * 81
        grid[0] = 5
        mask[0] = True
        grid[10] = 3

        lines = render_board(grid, mask, color=False).split("\n")

        self.assertEqual(len(lines), 9)
        self.assertEqual(lines[0], "[5] " + " ".join(["[ ]"] * 8))
        self.assertEqual(lines[1], "[ ] [3] " + " ".join(["[ ]"] * 7))
        self.assertEqual(lines[8], " ".join(["[ ]"] * 9))

    def test_frame_clears_screen_and_adds_status(self) -> None:
        frame = render_frame([0] * 81, [False] * 81, status="Entry Solved!")
        self.assertTrue(frame.startswith(CLEAR_SCREEN + TITLE))
        self.assertTrue(frame.endswith("Entry Solved!"))

    def test_screen_writes_one_frame_per_draw(self) -> None:
        written: list[str] = []
        screen = Screen(write=written.append, color=False)
        render = screen.visualizer()
        render([0] * 81, [False] * 81)
        screen.draw([0] * 81, [False] * 81)
        self.assertEqual(len(written), 2)
        self.assertIn("Solving Slowly", written[0])
        self.assertNotIn("Solving Slowly", written[1])


if __name__ == "__main__":
    unittest.main()
