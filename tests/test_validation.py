import unittest

from solver.validation import (
    find_conflicts,
    is_valid,
    normalize_fixed_mask,
    normalize_grid,
    validate_coordinate,
    validate_digit,
)


CLASSIC_PUZZLE = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
CLASSIC_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"


def parse(text: str) -> list[int]:
    return [int(char) for char in text]


class TestIsValid(unittest.TestCase):
    def test_rejects_value_already_in_row(self) -> None:
        grid = parse(CLASSIC_PUZZLE)
        self.assertEqual(grid[:9], [5, 3, 0, 0, 7, 0, 0, 0, 0])
        self.assertFalse(is_valid(grid, 5, 0, 3))

    def test_accepts_value_free_in_row_column_and_box(self) -> None:
        grid = [5, 3, 0, 0, 7, 0, 0, 0, 0] + [0] * 72
        self.assertFalse(is_valid(grid, 5, 0, 3))
        self.assertTrue(is_valid(grid, 4, 0, 3))

    def test_rejects_value_already_in_column(self) -> None:
        grid = [0] * 81
        grid[8 * 9 + 2] = 6
        self.assertFalse(is_valid(grid, 6, 0, 2))
        self.assertTrue(is_valid(grid, 6, 0, 3))

    def test_rejects_value_in_box_that_shares_neither_row_nor_column(self) -> None:
        grid = [0] * 81
        grid[3 * 9 + 3] = 7
        self.assertFalse(is_valid(grid, 7, 4, 4))
        self.assertFalse(is_valid(grid, 7, 5, 5))
        self.assertTrue(is_valid(grid, 7, 6, 6))

    def test_box_check_skips_only_the_target_cell(self) -> None:
        grid = parse(CLASSIC_SOLUTION)
        for row in range(9):
            for col in range(9):
                self.assertTrue(is_valid(grid, grid[row * 9 + col], row, col), (row, col))

    def test_box_check_outside_first_box_sees_own_box(self) -> None:
        grid = [0] * 81
        grid[7 * 9 + 8] = 4
        self.assertFalse(is_valid(grid, 4, 6, 6))
        self.assertTrue(is_valid(grid, 4, 5, 6))

    def test_does_not_mutate_grid(self) -> None:
        grid = parse(CLASSIC_PUZZLE)
        snapshot = list(grid)
        is_valid(grid, 9, 4, 4)
        self.assertEqual(grid, snapshot)


class TestFindConflicts(unittest.TestCase):
    def test_no_conflicts_in_consistent_grid(self) -> None:
        self.assertEqual(find_conflicts(parse(CLASSIC_PUZZLE)), [])

    def test_reports_both_cells_of_duplicate_in_row(self) -> None:
        grid = [0] * 81
        grid[0] = 5
        grid[8] = 5
        self.assertEqual(find_conflicts(grid), [(0, 0), (0, 8)])


class TestBoundaryValidation(unittest.TestCase):
    def test_normalize_grid_accepts_rows_with_none(self) -> None:
        rows = [[None] * 9 for _ in range(9)]
        rows[0][0] = 5
        grid = normalize_grid(rows)
        self.assertEqual(len(grid), 81)
        self.assertEqual(grid[0], 5)
        self.assertEqual(grid[1:], [0] * 80)

    def test_normalize_grid_accepts_flat_list(self) -> None:
        self.assertEqual(normalize_grid(parse(CLASSIC_PUZZLE)), parse(CLASSIC_PUZZLE))

    def test_normalize_grid_defaults_to_empty(self) -> None:
        self.assertEqual(normalize_grid(None), [0] * 81)

    def test_normalize_grid_rejects_wrong_shape(self) -> None:
        with self.assertRaises(ValueError):
            normalize_grid([[1, 2], [3, 4]])
        with self.assertRaises(ValueError):
            normalize_grid([0] * 80)

    def test_normalize_grid_rejects_out_of_range_values(self) -> None:
        rows = [[0] * 9 for _ in range(9)]
        rows[2][2] = 10
        with self.assertRaises(ValueError):
            normalize_grid(rows)

    def test_normalize_grid_rejects_non_integers(self) -> None:
        rows = [[0] * 9 for _ in range(9)]
        rows[0][0] = "5"
        with self.assertRaises(ValueError):
            normalize_grid(rows)
        rows[0][0] = True
        with self.assertRaises(ValueError):
            normalize_grid(rows)

    def test_fixed_mask_defaults_to_filled_cells(self) -> None:
        grid = parse(CLASSIC_PUZZLE)
        mask = normalize_fixed_mask(None, grid)
        self.assertEqual(mask, [value != 0 for value in grid])

    def test_fixed_mask_cannot_mark_empty_cell(self) -> None:
        grid = [0] * 81
        mask = [False] * 81
        mask[0] = True
        with self.assertRaises(ValueError):
            normalize_fixed_mask(mask, grid)

    def test_coordinates_and_digits_are_range_checked(self) -> None:
        self.assertEqual(validate_coordinate(8, "row"), 8)
        self.assertEqual(validate_digit(1), 1)
        with self.assertRaises(ValueError):
            validate_coordinate(9, "row")
        with self.assertRaises(ValueError):
            validate_coordinate(-1, "col")
        with self.assertRaises(ValueError):
            validate_digit(0)
        with self.assertRaises(ValueError):
            validate_digit(10)


if __name__ == "__main__":
    unittest.main()
