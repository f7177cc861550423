"""Dense two-dimensional grid used for alignment matrices."""


import os


from typing import Callable, Generic, List, Optional, TypeVar


T = TypeVar('T')


class Matrix(Generic[T]):

    def __init__(self, rows: List[List[T]]) -> None:
        assert all(len(row) == len(rows[0]) for row in rows), \
                'matrix rows must have equal length'
        self.rows = rows

    @classmethod
    def filled(cls, height: int, width: int, default: T) -> 'Matrix[T]':
        return cls([[default for j in range(width)] for i in range(height)])

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        if not self.rows:
            return 0
        return len(self.rows[0])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get_value(self, row: int, col: int) -> Optional[T]:
        """Returns the cell value, or None if (row, col) is outside the grid."""
        if not self.in_bounds(row, col):
            return None
        return self.rows[row][col]

    def set_value(self, row: int, col: int, value: T) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f'({row}, {col}) outside {self.height}x{self.width} matrix')
        self.rows[row][col] = value

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self):
        return f'Matrix({self.rows!r})'


def init_matrix(height: int, width: int, default: T) -> Matrix[T]:
    return Matrix.filled(height, width, default)


def pp_matrix(matrix: Matrix[T], show: Callable[[T], str]=str) -> str:
    """Pretty-print a matrix with right-aligned columns
    """
    cells = [[show(v) for v in row] for row in matrix.rows]
    if not cells or not cells[0]:
        return ''
    width = max(len(c) for row in cells for c in row)
    return os.linesep.join(
        ' '.join(c.rjust(width) for c in row)
        for row in cells
    )
