"""A fixed-size two-dimensional grid of integers."""

from __future__ import annotations

from typing import TextIO

MAX_MATRIX_WIDTH = 500
MAX_MATRIX_HEIGHT = 500


class Matrix:
    """A width-by-height grid of integers stored in row-major order."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int, fill: int = 0) -> None:
        if not 0 < width <= MAX_MATRIX_WIDTH:
            raise ValueError(
                f"width must be in 1..{MAX_MATRIX_WIDTH}, got {width}"
            )
        if not 0 < height <= MAX_MATRIX_HEIGHT:
            raise ValueError(
                f"height must be in 1..{MAX_MATRIX_HEIGHT}, got {height}"
            )
        self._width = width
        self._height = height
        self._data = [fill] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __repr__(self) -> str:
        return f"Matrix(width={self._width}, height={self._height})"

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self._height:
            raise IndexError(f"row {row} out of range 0..{self._height - 1}")

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self._width:
            raise IndexError(
                f"column {column} out of range 0..{self._width - 1}"
            )

    def index(self, row: int, column: int) -> int:
        """Return the row-major position of the element at (row, column)."""
        self._check_row(row)
        self._check_column(column)
        return row * self._width + column

    def row_of(self, index: int) -> int:
        """Return the row of the element at a row-major position."""
        self._check_index(index)
        return index // self._width

    def column_of(self, index: int) -> int:
        """Return the column of the element at a row-major position."""
        self._check_index(index)
        return index % self._width

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._data):
            raise IndexError(f"index {index} out of range")

    def __getitem__(self, position: tuple[int, int]) -> int:
        row, column = position
        return self._data[self.index(row, column)]

    def __setitem__(self, position: tuple[int, int], value: int) -> None:
        row, column = position
        self._data[self.index(row, column)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._data == other._data
        )

    def fill(self, value: int) -> None:
        """Set every element to value."""
        self._data = [value] * (self._width * self._height)

    def fill_border(self, value: int) -> None:
        """Set every element in the first/last row and column to value."""
        last_row = self._height - 1
        last_column = self._width - 1
        for row in range(self._height):
            self[row, 0] = value
            self[row, last_column] = value
        for column in range(1, last_column):
            self[0, column] = value
            self[last_row, column] = value

    def max(self) -> int:
        """Return the largest element."""
        return max(self._data)

    def _row_region(
        self, row: int, column_start: int, column_end: int
    ) -> list[int]:
        self._check_row(row)
        if column_start < 0 or column_end > self._width:
            raise IndexError(
                f"columns {column_start}..{column_end} outside 0..{self._width}"
            )
        if column_start >= column_end:
            raise ValueError(
                f"column_start {column_start} must be less than "
                f"column_end {column_end}"
            )
        base = row * self._width
        return self._data[base + column_start:base + column_end]

    def column_of_min_value_in_row(
        self, row: int, column_start: int, column_end: int
    ) -> int:
        """Return the leftmost column of the minimum in [column_start, column_end)."""
        region = self._row_region(row, column_start, column_end)
        offset = min(range(len(region)), key=region.__getitem__)
        return column_start + offset

    def min_value_in_row(
        self, row: int, column_start: int, column_end: int
    ) -> int:
        """Return the minimum of row within [column_start, column_end)."""
        return min(self._row_region(row, column_start, column_end))

    def to_text(self) -> str:
        """Return the size line followed by one line per row, each value followed by a space."""
        lines = [f"{self._width} {self._height}\n"]
        for row in range(self._height):
            base = row * self._width
            values = self._data[base:base + self._width]
            lines.append("".join(f"{value} " for value in values) + "\n")
        return "".join(lines)

    def write(self, stream: TextIO) -> None:
        """Write the text form of the matrix to stream."""
        stream.write(self.to_text())

    def copy(self) -> Matrix:
        """Return an independent copy."""
        duplicate = Matrix(self._width, self._height)
        duplicate._data = list(self._data)
        return duplicate