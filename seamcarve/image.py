"""RGB images stored as three integer channels, with PPM (P3) input and output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from seamcarve.matrix import Matrix

MAX_INTENSITY = 255


class PPMFormatError(ValueError):
    """Raised when PPM text cannot be read as an image."""


@dataclass(frozen=True)
class Pixel:
    """An RGB colour."""

    r: int
    g: int
    b: int


class Image:
    """A width-by-height RGB image addressed by (row, column)."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int) -> None:
        self._red = Matrix(width, height)
        self._green = Matrix(width, height)
        self._blue = Matrix(width, height)

    @property
    def width(self) -> int:
        return self._red.width

    @property
    def height(self) -> int:
        return self._red.height

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"

    @classmethod
    def from_ppm(cls, stream: TextIO) -> Image:
        """Read a comment-free PPM image from a text stream."""
        return cls.from_ppm_text(stream.read())

    @classmethod
    def from_ppm_text(cls, text: str) -> Image:
        """Parse a comment-free PPM image; any whitespace separates tokens."""
        tokens = text.split()
        if len(tokens) < 4:
            raise PPMFormatError("PPM header is incomplete")
        try:
            numbers = [int(token) for token in tokens[1:]]
        except ValueError as error:
            raise PPMFormatError(f"PPM holds a non-integer value: {error}") from None
        width, height = numbers[0], numbers[1]
        try:
            image = cls(width, height)
        except ValueError as error:
            raise PPMFormatError(str(error)) from None
        samples = numbers[3:]
        needed = width * height * 3
        if len(samples) < needed:
            raise PPMFormatError(
                f"PPM holds {len(samples)} samples, expected {needed}"
            )
        values = iter(samples)
        for row in range(height):
            for column in range(width):
                image[row, column] = Pixel(next(values), next(values), next(values))
        return image

    def __getitem__(self, position: tuple[int, int]) -> Pixel:
        return Pixel(
            self._red[position], self._green[position], self._blue[position]
        )

    def __setitem__(self, position: tuple[int, int], color: Pixel) -> None:
        self._red.index(*position)
        self._red[position] = color.r
        self._green[position] = color.g
        self._blue[position] = color.b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self._red == other._red
            and self._green == other._green
            and self._blue == other._blue
        )

    def fill(self, color: Pixel) -> None:
        """Set every pixel to color."""
        self._red.fill(color.r)
        self._green.fill(color.g)
        self._blue.fill(color.b)

    def copy(self) -> Image:
        """Return an independent copy."""
        duplicate = Image(self.width, self.height)
        duplicate._red = self._red.copy()
        duplicate._green = self._green.copy()
        duplicate._blue = self._blue.copy()
        return duplicate

    def to_ppm(self) -> str:
        """Return the image in PPM form, each value followed by a space."""
        lines = [f"P3\n{self.width} {self.height}\n{MAX_INTENSITY}\n"]
        for row in range(self.height):
            parts = []
            for column in range(self.width):
                pixel = self[row, column]
                parts.append(f"{pixel.r} {pixel.g} {pixel.b} ")
            lines.append("".join(parts) + "\n")
        return "".join(lines)

    def write_ppm(self, stream: TextIO) -> None:
        """Write the image to stream in PPM form."""
        stream.write(self.to_ppm())