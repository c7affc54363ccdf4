"""Seam carving: energy, cost, seam search and removal, and resizing."""

from __future__ import annotations

from collections.abc import Sequence

from seamcarve.image import Image, Pixel
from seamcarve.matrix import Matrix


def rotate_left(image: Image) -> Image:
    """Return the image rotated 90 degrees counterclockwise."""
    width, height = image.width, image.height
    rotated = Image(height, width)
    for row in range(height):
        for column in range(width):
            rotated[width - 1 - column, row] = image[row, column]
    return rotated


def rotate_right(image: Image) -> Image:
    """Return the image rotated 90 degrees clockwise."""
    width, height = image.width, image.height
    rotated = Image(height, width)
    for row in range(height):
        for column in range(width):
            rotated[column, height - 1 - row] = image[row, column]
    return rotated


def _squared_difference(first: Pixel, second: Pixel) -> int:
    dr = second.r - first.r
    dg = second.g - first.g
    db = second.b - first.b
    # Scaled down to keep later sums small.
    return (dr * dr + dg * dg + db * db) // 100


def compute_energy_matrix(image: Image) -> Matrix:
    """Return the energy of every pixel; border pixels get the largest interior energy."""
    energy = Matrix(image.width, image.height)
    for row in range(1, image.height - 1):
        for column in range(1, image.width - 1):
            north = image[row - 1, column]
            south = image[row + 1, column]
            west = image[row, column - 1]
            east = image[row, column + 1]
            energy[row, column] = _squared_difference(
                north, south
            ) + _squared_difference(west, east)
    energy.fill_border(energy.max())
    return energy


def _window(column: int, width: int) -> tuple[int, int]:
    return max(column - 1, 0), min(column + 2, width)


def compute_vertical_cost_matrix(energy: Matrix) -> Matrix:
    """Return the cheapest cumulative energy of a vertical path to each element."""
    width, height = energy.width, energy.height
    cost = Matrix(width, height)
    for column in range(width):
        cost[0, column] = energy[0, column]
    for row in range(1, height):
        for column in range(width):
            start, end = _window(column, width)
            cost[row, column] = energy[row, column] + cost.min_value_in_row(
                row - 1, start, end
            )
    return cost


def find_minimal_vertical_seam(cost: Matrix) -> list[int]:
    """Return the column of the cheapest seam in each row, top to bottom.

    Ties go to the leftmost column.
    """
    height, width = cost.height, cost.width
    column = cost.column_of_min_value_in_row(height - 1, 0, width)
    seam = [column]
    for row in range(height - 1, 0, -1):
        start, end = _window(column, width)
        column = cost.column_of_min_value_in_row(row - 1, start, end)
        seam.append(column)
    seam.reverse()
    return seam


def remove_vertical_seam(image: Image, seam: Sequence[int]) -> Image:
    """Return a copy of image one pixel narrower, without the seam's pixel in each row."""
    if image.width < 2:
        raise ValueError("image must be at least 2 pixels wide")
    if len(seam) != image.height:
        raise ValueError(
            f"seam has {len(seam)} entries, image has {image.height} rows"
        )
    for column in seam:
        if not 0 <= column < image.width:
            raise ValueError(f"seam column {column} outside the image")
    carved = Image(image.width - 1, image.height)
    for row, removed in enumerate(seam):
        kept = (c for c in range(image.width) if c != removed)
        for new_column, column in enumerate(kept):
            carved[row, new_column] = image[row, column]
    return carved


def seam_carve_width(image: Image, new_width: int) -> Image:
    """Return the image narrowed to new_width by removing minimal seams."""
    if not 0 < new_width <= image.width:
        raise ValueError(
            f"new width must be in 1..{image.width}, got {new_width}"
        )
    result = image.copy()
    while result.width > new_width:
        energy = compute_energy_matrix(result)
        cost = compute_vertical_cost_matrix(energy)
        seam = find_minimal_vertical_seam(cost)
        result = remove_vertical_seam(result, seam)
    return result


def seam_carve_height(image: Image, new_height: int) -> Image:
    """Return the image shortened to new_height by removing minimal seams."""
    if not 0 < new_height <= image.height:
        raise ValueError(
            f"new height must be in 1..{image.height}, got {new_height}"
        )
    return rotate_right(seam_carve_width(rotate_left(image), new_height))


def seam_carve(image: Image, new_width: int, new_height: int) -> Image:
    """Return the image reduced to new_width by new_height, width first."""
    if not 0 < new_width <= image.width:
        raise ValueError(
            f"new width must be in 1..{image.width}, got {new_width}"
        )
    if not 0 < new_height <= image.height:
        raise ValueError(
            f"new height must be in 1..{image.height}, got {new_height}"
        )
    return seam_carve_height(seam_carve_width(image, new_width), new_height)