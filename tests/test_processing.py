import pytest

from seamcarve.image import Image, Pixel
from seamcarve.matrix import Matrix
from seamcarve.processing import (
    compute_energy_matrix,
    compute_vertical_cost_matrix,
    find_minimal_vertical_seam,
    remove_vertical_seam,
    rotate_left,
    rotate_right,
    seam_carve,
    seam_carve_height,
    seam_carve_width,
)


def coordinate_image(width, height):
    image = Image(width, height)
    for row in range(height):
        for column in range(width):
            image[row, column] = Pixel(row, column, 0)
    return image


def varied_image(width, height):
    image = Image(width, height)
    for row in range(height):
        for column in range(width):
            image[row, column] = Pixel(
                (row * 37 + column * 11) % 256,
                (row * 5 + column * 53) % 256,
                (row * column * 7) % 256,
            )
    return image


def matrix_from_rows(rows):
    matrix = Matrix(len(rows[0]), len(rows))
    for r, values in enumerate(rows):
        for c, value in enumerate(values):
            matrix[r, c] = value
    return matrix


def test_rotate_left_moves_corners():
    image = coordinate_image(3, 2)
    rotated = rotate_left(image)
    assert (rotated.width, rotated.height) == (2, 3)
    assert rotated[0, 0] == Pixel(0, 2, 0)
    assert rotated[2, 0] == Pixel(0, 0, 0)
    assert rotated[2, 1] == Pixel(1, 0, 0)


def test_rotate_right_moves_corners():
    image = coordinate_image(3, 2)
    rotated = rotate_right(image)
    assert (rotated.width, rotated.height) == (2, 3)
    assert rotated[0, 0] == Pixel(1, 0, 0)
    assert rotated[0, 1] == Pixel(0, 0, 0)
    assert rotated[2, 1] == Pixel(0, 2, 0)


def test_rotations_are_inverse():
    image = varied_image(5, 3)
    assert rotate_right(rotate_left(image)) == image
    assert rotate_left(rotate_right(image)) == image


def test_four_rotations_are_identity():
    image = varied_image(4, 6)
    result = image
    for _ in range(4):
        result = rotate_left(result)
    assert result == image


def test_rotate_does_not_modify_input():
    image = varied_image(4, 2)
    before = image.copy()
    rotate_left(image)
    rotate_right(image)
    assert image == before


def test_energy_interior_and_border():
    image = Image(4, 3)
    image.fill(Pixel(0, 0, 0))
    image[0, 1] = Pixel(100, 0, 0)
    energy = compute_energy_matrix(image)
    assert (energy.width, energy.height) == (4, 3)
    assert energy[1, 1] == 100
    assert energy[1, 2] == 0
    for column in range(4):
        assert energy[0, column] == 100
        assert energy[2, column] == 100
    assert energy[1, 0] == 100
    assert energy[1, 3] == 100


def test_energy_of_uniform_image_is_zero():
    image = Image(5, 5)
    image.fill(Pixel(12, 34, 56))
    assert compute_energy_matrix(image) == Matrix(5, 5)


def test_energy_of_tiny_image_is_zero():
    image = varied_image(2, 2)
    assert compute_energy_matrix(image) == Matrix(2, 2)


def test_cost_matrix_worked_example():
    energy = matrix_from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    cost = compute_vertical_cost_matrix(energy)
    assert cost == matrix_from_rows([[1, 2, 3], [5, 6, 8], [12, 13, 15]])


def test_cost_first_row_equals_energy():
    energy = compute_energy_matrix(varied_image(6, 4))
    cost = compute_vertical_cost_matrix(energy)
    for column in range(6):
        assert cost[0, column] == energy[0, column]


def test_find_seam_worked_example():
    cost = matrix_from_rows([[1, 2, 3], [5, 6, 8], [12, 13, 15]])
    assert find_minimal_vertical_seam(cost) == [0, 0, 0]


def test_find_seam_prefers_leftmost_and_follows_window():
    cost = matrix_from_rows([[0, 7, 7], [9, 9, 2], [5, 1, 1]])
    assert find_minimal_vertical_seam(cost) == [1, 2, 1]


def test_find_seam_is_connected():
    energy = compute_energy_matrix(varied_image(8, 7))
    seam = find_minimal_vertical_seam(compute_vertical_cost_matrix(energy))
    assert len(seam) == 7
    assert all(0 <= column < 8 for column in seam)
    assert all(abs(a - b) <= 1 for a, b in zip(seam, seam[1:]))


def test_remove_vertical_seam():
    image = coordinate_image(3, 2)
    carved = remove_vertical_seam(image, [0, 2])
    assert (carved.width, carved.height) == (2, 2)
    assert carved[0, 0] == Pixel(0, 1, 0)
    assert carved[0, 1] == Pixel(0, 2, 0)
    assert carved[1, 0] == Pixel(1, 0, 0)
    assert carved[1, 1] == Pixel(1, 1, 0)


def test_remove_seam_rejects_narrow_image():
    with pytest.raises(ValueError):
        remove_vertical_seam(Image(1, 2), [0, 0])


def test_remove_seam_rejects_wrong_length():
    with pytest.raises(ValueError):
        remove_vertical_seam(Image(3, 2), [0])


def test_remove_seam_rejects_column_out_of_range():
    with pytest.raises(ValueError):
        remove_vertical_seam(Image(3, 2), [0, 3])


@pytest.mark.parametrize("width, height", [(4, 5), (6, 3), (1, 1), (8, 7)])
def test_seam_carve_sizes(width, height):
    image = varied_image(8, 7)
    carved = seam_carve(image, width, height)
    assert (carved.width, carved.height) == (width, height)


def test_seam_carve_same_size_is_identity():
    image = varied_image(5, 4)
    assert seam_carve(image, 5, 4) == image


def test_seam_carve_does_not_modify_input():
    image = varied_image(6, 5)
    before = image.copy()
    seam_carve(image, 3, 3)
    assert image == before


def test_seam_carve_is_width_then_height():
    image = varied_image(7, 6)
    expected = seam_carve_height(seam_carve_width(image, 4), 3)
    assert seam_carve(image, 4, 3) == expected


def test_seam_carve_width_keeps_uniform_colour():
    image = Image(6, 3)
    image.fill(Pixel(9, 8, 7))
    carved = seam_carve_width(image, 2)
    expected = Image(2, 3)
    expected.fill(Pixel(9, 8, 7))
    assert carved == expected


def test_seam_carve_height_keeps_width():
    image = varied_image(5, 6)
    carved = seam_carve_height(image, 2)
    assert (carved.width, carved.height) == (5, 2)


@pytest.mark.parametrize("width, height", [(0, 3), (6, 3), (3, 0), (3, 6)])
def test_seam_carve_rejects_bad_sizes(width, height):
    with pytest.raises(ValueError):
        seam_carve(varied_image(5, 5), width, height)


def test_seam_carve_width_rejects_growth():
    with pytest.raises(ValueError):
        seam_carve_width(varied_image(3, 3), 4)


def test_seam_carve_height_rejects_zero():
    with pytest.raises(ValueError):
        seam_carve_height(varied_image(3, 3), 0)