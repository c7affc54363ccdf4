# seamcarve

Shrink images without squashing what matters in them. `seamcarve` makes
plain-text PPM (`P3`) images smaller by seam carving. It removes the connected
path of pixels with the least visual energy, one path at a time. Edges and
objects keep their shape while empty background gets narrower.

## Installation

```
pip install .
```

## Command line

```
seamcarve-resize IN_FILENAME OUT_FILENAME WIDTH [HEIGHT]
```

The command reads `IN_FILENAME` and carves the image down to `WIDTH` columns.
If `HEIGHT` is given, it also carves the image down to `HEIGHT` rows. It writes
the result to `OUT_FILENAME` as a `P3` PPM file.

The command prints a message and exits with status 1 in these cases:

- the wrong number of arguments is given;
- a size is zero or negative, or larger than the original;
- either file cannot be opened;
- the input is not a readable PPM image.

A size argument is read like C's `atoi`: leading digits count and anything
after them is ignored. A non-number counts as 0 and is rejected.

The output file is opened before the input is checked. If the input turns out
to be bad, an empty output file may be left behind.

```
seamcarve-resize dog.ppm dog_4x5.ppm 4 5
```

## Library

```python
from seamcarve.image import Image
from seamcarve.processing import seam_carve

with open("dog.ppm") as stream:
    image = Image.from_ppm(stream)

smaller = seam_carve(image, 4, 5)

with open("dog_small.ppm", "w") as stream:
    smaller.write_ppm(stream)
```

The processing functions return new images and leave their input unchanged.

### `seamcarve.matrix.Matrix`

A fixed-size grid of integers. Build it with `Matrix(width, height, fill=0)`.

- It is indexed by `(row, column)`.
- It has the `width` and `height` properties.
- `index(row, column)` gives an element's row-major position. `row_of` and
  `column_of` turn such a position back into its row and column.
- `fill` and `fill_border` set values. `max`, `min_value_in_row` and
  `column_of_min_value_in_row` read them. The two row functions work on the
  half-open range `[column_start, column_end)`, and
  `column_of_min_value_in_row` prefers the leftmost column on a tie.
- `to_text` gives the text form and `write` writes it to a stream. The text
  form is the size line `WIDTH HEIGHT`, then one line per row with each value
  followed by a space.
- `copy` returns an independent copy.

Matrices compare equal when their sizes and contents match.

### `seamcarve.image`

`Image(width, height)` is an RGB image of `Pixel(r, g, b)` values.

- It is indexed by `(row, column)`.
- It has `width`, `height`, `fill` and `copy`.
- `Image.from_ppm(stream)` and `Image.from_ppm_text(text)` read a PPM image
  without comments. Any whitespace may separate the values.
- `to_ppm` and `write_ppm` write an image as PPM text, with each value
  followed by a space.
- Malformed input raises `PPMFormatError`, a subclass of `ValueError`.

### `seamcarve.processing`

This module holds the steps of the algorithm:

- `compute_energy_matrix(image)`: border pixels get the largest energy found
  inside the image.
- `compute_vertical_cost_matrix(energy)`
- `find_minimal_vertical_seam(cost)`: returns one column per row, from top to
  bottom.
- `remove_vertical_seam(image, seam)`
- `rotate_left(image)` and `rotate_right(image)`
- `seam_carve_width(image, new_width)`, `seam_carve_height(image, new_height)`
  and `seam_carve(image, new_width, new_height)`. `seam_carve` narrows the
  image first and then shortens it.

Sizes out of range raise `ValueError`. When two seams cost the same, the
leftmost one is removed, so the output is deterministic.

## Limits

Images and matrices can be at most 500 pixels wide and 500 pixels high. Only
the plain `P3` PPM format without comments is read. Images can only be made
smaller, never larger.

## Running the tests

```
pip install .[test]
pytest
```