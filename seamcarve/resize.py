"""Command that shrinks a PPM image by seam carving."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from seamcarve.image import Image, PPMFormatError
from seamcarve.processing import seam_carve

USAGE = (
    "Usage: resize IN_FILENAME OUT_FILENAME WIDTH [HEIGHT]\n"
    "WIDTH and HEIGHT must be less than or equal to original"
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    """Read a leading integer, giving 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Resize IN_FILENAME to WIDTH (and HEIGHT) and write OUT_FILENAME."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (3, 4):
        print(USAGE)
        return 1
    input_name, output_name = args[0], args[1]
    desired_width = _parse_int(args[2])

    try:
        source = open(input_name, encoding="ascii")
    except OSError:
        print(f"Error opening input file: {input_name}")
        return 1
    with source:
        try:
            target = open(output_name, "w", encoding="ascii")
        except OSError:
            print(f"Error opening output file: {output_name}")
            return 1
        with target:
            try:
                image = Image.from_ppm(source)
            except PPMFormatError as error:
                print(f"Error reading input file: {input_name}: {error}")
                return 1
            if not 0 < desired_width <= image.width:
                print(USAGE)
                return 1
            desired_height = image.height
            if len(args) == 4:
                desired_height = _parse_int(args[3])
                if not 0 < desired_height <= image.height:
                    print(USAGE)
                    return 1
            seam_carve(image, desired_width, desired_height).write_ppm(target)
    return 0


if __name__ == "__main__":
    sys.exit(main())