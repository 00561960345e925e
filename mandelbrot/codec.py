"""Text parsing of command-line values and PNG input/output of pixel buffers."""
import logging

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def parse_pair(s, separator, kind=float):
    """Parse `s` as two `kind` values around the first `separator`.

    parse_pair("400x600", "x", int) gives (400, 600) and
    parse_pair("1.0,0.5", ",") gives (1.0, 0.5). Anything that does not
    split into two convertible halves gives None.
    """
    index = s.find(separator)
    if index < 0:
        return None
    try:
        return kind(s[:index]), kind(s[index + 1 :])
    except ValueError:
        return None


def parse_complex(s):
    """Parse "re,im" as a complex number, or return None."""
    pair = parse_pair(s, ",", float)
    if pair is None:
        return None
    return complex(*pair)


def write_image(filename, pixels, bounds):
    """Write a row-major buffer of 8-bit gray levels as a PNG file."""
    width, height = bounds
    data = np.ascontiguousarray(pixels, dtype=np.uint8)
    if data.size != width * height:
        raise ValueError(
            f"buffer holds {data.size} pixels, bounds {width}x{height} need {width * height}"
        )
    image = Image.frombytes("L", (width, height), data.tobytes())
    image.save(filename, format="PNG")
    logger.debug("wrote %dx%d image to %s", width, height, filename)


def read_image(filename):
    """Read a gray PNG back into a flat uint8 buffer and its (width, height)."""
    with Image.open(filename) as image:
        if image.mode != "L":
            raise ValueError(f"{filename} is not an 8-bit grayscale image ({image.mode})")
        pixels = np.asarray(image, dtype=np.uint8).reshape(-1).copy()
        return pixels, image.size
