"""Split the pixel buffer into horizontal bands, one per render thread.

Every band owns a contiguous run of rows. The rows per band are
ceil(height / workers), so the last band takes whatever is left over and
may be shorter than the others. Bands that would start past the bottom of
the image are dropped, so there can be fewer bands than workers.
"""
from dataclasses import dataclass

import numpy as np

from .errors import InvalidGeometry
from .geometry import PlaneWindow, check_bounds, pixel_to_point


@dataclass
class Band:
    """Rows [top, top + rows) of the image and the buffer slice that holds them.

    `window` is the part of the plane the band covers. It is informational
    (logged by the renderer): pixels are always mapped through the
    whole-image window so the result does not depend on where bands split.
    """

    top: int
    rows: int
    pixels: np.ndarray
    window: PlaneWindow

    @property
    def bottom(self):
        return self.top + self.rows


def row_spans(height, workers):
    """Half-open (top, bottom) row ranges covering [0, height) exactly once."""
    if height < 1:
        raise InvalidGeometry(f"height must be positive, got {height}")
    if workers < 1:
        raise InvalidGeometry(f"worker count must be positive, got {workers}")

    rows_per_band = -(-height // workers)
    spans = []
    for i in range(workers):
        top = i * rows_per_band
        if top >= height:
            break
        spans.append((top, min(height, top + rows_per_band)))
    return spans


def split_bands(pixels, bounds, window, workers):
    """Cut the flat buffer `pixels` into disjoint `Band` views."""
    width, height = check_bounds(bounds)
    if pixels.shape != (width * height,):
        raise InvalidGeometry(
            f"buffer of shape {pixels.shape} does not match bounds {width}x{height}"
        )

    bands = []
    for top, bottom in row_spans(height, workers):
        upper_left = pixel_to_point(
            bounds, (0, top), window.upper_left, window.lower_right
        )
        lower_right = pixel_to_point(
            bounds, (width, bottom), window.upper_left, window.lower_right
        )
        bands.append(
            Band(
                top=top,
                rows=bottom - top,
                pixels=pixels[top * width : bottom * width],
                window=PlaneWindow(upper_left, lower_right),
            )
        )
    return bands
