import operator
from dataclasses import dataclass

import numba as nb

from .errors import InvalidGeometry


@dataclass(frozen=True)
class PlaneWindow:
    """Rectangle of the complex plane shown on the image.

    `upper_left` is drawn at pixel (0, 0) and `lower_right` at the far
    corner (width, height). The imaginary axis points up while image rows
    count down, so the upper-left corner has the larger imaginary part.
    """

    upper_left: complex
    lower_right: complex

    def __post_init__(self):
        # written as `not <` so that NaN corners are rejected too
        if not self.upper_left.real < self.lower_right.real:
            raise InvalidGeometry(
                f"upper-left real part {self.upper_left.real} must be less "
                f"than lower-right real part {self.lower_right.real}"
            )
        if not self.upper_left.imag > self.lower_right.imag:
            raise InvalidGeometry(
                f"upper-left imaginary part {self.upper_left.imag} must be "
                f"greater than lower-right imaginary part {self.lower_right.imag}"
            )

    @property
    def width(self):
        return self.lower_right.real - self.upper_left.real

    @property
    def height(self):
        return self.upper_left.imag - self.lower_right.imag

    @property
    def area(self):
        return self.width * self.height

    def extent(self):
        """[xmin, xmax, ymin, ymax] as expected by `imshow`."""
        return [
            self.upper_left.real,
            self.lower_right.real,
            self.lower_right.imag,
            self.upper_left.imag,
        ]


def check_bounds(bounds):
    """Return `bounds` as a (width, height) tuple of positive ints."""
    try:
        width, height = bounds
    except (TypeError, ValueError):
        raise InvalidGeometry(f"bounds must be a (width, height) pair, got {bounds!r}")
    sizes = []
    for name, value in (("width", width), ("height", height)):
        try:
            if isinstance(value, bool):
                raise TypeError
            value = operator.index(value)
        except TypeError:
            raise InvalidGeometry(f"image {name} must be an int, got {value!r}") from None
        if value <= 0:
            raise InvalidGeometry(f"image {name} must be positive, got {value}")
        sizes.append(value)
    return tuple(sizes)


@nb.njit(nogil=True)
def pixel_to_point(bounds, pixel, upper_left, lower_right):
    """Complex point at `pixel` = (column, row) of an image of size `bounds`."""
    width = lower_right.real - upper_left.real
    height = upper_left.imag - lower_right.imag
    return complex(
        upper_left.real + pixel[0] * width / bounds[0],
        # subtract: rows grow downwards, the imaginary axis grows upwards
        upper_left.imag - pixel[1] * height / bounds[1],
    )
