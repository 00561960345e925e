"""Escape-time evaluation of the quadratic map z -> z**2 + c.

A point c is in the Mandelbrot set when the orbit of 0 under the map stays
bounded. Once |z| > 2 the orbit provably diverges, so the number of
iterations needed to leave the circle of radius 2 measures how far c is
from the set. Points still inside after `limit` iterations are treated as
members.
"""
import operator

import numba as nb

from .config import ESCAPE_NORM_SQR
from .errors import InvalidGeometry


def check_limit(limit):
    """Return `limit` as a positive Python int; numpy integers are accepted."""
    try:
        if isinstance(limit, bool):
            raise TypeError
        limit = operator.index(limit)
    except TypeError:
        raise InvalidGeometry(f"iteration limit must be an int, got {limit!r}") from None
    if limit < 1:
        raise InvalidGeometry(f"iteration limit must be positive, got {limit}")
    return limit


@nb.njit(nogil=True)
def escape_count(c, limit):
    """Iteration at which the orbit of `c` escapes, or `limit` if it never does."""
    z = 0j
    for i in range(limit):
        z = z * z + c
        # `not <=` so that a NaN orbit counts as escaped
        if not z.real * z.real + z.imag * z.imag <= ESCAPE_NORM_SQR:
            return i
    return limit


def escape_time(c, limit):
    """Return the escape iteration of `c`, or None if it stays within `limit` iterations."""
    limit = check_limit(limit)
    count = escape_count(complex(c), limit)
    if count == limit:
        return None
    return count


@nb.njit(nogil=True)
def escape_intensity(count, limit):
    """Gray level for an `escape_count` result.

    Points that never escape are black. Fast escapers are bright and slow
    ones fade towards black, but an escaped point never reaches 0.
    """
    if count >= limit:
        return 0
    return max(1, (limit - count) * 255 // limit)
