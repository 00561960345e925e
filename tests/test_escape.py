import math

import numpy as np
import pytest

from mandelbrot import InvalidGeometry, escape_count, escape_intensity, escape_time


@pytest.mark.parametrize("limit", [1, 2, 50, 255, 1000])
def test_origin_never_escapes(limit):
    assert escape_time(0j, limit) is None


def test_escapes_immediately_outside_radius_two():
    assert escape_time(3 + 0j, 255) == 0
    assert escape_time(complex(0, -2.5), 1) == 0


def test_escape_iteration():
    # orbit of 1: 1, 2, 5 -> |5|^2 > 4 at the third step
    assert escape_time(1 + 0j, 255) == 2
    assert escape_time(1 + 0j, 2) is None


def test_radius_two_is_not_escaped():
    # -2 is mapped to 2 and then stays at 2 forever
    assert escape_time(-2 + 0j, 255) is None


def test_periodic_orbit_stays():
    assert escape_time(-1 + 0j, 255) is None
    assert escape_time(1j, 255) is None


@pytest.mark.parametrize(
    "c",
    [
        complex(math.inf, 0),
        complex(0, -math.inf),
        complex(math.nan, 0),
        complex(0, math.nan),
    ],
)
def test_non_finite_escape_at_once(c):
    assert escape_time(c, 255) == 0


def test_escape_count_uses_limit_for_members():
    assert escape_count(0j, 17) == 17
    assert escape_count(3 + 0j, 17) == 0


def test_escape_time_accepts_numpy_limit():
    assert escape_time(3 + 0j, np.int64(255)) == 0
    assert escape_time(0j, np.int32(20)) is None


@pytest.mark.parametrize("limit", [0, -3, 2.5, True])
def test_escape_time_rejects_bad_limit(limit):
    with pytest.raises(InvalidGeometry):
        escape_time(0j, limit)


def test_intensity_for_byte_limit():
    assert escape_intensity(255, 255) == 0
    assert escape_intensity(0, 255) == 255
    assert escape_intensity(100, 255) == 155
    assert escape_intensity(254, 255) == 1


def test_intensity_scales_other_limits():
    assert escape_intensity(1000, 1000) == 0
    assert escape_intensity(0, 1000) == 255
    assert escape_intensity(500, 1000) == 127
    # slow escapers stay distinguishable from members
    assert escape_intensity(999, 1000) == 1
    assert escape_intensity(0, 10) == 255
    assert escape_intensity(9, 10) == 25
