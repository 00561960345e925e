import logging
import threading
from time import perf_counter

import numba as nb
import numpy as np

from .bands import split_bands
from .config import DEFAULT_LIMIT, default_workers
from .errors import InvalidGeometry, RenderError
from .escape import check_limit, escape_count, escape_intensity
from .geometry import PlaneWindow, check_bounds, pixel_to_point

logger = logging.getLogger(__name__)


@nb.njit(nogil=True)
def render_band(pixels, bounds, first_row, upper_left, lower_right, limit):
    """Fill the rows starting at `first_row` of an image of size `bounds`.

    `pixels` holds only the band's rows and the window is the one for the
    whole image, so a pixel gets the same value whichever band renders it.
    """
    width = bounds[0]
    rows = pixels.shape[0] // width
    for row in range(rows):
        for column in range(width):
            point = pixel_to_point(
                bounds, (column, first_row + row), upper_left, lower_right
            )
            pixels[row * width + column] = escape_intensity(
                escape_count(point, limit), limit
            )


def _as_pixel_buffer(pixels):
    """View `pixels` as a writable flat uint8 array; bytearrays are wrapped, not copied."""
    if not isinstance(pixels, np.ndarray):
        try:
            pixels = np.frombuffer(pixels, dtype=np.uint8)
        except (TypeError, ValueError) as exc:
            raise InvalidGeometry(f"cannot render into {type(pixels).__name__}") from exc
    if pixels.dtype != np.uint8 or pixels.ndim != 1:
        raise InvalidGeometry(
            f"buffer must be a flat uint8 array, got {pixels.ndim}-D {pixels.dtype}"
        )
    if not pixels.flags.writeable:
        raise InvalidGeometry("buffer is read-only")
    return pixels


def render(pixels, bounds, upper_left, lower_right, limit=DEFAULT_LIMIT):
    """Render the whole image into `pixels` on the calling thread."""
    width, height = check_bounds(bounds)
    limit = check_limit(limit)
    pixels = _as_pixel_buffer(pixels)
    if pixels.size != width * height:
        raise InvalidGeometry(
            f"buffer holds {pixels.size} pixels, bounds {width}x{height} need {width * height}"
        )
    window = PlaneWindow(complex(upper_left), complex(lower_right))
    render_band(pixels, (width, height), 0, window.upper_left, window.lower_right, limit)


def render_parallel(bounds, window, limit=DEFAULT_LIMIT, workers=None):
    """Render `window` at `bounds` with one thread per band of rows.

    Returns a read-only flat uint8 buffer in row-major order. All threads are
    joined before returning; if any of them failed a `RenderError` is raised
    and no buffer is handed out.
    """
    width, height = check_bounds(bounds)
    limit = check_limit(limit)
    if not isinstance(window, PlaneWindow):
        window = PlaneWindow(*window)
    if workers is None:
        workers = default_workers()

    pixels = np.zeros(width * height, dtype=np.uint8)
    bands = split_bands(pixels, (width, height), window, workers)
    logger.debug(
        "rendering %dx%d in %d bands of up to %d rows",
        width, height, len(bands), bands[0].rows,
    )

    errors = [None] * len(bands)

    def work(index, band):
        try:
            render_band(
                band.pixels, (width, height), band.top,
                window.upper_left, window.lower_right, limit,
            )
        except Exception as exc:
            errors[index] = exc

    ts = perf_counter()
    threads = []
    try:
        for index, band in enumerate(bands):
            logger.debug(
                "band %d: rows [%d, %d) over %s .. %s",
                index, band.top, band.bottom,
                band.window.upper_left, band.window.lower_right,
            )
            thread = threading.Thread(
                target=work, args=(index, band), name=f"mandelbrot-band-{index}"
            )
            thread.start()
            threads.append(thread)
    except RuntimeError as exc:
        raise RenderError(f"could not start render thread {len(threads)}") from exc
    finally:
        for thread in threads:
            thread.join()

    for index, exc in enumerate(errors):
        if exc is not None:
            raise RenderError(f"band {index} failed") from exc

    pixels.flags.writeable = False
    logger.info(
        "rendered %dx%d with %d threads in %.3f s",
        width, height, len(bands), perf_counter() - ts,
    )
    return pixels
