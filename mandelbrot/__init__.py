"""Threaded escape-time renderer for the Mandelbrot set."""
from .bands import Band, row_spans, split_bands
from .codec import parse_complex, parse_pair, read_image, write_image
from .errors import InvalidGeometry, MandelbrotError, RenderError
from .escape import escape_count, escape_intensity, escape_time
from .geometry import PlaneWindow, check_bounds, pixel_to_point
from .renderer import render, render_band, render_parallel

__version__ = "0.1.0"
