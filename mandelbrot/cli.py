import argparse
import logging
import sys
from time import perf_counter

from .codec import parse_complex, parse_pair, write_image
from .config import DEFAULT_LIMIT, default_workers
from .errors import MandelbrotError
from .geometry import PlaneWindow
from .renderer import render_parallel
from .utils import interior_area, plot_pixels

logger = logging.getLogger(__name__)

# negative corners need `--` so argparse does not read them as options
EXAMPLE = "example: mandelbrot mandel.png 1000x750 -- -1.20,0.35 -1,0.20"


def _pixels(s):
    bounds = parse_pair(s, "x", int)
    if bounds is None:
        raise argparse.ArgumentTypeError(f"error parsing image dimensions {s!r}")
    return bounds


def _point(s):
    point = parse_complex(s)
    if point is None:
        raise argparse.ArgumentTypeError(f"error parsing corner point {s!r}")
    return point


def build_parser():
    parser = argparse.ArgumentParser(
        prog="mandelbrot",
        description="Write a grayscale PNG of the Mandelbrot set.",
        epilog=EXAMPLE,
    )
    parser.add_argument("file", metavar="FILE", help="output PNG path")
    parser.add_argument("pixels", metavar="PIXELS", type=_pixels,
                        help="image size as WIDTHxHEIGHT")
    parser.add_argument("upper_left", metavar="UPPERLEFT", type=_point,
                        help="upper-left corner as RE,IM")
    parser.add_argument("lower_right", metavar="LOWERRIGHT", type=_point,
                        help="lower-right corner as RE,IM")
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT,
                        help="iteration cap (default: %(default)s)")
    parser.add_argument("--workers", type=int, default=None,
                        help=f"render threads (default: {default_workers()})")
    parser.add_argument("--plot", metavar="PATH",
                        help="also save a preview with complex-plane axes")
    parser.add_argument("--area", action="store_true",
                        help="print the area of the window covered by non-escaping pixels")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log band layout and timings")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        window = PlaneWindow(args.upper_left, args.lower_right)

        print("########################################################")
        print(f"Rendering {args.pixels[0]}x{args.pixels[1]} pixels of "
              f"{window.upper_left} .. {window.lower_right}")
        print("########################################################")
        ts = perf_counter()
        pixels = render_parallel(args.pixels, window, args.limit, args.workers)
        print(f"\tRuntime: {perf_counter() - ts:.3f} s")

        write_image(args.file, pixels, args.pixels)
        print(f"\tImage has been saved in `{args.file}`")

        if args.area:
            print(f"\tInterior area is {interior_area(pixels, window):.6g}")

        if args.plot:
            fig, _, _ = plot_pixels(pixels, args.pixels, window)
            fig.savefig(args.plot)
            print(f"\tPreview has been plotted in `{args.plot}`")
    except (MandelbrotError, OSError) as exc:
        logger.debug("render failed", exc_info=True)
        print(f"mandelbrot: {exc}", file=sys.stderr)
        return 1
    return 0
