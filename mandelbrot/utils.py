# Some utility functions for looking at rendered images
import matplotlib.pyplot as plt
import numpy as np


def plot_pixels(pixels, bounds, window, figsize=(7, 7), dpi=300):
    """Show a flat gray buffer with axes in complex-plane units."""
    width, height = bounds
    fig, ax = plt.subplots(figsize=figsize, dpi=dpi, layout="constrained")
    p = ax.imshow(
        np.asarray(pixels).reshape(height, width),
        extent=window.extent(),
        cmap="gray",
        vmin=0,
        vmax=255,
    )
    ax.set_xlabel("Re(c)")
    ax.set_ylabel("Im(c)")

    return fig, ax, p


def interior_area(pixels, window):
    """Area of `window` covered by pixels that never escaped (intensity 0)."""
    pixels = np.asarray(pixels)
    return np.count_nonzero(pixels == 0) / pixels.size * window.area
