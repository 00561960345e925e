# Defaults shared by the renderer and the command line
import os

# iteration cap; 255 lines up with the byte range of the output
DEFAULT_LIMIT = 255

# |z|^2 > 4 (|z| > 2) means the orbit diverges to infinity
ESCAPE_NORM_SQR = 4.0


def default_workers():
    """Number of render threads to use when none is given."""
    return os.cpu_count() or 1
