class MandelbrotError(Exception):
    pass


class InvalidGeometry(MandelbrotError, ValueError):
    """Image bounds, plane window or render parameters are unusable."""


class RenderError(MandelbrotError, RuntimeError):
    """A render worker failed; no pixels are returned."""
