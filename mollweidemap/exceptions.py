"""
Named error conditions raised by mollweidemap. All subclass ValueError, so callers
that only care about bad input can catch that instead.
"""

__all__ = [
    'InvalidCalibrationError', 'InvalidImageError',
    'NoBoundaryFoundError', 'PixelOutOfBoundsError',
]


class InvalidImageError(ValueError):
    """The image is zero-sized or is not an RGB(A) pixel grid"""


class NoBoundaryFoundError(ValueError):
    """The boundary mask contains no boundary pixels, so no cluster can be formed"""


class InvalidCalibrationError(ValueError):
    """Calibration bounds violate rightmost_x > leftmost_x or bottommost_y > topmost_y"""


class PixelOutOfBoundsError(ValueError):
    """A projected pixel falls outside the image"""

    def __init__(self, pixel, image_size):
        self.pixel = pixel
        self.image_size = image_size
        super().__init__(
            f'Projected pixel {tuple(pixel)} lies outside image of size {tuple(image_size)}'
        )
