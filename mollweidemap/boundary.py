"""
Detection of the outline where drawn map content meets a bright background
"""

__all__ = ['background_mask', 'classify']

import numpy as np

from mollweidemap._const import BACKGROUND_THRESHOLD
from mollweidemap.exceptions import InvalidImageError

# The 8-neighbourhood, as (dy, dx) offsets
_NEIGHBOUR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def _validate_image(image: np.ndarray) -> np.ndarray:
    image = np.asarray(image)
    if image.ndim != 3 or image.shape[2] not in (3, 4):
        raise InvalidImageError(
            f'Expected an RGB(A) image of shape (height, width, 3|4), received {image.shape}'
        )

    if image.shape[0] == 0 or image.shape[1] == 0:
        raise InvalidImageError('Cannot classify a zero-sized image')

    return image


def background_mask(image: np.ndarray, threshold: int = BACKGROUND_THRESHOLD) -> np.ndarray:
    """
    Flags pixels whose red, green and blue channels all exceed the threshold.

    Args:
        image:
            An RGB(A) image as a (height, width, channels) array. An alpha channel
            is ignored.

        threshold:
            (Default 230) The channel value that must be exceeded

    Returns:
        A (height, width) boolean array
    """
    image = _validate_image(image)
    return np.all(image[:, :, :3] > threshold, axis=2)


def classify(image: np.ndarray, threshold: int = BACKGROUND_THRESHOLD) -> np.ndarray:
    """
    Computes the boundary mask of an image. A pixel is on the boundary when it is
    not background itself but at least one of its eight neighbours (diagonals
    included) is. Neighbours beyond the image edge are ignored rather than
    assumed to be background.

    Args:
        image:
            An RGB(A) image as a (height, width, channels) array

        threshold:
            (Default 230) Pixels with every channel above this value are background

    Returns:
        A (height, width) boolean array, True on boundary pixels

    Raises:
        InvalidImageError: if the image is zero-sized or not RGB(A)
    """
    background = background_mask(image, threshold)
    height, width = background.shape

    # Out of range neighbours are padded as non-background so they never count
    padded = np.pad(background, 1, mode='constant', constant_values=False)
    touches_background = np.zeros_like(background)
    for dy, dx in _NEIGHBOUR_OFFSETS:
        touches_background |= padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]

    return ~background & touches_background
