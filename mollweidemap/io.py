"""
Reading and writing map images. Requires the optional Pillow dependency
(pip install mollweidemap[image]).
"""

__all__ = ['load_image', 'save_image']

from pathlib import Path
from typing import Union

import numpy as np


def load_image(path: Union[str, Path]) -> np.ndarray:
    """
    Loads an image file as an RGB array of shape (height, width, 3)

    Args:
        path:
            Path to any image format Pillow can read

    Returns:
        np.ndarray of dtype uint8
    """
    from PIL import Image  # pylint: disable=import-outside-toplevel

    with Image.open(path) as img:
        return np.array(img.convert('RGB'))


def save_image(image: np.ndarray, path: Union[str, Path]) -> None:
    """
    Writes an RGB(A) array to an image file, the format being inferred from the
    file extension
    """
    from PIL import Image  # pylint: disable=import-outside-toplevel

    Image.fromarray(np.asarray(image, dtype=np.uint8)).save(path)
