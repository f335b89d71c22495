import numpy as np
import pytest

from mollweidemap import InvalidImageError
from mollweidemap.boundary import *
from tests.functions import blank_image, rectangle_map


def test_background_mask():
    image = blank_image(3, 2)
    image[0, 0] = (231, 231, 231)
    image[0, 1] = (230, 255, 255)
    image[1, 2] = (255, 255, 0)
    assert background_mask(image).tolist() == [
        [True, False, True],
        [True, True, False],
    ]

    # A custom threshold
    assert background_mask(image, threshold=0).tolist() == [
        [True, True, True],
        [True, True, False],
    ]


def test_background_mask_ignores_alpha():
    image = np.zeros((2, 2, 4), dtype=np.uint8)
    image[:, :, :3] = 255
    assert background_mask(image).all()


def test_classify_diagonal_neighbour():
    image = blank_image(5, 5, value=0)
    image[0, 0] = 255

    mask = classify(image)
    # (1, 1) touches the background only diagonally
    assert mask[1, 1]
    assert mask[0, 1] and mask[1, 0]
    # Background pixels are never boundary pixels
    assert not mask[0, 0]
    # Interior pixels, including those on the image edge
    assert not mask[3, 3]
    assert not mask[4, 4]
    assert not mask[0, 2]
    assert mask.sum() == 3


def test_classify_rectangle_outline():
    mask = classify(rectangle_map())
    assert mask.shape == (30, 60)

    expected = np.zeros((30, 60), dtype=bool)
    expected[5:25, 10:50] = True
    expected[6:24, 11:49] = False
    assert (mask == expected).all()


def test_classify_all_background():
    assert not classify(blank_image(8, 4)).any()


def test_classify_all_content():
    # No background anywhere, and the image edge is not treated as background
    assert not classify(blank_image(8, 4, value=0)).any()


def test_classify_invalid_image():
    with pytest.raises(InvalidImageError):
        classify(np.zeros((0, 5, 3), dtype=np.uint8))

    with pytest.raises(InvalidImageError):
        classify(np.zeros((5, 0, 3), dtype=np.uint8))

    with pytest.raises(InvalidImageError):
        classify(np.zeros((5, 5), dtype=np.uint8))

    with pytest.raises(InvalidImageError):
        classify(np.zeros((5, 5, 2), dtype=np.uint8))
