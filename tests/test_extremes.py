import pytest

from mollweidemap.clusters import Cluster, find_principal_cluster
from mollweidemap.boundary import classify
from mollweidemap.coordinates import PixelCoordinate
from mollweidemap.extremes import *
from tests.functions import rectangle_map


def test_extremes_single_pixel():
    pixel = PixelCoordinate(3, 4)
    assert extremes(Cluster([(3, 4)])) == ExtremalSet(pixel, pixel, pixel, pixel)


def test_extremes_middle_of_ties():
    cluster = Cluster([(2, 0), (2, 1), (2, 2), (3, 1), (4, 1)])
    result = extremes(cluster)
    assert result.west == (2, 1)
    assert result.east == (4, 1)
    # North ties on y=0 hold a single pixel; south ties hold only (2, 2)
    assert result.north == (2, 0)
    assert result.south == (2, 2)


def test_extremes_even_ties():
    # Two tied candidates: index 2 // 2 == 1 picks the second
    cluster = Cluster([(0, 0), (0, 1), (1, 1)])
    assert extremes(cluster).west == (0, 1)


def test_extremes_follow_discovery_order():
    cluster = Cluster([(2, 2), (2, 0), (2, 1)])
    assert extremes(cluster).west == (2, 0)


def test_extremes_discard_superseded_ties():
    cluster = Cluster([(5, 0), (5, 1), (5, 2), (3, 4), (4, 4), (3, 5)])
    result = extremes(cluster)
    # Ties on x=5 are dropped once x=3 is found
    assert result.west == (3, 5)
    assert result.east == (5, 1)
    assert result.north == (5, 0)
    assert result.south == (3, 5)


def test_extremes_of_map_outline():
    cluster = find_principal_cluster(classify(rectangle_map()))
    assert extremes(cluster) == ExtremalSet(
        west=PixelCoordinate(10, 15),
        east=PixelCoordinate(49, 15),
        north=PixelCoordinate(30, 5),
        south=PixelCoordinate(30, 24),
    )


def test_extremes_accepts_pixel_lists():
    assert extremes([(0, 0), (1, 0)]).east == (1, 0)


def test_extremes_empty():
    with pytest.raises(AssertionError):
        extremes([])


def test_extremal_set_json():
    extremal_set = ExtremalSet((1, 2), (9, 3), (5, 0), (4, 8))
    assert extremal_set.to_dict() == {
        'west': [1, 2], 'east': [9, 3], 'north': [5, 0], 'south': [4, 8]
    }
    assert ExtremalSet.from_json(extremal_set.to_json()) == extremal_set
    assert isinstance(ExtremalSet.from_json(extremal_set.to_json()).west, PixelCoordinate)
