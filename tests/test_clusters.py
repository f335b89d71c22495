import numpy as np
import pytest

from mollweidemap import NoBoundaryFoundError
from mollweidemap.boundary import classify
from mollweidemap.clusters import *
from tests.functions import blank_image, mask_from_rows, rectangle_map


def test_cluster():
    cluster = Cluster([(1, 2), (2, 2), (2, 3)])
    assert len(cluster) == 3
    assert (2, 2) in cluster
    assert (3, 3) not in cluster
    assert list(cluster) == [(1, 2), (2, 2), (2, 3)]
    assert cluster.pixels[0].x == 1
    assert cluster == Cluster([(2, 3), (1, 2), (2, 2)])
    assert cluster != Cluster([(1, 2)])
    assert repr(cluster) == '<Cluster of 3 pixels>'
    assert cluster.bounding_box() == ((1, 2), (2, 3))

    with pytest.raises(AssertionError):
        Cluster([])


def test_find_clusters():
    mask = mask_from_rows(
        '11000',
        '11001',
        '11000',
        '00000',
        '00000',
    )
    clusters = find_clusters(mask)
    assert [len(x) for x in clusters] == [6, 1]
    assert clusters[0] == Cluster([(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2)])
    assert clusters[1] == Cluster([(4, 1)])

    # Every mask pixel belongs to exactly one cluster
    pixels = [pixel for cluster in clusters for pixel in cluster]
    assert len(pixels) == len(set(pixels)) == mask.sum()


def test_find_clusters_ignores_diagonals():
    mask = mask_from_rows(
        '100',
        '010',
        '001',
    )
    assert [len(x) for x in find_clusters(mask)] == [1, 1, 1]


def test_find_clusters_winding():
    mask = mask_from_rows(
        '11111',
        '00001',
        '11101',
        '10001',
        '11111',
    )
    clusters = find_clusters(mask)
    assert len(clusters) == 1
    assert len(clusters[0]) == mask.sum()


def test_find_clusters_empty():
    assert find_clusters(np.zeros((3, 3), dtype=bool)) == []


def test_find_principal_cluster():
    mask = mask_from_rows(
        '11000',
        '11001',
        '11000',
        '00000',
        '00000',
    )
    assert find_principal_cluster(mask) == Cluster(
        [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2)]
    )


def test_find_principal_cluster_tie(caplog, monkeypatch):
    monkeypatch.setattr('mollweidemap.utils.logging._WARNINGS', set())
    mask = mask_from_rows(
        '00000',
        '00011',
        '00000',
        '11000',
    )
    # Both clusters have two pixels; the first in raster order wins
    assert find_principal_cluster(mask) == Cluster([(3, 1), (4, 1)])
    assert 'share the largest size' in caplog.text


def test_find_principal_cluster_of_map():
    image = rectangle_map()
    image[1, 1] = (0, 0, 0)
    cluster = find_principal_cluster(classify(image))
    assert len(cluster) == 2 * 40 + 2 * 18
    assert (1, 1) not in cluster


def test_find_principal_cluster_no_boundary():
    with pytest.raises(NoBoundaryFoundError):
        find_principal_cluster(np.zeros((4, 4), dtype=bool))

    with pytest.raises(NoBoundaryFoundError):
        find_principal_cluster(classify(blank_image(10, 10)))


def test_find_principal_cluster_tie_warns_once(caplog, monkeypatch):
    monkeypatch.setattr('mollweidemap.utils.logging._WARNINGS', set())

    find_principal_cluster(mask_from_rows('10100'))
    find_principal_cluster(mask_from_rows('11011'))
    assert caplog.text.count('share the largest size') == 1
