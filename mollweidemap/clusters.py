"""
Connected-component analysis of boundary masks
"""

__all__ = ['Cluster', 'find_clusters', 'find_principal_cluster']

from collections import deque
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from mollweidemap.coordinates import PixelCoordinate
from mollweidemap.exceptions import NoBoundaryFoundError
from mollweidemap.utils.logging import LOGGER, warn_once

# The 4-neighbourhood, as (dx, dy) offsets
_ORTHOGONAL_OFFSETS = ((0, -1), (0, 1), (-1, 0), (1, 0))


class Cluster:
    """
    A set of mask pixels mutually reachable through up/down/left/right steps.
    Pixels are kept in the order they were discovered, which determines the
    tie-breaking of ExtremalPointSelector.

    Args:
        pixels:
            The pixels of the cluster, in discovery order. Must not be empty.
    """

    def __init__(self, pixels: Sequence[Tuple[int, int]]):
        assert len(pixels) > 0, 'A cluster must contain at least one pixel'
        self.pixels: List[PixelCoordinate] = [PixelCoordinate(*pixel) for pixel in pixels]
        self._members = frozenset(self.pixels)

    def __contains__(self, pixel):
        return tuple(pixel) in self._members

    def __eq__(self, other):
        if not isinstance(other, Cluster):
            return False

        return self._members == other._members

    def __hash__(self):
        return hash(self._members)

    def __iter__(self) -> Iterator[PixelCoordinate]:
        return iter(self.pixels)

    def __len__(self):
        return len(self.pixels)

    def __repr__(self):
        return f'<Cluster of {len(self)} pixels>'

    def bounding_box(self) -> Tuple[PixelCoordinate, PixelCoordinate]:
        """Returns the (min_x, min_y) and (max_x, max_y) corners enclosing the cluster"""
        xs = [pixel.x for pixel in self.pixels]
        ys = [pixel.y for pixel in self.pixels]
        return PixelCoordinate(min(xs), min(ys)), PixelCoordinate(max(xs), max(ys))


def _grow_cluster(
    mask: np.ndarray,
    visited: np.ndarray,
    seed: Tuple[int, int]
) -> List[Tuple[int, int]]:
    """
    Breadth-first expansion from a seed pixel, absorbing every unvisited mask pixel
    reachable through 4-adjacency. Mutates `visited`.
    """
    height, width = mask.shape
    x, y = seed
    visited[y, x] = True
    frontier = deque([seed])
    pixels = []
    while frontier:
        x, y = frontier.popleft()
        pixels.append((x, y))
        for dx, dy in _ORTHOGONAL_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height and mask[ny, nx] and not visited[ny, nx]:
                visited[ny, nx] = True
                frontier.append((nx, ny))

    return pixels


def find_clusters(mask: np.ndarray) -> List[Cluster]:
    """
    Partitions the True pixels of a mask into 4-connected clusters.

    Seeds are taken in raster-scan order (row by row, left to right), so clusters
    are returned in the order their first pixel appears in that scan.

    Args:
        mask:
            A (height, width) boolean array

    Returns:
        List[Cluster], empty if the mask has no True pixels
    """
    mask = np.asarray(mask, dtype=bool)
    visited = np.zeros(mask.shape, dtype=bool)
    clusters = []
    for y, x in np.argwhere(mask):
        if visited[y, x]:
            continue

        clusters.append(Cluster(_grow_cluster(mask, visited, (int(x), int(y)))))

    LOGGER.debug('Found %d clusters in a %s mask', len(clusters), mask.shape)
    return clusters


def find_principal_cluster(mask: np.ndarray) -> Cluster:
    """
    Finds the largest 4-connected cluster of a boundary mask, taken to be the map
    outline. When several clusters share the largest size, the one discovered
    first in raster-scan order wins.

    Args:
        mask:
            A (height, width) boolean array

    Returns:
        Cluster

    Raises:
        NoBoundaryFoundError: if the mask has no True pixels
    """
    clusters = find_clusters(mask)
    if not clusters:
        raise NoBoundaryFoundError('The mask contains no boundary pixels')

    # max() keeps the first of equally sized clusters
    principal = max(clusters, key=len)
    if sum(1 for cluster in clusters if len(cluster) == len(principal)) > 1:
        LOGGER.debug('Clusters tied at the largest size of %d pixels', len(principal))
        warn_once(
            'Multiple clusters share the largest size; '
            'the first in raster-scan order was chosen. (this warning will not repeat)'
        )

    LOGGER.debug('Principal cluster has %d of %d boundary pixels',
                 len(principal), sum(len(cluster) for cluster in clusters))
    return principal
