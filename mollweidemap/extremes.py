"""
Selection of the four cardinal extremal points of a cluster
"""

__all__ = ['ExtremalSet', 'extremes']

import json
from typing import Any, Callable, Dict, Iterable, List, NamedTuple

from mollweidemap.coordinates import PixelCoordinate


class ExtremalSet(NamedTuple):
    """The representative westmost, eastmost, northmost and southmost pixels of a cluster"""
    west: PixelCoordinate
    east: PixelCoordinate
    north: PixelCoordinate
    south: PixelCoordinate

    @classmethod
    def from_dict(cls, record: Dict[str, Any]):
        return cls(**{key: PixelCoordinate(*record[key]) for key in cls._fields})

    @classmethod
    def from_json(cls, json_str: str):
        return cls.from_dict(json.loads(json_str))

    def to_dict(self) -> Dict[str, List[int]]:
        return {key: list(getattr(self, key)) for key in self._fields}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


def _select_extreme(
    pixels: Iterable[PixelCoordinate],
    key: Callable[[PixelCoordinate], int]
) -> PixelCoordinate:
    """
    Scans the pixels once, keeping every pixel that attains the maximum of `key`
    in scan order, and returns the middle one (index len // 2) of those.
    """
    best = None
    candidates: List[PixelCoordinate] = []
    for pixel in pixels:
        value = key(pixel)
        if best is None or value > best:
            best = value
            candidates = [pixel]
        elif value == best:
            candidates.append(pixel)

    assert candidates, 'Cannot select an extreme of an empty cluster'
    return candidates[len(candidates) // 2]


def extremes(cluster) -> ExtremalSet:
    """
    Picks one representative pixel for each cardinal direction of a cluster:
    minimum x (west), maximum x (east), minimum y (north) and maximum y (south).

    When several pixels share an extreme coordinate, the middle one in the
    cluster's discovery order is chosen (index len // 2 of the ties).

    Args:
        cluster:
            A non-empty Cluster, or any sequence of (x, y) pixels in discovery order

    Returns:
        ExtremalSet
    """
    pixels = [PixelCoordinate(*pixel) for pixel in cluster]
    assert pixels, 'Cannot select extremes of an empty cluster'

    return ExtremalSet(
        west=_select_extreme(pixels, lambda p: -p.x),
        east=_select_extreme(pixels, lambda p: p.x),
        north=_select_extreme(pixels, lambda p: -p.y),
        south=_select_extreme(pixels, lambda p: p.y),
    )
