"""
Calibration bounds anchoring the projection to a rendered map, and the pipeline
that derives them from a reference image
"""

__all__ = ['CalibrationBounds', 'calibrate']

import json
import math
from pathlib import Path
from typing import Any, Dict, Sequence, Union

import numpy as np

from mollweidemap._const import BACKGROUND_THRESHOLD
from mollweidemap.boundary import classify
from mollweidemap.clusters import find_principal_cluster
from mollweidemap.exceptions import InvalidCalibrationError
from mollweidemap.extremes import ExtremalSet, extremes
from mollweidemap.utils.logging import LOGGER


class CalibrationBounds:
    """
    The pixel extents of the drawable map: the x of its leftmost and rightmost points
    and the y of its topmost and bottommost points. Read-only once created.

    Args:
        leftmost_x:
            The x coordinate of the western extreme of the map outline

        rightmost_x:
            The x coordinate of the eastern extreme; must exceed leftmost_x

        topmost_y:
            The y coordinate of the northern extreme of the map outline

        bottommost_y:
            The y coordinate of the southern extreme; must exceed topmost_y
    """

    __slots__ = ('_leftmost_x', '_rightmost_x', '_topmost_y', '_bottommost_y')

    def __init__(
        self,
        leftmost_x: float,
        rightmost_x: float,
        topmost_y: float,
        bottommost_y: float,
    ):
        if not rightmost_x > leftmost_x:
            raise InvalidCalibrationError(
                f'rightmost_x ({rightmost_x}) must be greater than leftmost_x ({leftmost_x})'
            )

        if not bottommost_y > topmost_y:
            raise InvalidCalibrationError(
                f'bottommost_y ({bottommost_y}) must be greater than topmost_y ({topmost_y})'
            )

        self._leftmost_x = leftmost_x
        self._rightmost_x = rightmost_x
        self._topmost_y = topmost_y
        self._bottommost_y = bottommost_y

    @property
    def leftmost_x(self) -> float:
        return self._leftmost_x

    @property
    def rightmost_x(self) -> float:
        return self._rightmost_x

    @property
    def topmost_y(self) -> float:
        return self._topmost_y

    @property
    def bottommost_y(self) -> float:
        return self._bottommost_y

    @property
    def width(self) -> float:
        return self._rightmost_x - self._leftmost_x

    @property
    def height(self) -> float:
        return self._bottommost_y - self._topmost_y

    @property
    def radius(self) -> float:
        """The projection radius R, in pixels, such that the map is 4*sqrt(2)*R wide"""
        return self.width / (4 * math.sqrt(2))

    def __eq__(self, other):
        if not isinstance(other, CalibrationBounds):
            return False

        return self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())

    def __repr__(self):
        return f'<CalibrationBounds({", ".join(map(str, self.to_tuple()))})>'

    @classmethod
    def from_extremes(cls, extremal_set: ExtremalSet):
        """Creates calibration bounds from the four extremal points of a map outline"""
        (left, _), (right, _) = extremal_set.west, extremal_set.east
        (_, top), (_, bottom) = extremal_set.north, extremal_set.south
        return cls(left, right, top, bottom)

    @classmethod
    def from_tuple(cls, bounds: Sequence[float]):
        """Creates calibration bounds from a (left, right, top, bottom) sequence"""
        if len(bounds) != 4:
            raise InvalidCalibrationError(
                f'Expected (left, right, top, bottom), received {len(bounds)} values'
            )
        return cls(*bounds)

    @classmethod
    def from_dict(cls, record: Dict[str, Any]):
        """
        Creates calibration bounds from a dict as produced by .to_dict()

        Args:
            record:
                A dict with keys leftmost_x, rightmost_x, topmost_y and bottommost_y

        Returns:
            CalibrationBounds
        """
        try:
            return cls(
                record['leftmost_x'],
                record['rightmost_x'],
                record['topmost_y'],
                record['bottommost_y'],
            )
        except KeyError as err:
            raise InvalidCalibrationError(f'Calibration record is missing {err}') from err

    @classmethod
    def from_json(cls, json_str: str):
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def load(cls, path: Union[str, Path]):
        """Reads calibration bounds from a JSON file written by .save()"""
        return cls.from_json(Path(path).read_text(encoding='utf-8'))

    def to_dict(self) -> Dict[str, float]:
        return {
            'leftmost_x': self._leftmost_x,
            'rightmost_x': self._rightmost_x,
            'topmost_y': self._topmost_y,
            'bottommost_y': self._bottommost_y,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def to_tuple(self):
        """Returns the bounds as (leftmost_x, rightmost_x, topmost_y, bottommost_y)"""
        return self._leftmost_x, self._rightmost_x, self._topmost_y, self._bottommost_y

    def save(self, path: Union[str, Path]) -> None:
        """Writes the calibration bounds to a JSON file"""
        Path(path).write_text(self.to_json(), encoding='utf-8')


def calibrate(image: np.ndarray, threshold: int = BACKGROUND_THRESHOLD) -> CalibrationBounds:
    """
    Derives calibration bounds from a reference map image: the boundary mask is
    computed, its largest connected outline selected, and the outline's four
    extremal points used as the map extents.

    Args:
        image:
            An RGB(A) image as a (height, width, channels) array

        threshold:
            (Default 230) Pixels with every channel above this value are background

    Returns:
        CalibrationBounds

    Raises:
        InvalidImageError: if the image is empty or not RGB(A)
        NoBoundaryFoundError: if the image contains no map outline
        InvalidCalibrationError: if the outline is degenerate (e.g. a single pixel column)
    """
    cluster = find_principal_cluster(classify(image, threshold))
    bounds = CalibrationBounds.from_extremes(extremes(cluster))
    LOGGER.debug(
        'Calibrated map bounds %s from a %d pixel outline spanning %s',
        bounds, len(cluster), cluster.bounding_box()
    )
    return bounds
