"""
Marker overlay for annotating projected points on a map image
"""

__all__ = ['MarkerOverlay']

import math
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

import numpy as np

from mollweidemap._const import (
    MARKER_BORDER_COLOR, MARKER_BORDER_THICKNESS, MARKER_COLOR, MARKER_RADIUS
)
from mollweidemap.coordinates import PixelCoordinate
from mollweidemap.utils.mixins import LoggingMixin


class MarkerOverlay(LoggingMixin):
    """
    Draws a bordered disc marker onto an image, remembering the pixels it covers
    so they can be restored. Placing a new marker first restores the previous one,
    so at most one marker is visible at a time.

    Args:
        radius: (int)
            (Default 5) The marker radius, in pixels

        border_thickness: (int)
            (Default 2) The width of the marker's outer ring

        color: (Tuple[int, int, int])
            (Default red) The fill colour

        border_color: (Tuple[int, int, int])
            (Default black) The ring colour
    """

    def __init__(
        self,
        radius: int = MARKER_RADIUS,
        border_thickness: int = MARKER_BORDER_THICKNESS,
        color: Tuple[int, int, int] = MARKER_COLOR,
        border_color: Tuple[int, int, int] = MARKER_BORDER_COLOR,
    ):
        super().__init__()
        self.radius = radius
        self.border_thickness = border_thickness
        self.color = color
        self.border_color = border_color
        self._hidden: Dict[PixelCoordinate, np.ndarray] = {}

    @property
    def hidden_pixels(self) -> Mapping[PixelCoordinate, np.ndarray]:
        """The original values of the pixels currently covered by the marker"""
        return MappingProxyType(self._hidden)

    def restore(self, image: np.ndarray) -> None:
        """Puts back every pixel covered by the marker, in place"""
        for pixel, value in self._hidden.items():
            image[pixel.y, pixel.x] = value
        self._hidden.clear()

    def place(self, image: np.ndarray, pixel: Tuple[int, int]) -> None:
        """
        Restores the previous marker, then draws a new one centred on `pixel`, in place.
        Parts of the disc falling outside the image are skipped.

        Args:
            image:
                A (height, width, 3) array, modified in place

            pixel:
                The (x, y) centre of the marker
        """
        self.restore(image)

        height, width = image.shape[:2]
        px, py = pixel
        if not PixelCoordinate(px, py).in_bounds(width, height):
            self.warn_once(
                'Marker centre lies outside the image; only its visible part is drawn. '
                '(this warning will not repeat)'
            )

        for dx in range(-self.radius, self.radius + 1):
            for dy in range(-self.radius, self.radius + 1):
                pos = PixelCoordinate(px + dx, py + dy)
                if not pos.in_bounds(width, height):
                    continue

                dist = math.sqrt(dx * dx + dy * dy)
                if dist > self.radius:
                    continue

                if pos not in self._hidden:
                    self._hidden[pos] = image[pos.y, pos.x].copy()

                if dist >= self.radius - self.border_thickness:
                    image[pos.y, pos.x, :3] = self.border_color
                else:
                    image[pos.y, pos.x, :3] = self.color
