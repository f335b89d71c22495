"""
Forward Mollweide projection from (latitude, longitude) to pixels of a calibrated map
"""

__all__ = ['project', 'project_coordinate', 'solve_auxiliary_angle']

import math
from typing import Optional, Sequence, Tuple, Union

from mollweidemap._const import (
    NEWTON_CONVERGENCE_TOLERANCE, NEWTON_DERIVATIVE_EPSILON,
    NEWTON_MAX_ITERATIONS, POLE_EPSILON
)
from mollweidemap.calibration import CalibrationBounds
from mollweidemap.coordinates import GeoCoordinate, PixelCoordinate
from mollweidemap.exceptions import PixelOutOfBoundsError
from mollweidemap.utils.functions import clamp, round_half_away
from mollweidemap.utils.logging import LOGGER, warn_once

_OUT_OF_BOUNDS_POLICIES = ('propagate', 'clamp', 'reject')


def solve_auxiliary_angle(phi: float) -> Tuple[float, bool]:
    """
    Solves 2θ + sin(2θ) = π·sin(φ) for the auxiliary angle θ by Newton-Raphson,
    starting from θ = φ.

    Within POLE_EPSILON of either pole the derivative vanishes, so θ = ±π/2 is
    returned directly. Otherwise at most NEWTON_MAX_ITERATIONS steps are taken,
    stopping early if the derivative falls below NEWTON_DERIVATIVE_EPSILON.

    Args:
        phi:
            The latitude, in radians

    Returns:
        (theta, converged), where converged reports whether the last step moved
        theta by less than NEWTON_CONVERGENCE_TOLERANCE. Theta is returned either way.
    """
    if abs(phi) >= math.pi / 2 - POLE_EPSILON:
        return math.copysign(math.pi / 2, phi), True

    target = math.pi * math.sin(phi)
    theta = phi
    step = math.inf
    for _ in range(NEWTON_MAX_ITERATIONS):
        denom = 2 + 2 * math.cos(2 * theta)
        if abs(denom) < NEWTON_DERIVATIVE_EPSILON:
            break

        step = (2 * theta + math.sin(2 * theta) - target) / denom
        theta -= step

    return theta, abs(step) < NEWTON_CONVERGENCE_TOLERANCE


def _resolve_out_of_bounds(
    pixel: PixelCoordinate,
    image_size: Optional[Tuple[int, int]],
    out_of_bounds: str
) -> PixelCoordinate:
    if out_of_bounds not in _OUT_OF_BOUNDS_POLICIES:
        raise ValueError(
            f"Unknown out_of_bounds policy '{out_of_bounds}'. Options: {list(_OUT_OF_BOUNDS_POLICIES)}"
        )

    if out_of_bounds == 'propagate':
        return pixel

    if image_size is None:
        raise ValueError(f"The '{out_of_bounds}' policy requires an image_size")

    width, height = image_size
    if pixel.in_bounds(width, height):
        return pixel

    if out_of_bounds == 'reject':
        raise PixelOutOfBoundsError(pixel, image_size)

    return PixelCoordinate(clamp(pixel.x, 0, width - 1), clamp(pixel.y, 0, height - 1))


def project(
    lat: float,
    lon: float,
    bounds: Union[CalibrationBounds, Sequence[float]],
    image_size: Optional[Tuple[int, int]] = None,
    out_of_bounds: str = 'propagate',
) -> PixelCoordinate:
    """
    Locates a (latitude, longitude) pair on a Mollweide map whose extents are
    given by the calibration bounds.

    The map is treated as an ellipse 4·√2·R wide and 2·√2·R tall with
    R = (rightmost_x - leftmost_x) / (4·√2), so the equator spans the calibrated
    width and the poles sit on topmost_y and bottommost_y.

    Args:
        lat:
            Latitude in degrees, within [-90, 90]

        lon:
            Longitude in degrees, within [-180, 180]

        bounds:
            A CalibrationBounds, or a (leftmost_x, rightmost_x, topmost_y, bottommost_y)
            sequence

        image_size: (Tuple[int, int])
            (Optional) The (width, height) of the target image. Required by the
            'clamp' and 'reject' policies.

        out_of_bounds: (str)
            (Default 'propagate') What to do with a pixel falling outside image_size:
            'propagate' returns it unchanged, 'clamp' moves it to the nearest edge
            pixel and 'reject' raises PixelOutOfBoundsError.

    Returns:
        PixelCoordinate
    """
    if not isinstance(bounds, CalibrationBounds):
        bounds = CalibrationBounds.from_tuple(bounds)

    phi = math.radians(lat)
    lam = math.radians(lon)

    theta, converged = solve_auxiliary_angle(phi)
    if not converged:
        LOGGER.debug('Auxiliary angle did not converge for latitude %s', lat)
        warn_once(
            'Auxiliary angle did not converge near the poles; '
            'projected pixels may be imprecise. (this warning will not repeat)'
        )

    r = bounds.radius
    x = r * (2 * math.sqrt(2) / math.pi) * lam * math.cos(theta)
    y = r * math.sqrt(2) * math.sin(theta)

    pixel_x = (x + 2 * r * math.sqrt(2)) / (4 * r * math.sqrt(2)) * bounds.width + bounds.leftmost_x
    pixel_y = (1 - y / (math.sqrt(2) * r)) / 2 * bounds.height + bounds.topmost_y

    pixel = PixelCoordinate(round_half_away(pixel_x), round_half_away(pixel_y))
    return _resolve_out_of_bounds(pixel, image_size, out_of_bounds)


def project_coordinate(
    coordinate: GeoCoordinate,
    bounds: Union[CalibrationBounds, Sequence[float]],
    **kwargs
) -> PixelCoordinate:
    """
    Convenience wrapper around project() for a GeoCoordinate.

    Keyword Args:
        image_size, out_of_bounds: as for project()
    """
    return project(coordinate.latitude, coordinate.longitude, bounds, **kwargs)
