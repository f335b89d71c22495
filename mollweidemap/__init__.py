
import sys

from mollweidemap._version import __version__  # noqa: F401
from mollweidemap.utils.logging import LOGGER, set_log_level
from mollweidemap.boundary import background_mask, classify
from mollweidemap.calibration import CalibrationBounds, calibrate
from mollweidemap.clusters import Cluster, find_clusters, find_principal_cluster
from mollweidemap.coordinates import GeoCoordinate, PixelCoordinate
from mollweidemap.exceptions import (
    InvalidCalibrationError, InvalidImageError, NoBoundaryFoundError, PixelOutOfBoundsError
)
from mollweidemap.extremes import ExtremalSet, extremes
from mollweidemap.overlay import MarkerOverlay
from mollweidemap.projection import project, project_coordinate, solve_auxiliary_angle
from mollweidemap.utils.conditional_imports import ConditionalPackageInterceptor


ConditionalPackageInterceptor.permit_packages(
    {
        'PIL': 'mollweidemap[image]',
    }
)
sys.meta_path.append(ConditionalPackageInterceptor)  # type: ignore

__all__ = [
    'CalibrationBounds',
    'Cluster',
    'ExtremalSet',
    'GeoCoordinate',
    'InvalidCalibrationError',
    'InvalidImageError',
    'MarkerOverlay',
    'NoBoundaryFoundError',
    'PixelCoordinate',
    'PixelOutOfBoundsError',
    'background_mask',
    'calibrate',
    'classify',
    'extremes',
    'find_clusters',
    'find_principal_cluster',
    'project',
    'project_coordinate',
    'solve_auxiliary_angle',
    'LOGGER',
    'set_log_level',
]
