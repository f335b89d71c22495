"""
Representation of geographic points and of pixels on a rendered map
"""

__all__ = ['GeoCoordinate', 'PixelCoordinate']

from typing import NamedTuple, Tuple, Union


class PixelCoordinate(NamedTuple):
    """A pixel position, x counted rightwards from the left edge and y downwards from the top"""
    x: int
    y: int

    def in_bounds(self, width: int, height: int) -> bool:
        """Whether the pixel lies within an image of the given width and height"""
        return 0 <= self.x < width and 0 <= self.y < height


class GeoCoordinate:
    """
    Representation of a (latitude, longitude) pair, in degrees. Values outside
    [-90, 90] and [-180, 180] respectively are refused rather than wrapped, since the
    map projection is only defined over that domain.
    """

    __slots__ = ('_latitude', '_longitude')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        lat, lon = float(latitude), float(longitude)
        if not -90 <= lat <= 90:
            raise ValueError(f'latitude {lat} is outside [-90, 90]')

        if not -180 <= lon <= 180:
            raise ValueError(f'longitude {lon} is outside [-180, 180]')

        self._latitude = lat
        self._longitude = lon

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def __eq__(self, other):
        if not isinstance(other, GeoCoordinate):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoCoordinate({self.latitude}, {self.longitude})>'

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a GeoCoordinate from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))

        Returns:
            GeoCoordinate
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return GeoCoordinate(convert(lat), convert(lon))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert this coordinate to a pair of (degrees, minutes, seconds, hemisphere)
        tuples, latitude first.
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round(seconds, 5)

        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self) -> Tuple[float, float]:
        """Returns the coordinate as a (latitude, longitude) tuple"""
        return self.latitude, self.longitude
