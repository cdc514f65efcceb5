"""
KML coordinate tuples.

A coordinate is written ``lon,lat[,alt]``; a coordinate sequence is a
whitespace separated list of those tuples. Longitude and latitude are raw
doubles here, with no range checks, but never NaN. A missing altitude is
stored as NaN and written back as ``NaN`` unless the caller asks for the
two-field form.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from shapely.geometry.base import BaseGeometry

from kmlmodel.core.config import get_settings
from kmlmodel.core.defaults import EMPTY, or_empty
from kmlmodel.core.errors import CoordinateParseError

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def format_number(value: float) -> str:
    """
    Format a double the way the KML writer emits it.

    Finite values use Python's shortest round-trip form (``400.0``,
    ``146.825``); NaN and infinities use the XML Schema spellings.

    Trailing zeros of the input text are not preserved: ``146.820`` is read
    as the double 146.82 and written back as ``146.82``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(value)


def _parse_number(token: str, text: str) -> float:
    try:
        return float(token)
    except ValueError as e:
        raise CoordinateParseError(
            f"Coordinate field {token!r} is not a number", text=text, token=token
        ) from e


def _to_float(name: str, value: object, allow_nan: bool = False) -> float:
    try:
        if isinstance(value, bool):
            raise TypeError("bool is not a coordinate value")
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise CoordinateParseError(
            f"Coordinate {name} {value!r} is not a number", text=value
        ) from e
    if math.isnan(number) and not allow_nan:
        raise CoordinateParseError(f"Coordinate {name} cannot be NaN", text=value)
    return number


@dataclass(frozen=True, eq=False)
class Coordinate:
    """
    One longitude, latitude, altitude triple.

    Attributes:
        longitude: Geodetic longitude in decimal degrees
        latitude: Geodetic latitude in decimal degrees
        altitude: Altitude in meters, NaN when not given
    """

    longitude: float
    latitude: float
    altitude: float = math.nan

    def __post_init__(self) -> None:
        """
        Store all fields as floats.

        Raises:
            CoordinateParseError: If a field is not a number, or longitude or
                latitude is NaN (only the altitude may be missing)
        """
        object.__setattr__(self, "longitude", _to_float("longitude", self.longitude))
        object.__setattr__(self, "latitude", _to_float("latitude", self.latitude))
        altitude = (
            math.nan
            if self.altitude is None
            else _to_float("altitude", self.altitude, allow_nan=True)
        )
        object.__setattr__(self, "altitude", altitude)

    @classmethod
    def create(
        cls, longitude: float, latitude: float, altitude: Optional[float] = None
    ) -> "Coordinate":
        """
        Create a coordinate from numbers.

        Args:
            longitude: Longitude in decimal degrees
            latitude: Latitude in decimal degrees
            altitude: Altitude in meters, None or NaN for "not given"

        Returns:
            Coordinate instance
        """
        return cls(longitude, latitude, math.nan if altitude is None else altitude)

    @classmethod
    def parse(cls, text: str, strict: Optional[bool] = None) -> "Coordinate":
        """
        Parse a ``lon,lat[,alt]`` tuple.

        Args:
            text: Coordinate text, surrounding whitespace ignored
            strict: Reject more than three fields; defaults to the
                ``strict_coordinate_count`` setting. When False the extra
                fields are dropped.

        Returns:
            Coordinate instance

        Raises:
            CoordinateParseError: If the text has fewer than two fields,
                too many fields, or a non-numeric field

        Examples:
            >>> Coordinate.parse("146.825,12.233,400.0").altitude
            400.0
        """
        if not isinstance(text, str):
            raise CoordinateParseError(
                f"Coordinate text must be a string, got {type(text).__name__}", text=text
            )

        tokens = [token.strip() for token in text.strip().split(",")]

        if len(tokens) < 2 or not tokens[0] or not tokens[1]:
            raise CoordinateParseError(
                f"Invalid coordinate {text!r} (need at least lon,lat)", text=text
            )

        if len(tokens) > 3:
            if strict is None:
                strict = get_settings().strict_coordinate_count
            if strict:
                raise CoordinateParseError(
                    f"Invalid coordinate {text!r} (more than lon,lat,alt)", text=text
                )
            logger.debug("Ignoring extra coordinate fields in %r", text)

        longitude = _parse_number(tokens[0], text)
        latitude = _parse_number(tokens[1], text)
        altitude = math.nan
        if len(tokens) > 2 and tokens[2]:
            altitude = _parse_number(tokens[2], text)

        return cls(longitude, latitude, altitude)

    @property
    def has_altitude(self) -> bool:
        """True unless the altitude was omitted."""
        return not math.isnan(self.altitude)

    def as_tuple(self) -> Tuple[float, ...]:
        """Get (lon, lat, alt), or (lon, lat) when the altitude was omitted."""
        if self.has_altitude:
            return (self.longitude, self.latitude, self.altitude)
        return (self.longitude, self.latitude)

    def to_string(self, omit_missing_altitude: Optional[bool] = None) -> str:
        """
        Format as ``lon,lat,alt``.

        Args:
            omit_missing_altitude: Write ``lon,lat`` when the altitude was
                omitted; defaults to the ``omit_missing_altitude`` setting.
                Otherwise a missing altitude is written as ``NaN``.

        Returns:
            Comma-joined coordinate text
        """
        if omit_missing_altitude is None:
            omit_missing_altitude = get_settings().omit_missing_altitude

        fields = [format_number(self.longitude), format_number(self.latitude)]
        if self.has_altitude or not omit_missing_altitude:
            fields.append(format_number(self.altitude))
        return ",".join(fields)

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        # Two omitted altitudes compare equal
        return (
            self.longitude == other.longitude
            and self.latitude == other.latitude
            and (
                self.altitude == other.altitude
                or (not self.has_altitude and not other.has_altitude)
            )
        )

    def __hash__(self) -> int:
        return hash((self.longitude, self.latitude, self.altitude if self.has_altitude else None))


@dataclass(frozen=True)
class Coordinates:
    """
    An ordered, immutable sequence of coordinates.

    Attributes:
        items: Coordinates in document order; never None
    """

    items: Tuple[Coordinate, ...] = field(default=EMPTY)

    def __post_init__(self) -> None:
        """Default a missing item list to the shared empty sequence."""
        items = or_empty(self.items)
        for item in items:
            if not isinstance(item, Coordinate):
                raise TypeError(f"Expected Coordinate, got {type(item).__name__}")
        object.__setattr__(self, "items", items)

    @classmethod
    def create(cls, items: Optional[Iterable[Coordinate]] = None) -> "Coordinates":
        """
        Create a sequence from coordinates.

        Args:
            items: Coordinates in order, or None for an empty sequence

        Returns:
            Coordinates instance
        """
        return cls(or_empty(items))

    @classmethod
    def parse(cls, text: Optional[str], strict: Optional[bool] = None) -> "Coordinates":
        """
        Parse whitespace separated coordinate tuples.

        Args:
            text: Content of a ``coordinates`` element; None or blank gives
                an empty sequence
            strict: Passed through to ``Coordinate.parse``

        Returns:
            Coordinates instance

        Raises:
            CoordinateParseError: If any tuple is malformed
        """
        if text is None or not text.strip():
            return cls()
        return cls(
            tuple(
                Coordinate.parse(token, strict=strict)
                for token in _WHITESPACE.split(text.strip())
            )
        )

    @classmethod
    def from_shapely(cls, geometry: BaseGeometry) -> "Coordinates":
        """
        Build a sequence from a Shapely Point, LineString or LinearRing.

        Args:
            geometry: Shapely geometry exposing ``coords``

        Returns:
            Coordinates instance

        Raises:
            ValueError: If the geometry has no simple coordinate sequence
        """
        if geometry.geom_type not in ("Point", "LineString", "LinearRing"):
            raise ValueError(f"Cannot read coordinates from {geometry.geom_type}")
        return cls(tuple(Coordinate(*coord) for coord in geometry.coords))

    def get(self, index: int) -> Optional[Coordinate]:
        """
        Get the coordinate at ``index``.

        Returns:
            The coordinate, or None when the index is outside [0, len)
        """
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def get_coordinate(self, index: int) -> Optional[Coordinate]:
        return self.get(index)

    def to_shapely_coords(self) -> List[Tuple[float, ...]]:
        """
        Get coordinate tuples for Shapely constructors.

        The tuples are 3D only when every coordinate has an altitude.
        """
        if self.items and all(item.has_altitude for item in self.items):
            return [(c.longitude, c.latitude, c.altitude) for c in self.items]
        return [(c.longitude, c.latitude) for c in self.items]

    def to_string(self, omit_missing_altitude: Optional[bool] = None) -> str:
        """
        Format as space separated coordinate tuples.

        Returns:
            Item strings joined by single spaces; "" for an empty sequence
        """
        return " ".join(
            item.to_string(omit_missing_altitude=omit_missing_altitude)
            for item in self.items
        )

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.items)

    def __contains__(self, item: object) -> bool:
        return item in self.items

    def __str__(self) -> str:
        return self.to_string()
