"""
Geometry entities holding coordinate sequences.

Each geometry converts to the equivalent Shapely geometry. Altitudes are
kept in the Shapely geometry only when every coordinate has one.
"""

import logging
from typing import Any, Optional, Tuple

from pydantic import Field, field_validator
from shapely.geometry import LinearRing as ShapelyLinearRing
from shapely.geometry import LineString as ShapelyLineString
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon

from kmlmodel.core.defaults import EMPTY, or_empty
from kmlmodel.models.base import (
    AltitudeMode,
    CoordinatesField,
    Extensions,
    KmlModel,
    KmlObject,
    extensions_or_empty,
    to_coordinates,
)
from kmlmodel.values.coordinate import Coordinates

logger = logging.getLogger(__name__)


class Point(KmlObject):
    """
    A single geographic location.

    Attributes:
        geometry_extensions: AbstractGeometry level extensions
        extrude: Connect the point to the ground with a line
        altitude_mode: How the altitude is interpreted
        coordinates: Zero or one coordinate
        extensions: Point level extensions
    """

    geometry_extensions: Extensions = Field(default_factory=Extensions)
    extrude: bool = False
    altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND
    coordinates: CoordinatesField = Field(default_factory=Coordinates)
    extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("geometry_extensions", "extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)

    @field_validator("coordinates", mode="before")
    @classmethod
    def validate_coordinates(cls, v: Any) -> Coordinates:
        """Validate that a point holds at most one coordinate."""
        coordinates = to_coordinates(v)
        if len(coordinates) > 1:
            raise ValueError(f"Point takes one coordinate, got {len(coordinates)}")
        return coordinates

    def to_shapely(self) -> ShapelyPoint:
        """
        Convert to a Shapely Point.

        Returns:
            Shapely Point, empty when no coordinate is set
        """
        coords = self.coordinates.to_shapely_coords()
        if not coords:
            return ShapelyPoint()
        return ShapelyPoint(coords[0])


class LineString(KmlObject):
    """
    A connected set of line segments.

    Attributes:
        geometry_extensions: AbstractGeometry level extensions
        extrude: Connect the line to the ground
        tessellate: Follow the terrain
        altitude_mode: How the altitudes are interpreted
        coordinates: Two or more coordinates (or none while being built)
        extensions: LineString level extensions
    """

    geometry_extensions: Extensions = Field(default_factory=Extensions)
    extrude: bool = False
    tessellate: bool = False
    altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND
    coordinates: CoordinatesField = Field(default_factory=Coordinates)
    extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("geometry_extensions", "extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)

    @field_validator("coordinates", mode="before")
    @classmethod
    def validate_coordinates(cls, v: Any) -> Coordinates:
        return to_coordinates(v)

    def to_shapely(self) -> ShapelyLineString:
        """Convert to a Shapely LineString (empty below two coordinates)."""
        coords = self.coordinates.to_shapely_coords()
        if len(coords) < 2:
            return ShapelyLineString()
        return ShapelyLineString(coords)


class LinearRing(KmlObject):
    """
    A closed line string, used as a polygon boundary.

    KML requires the last coordinate to repeat the first. An open ring is
    accepted and closed by Shapely on conversion.
    """

    geometry_extensions: Extensions = Field(default_factory=Extensions)
    extrude: bool = False
    tessellate: bool = False
    altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND
    coordinates: CoordinatesField = Field(default_factory=Coordinates)
    extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("geometry_extensions", "extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)

    @field_validator("coordinates", mode="before")
    @classmethod
    def validate_coordinates(cls, v: Any) -> Coordinates:
        return to_coordinates(v)

    @property
    def is_closed(self) -> bool:
        """True when the first and last coordinates are equal."""
        if len(self.coordinates) < 2:
            return False
        return self.coordinates.get(0) == self.coordinates.get(len(self.coordinates) - 1)

    @property
    def is_degenerate(self) -> bool:
        """True when there are too few distinct coordinates to enclose an area."""
        # A closed ring repeats its first coordinate at the end
        return len(self.coordinates) < (4 if self.is_closed else 3)

    def to_shapely(self) -> ShapelyLinearRing:
        """Convert to a Shapely LinearRing (empty when degenerate)."""
        if self.is_degenerate:
            return ShapelyLinearRing()
        coords = self.coordinates.to_shapely_coords()
        if not self.is_closed:
            logger.debug("Closing open linear ring with %d coordinates", len(coords))
        return ShapelyLinearRing(coords)


class Boundary(KmlModel):
    """
    An outer or inner polygon boundary.
    """

    linear_ring: Optional[LinearRing] = None
    extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)


class Polygon(KmlObject):
    """
    A polygon with one outer boundary and any number of holes.

    Attributes:
        geometry_extensions: AbstractGeometry level extensions
        extrude: Connect the polygon to the ground
        tessellate: Follow the terrain
        altitude_mode: How the altitudes are interpreted
        outer_boundary: Exterior boundary
        inner_boundaries: Holes, in document order; never None
        extensions: Polygon level extensions
    """

    geometry_extensions: Extensions = Field(default_factory=Extensions)
    extrude: bool = False
    tessellate: bool = False
    altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND
    outer_boundary: Optional[Boundary] = None
    inner_boundaries: Tuple[Boundary, ...] = Field(default=EMPTY)
    extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("geometry_extensions", "extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)

    @field_validator("inner_boundaries", mode="before")
    @classmethod
    def default_inner_boundaries(cls, v: Any) -> Tuple[Any, ...]:
        return or_empty(v)

    def to_shapely(self) -> ShapelyPolygon:
        """
        Convert to a Shapely Polygon.

        Inner boundaries without a linear ring, or with a degenerate one,
        are skipped.

        Returns:
            Shapely Polygon, empty when the outer ring is missing or degenerate
        """
        outer = self.outer_boundary.linear_ring if self.outer_boundary else None
        if outer is None or outer.is_degenerate:
            return ShapelyPolygon()

        shell = outer.coordinates.to_shapely_coords()
        holes = []
        for boundary in self.inner_boundaries:
            ring = boundary.linear_ring
            if ring is None:
                continue
            if ring.is_degenerate:
                logger.debug(
                    "Skipping degenerate inner ring with %d coordinates",
                    len(ring.coordinates),
                )
                continue
            holes.append(ring.coordinates.to_shapely_coords())
        return ShapelyPolygon(shell, holes)
