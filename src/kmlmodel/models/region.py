"""
Region entities: LatLonBox, LatLonAltBox, Lod and Region.
"""

from typing import Any, Optional

from pydantic import Field, field_validator, model_validator

from kmlmodel.models.base import (
    AltitudeMode,
    AngleField,
    Extensions,
    KmlObject,
    extensions_or_empty,
    to_angle,
)
from kmlmodel.values.angle import Angle, AngleKind


class LatLonBox(KmlObject):
    """
    Bounding box of a ground overlay.

    Attributes:
        lat_lon_box_extensions: AbstractLatLonBox level extensions
        north: Northern edge latitude (angle90)
        south: Southern edge latitude (angle90)
        east: Eastern edge longitude (angle180)
        west: Western edge longitude (angle180)
        rotation: Rotation of the overlay about its center (angle180)
        extensions: LatLonBox level extensions
    """

    lat_lon_box_extensions: Extensions = Field(default_factory=Extensions)
    north: AngleField = Field(default=Angle.angle90(0.0))
    south: AngleField = Field(default=Angle.angle90(0.0))
    east: AngleField = Field(default=Angle.angle180(0.0))
    west: AngleField = Field(default=Angle.angle180(0.0))
    rotation: AngleField = Field(default=Angle.angle180(0.0))
    extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("lat_lon_box_extensions", "extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)

    @field_validator("north", "south", mode="before")
    @classmethod
    def validate_latitude(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLE90, v)

    @field_validator("east", "west", "rotation", mode="before")
    @classmethod
    def validate_longitude(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLE180, v)


class LatLonAltBox(KmlObject):
    """
    Bounding box of a region, with an altitude range.

    Attributes:
        lat_lon_box_extensions: AbstractLatLonBox level extensions
        north: Northern edge latitude (angle90)
        south: Southern edge latitude (angle90)
        east: Eastern edge longitude (angle180)
        west: Western edge longitude (angle180)
        min_altitude: Lower altitude bound in meters
        max_altitude: Upper altitude bound in meters
        altitude_mode: How the altitudes are interpreted
        extensions: LatLonAltBox level extensions
    """

    lat_lon_box_extensions: Extensions = Field(default_factory=Extensions)
    north: AngleField = Field(default=Angle.angle90(0.0))
    south: AngleField = Field(default=Angle.angle90(0.0))
    east: AngleField = Field(default=Angle.angle180(0.0))
    west: AngleField = Field(default=Angle.angle180(0.0))
    min_altitude: float = 0.0
    max_altitude: float = 0.0
    altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND
    extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("lat_lon_box_extensions", "extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)

    @field_validator("north", "south", mode="before")
    @classmethod
    def validate_latitude(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLE90, v)

    @field_validator("east", "west", mode="before")
    @classmethod
    def validate_longitude(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLE180, v)

    @model_validator(mode="after")
    def validate_altitudes(self) -> "LatLonAltBox":
        """Validate the altitude range is not inverted."""
        if self.min_altitude > self.max_altitude:
            raise ValueError(
                f"min_altitude {self.min_altitude} is above max_altitude {self.max_altitude}"
            )
        return self


class Lod(KmlObject):
    """
    Level of detail: the projected size range in which a region is active.

    Attributes:
        min_lod_pixels: Minimum projected size in pixels
        max_lod_pixels: Maximum projected size in pixels, -1 for unbounded
        min_fade_extent: Fade distance at the minimum end, in pixels
        max_fade_extent: Fade distance at the maximum end, in pixels
        extensions: Lod level extensions
    """

    min_lod_pixels: float = 0.0
    max_lod_pixels: float = -1.0
    min_fade_extent: float = 0.0
    max_fade_extent: float = 0.0
    extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)


class Region(KmlObject):
    """
    A bounding box plus level of detail that controls when content is shown.
    """

    lat_lon_alt_box: Optional[LatLonAltBox] = None
    lod: Optional[Lod] = None
    extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)
