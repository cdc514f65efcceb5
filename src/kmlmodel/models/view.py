"""
View entities: Camera, LookAt and Orientation.
"""

from typing import Any

from pydantic import Field, field_validator

from kmlmodel.models.base import (
    AltitudeMode,
    AngleField,
    Extensions,
    KmlObject,
    extensions_or_empty,
    to_angle,
)
from kmlmodel.values.angle import Angle, AngleKind


class Camera(KmlObject):
    """
    A virtual camera positioned above the Earth.

    Attributes:
        view_extensions: AbstractView level extensions
        longitude: Camera longitude (angle180)
        latitude: Camera latitude (angle90)
        altitude: Camera altitude in meters
        heading: Rotation about the z axis (angle360)
        tilt: Rotation about the x axis (anglepos180)
        roll: Rotation about the y axis (angle180)
        altitude_mode: How ``altitude`` is interpreted
        camera_extensions: Camera level extensions
    """

    view_extensions: Extensions = Field(default_factory=Extensions)
    longitude: AngleField = Field(default=Angle.angle180(0.0))
    latitude: AngleField = Field(default=Angle.angle90(0.0))
    altitude: float = 0.0
    heading: AngleField = Field(default=Angle.angle360(0.0))
    tilt: AngleField = Field(default=Angle.anglepos180(0.0))
    roll: AngleField = Field(default=Angle.angle180(0.0))
    altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND
    camera_extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("view_extensions", "camera_extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)

    @field_validator("longitude", "roll", mode="before")
    @classmethod
    def validate_angle180(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLE180, v)

    @field_validator("latitude", mode="before")
    @classmethod
    def validate_angle90(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLE90, v)

    @field_validator("heading", mode="before")
    @classmethod
    def validate_heading(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLE360, v)

    @field_validator("tilt", mode="before")
    @classmethod
    def validate_tilt(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLEPOS180, v)


class LookAt(KmlObject):
    """
    A viewpoint looking at a point on the ground.

    Attributes:
        view_extensions: AbstractView level extensions
        longitude: Longitude of the observed point (angle180)
        latitude: Latitude of the observed point (angle90)
        altitude: Altitude of the observed point in meters
        heading: Direction of the view (angle360)
        tilt: Angle between the view and the vertical (anglepos90)
        range: Distance in meters from the observed point
        altitude_mode: How ``altitude`` is interpreted
        look_at_extensions: LookAt level extensions
    """

    view_extensions: Extensions = Field(default_factory=Extensions)
    longitude: AngleField = Field(default=Angle.angle180(0.0))
    latitude: AngleField = Field(default=Angle.angle90(0.0))
    altitude: float = 0.0
    heading: AngleField = Field(default=Angle.angle360(0.0))
    tilt: AngleField = Field(default=Angle.anglepos90(0.0))
    range: float = Field(default=0.0, ge=0)
    altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND
    look_at_extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("view_extensions", "look_at_extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)

    @field_validator("longitude", mode="before")
    @classmethod
    def validate_longitude(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLE180, v)

    @field_validator("latitude", mode="before")
    @classmethod
    def validate_latitude(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLE90, v)

    @field_validator("heading", mode="before")
    @classmethod
    def validate_heading(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLE360, v)

    @field_validator("tilt", mode="before")
    @classmethod
    def validate_tilt(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLEPOS90, v)


class Orientation(KmlObject):
    """
    Rotation of a 3D model.
    """

    heading: AngleField = Field(default=Angle.angle360(0.0))
    tilt: AngleField = Field(default=Angle.anglepos180(0.0))
    roll: AngleField = Field(default=Angle.angle180(0.0))
    orientation_extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("orientation_extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)

    @field_validator("heading", mode="before")
    @classmethod
    def validate_heading(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLE360, v)

    @field_validator("tilt", mode="before")
    @classmethod
    def validate_tilt(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLEPOS180, v)

    @field_validator("roll", mode="before")
    @classmethod
    def validate_roll(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLE180, v)
