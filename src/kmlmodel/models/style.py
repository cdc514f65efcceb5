"""
Color style entities: LineStyle, PolyStyle, IconStyle and LabelStyle.

The fields shared by every color style live in one ``ColorStyle`` value
held by each concrete style.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from kmlmodel.models.base import (
    AngleField,
    ColorField,
    ColorMode,
    Extensions,
    KmlModel,
    KmlObject,
    extensions_or_empty,
    to_angle,
    to_color,
)
from kmlmodel.values.angle import Angle, AngleKind
from kmlmodel.values.color import Color


class ColorStyle(KmlModel):
    """
    Fields of the AbstractSubStyle and AbstractColorStyle levels.

    Attributes:
        sub_style_extensions: AbstractSubStyle level extensions
        color_style_extensions: AbstractColorStyle level extensions
        color: aabbggrr color, ``ffffffff`` by default
        color_mode: normal or random
    """

    sub_style_extensions: Extensions = Field(default_factory=Extensions)
    color_style_extensions: Extensions = Field(default_factory=Extensions)
    color: ColorField = Field(default=Color.DEFAULT)
    color_mode: ColorMode = ColorMode.NORMAL

    @field_validator("sub_style_extensions", "color_style_extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)

    @field_validator("color", mode="before")
    @classmethod
    def validate_color(cls, v: Any) -> Color:
        return to_color(v)


def color_style_or_empty(v: Any) -> ColorStyle:
    """Default a missing ``ColorStyle`` field."""
    return ColorStyle() if v is None else v


class LineStyle(KmlObject):
    """
    Drawing style of lines.

    Attributes:
        color_style: Shared color style fields
        width: Line width in pixels
        extensions: LineStyle level extensions
    """

    color_style: ColorStyle = Field(default_factory=ColorStyle)
    width: float = Field(default=1.0, ge=0)
    extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("color_style", mode="before")
    @classmethod
    def default_color_style(cls, v: Any) -> ColorStyle:
        return color_style_or_empty(v)

    @field_validator("extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)

    @property
    def color(self) -> Color:
        return self.color_style.color


class PolyStyle(KmlObject):
    """
    Drawing style of polygons.

    Attributes:
        color_style: Shared color style fields
        fill: Whether the polygon is filled
        outline: Whether the polygon is outlined
        extensions: PolyStyle level extensions
    """

    color_style: ColorStyle = Field(default_factory=ColorStyle)
    fill: bool = True
    outline: bool = True
    extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("color_style", mode="before")
    @classmethod
    def default_color_style(cls, v: Any) -> ColorStyle:
        return color_style_or_empty(v)

    @field_validator("extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)

    @property
    def color(self) -> Color:
        return self.color_style.color


class IconStyle(KmlObject):
    """
    Drawing style of point icons.

    Attributes:
        color_style: Shared color style fields
        scale: Icon scale factor
        heading: Icon rotation (angle360)
        icon_href: Icon image location
        extensions: IconStyle level extensions
    """

    color_style: ColorStyle = Field(default_factory=ColorStyle)
    scale: float = Field(default=1.0, ge=0)
    heading: AngleField = Field(default=Angle.angle360(0.0))
    icon_href: Optional[str] = None
    extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("color_style", mode="before")
    @classmethod
    def default_color_style(cls, v: Any) -> ColorStyle:
        return color_style_or_empty(v)

    @field_validator("extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)

    @field_validator("heading", mode="before")
    @classmethod
    def validate_heading(cls, v: Any) -> Angle:
        return to_angle(AngleKind.ANGLE360, v)

    @property
    def color(self) -> Color:
        return self.color_style.color


class LabelStyle(KmlObject):
    """
    Drawing style of feature labels.
    """

    color_style: ColorStyle = Field(default_factory=ColorStyle)
    scale: float = Field(default=1.0, ge=0)
    extensions: Extensions = Field(default_factory=Extensions)

    @field_validator("color_style", mode="before")
    @classmethod
    def default_color_style(cls, v: Any) -> ColorStyle:
        return color_style_or_empty(v)

    @field_validator("extensions", mode="before")
    @classmethod
    def default_extensions(cls, v: Any) -> Extensions:
        return extensions_or_empty(v)

    @property
    def color(self) -> Color:
        return self.color_style.color
