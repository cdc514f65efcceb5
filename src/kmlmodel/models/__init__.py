"""
Composite KML entities.
"""

from .base import (
    AltitudeMode,
    ColorMode,
    Extensions,
    IdAttributes,
    KmlModel,
    KmlObject,
    ObjectBase,
    SimpleTypeContainer,
)
from .geometry import Boundary, LinearRing, LineString, Point, Polygon
from .region import LatLonAltBox, LatLonBox, Lod, Region
from .style import ColorStyle, IconStyle, LabelStyle, LineStyle, PolyStyle
from .view import Camera, LookAt, Orientation

__all__ = [
    # Building blocks
    "AltitudeMode",
    "ColorMode",
    "Extensions",
    "IdAttributes",
    "KmlModel",
    "KmlObject",
    "ObjectBase",
    "SimpleTypeContainer",
    # Views
    "Camera",
    "LookAt",
    "Orientation",
    # Regions
    "LatLonBox",
    "LatLonAltBox",
    "Lod",
    "Region",
    # Geometries
    "Point",
    "LineString",
    "LinearRing",
    "Boundary",
    "Polygon",
    # Styles
    "ColorStyle",
    "LineStyle",
    "PolyStyle",
    "IconStyle",
    "LabelStyle",
]
