"""
Factory for values and composite entities.

One ``create_*`` operation per entity. Composite operations take the flat
per-level extension lists a streaming reader collects
(``object_simple_extensions``, ``<level>_simple_extensions``,
``<level>_object_extensions``) and assemble the composed model; every list
argument may be omitted or None.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, List, Optional, Union

from pydantic import ValidationError

from kmlmodel.core.errors import KmlModelException
from kmlmodel.models.base import (
    AltitudeMode,
    ColorMode,
    Extensions,
    IdAttributes,
    ObjectBase,
    SimpleTypeContainer,
)
from kmlmodel.models.geometry import Boundary, LinearRing, LineString, Point, Polygon
from kmlmodel.models.region import LatLonAltBox, LatLonBox, Lod, Region
from kmlmodel.models.style import ColorStyle, IconStyle, LabelStyle, LineStyle, PolyStyle
from kmlmodel.models.view import Camera, LookAt, Orientation
from kmlmodel.values.angle import Angle, AngleKind
from kmlmodel.values.color import Color
from kmlmodel.values.coordinate import Coordinate, Coordinates

logger = logging.getLogger(__name__)

ExtensionList = Optional[Iterable[Any]]
CoordinatesInput = Union[Coordinates, Iterable[Coordinate], str, None]


def _base(
    object_simple_extensions: ExtensionList, id_attributes: Optional[IdAttributes]
) -> ObjectBase:
    return ObjectBase(simple_extensions=object_simple_extensions, id_attributes=id_attributes)


def _color_style(
    sub_style_simple_extensions: ExtensionList,
    sub_style_object_extensions: ExtensionList,
    color: Union[Color, str, None],
    color_mode: ColorMode,
    color_style_simple_extensions: ExtensionList,
    color_style_object_extensions: ExtensionList,
) -> ColorStyle:
    return ColorStyle(
        sub_style_extensions=Extensions.of(
            sub_style_simple_extensions, sub_style_object_extensions
        ),
        color_style_extensions=Extensions.of(
            color_style_simple_extensions, color_style_object_extensions
        ),
        color=color,
        color_mode=color_mode,
    )


class KmlFactory:
    """
    Create validated values and composite entities.

    Use ``KmlFactory.get_instance()`` for the shared instance; the factory
    holds no state.
    """

    _instance: Optional["KmlFactory"] = None

    @classmethod
    def get_instance(cls) -> "KmlFactory":
        """Get the process-wide factory."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @contextmanager
    def _creating(self, entity: str) -> Iterator[None]:
        """Log construction failures before they propagate."""
        try:
            yield
        except KmlModelException as e:
            logger.debug(
                "Failed to create %s: %s", entity, e, extra={"error_code": e.error_code}
            )
            raise
        except ValidationError as e:
            logger.debug(
                "Failed to create %s: %d validation error(s)",
                entity,
                e.error_count(),
                extra={"error_code": "VALIDATION_ERROR"},
            )
            raise

    # Values

    def create_angle(self, kind: Union[AngleKind, str], value: float) -> Angle:
        """
        Create a bounded angle.

        Raises:
            AngleRangeError: If the value is outside the kind's bounds
        """
        with self._creating("angle"):
            return Angle.create(kind, value)

    def create_color(self, hex: str) -> Color:
        """
        Create an aabbggrr color.

        Raises:
            ColorFormatError: If the text is not eight hex digits
        """
        with self._creating("color"):
            return Color.create(hex)

    def create_coordinate(
        self,
        value: Union[str, float],
        latitude: Optional[float] = None,
        altitude: Optional[float] = None,
    ) -> Coordinate:
        """
        Create a coordinate from ``lon,lat[,alt]`` text or from numbers.

        Args:
            value: Coordinate text, or the longitude
            latitude: Latitude, required when ``value`` is a longitude
            altitude: Optional altitude

        Returns:
            Coordinate instance

        Raises:
            CoordinateParseError: If the text is malformed
            TypeError: If numbers and text are mixed or latitude is missing
        """
        with self._creating("coordinate"):
            if isinstance(value, str):
                if latitude is not None or altitude is not None:
                    raise TypeError("Coordinate text cannot be combined with numbers")
                return Coordinate.parse(value)
            if latitude is None:
                raise TypeError("latitude is required with a numeric longitude")
            return Coordinate.create(value, latitude, altitude)

    def create_coordinates(self, coordinates: CoordinatesInput = None) -> Coordinates:
        """
        Create a coordinate sequence from coordinates or coordinate text.
        """
        with self._creating("coordinates"):
            if isinstance(coordinates, Coordinates):
                return coordinates
            if coordinates is None or isinstance(coordinates, str):
                return Coordinates.parse(coordinates)
            return Coordinates.create(coordinates)

    # Building blocks

    def create_id_attributes(
        self, id: Optional[str] = None, target_id: Optional[str] = None
    ) -> IdAttributes:
        """Create the id / targetId attributes of an object."""
        return IdAttributes(id=id, target_id=target_id)

    def create_simple_type_container(
        self, namespace: str, tag_name: str, value: Any = None
    ) -> SimpleTypeContainer:
        """
        Create a simple-typed extension element.

        Args:
            namespace: Namespace URI of the extension element
            tag_name: Local name of the extension element
            value: Element content

        Returns:
            SimpleTypeContainer instance

        Raises:
            pydantic.ValidationError: If the tag name is empty
        """
        with self._creating("simple type container"):
            return SimpleTypeContainer(namespace=namespace, tag_name=tag_name, value=value)

    # Views

    def create_camera(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        abstract_view_simple_extensions: ExtensionList = None,
        abstract_view_object_extensions: ExtensionList = None,
        longitude: Union[Angle, float] = 0.0,
        latitude: Union[Angle, float] = 0.0,
        altitude: float = 0.0,
        heading: Union[Angle, float] = 0.0,
        tilt: Union[Angle, float] = 0.0,
        roll: Union[Angle, float] = 0.0,
        altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND,
        camera_simple_extensions: ExtensionList = None,
        camera_object_extensions: ExtensionList = None,
    ) -> Camera:
        """
        Create a Camera.

        Raises:
            pydantic.ValidationError: If an angle is out of bounds
        """
        with self._creating("Camera"):
            return Camera(
                base=_base(object_simple_extensions, id_attributes),
                view_extensions=Extensions.of(
                    abstract_view_simple_extensions, abstract_view_object_extensions
                ),
                longitude=longitude,
                latitude=latitude,
                altitude=altitude,
                heading=heading,
                tilt=tilt,
                roll=roll,
                altitude_mode=altitude_mode,
                camera_extensions=Extensions.of(
                    camera_simple_extensions, camera_object_extensions
                ),
            )

    def create_look_at(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        abstract_view_simple_extensions: ExtensionList = None,
        abstract_view_object_extensions: ExtensionList = None,
        longitude: Union[Angle, float] = 0.0,
        latitude: Union[Angle, float] = 0.0,
        altitude: float = 0.0,
        heading: Union[Angle, float] = 0.0,
        tilt: Union[Angle, float] = 0.0,
        range: float = 0.0,
        altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND,
        look_at_simple_extensions: ExtensionList = None,
        look_at_object_extensions: ExtensionList = None,
    ) -> LookAt:
        """
        Create a LookAt.

        Raises:
            pydantic.ValidationError: If an angle is out of bounds (tilt is
                anglepos90) or the range is negative
        """
        with self._creating("LookAt"):
            return LookAt(
                base=_base(object_simple_extensions, id_attributes),
                view_extensions=Extensions.of(
                    abstract_view_simple_extensions, abstract_view_object_extensions
                ),
                longitude=longitude,
                latitude=latitude,
                altitude=altitude,
                heading=heading,
                tilt=tilt,
                range=range,
                altitude_mode=altitude_mode,
                look_at_extensions=Extensions.of(
                    look_at_simple_extensions, look_at_object_extensions
                ),
            )

    def create_orientation(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        heading: Union[Angle, float] = 0.0,
        tilt: Union[Angle, float] = 0.0,
        roll: Union[Angle, float] = 0.0,
        orientation_simple_extensions: ExtensionList = None,
        orientation_object_extensions: ExtensionList = None,
    ) -> Orientation:
        """Create an Orientation from heading, tilt and roll."""
        with self._creating("Orientation"):
            return Orientation(
                base=_base(object_simple_extensions, id_attributes),
                heading=heading,
                tilt=tilt,
                roll=roll,
                orientation_extensions=Extensions.of(
                    orientation_simple_extensions, orientation_object_extensions
                ),
            )

    # Regions

    def create_lat_lon_box(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        north: Union[Angle, float] = 0.0,
        south: Union[Angle, float] = 0.0,
        east: Union[Angle, float] = 0.0,
        west: Union[Angle, float] = 0.0,
        abstract_lat_lon_box_simple_extensions: ExtensionList = None,
        abstract_lat_lon_box_object_extensions: ExtensionList = None,
        rotation: Union[Angle, float] = 0.0,
        lat_lon_box_simple_extensions: ExtensionList = None,
        lat_lon_box_object_extensions: ExtensionList = None,
    ) -> LatLonBox:
        """
        Create a LatLonBox.

        Args:
            north: Northern edge, angle90
            south: Southern edge, angle90
            east: Eastern edge, angle180
            west: Western edge, angle180
            rotation: Rotation of the box, angle180

        Returns:
            LatLonBox instance
        """
        with self._creating("LatLonBox"):
            return LatLonBox(
                base=_base(object_simple_extensions, id_attributes),
                lat_lon_box_extensions=Extensions.of(
                    abstract_lat_lon_box_simple_extensions,
                    abstract_lat_lon_box_object_extensions,
                ),
                north=north,
                south=south,
                east=east,
                west=west,
                rotation=rotation,
                extensions=Extensions.of(
                    lat_lon_box_simple_extensions, lat_lon_box_object_extensions
                ),
            )

    def create_lat_lon_alt_box(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        north: Union[Angle, float] = 0.0,
        south: Union[Angle, float] = 0.0,
        east: Union[Angle, float] = 0.0,
        west: Union[Angle, float] = 0.0,
        abstract_lat_lon_box_simple_extensions: ExtensionList = None,
        abstract_lat_lon_box_object_extensions: ExtensionList = None,
        min_altitude: float = 0.0,
        max_altitude: float = 0.0,
        altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND,
        lat_lon_alt_box_simple_extensions: ExtensionList = None,
        lat_lon_alt_box_object_extensions: ExtensionList = None,
    ) -> LatLonAltBox:
        """
        Create a LatLonAltBox.

        Raises:
            pydantic.ValidationError: If an edge is out of bounds or
                min_altitude is above max_altitude
        """
        with self._creating("LatLonAltBox"):
            return LatLonAltBox(
                base=_base(object_simple_extensions, id_attributes),
                lat_lon_box_extensions=Extensions.of(
                    abstract_lat_lon_box_simple_extensions,
                    abstract_lat_lon_box_object_extensions,
                ),
                north=north,
                south=south,
                east=east,
                west=west,
                min_altitude=min_altitude,
                max_altitude=max_altitude,
                altitude_mode=altitude_mode,
                extensions=Extensions.of(
                    lat_lon_alt_box_simple_extensions, lat_lon_alt_box_object_extensions
                ),
            )

    def create_lod(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        min_lod_pixels: float = 0.0,
        max_lod_pixels: float = -1.0,
        min_fade_extent: float = 0.0,
        max_fade_extent: float = 0.0,
        lod_simple_extensions: ExtensionList = None,
        lod_object_extensions: ExtensionList = None,
    ) -> Lod:
        """Create a level of detail; max_lod_pixels -1 means no limit."""
        with self._creating("Lod"):
            return Lod(
                base=_base(object_simple_extensions, id_attributes),
                min_lod_pixels=min_lod_pixels,
                max_lod_pixels=max_lod_pixels,
                min_fade_extent=min_fade_extent,
                max_fade_extent=max_fade_extent,
                extensions=Extensions.of(lod_simple_extensions, lod_object_extensions),
            )

    def create_region(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        lat_lon_alt_box: Optional[LatLonAltBox] = None,
        lod: Optional[Lod] = None,
        region_simple_extensions: ExtensionList = None,
        region_object_extensions: ExtensionList = None,
    ) -> Region:
        """Create a Region from an optional box and level of detail."""
        with self._creating("Region"):
            return Region(
                base=_base(object_simple_extensions, id_attributes),
                lat_lon_alt_box=lat_lon_alt_box,
                lod=lod,
                extensions=Extensions.of(region_simple_extensions, region_object_extensions),
            )

    # Geometries

    def create_point(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        abstract_geometry_simple_extensions: ExtensionList = None,
        abstract_geometry_object_extensions: ExtensionList = None,
        extrude: bool = False,
        altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND,
        coordinates: CoordinatesInput = None,
        point_simple_extensions: ExtensionList = None,
        point_object_extensions: ExtensionList = None,
    ) -> Point:
        """
        Create a Point.

        Args:
            coordinates: Coordinates, coordinate text or a list of
                Coordinate; at most one coordinate

        Returns:
            Point instance
        """
        with self._creating("Point"):
            return Point(
                base=_base(object_simple_extensions, id_attributes),
                geometry_extensions=Extensions.of(
                    abstract_geometry_simple_extensions, abstract_geometry_object_extensions
                ),
                extrude=extrude,
                altitude_mode=altitude_mode,
                coordinates=coordinates,
                extensions=Extensions.of(point_simple_extensions, point_object_extensions),
            )

    def create_line_string(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        abstract_geometry_simple_extensions: ExtensionList = None,
        abstract_geometry_object_extensions: ExtensionList = None,
        extrude: bool = False,
        tessellate: bool = False,
        altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND,
        coordinates: CoordinatesInput = None,
        line_string_simple_extensions: ExtensionList = None,
        line_string_object_extensions: ExtensionList = None,
    ) -> LineString:
        """Create a LineString."""
        with self._creating("LineString"):
            return LineString(
                base=_base(object_simple_extensions, id_attributes),
                geometry_extensions=Extensions.of(
                    abstract_geometry_simple_extensions, abstract_geometry_object_extensions
                ),
                extrude=extrude,
                tessellate=tessellate,
                altitude_mode=altitude_mode,
                coordinates=coordinates,
                extensions=Extensions.of(
                    line_string_simple_extensions, line_string_object_extensions
                ),
            )

    def create_linear_ring(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        abstract_geometry_simple_extensions: ExtensionList = None,
        abstract_geometry_object_extensions: ExtensionList = None,
        extrude: bool = False,
        tessellate: bool = False,
        altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND,
        coordinates: CoordinatesInput = None,
        linear_ring_simple_extensions: ExtensionList = None,
        linear_ring_object_extensions: ExtensionList = None,
    ) -> LinearRing:
        """Create a LinearRing; an open ring is accepted as given."""
        with self._creating("LinearRing"):
            return LinearRing(
                base=_base(object_simple_extensions, id_attributes),
                geometry_extensions=Extensions.of(
                    abstract_geometry_simple_extensions, abstract_geometry_object_extensions
                ),
                extrude=extrude,
                tessellate=tessellate,
                altitude_mode=altitude_mode,
                coordinates=coordinates,
                extensions=Extensions.of(
                    linear_ring_simple_extensions, linear_ring_object_extensions
                ),
            )

    def create_boundary(
        self,
        linear_ring: Optional[LinearRing] = None,
        boundary_simple_extensions: ExtensionList = None,
        boundary_object_extensions: ExtensionList = None,
    ) -> Boundary:
        """Create an outer or inner polygon boundary."""
        with self._creating("Boundary"):
            return Boundary(
                linear_ring=linear_ring,
                extensions=Extensions.of(boundary_simple_extensions, boundary_object_extensions),
            )

    def create_polygon(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        abstract_geometry_simple_extensions: ExtensionList = None,
        abstract_geometry_object_extensions: ExtensionList = None,
        extrude: bool = False,
        tessellate: bool = False,
        altitude_mode: AltitudeMode = AltitudeMode.CLAMP_TO_GROUND,
        outer_boundary: Optional[Boundary] = None,
        inner_boundaries: Optional[List[Boundary]] = None,
        polygon_simple_extensions: ExtensionList = None,
        polygon_object_extensions: ExtensionList = None,
    ) -> Polygon:
        """
        Create a Polygon.

        Args:
            outer_boundary: Exterior boundary
            inner_boundaries: Holes in document order; None for no holes

        Returns:
            Polygon instance
        """
        with self._creating("Polygon"):
            return Polygon(
                base=_base(object_simple_extensions, id_attributes),
                geometry_extensions=Extensions.of(
                    abstract_geometry_simple_extensions, abstract_geometry_object_extensions
                ),
                extrude=extrude,
                tessellate=tessellate,
                altitude_mode=altitude_mode,
                outer_boundary=outer_boundary,
                inner_boundaries=inner_boundaries,
                extensions=Extensions.of(polygon_simple_extensions, polygon_object_extensions),
            )

    # Styles

    def create_line_style(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        sub_style_simple_extensions: ExtensionList = None,
        sub_style_object_extensions: ExtensionList = None,
        color: Union[Color, str, None] = None,
        color_mode: ColorMode = ColorMode.NORMAL,
        color_style_simple_extensions: ExtensionList = None,
        color_style_object_extensions: ExtensionList = None,
        width: float = 1.0,
        line_style_simple_extensions: ExtensionList = None,
        line_style_object_extensions: ExtensionList = None,
    ) -> LineStyle:
        """
        Create a LineStyle.

        Raises:
            pydantic.ValidationError: If the color is malformed or the
                width is negative
        """
        with self._creating("LineStyle"):
            return LineStyle(
                base=_base(object_simple_extensions, id_attributes),
                color_style=_color_style(
                    sub_style_simple_extensions,
                    sub_style_object_extensions,
                    color,
                    color_mode,
                    color_style_simple_extensions,
                    color_style_object_extensions,
                ),
                width=width,
                extensions=Extensions.of(
                    line_style_simple_extensions, line_style_object_extensions
                ),
            )

    def create_poly_style(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        sub_style_simple_extensions: ExtensionList = None,
        sub_style_object_extensions: ExtensionList = None,
        color: Union[Color, str, None] = None,
        color_mode: ColorMode = ColorMode.NORMAL,
        color_style_simple_extensions: ExtensionList = None,
        color_style_object_extensions: ExtensionList = None,
        fill: bool = True,
        outline: bool = True,
        poly_style_simple_extensions: ExtensionList = None,
        poly_style_object_extensions: ExtensionList = None,
    ) -> PolyStyle:
        """Create a PolyStyle."""
        with self._creating("PolyStyle"):
            return PolyStyle(
                base=_base(object_simple_extensions, id_attributes),
                color_style=_color_style(
                    sub_style_simple_extensions,
                    sub_style_object_extensions,
                    color,
                    color_mode,
                    color_style_simple_extensions,
                    color_style_object_extensions,
                ),
                fill=fill,
                outline=outline,
                extensions=Extensions.of(
                    poly_style_simple_extensions, poly_style_object_extensions
                ),
            )

    def create_icon_style(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        sub_style_simple_extensions: ExtensionList = None,
        sub_style_object_extensions: ExtensionList = None,
        color: Union[Color, str, None] = None,
        color_mode: ColorMode = ColorMode.NORMAL,
        color_style_simple_extensions: ExtensionList = None,
        color_style_object_extensions: ExtensionList = None,
        scale: float = 1.0,
        heading: Union[Angle, float] = 0.0,
        icon_href: Optional[str] = None,
        icon_style_simple_extensions: ExtensionList = None,
        icon_style_object_extensions: ExtensionList = None,
    ) -> IconStyle:
        """
        Create an IconStyle.

        Args:
            scale: Icon scale factor
            heading: Icon rotation, angle360
            icon_href: Location of the icon image

        Returns:
            IconStyle instance
        """
        with self._creating("IconStyle"):
            return IconStyle(
                base=_base(object_simple_extensions, id_attributes),
                color_style=_color_style(
                    sub_style_simple_extensions,
                    sub_style_object_extensions,
                    color,
                    color_mode,
                    color_style_simple_extensions,
                    color_style_object_extensions,
                ),
                scale=scale,
                heading=heading,
                icon_href=icon_href,
                extensions=Extensions.of(
                    icon_style_simple_extensions, icon_style_object_extensions
                ),
            )

    def create_label_style(
        self,
        object_simple_extensions: ExtensionList = None,
        id_attributes: Optional[IdAttributes] = None,
        sub_style_simple_extensions: ExtensionList = None,
        sub_style_object_extensions: ExtensionList = None,
        color: Union[Color, str, None] = None,
        color_mode: ColorMode = ColorMode.NORMAL,
        color_style_simple_extensions: ExtensionList = None,
        color_style_object_extensions: ExtensionList = None,
        scale: float = 1.0,
        label_style_simple_extensions: ExtensionList = None,
        label_style_object_extensions: ExtensionList = None,
    ) -> LabelStyle:
        """Create a LabelStyle."""
        with self._creating("LabelStyle"):
            return LabelStyle(
                base=_base(object_simple_extensions, id_attributes),
                color_style=_color_style(
                    sub_style_simple_extensions,
                    sub_style_object_extensions,
                    color,
                    color_mode,
                    color_style_simple_extensions,
                    color_style_object_extensions,
                ),
                scale=scale,
                extensions=Extensions.of(
                    label_style_simple_extensions, label_style_object_extensions
                ),
            )
