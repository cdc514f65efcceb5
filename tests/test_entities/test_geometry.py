"""
Tests for geometry entities and their Shapely conversion.
"""

import pytest
from pydantic import ValidationError

from kmlmodel.models import Boundary, LinearRing, LineString, Point, Polygon
from kmlmodel.values.coordinate import Coordinate, Coordinates

SQUARE = "0,0,0 10,0,0 10,10,0 0,10,0 0,0,0"
HOLE = "2,2,0 4,2,0 4,4,0 2,4,0 2,2,0"


class TestPoint:
    """Tests for the Point model."""

    def test_coordinates_from_text(self) -> None:
        """Test the altitude mode fixture point."""
        point = Point(coordinates="146.825,12.233,400.0", extrude=True)

        coordinate = point.coordinates.get(0)
        assert coordinate.longitude == pytest.approx(146.825, abs=1e-12)
        assert coordinate.latitude == pytest.approx(12.233, abs=1e-12)
        assert coordinate.altitude == pytest.approx(400.0, abs=1e-12)
        assert point.coordinates.to_string() == "146.825,12.233,400.0"

    def test_coordinates_default_empty(self) -> None:
        """Test missing coordinates are an empty sequence."""
        assert len(Point().coordinates) == 0
        assert len(Point(coordinates=None).coordinates) == 0

    def test_more_than_one_coordinate(self) -> None:
        """Test a point holds at most one coordinate."""
        with pytest.raises(ValidationError, match="one coordinate"):
            Point(coordinates="1,2 3,4")

    def test_malformed_coordinates(self) -> None:
        """Test parse errors surface as validation errors."""
        with pytest.raises(ValidationError, match="PARSE_ERROR"):
            Point(coordinates="1")

    def test_to_shapely(self) -> None:
        """Test conversion to a Shapely point."""
        shape = Point(coordinates="146.825,12.233,400.0").to_shapely()

        assert shape.x == 146.825
        assert shape.y == 12.233
        assert shape.z == 400.0

    def test_empty_to_shapely(self) -> None:
        """Test an empty point converts to an empty geometry."""
        assert Point().to_shapely().is_empty


class TestLineString:
    """Tests for the LineString model."""

    def test_coordinates_from_list(self) -> None:
        """Test a list of coordinates is accepted."""
        line = LineString(
            coordinates=[Coordinate(0.0, 0.0), Coordinate(1.0, 1.0)], tessellate=True
        )

        assert len(line.coordinates) == 2
        assert line.tessellate

    def test_to_shapely(self) -> None:
        """Test conversion to a 2D Shapely line string."""
        shape = LineString(coordinates="0,0 3,4").to_shapely()

        assert shape.length == 5.0
        assert not shape.has_z

    def test_short_line_is_empty(self) -> None:
        """Test fewer than two coordinates convert to an empty geometry."""
        assert LineString(coordinates="0,0").to_shapely().is_empty


class TestLinearRing:
    """Tests for the LinearRing model."""

    def test_is_closed(self) -> None:
        """Test ring closure detection."""
        assert LinearRing(coordinates=SQUARE).is_closed
        assert not LinearRing(coordinates="0,0 1,0 1,1").is_closed

    def test_is_degenerate(self) -> None:
        """Test rings need three distinct coordinates."""
        assert not LinearRing(coordinates="0,0 1,0 1,1").is_degenerate
        assert not LinearRing(coordinates=SQUARE).is_degenerate
        assert LinearRing(coordinates="0,0 1,0 0,0").is_degenerate
        assert LinearRing().is_degenerate

    def test_open_ring_closed_by_shapely(self) -> None:
        """Test an open ring converts to a closed Shapely ring."""
        shape = LinearRing(coordinates="0,0 1,0 1,1").to_shapely()
        assert shape.is_closed

    def test_coordinates_instance_kept(self) -> None:
        """Test a Coordinates value is stored as given."""
        coordinates = Coordinates.parse(SQUARE)
        assert LinearRing(coordinates=coordinates).coordinates is coordinates


class TestPolygon:
    """Tests for the Polygon model."""

    def test_to_shapely_with_hole(self) -> None:
        """Test conversion keeps the holes."""
        polygon = Polygon(
            outer_boundary=Boundary(linear_ring=LinearRing(coordinates=SQUARE)),
            inner_boundaries=[Boundary(linear_ring=LinearRing(coordinates=HOLE))],
        )
        shape = polygon.to_shapely()

        assert shape.area == pytest.approx(96.0)
        assert len(shape.interiors) == 1

    def test_inner_boundaries_order(self) -> None:
        """Test holes keep their document order."""
        first = Boundary(linear_ring=LinearRing(coordinates=HOLE))
        second = Boundary(linear_ring=LinearRing(coordinates="6,6 8,6 8,8 6,6"))
        polygon = Polygon(inner_boundaries=[first, second])

        assert polygon.inner_boundaries == (first, second)

    def test_no_outer_boundary(self) -> None:
        """Test a polygon without an outer ring converts to an empty geometry."""
        assert Polygon().to_shapely().is_empty
        assert Polygon(outer_boundary=Boundary()).to_shapely().is_empty

    @pytest.mark.parametrize("text", ["0,0,0", "0,0,0 1,1,0", "0,0 1,1 0,0"])
    def test_degenerate_outer_boundary(self, text: str) -> None:
        """Test an outer ring too short to enclose an area converts to an empty geometry."""
        ring = LinearRing(coordinates=text)
        polygon = Polygon(outer_boundary=Boundary(linear_ring=ring))

        assert ring.is_degenerate
        assert ring.to_shapely().is_empty
        assert polygon.to_shapely().is_empty

    def test_degenerate_inner_boundary_skipped(self) -> None:
        """Test holes too short to enclose an area are left out."""
        polygon = Polygon(
            outer_boundary=Boundary(linear_ring=LinearRing(coordinates=SQUARE)),
            inner_boundaries=[
                Boundary(linear_ring=LinearRing(coordinates="2,2,0 4,4,0")),
                Boundary(linear_ring=LinearRing(coordinates=HOLE)),
            ],
        )
        shape = polygon.to_shapely()

        assert len(shape.interiors) == 1
        assert shape.area == pytest.approx(96.0)
