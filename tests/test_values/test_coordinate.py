"""
Tests for coordinate tuples and coordinate sequences.
"""

import math

import pytest
from shapely.geometry import LineString as ShapelyLineString
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon

from kmlmodel.core.defaults import EMPTY
from kmlmodel.core.errors import CoordinateParseError
from kmlmodel.values.coordinate import Coordinate, Coordinates, format_number


class TestFormatNumber:
    """Tests for number formatting."""

    def test_finite(self) -> None:
        """Test finite values use the shortest round-trip form."""
        assert format_number(400.0) == "400.0"
        assert format_number(146.825) == "146.825"
        assert format_number(-0.5) == "-0.5"
        # Trailing zeros are not kept
        assert format_number(146.820) == "146.82"

    def test_special_values(self) -> None:
        """Test NaN and infinities use the XML Schema spellings."""
        assert format_number(math.nan) == "NaN"
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"


class TestCoordinateParse:
    """Tests for parsing lon,lat[,alt] text."""

    def test_parse_three_fields(self) -> None:
        """Test the altitude mode fixture coordinate."""
        coordinate = Coordinate.parse("146.825,12.233,400.0")

        assert coordinate.longitude == pytest.approx(146.825, abs=1e-12)
        assert coordinate.latitude == pytest.approx(12.233, abs=1e-12)
        assert coordinate.altitude == pytest.approx(400.0, abs=1e-12)
        assert coordinate.has_altitude

    def test_parse_two_fields(self) -> None:
        """Test a missing altitude is stored as NaN."""
        coordinate = Coordinate.parse("-122.0822,37.4222")

        assert coordinate.longitude == -122.0822
        assert coordinate.latitude == 37.4222
        assert math.isnan(coordinate.altitude)
        assert not coordinate.has_altitude

    def test_parse_ignores_surrounding_whitespace(self) -> None:
        """Test whitespace around the tuple and its fields is ignored."""
        coordinate = Coordinate.parse("  1.5 , 2.5 ,3\n")
        assert coordinate.as_tuple() == (1.5, 2.5, 3.0)

    def test_parse_trailing_comma(self) -> None:
        """Test an empty third field means no altitude."""
        assert not Coordinate.parse("1,2,").has_altitude

    def test_no_range_check(self) -> None:
        """Test longitude and latitude are raw doubles."""
        coordinate = Coordinate.parse("500,-200,0")
        assert coordinate.longitude == 500.0
        assert coordinate.latitude == -200.0

    @pytest.mark.parametrize("text", ["", "   ", "146.825", ",12.2", "12.2,", "1;2;3"])
    def test_too_few_fields(self, text: str) -> None:
        """Test fewer than two fields fail with a parse error."""
        with pytest.raises(CoordinateParseError, match="need at least lon,lat"):
            Coordinate.parse(text)

    @pytest.mark.parametrize("text", ["a,2", "1,b", "1,2,high"])
    def test_non_numeric_field(self, text: str) -> None:
        """Test non-numeric fields fail with a parse error naming the token."""
        with pytest.raises(CoordinateParseError) as exc_info:
            Coordinate.parse(text)

        assert exc_info.value.text == text
        assert exc_info.value.token in ("a", "b", "high")

    def test_too_many_fields_strict(self) -> None:
        """Test more than three fields fail by default."""
        with pytest.raises(CoordinateParseError, match="more than lon,lat,alt"):
            Coordinate.parse("1,2,3,4")

    def test_too_many_fields_lenient(self) -> None:
        """Test extra fields are dropped when strict checking is off."""
        coordinate = Coordinate.parse("1,2,3,4", strict=False)
        assert coordinate.as_tuple() == (1.0, 2.0, 3.0)

    def test_too_many_fields_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the strictness default comes from settings."""
        from kmlmodel.core.config import get_settings

        monkeypatch.setenv("KMLMODEL_STRICT_COORDINATE_COUNT", "false")
        get_settings.cache_clear()

        assert Coordinate.parse("1,2,3,4").as_tuple() == (1.0, 2.0, 3.0)

    def test_non_string(self) -> None:
        """Test non-string input fails with a parse error."""
        with pytest.raises(CoordinateParseError):
            Coordinate.parse(None)  # type: ignore[arg-type]


class TestCoordinateFormat:
    """Tests for formatting coordinates."""

    def test_to_string(self) -> None:
        """Test three comma-joined fields."""
        coordinate = Coordinate.create(146.825, 12.233, 400.0)
        assert coordinate.to_string() == "146.825,12.233,400.0"
        assert str(coordinate) == "146.825,12.233,400.0"

    def test_round_trip(self) -> None:
        """Test parse(to_string(c)) == c for coordinates with altitude."""
        for coordinate in (
            Coordinate.create(146.825, 12.233, 400.0),
            Coordinate.create(-0.1278, 51.5074, -12.75),
            Coordinate.create(0.1, 0.2, 0.30000000000000004),
        ):
            assert Coordinate.parse(coordinate.to_string()) == coordinate

    def test_missing_altitude_written_as_nan(self) -> None:
        """Test a missing altitude is emitted as NaN by default."""
        coordinate = Coordinate.create(1.5, 2.5)
        assert coordinate.to_string() == "1.5,2.5,NaN"

    def test_missing_altitude_two_fields(self) -> None:
        """Test the two-field form on request."""
        coordinate = Coordinate.create(1.5, 2.5)
        assert coordinate.to_string(omit_missing_altitude=True) == "1.5,2.5"
        # An altitude that is present is always written
        assert Coordinate.create(1.5, 2.5, 3.0).to_string(omit_missing_altitude=True) == (
            "1.5,2.5,3.0"
        )

    def test_missing_altitude_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the two-field form can be the configured default."""
        from kmlmodel.core.config import get_settings

        monkeypatch.setenv("KMLMODEL_OMIT_MISSING_ALTITUDE", "true")
        get_settings.cache_clear()

        assert Coordinate.create(1.5, 2.5).to_string() == "1.5,2.5"

    def test_nan_text_round_trip(self) -> None:
        """Test NaN written by the formatter parses back as a missing altitude."""
        coordinate = Coordinate.parse(Coordinate.create(1.5, 2.5).to_string())
        assert not coordinate.has_altitude
        assert coordinate == Coordinate.create(1.5, 2.5)


class TestCoordinateEquality:
    """Tests for coordinate equality and hashing."""

    def test_missing_altitudes_equal(self) -> None:
        """Test two omitted altitudes compare equal."""
        assert Coordinate(1.0, 2.0) == Coordinate(1.0, 2.0, math.nan)
        assert hash(Coordinate(1.0, 2.0)) == hash(Coordinate(1.0, 2.0))

    def test_altitude_matters(self) -> None:
        """Test a present altitude differs from a missing one."""
        assert Coordinate(1.0, 2.0, 0.0) != Coordinate(1.0, 2.0)
        assert Coordinate(1.0, 2.0, 0.0) != Coordinate(1.0, 2.0, 1.0)

    def test_usable_in_sets(self) -> None:
        """Test coordinates hash consistently with equality."""
        assert len({Coordinate(1.0, 2.0), Coordinate(1.0, 2.0), Coordinate(1.0, 2.0, 5.0)}) == 2

    def test_none_altitude(self) -> None:
        """Test None is accepted as a missing altitude."""
        assert not Coordinate.create(1.0, 2.0, None).has_altitude


class TestCoordinateFields:
    """Tests for direct construction from field values."""

    @pytest.mark.parametrize(
        "args",
        [("east", 2.0), (1.0, None), (1.0, 2.0, "high"), (True, 2.0)],
    )
    def test_non_numeric_field(self, args: tuple) -> None:
        """Test non-numeric fields raise a parse error."""
        with pytest.raises(CoordinateParseError, match="is not a number"):
            Coordinate(*args)

    @pytest.mark.parametrize("args", [(math.nan, 2.0), (1.0, math.nan)])
    def test_nan_position_rejected(self, args: tuple) -> None:
        """Test only the altitude may be NaN."""
        with pytest.raises(CoordinateParseError, match="cannot be NaN"):
            Coordinate(*args)

    def test_nan_position_text_rejected(self) -> None:
        """Test NaN longitude text is rejected when parsing."""
        with pytest.raises(CoordinateParseError):
            Coordinate.parse("NaN,2,3")

    def test_equal_to_itself(self) -> None:
        """Test every constructible coordinate equals itself."""
        coordinate = Coordinate(1.0, 2.0)
        assert coordinate == coordinate


class TestCoordinates:
    """Tests for coordinate sequences."""

    def test_to_string_joins_with_single_space(self, sample_coordinates: list) -> None:
        """Test items are joined by single spaces, no trailing separator."""
        sequence = Coordinates.create(sample_coordinates)

        assert sequence.to_string() == " ".join(c.to_string() for c in sample_coordinates)
        assert Coordinates.create(sample_coordinates[:2]).to_string() == (
            "146.825,12.233,400.0 146.82,12.222,400.0"
        )

    def test_absent_items(self) -> None:
        """Test None becomes the shared empty sequence."""
        sequence = Coordinates.create(None)

        assert sequence.items is EMPTY
        assert len(sequence) == 0
        assert sequence.get(0) is None
        assert sequence.to_string() == ""

    def test_default_constructor_empty(self) -> None:
        """Test the no-argument constructor gives an empty sequence."""
        assert len(Coordinates()) == 0
        assert Coordinates() == Coordinates.create(None)

    def test_get_soft_miss(self, sample_coordinates: list) -> None:
        """Test out-of-range indexes return None instead of raising."""
        sequence = Coordinates.create(sample_coordinates[:1])

        assert sequence.get(0) == sample_coordinates[0]
        assert sequence.get(5) is None
        assert sequence.get(-1) is None
        assert sequence.get_coordinate(1) is None

    def test_preserves_order(self, sample_coordinates: list) -> None:
        """Test insertion order is kept."""
        sequence = Coordinates.create(reversed(sample_coordinates))

        assert list(sequence) == list(reversed(sample_coordinates))
        assert sample_coordinates[1] in sequence

    def test_rejects_non_coordinates(self) -> None:
        """Test items must be coordinates."""
        with pytest.raises(TypeError):
            Coordinates.create([(1.0, 2.0)])  # type: ignore[list-item]

    def test_parse(self) -> None:
        """Test parsing whitespace separated tuples."""
        sequence = Coordinates.parse(
            """
            -122.0822,37.4222,0
            -122.0844,37.4215,0\t-122.0844,37.4222,10
            """
        )

        assert len(sequence) == 3
        assert sequence.get(2) == Coordinate(-122.0844, 37.4222, 10.0)

    def test_parse_blank(self) -> None:
        """Test blank or missing text gives an empty sequence."""
        assert len(Coordinates.parse("  \n ")) == 0
        assert len(Coordinates.parse(None)) == 0

    def test_parse_propagates_errors(self) -> None:
        """Test one malformed tuple fails the whole sequence."""
        with pytest.raises(CoordinateParseError):
            Coordinates.parse("1,2,3 4 5,6,7")

    def test_parse_round_trip(self, sample_coordinates: list) -> None:
        """Test parse(to_string(seq)) == seq."""
        sequence = Coordinates.create(sample_coordinates)
        assert Coordinates.parse(sequence.to_string()) == sequence

    def test_immutable(self, sample_coordinates: list) -> None:
        """Test the item list cannot be replaced or changed."""
        sequence = Coordinates.create(sample_coordinates)
        with pytest.raises(AttributeError):
            sequence.items = ()  # type: ignore[misc]

        sample_coordinates.clear()
        assert len(sequence) == 3


class TestCoordinatesShapely:
    """Tests for Shapely interop."""

    def test_to_shapely_coords_3d(self, sample_coordinates: list) -> None:
        """Test 3D tuples when every coordinate has an altitude."""
        coords = Coordinates.create(sample_coordinates).to_shapely_coords()

        assert coords[0] == (146.825, 12.233, 400.0)
        assert ShapelyLineString(coords).has_z

    def test_to_shapely_coords_2d(self) -> None:
        """Test 2D tuples when any altitude is missing."""
        sequence = Coordinates.create([Coordinate(1.0, 2.0, 3.0), Coordinate(4.0, 5.0)])
        assert sequence.to_shapely_coords() == [(1.0, 2.0), (4.0, 5.0)]

    def test_from_shapely(self) -> None:
        """Test reading coordinates from Shapely geometries."""
        line = Coordinates.from_shapely(ShapelyLineString([(0, 0, 1), (1, 1, 2)]))
        point = Coordinates.from_shapely(ShapelyPoint(3, 4))

        assert line.to_string() == "0.0,0.0,1.0 1.0,1.0,2.0"
        assert point.get(0) == Coordinate(3.0, 4.0)

    def test_from_shapely_polygon_rejected(self) -> None:
        """Test geometries without a simple coordinate list are rejected."""
        with pytest.raises(ValueError, match="Polygon"):
            Coordinates.from_shapely(ShapelyPolygon([(0, 0), (1, 0), (1, 1)]))
