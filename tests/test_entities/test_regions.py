"""
Tests for LatLonBox, LatLonAltBox, Lod and Region.
"""

import pytest
from pydantic import ValidationError

from kmlmodel.models import AltitudeMode, LatLonAltBox, LatLonBox, Lod, Region
from kmlmodel.values.angle import AngleKind


class TestLatLonBox:
    """Tests for the LatLonBox model."""

    def test_edges(self) -> None:
        """Test latitude edges are angle90 and longitude edges angle180."""
        box = LatLonBox(north=37.91, south=37.46, east=15.46, west=14.6, rotation=-0.1)

        assert box.north.kind is AngleKind.ANGLE90
        assert box.south.kind is AngleKind.ANGLE90
        assert box.east.kind is AngleKind.ANGLE180
        assert box.west.kind is AngleKind.ANGLE180
        assert box.rotation.get_angle() == -0.1

    def test_latitude_out_of_range(self) -> None:
        """Test latitudes above 90 are rejected."""
        with pytest.raises(ValidationError, match="RANGE_ERROR"):
            LatLonBox(north=95)

    def test_longitude_out_of_range(self) -> None:
        """Test longitudes beyond 180 are rejected."""
        with pytest.raises(ValidationError, match="RANGE_ERROR"):
            LatLonBox(west=-181)


class TestLatLonAltBox:
    """Tests for the LatLonAltBox model."""

    def test_altitudes(self) -> None:
        """Test altitude range and mode."""
        box = LatLonAltBox(
            north=45, south=44, east=-110, west=-111,
            min_altitude=0, max_altitude=1000, altitude_mode="absolute",
        )

        assert box.max_altitude == 1000.0
        assert box.altitude_mode == AltitudeMode.ABSOLUTE

    def test_inverted_altitudes(self) -> None:
        """Test an inverted altitude range is rejected."""
        with pytest.raises(ValidationError, match="min_altitude"):
            LatLonAltBox(min_altitude=100, max_altitude=10)

    def test_gx_altitude_mode(self) -> None:
        """Test gx altitude modes are accepted."""
        box = LatLonAltBox(altitude_mode=AltitudeMode.CLAMP_TO_SEA_FLOOR)
        assert box.altitude_mode.value == "clampToSeaFloor"


class TestLodAndRegion:
    """Tests for Lod and Region."""

    def test_lod_defaults(self) -> None:
        """Test the unbounded maximum default."""
        lod = Lod()
        assert lod.min_lod_pixels == 0.0
        assert lod.max_lod_pixels == -1.0

    def test_region(self) -> None:
        """Test a region holds its box and level of detail."""
        region = Region(lat_lon_alt_box=LatLonAltBox(north=1), lod=Lod(min_lod_pixels=128))

        assert region.lat_lon_alt_box.north.get_angle() == 1.0
        assert region.lod.min_lod_pixels == 128.0

    def test_region_extensions_include_nested(self) -> None:
        """Test extension levels of nested entities are visited."""
        region = Region(lat_lon_alt_box=LatLonAltBox(), lod=Lod())
        paths = [path for path, _ in region.iter_extensions()]

        assert "extensions" in paths
        assert "lat_lon_alt_box.lat_lon_box_extensions" in paths
        assert "lod.extensions" in paths
