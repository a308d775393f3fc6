# test_models.py
import pytest
from pydantic import ValidationError

from geocell.models import Cell, CellBounds, GeoPoint


class TestGeoPoint:
    def test_valid(self):
        p = GeoPoint(lon=116.3, lat=39.9)
        assert (p.lon, p.lat) == (116.3, 39.9)

    @pytest.mark.parametrize("lon,lat", [(180.0, 0.0), (-180.0, 0.0), (0.0, 90.0), (0.0, -90.0)])
    def test_bounds_are_exclusive(self, lon, lat):
        with pytest.raises(ValidationError):
            GeoPoint(lon=lon, lat=lat)

    def test_frozen(self):
        p = GeoPoint(lon=1.0, lat=2.0)
        with pytest.raises(ValidationError):
            p.lon = 3.0  # type: ignore


class TestCellBounds:
    def test_full_world_allowed(self):
        b = CellBounds(min_lon=-180.0, min_lat=-90.0, max_lon=180.0, max_lat=90.0)
        assert b.width == 360.0
        assert b.height == 180.0

    def test_min_must_be_below_max(self):
        with pytest.raises(ValidationError):
            CellBounds(min_lon=10.0, min_lat=0.0, max_lon=10.0, max_lat=1.0)
        with pytest.raises(ValidationError):
            CellBounds(min_lon=0.0, min_lat=5.0, max_lon=1.0, max_lat=4.0)

    def test_contains_is_half_open(self):
        b = CellBounds(min_lon=0.0, min_lat=0.0, max_lon=1.0, max_lat=1.0)
        assert b.contains(0.0, 0.0)
        assert b.contains(0.5, 0.999)
        assert not b.contains(1.0, 0.5)
        assert not b.contains(0.5, 1.0)

    def test_round_trip(self):
        b = CellBounds(min_lon=0.0, min_lat=0.0, max_lon=1.0, max_lat=1.0)
        assert CellBounds.model_validate(b.model_dump()) == b


class TestCell:
    def test_valid(self):
        cell = Cell(binary="1110011101", base32="wx", precision=5)
        assert cell.table_aligned

    def test_base32_optional(self):
        cell = Cell(binary="111001", precision=3)
        assert cell.base32 is None
        assert not cell.table_aligned

    def test_binary_length_matches_precision(self):
        with pytest.raises(ValidationError):
            Cell(binary="1110", precision=3)

    @pytest.mark.parametrize("binary", ["", "1", "1201", "0" * 66])
    def test_binary_pattern(self, binary):
        with pytest.raises(ValidationError):
            Cell(binary=binary, precision=max(1, len(binary) // 2))

    def test_base32_alphabet(self):
        with pytest.raises(ValidationError):
            Cell(binary="1110011101", base32="wa", precision=5)
