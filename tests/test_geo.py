import pytest

from geocell.errors import InvalidArgumentError
from geocell.geo import cell_center, decode_base32_bounds, decode_bounds
from geocell.geohash import encode


class TestDecodeBounds:
    def test_beijing(self, beijing_binary):
        b = decode_bounds(beijing_binary)
        assert (b.min_lon, b.max_lon) == (112.5, 123.75)
        assert (b.min_lat, b.max_lat) == (39.375, 45.0)

    @pytest.mark.parametrize("precision", [1, 5, 13, 26, 32])
    def test_encoded_point_is_inside(self, city_points, precision):
        for lon, lat in city_points:
            b = decode_bounds(encode(lon, lat, precision))
            assert b.contains(lon, lat)
            assert b.width == pytest.approx(360.0 / 2 ** precision)
            assert b.height == pytest.approx(180.0 / 2 ** precision)

    def test_odd_length_splits_longitude_last(self):
        b = decode_bounds("1")
        assert (b.min_lon, b.max_lon) == (0.0, 180.0)
        assert (b.min_lat, b.max_lat) == (-90.0, 90.0)

    def test_base32(self, beijing_binary):
        assert decode_base32_bounds("wx", 10) == decode_bounds(beijing_binary)

    def test_invalid(self):
        with pytest.raises(InvalidArgumentError):
            decode_bounds("")


class TestCellCenter:
    def test_center(self, beijing_binary):
        c = cell_center(beijing_binary)
        assert c.lon == pytest.approx(118.125)
        assert c.lat == pytest.approx(42.1875)

    def test_center_encodes_to_same_cell(self, city_points):
        for lon, lat in city_points:
            binary = encode(lon, lat, 12)
            c = cell_center(binary)
            assert encode(c.lon, c.lat, 12) == binary
