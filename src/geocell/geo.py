"""geo.py

Decoding cell codes back into the rectangle they cover.
"""

from __future__ import annotations

from typing import List

from .geohash import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    base32_to_binary,
    validate_binary,
)
from .models import CellBounds, GeoPoint


def _narrow(interval: List[float], bit: str) -> None:
    mid = interval[0] + (interval[1] - interval[0]) / 2
    if bit == "1":
        interval[0] = mid
    else:
        interval[1] = mid


def decode_bounds(binary: str) -> CellBounds:
    """Replay the bisection encoded by *binary* and return the final rectangle.

    Uses the same midpoint arithmetic as :func:`geocell.geohash.encode`, so
    any point encoded to *binary* satisfies ``bounds.contains(lon, lat)``.
    Odd-length codes are accepted (the last bit is a longitude bit).
    """
    validate_binary(binary)
    lon_range = [MIN_LONGITUDE, MAX_LONGITUDE]
    lat_range = [MIN_LATITUDE, MAX_LATITUDE]
    for i, bit in enumerate(binary):
        _narrow(lon_range if i % 2 == 0 else lat_range, bit)
    return CellBounds(
        min_lon=lon_range[0],
        min_lat=lat_range[0],
        max_lon=lon_range[1],
        max_lat=lat_range[1],
    )


def decode_base32_bounds(code: str, bits: int) -> CellBounds:
    """Bounds of a base32 code that expands to *bits* binary bits."""
    return decode_bounds(base32_to_binary(code, bits))


def cell_center(binary: str) -> GeoPoint:
    """Center point of the cell covered by *binary*."""
    b = decode_bounds(binary)
    return GeoPoint(lon=b.min_lon + b.width / 2, lat=b.min_lat + b.height / 2)
