"""
geohash.py

Interleaved binary / base32 cell codes for (longitude, latitude) points.

A point is encoded by recursive bisection of the longitude and latitude
ranges; each step emits one bit, alternating axes starting with longitude
(even indices are longitude bits, odd indices latitude bits).  The binary
code can be compacted into base32 text, five bits per symbol.

Two neighbor engines are provided:

- the *table* engine works on base32 codes and swaps the last symbol through
  a direction-specific permutation, carrying into the prefix when the symbol
  sits on a border.  Only valid for codes whose bit length is a multiple of
  five.  Moving off the top-level grid raises :class:`BoundaryExceededError`.
- the *general* engine works on binary codes of any length by treating each
  axis as a fixed-width counter.  Moving off the grid wraps silently.

Neighbor grids are returned in row-major order::

    0 1 2
    3 4 5
    6 7 8

with index 4 being the input code.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping

from .errors import (
    BoundaryExceededError,
    InvalidAlphabetError,
    InvalidArgumentError,
    OutOfRangeError,
)
from .logging_config import get_logger

logger = get_logger(__name__)

# ------------------------------------------------------------
# Limits
# ------------------------------------------------------------

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

MAX_BINARY_BITS = 64

# 13 * 5 = 65 > 64
MAX_BASE32_LENGTH = 13

BITS_PER_SYMBOL = 5

MAX_PRECISION = MAX_BINARY_BITS // 2


# ------------------------------------------------------------
# Base32 alphabet (no a, i, l, o)
# ------------------------------------------------------------

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"

BASE32_INDEX: Mapping[str, int] = MappingProxyType({c: i for i, c in enumerate(BASE32)})


# ------------------------------------------------------------
# Directions and lookup tables
# ------------------------------------------------------------

class Direction(Enum):
    """The four orthogonal moves.  Diagonals are two moves composed."""
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


def _table(top: str, right: str, bottom: str, left: str) -> Mapping[Direction, str]:
    return MappingProxyType({
        Direction.TOP: top,
        Direction.RIGHT: right,
        Direction.BOTTOM: bottom,
        Direction.LEFT: left,
    })


# Replacement for the last symbol, indexed by the symbol's position in BASE32.
# Keyed by whether the code length is odd.
NEIGHBORS: Mapping[bool, Mapping[Direction, str]] = MappingProxyType({
    True: _table(
        top="238967debc01fg45kmstqrwxuvhjyznp",
        right="14365h7k9dcfesgujnmqp0r2twvyx8zb",
        bottom="bc01fg45238967deuvhjyznpkmstqrwx",
        left="p0r21436x8zb9dcf5h7kjnmqesgutwvy",
    ),
    False: _table(
        top="14365h7k9dcfesgujnmqp0r2twvyx8zb",
        right="238967debc01fg45kmstqrwxuvhjyznp",
        bottom="p0r21436x8zb9dcf5h7kjnmqesgutwvy",
        left="bc01fg45238967deuvhjyznpkmstqrwx",
    ),
})

# Symbols on the edge of their parent cell; moving across them carries.
BORDERS: Mapping[bool, Mapping[Direction, str]] = MappingProxyType({
    True: _table(top="bcfguvyz", right="prxz", bottom="0145hjnp", left="028b"),
    False: _table(top="prxz", right="bcfguvyz", bottom="028b", left="0145hjnp"),
})

# (axis start index, counter step) for the general engine
_AXIS_STEP: Mapping[Direction, tuple] = MappingProxyType({
    Direction.TOP: (1, 1),
    Direction.RIGHT: (0, 1),
    Direction.BOTTOM: (1, -1),
    Direction.LEFT: (0, -1),
})


# ------------------------------------------------------------
# Validation
# ------------------------------------------------------------

def validate_binary(binary: str) -> None:
    """Check that *binary* is a non-empty string of at most 64 ``0``/``1`` chars.

    Raises:
        InvalidArgumentError: If the code is empty or too long.
        InvalidAlphabetError: If the code contains anything but ``0`` and ``1``.
    """
    if not binary:
        raise InvalidArgumentError("binary code must not be empty", field="binary", value=binary)
    if len(binary) > MAX_BINARY_BITS:
        raise InvalidArgumentError(
            f"binary code is at most {MAX_BINARY_BITS} bits", field="binary", value=binary
        )
    for ch in binary:
        if ch not in "01":
            raise InvalidAlphabetError("binary code may only contain 0 and 1", field="binary", value=ch)


def validate_base32(code: str) -> None:
    """Check that *code* is a non-empty base32 string of at most 13 symbols.

    Raises:
        InvalidArgumentError: If the code is empty or too long.
        InvalidAlphabetError: If a symbol is not in :data:`BASE32`.
    """
    if not code:
        raise InvalidArgumentError("base32 code must not be empty", field="code", value=code)
    if len(code) > MAX_BASE32_LENGTH:
        raise InvalidArgumentError(
            f"base32 code is at most {MAX_BASE32_LENGTH} symbols", field="code", value=code
        )
    for ch in code:
        if ch not in BASE32_INDEX:
            raise InvalidAlphabetError("symbol is not in the base32 alphabet", field="code", value=ch)


# ------------------------------------------------------------
# Coordinate binarizer
# ------------------------------------------------------------

def _bisect(interval: List[float], value: float) -> str:
    mid = interval[0] + (interval[1] - interval[0]) / 2
    if value < mid:
        interval[1] = mid
        return "0"
    interval[0] = mid
    return "1"


def encode(lon: float, lat: float, precision: int) -> str:
    """Encode a point into an interleaved binary code of ``2 * precision`` bits.

    Each bit halves the current interval of one axis (``0`` = lower half,
    ``1`` = upper half), alternating longitude and latitude.

    Args:
        lon: Longitude in decimal degrees, strictly within (-180, 180).
        lat: Latitude in decimal degrees, strictly within (-90, 90).
        precision: Bits per axis, 1 to 32.

    Returns:
        Binary code string, e.g. ``"1110011101"`` for Beijing at precision 5.

    Raises:
        OutOfRangeError: If a coordinate touches or exceeds its bounds, or
            the precision is outside 1..32.
    """
    if not MIN_LONGITUDE < lon < MAX_LONGITUDE:
        raise OutOfRangeError(
            f"longitude must be in ({MIN_LONGITUDE}, {MAX_LONGITUDE})", field="lon", value=lon
        )
    if not MIN_LATITUDE < lat < MAX_LATITUDE:
        raise OutOfRangeError(
            f"latitude must be in ({MIN_LATITUDE}, {MAX_LATITUDE})", field="lat", value=lat
        )
    if not 1 <= precision <= MAX_PRECISION:
        raise OutOfRangeError(
            f"precision must be in [1, {MAX_PRECISION}]", field="precision", value=precision
        )

    lon_range = [MIN_LONGITUDE, MAX_LONGITUDE]
    lat_range = [MIN_LATITUDE, MAX_LATITUDE]
    bits = []
    for i in range(precision * 2):
        if i % 2 == 0:
            bits.append(_bisect(lon_range, lon))
        else:
            bits.append(_bisect(lat_range, lat))
    return "".join(bits)


# ------------------------------------------------------------
# Base32 codec
# ------------------------------------------------------------

def binary_to_base32(binary: str) -> str:
    """Compact a binary code into base32, five bits per symbol.

    The last chunk may be shorter than five bits; it is read as an unsigned
    integer of its own width.  Such codes round-trip through
    :func:`base32_to_binary` but must not be fed to the table engine; a
    ``base32_not_table_aligned`` warning is logged for them.

    Args:
        binary: Binary code, 1 to 64 bits.

    Returns:
        Base32 code of ``ceil(len(binary) / 5)`` symbols.
    """
    validate_binary(binary)
    if len(binary) % BITS_PER_SYMBOL:
        logger.warning("base32_not_table_aligned", bits=len(binary))

    out = []
    for i in range(0, len(binary), BITS_PER_SYMBOL):
        out.append(BASE32[int(binary[i:i + BITS_PER_SYMBOL], 2)])
    return "".join(out)


def base32_to_binary(code: str, bits: int) -> str:
    """Expand a base32 code back into a binary code of exactly *bits* bits.

    Every symbol but the last yields five bits.  The last symbol yields the
    remaining ``bits - (len(code) - 1) * 5`` low bits of its 5-bit value, so
    the inverse of :func:`binary_to_base32` holds for any length.

    Args:
        code: Base32 code, 1 to 13 symbols.
        bits: Target binary length, in ``((len(code) - 1) * 5, len(code) * 5]``.

    Raises:
        InvalidArgumentError: If *bits* does not match the code length.
        InvalidAlphabetError: If a symbol is not in :data:`BASE32`.
    """
    validate_base32(code)
    low = (len(code) - 1) * BITS_PER_SYMBOL
    high = len(code) * BITS_PER_SYMBOL
    if not low < bits <= high:
        raise InvalidArgumentError(
            f"precision does not match base32 length: {len(code)} symbols need "
            f"a bit length in ({low}, {high}]",
            field="bits",
            value=bits,
        )

    out = []
    for ch in code[:-1]:
        out.append(format(BASE32_INDEX[ch], "05b"))

    # short last symbol keeps its low bits
    width = bits - low
    out.append(format(BASE32_INDEX[code[-1]], "05b")[-width:])
    return "".join(out)


# ------------------------------------------------------------
# Bit interleave utilities
# ------------------------------------------------------------

def _check_start(binary: str, start: int) -> None:
    if start not in (0, 1) or start >= len(binary):
        raise InvalidArgumentError(
            "axis start must be 0 or 1 and inside the code", field="start", value=start
        )


def extract_axis(binary: str, start: int) -> str:
    """Return every other bit of *binary* beginning at *start*.

    ``start=0`` yields the longitude bits, ``start=1`` the latitude bits.
    """
    _check_start(binary, start)
    return binary[start::2]


def inject_axis(binary: str, start: int, axis_bits: str) -> str:
    """Return a copy of *binary* with positions ``start, start+2, ...`` replaced.

    Bits of *axis_bits* are written in order until either sequence runs out.
    """
    _check_start(binary, start)
    chars = list(binary)
    for pos, bit in zip(range(start, len(chars), 2), axis_bits):
        chars[pos] = bit
    return "".join(chars)


def mask_last_n_bits(value: int, n: int) -> str:
    """Render the lowest *n* bits of *value* as an *n*-character bit string.

    Negative values and values past ``2**n - 1`` wrap in two's complement::

        mask_last_n_bits(-1, 3)  -> "111"
        mask_last_n_bits(8, 3)   -> "000"
    """
    if not 1 <= n <= MAX_BINARY_BITS:
        raise InvalidArgumentError(
            f"bit width must be in [1, {MAX_BINARY_BITS}]", field="n", value=n
        )
    return format(value & ((1 << n) - 1), f"0{n}b")


# ------------------------------------------------------------
# Table-driven neighbor engine (base32, aligned lengths only)
# ------------------------------------------------------------

def neighbor_by_table(code: str, direction: Direction) -> str:
    """Return the base32 code adjacent to *code* in *direction*.

    The last symbol is replaced through the direction's permutation.  When
    the original symbol sits on the border for that direction, the move
    carries into the preceding symbol, and so on toward the front.

    Only meaningful when the code's bit length is a multiple of five (every
    symbol full).

    Raises:
        BoundaryExceededError: If the carry runs past the first symbol, i.e.
            the neighbor lies outside the top-level grid.
    """
    validate_base32(code)
    chars = list(code)
    i = len(chars) - 1
    while True:
        # parity of the code ending at position i
        odd = (i + 1) % 2 == 1
        ch = chars[i]
        chars[i] = NEIGHBORS[odd][direction][BASE32_INDEX[ch]]
        if ch not in BORDERS[odd][direction]:
            break
        if i == 0:
            raise BoundaryExceededError(
                f"no {direction.value} neighbor inside the grid", field="code", value=code
            )
        i -= 1
    return "".join(chars)


def neighbors_by_table(code: str) -> List[str]:
    """Return the 3x3 neighbor grid of a base32 code (row-major, self at 4)."""
    validate_base32(code)
    top = neighbor_by_table(code, Direction.TOP)
    bottom = neighbor_by_table(code, Direction.BOTTOM)
    return [
        neighbor_by_table(top, Direction.LEFT),
        top,
        neighbor_by_table(top, Direction.RIGHT),
        neighbor_by_table(code, Direction.LEFT),
        code,
        neighbor_by_table(code, Direction.RIGHT),
        neighbor_by_table(bottom, Direction.LEFT),
        bottom,
        neighbor_by_table(bottom, Direction.RIGHT),
    ]


# ------------------------------------------------------------
# General neighbor engine (binary, any length)
# ------------------------------------------------------------

def neighbor(binary: str, direction: Direction) -> str:
    """Return the binary code adjacent to *binary* in *direction*.

    The axis that moves (latitude for top/bottom, longitude for right/left) is
    de-interleaved, incremented or decremented as an unsigned counter of its
    own width, and written back.  At the edge of the grid the counter wraps,
    so the top neighbor of the northernmost row is the southernmost row.

    Raises:
        InvalidArgumentError: If the code is shorter than two bits.
    """
    if len(binary) < 2:
        raise InvalidArgumentError(
            "binary code needs at least 2 bits for neighbor lookup", field="binary", value=binary
        )
    validate_binary(binary)

    start, step = _AXIS_STEP[direction]
    axis = extract_axis(binary, start)
    moved = mask_last_n_bits(int(axis, 2) + step, len(axis))
    return inject_axis(binary, start, moved)


def neighbors(binary: str) -> List[str]:
    """Return the 3x3 neighbor grid of a binary code (row-major, self at 4)."""
    validate_binary(binary)
    top = neighbor(binary, Direction.TOP)
    bottom = neighbor(binary, Direction.BOTTOM)
    return [
        neighbor(top, Direction.LEFT),
        top,
        neighbor(top, Direction.RIGHT),
        neighbor(binary, Direction.LEFT),
        binary,
        neighbor(binary, Direction.RIGHT),
        neighbor(bottom, Direction.LEFT),
        bottom,
        neighbor(bottom, Direction.RIGHT),
    ]


def is_table_aligned(bits: int) -> bool:
    """True when a binary code of *bits* bits fills whole base32 symbols."""
    return bits > 0 and bits % BITS_PER_SYMBOL == 0


GRID_INDEX: Dict[str, int] = {
    "top_left": 0, "top": 1, "top_right": 2,
    "left": 3, "self": 4, "right": 5,
    "bottom_left": 6, "bottom": 7, "bottom_right": 8,
}
