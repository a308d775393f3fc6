"""encoder.py

Settings-driven facade over :mod:`geocell.geohash`.

Usage::

    from geocell.encoder import CellEncoder
    from geocell.config import EncoderSettings

    enc = CellEncoder(EncoderSettings(precision=10))
    cell = enc.encode(116.3, 39.9)
    cell.base32            # "wx4g"
    enc.neighbors(cell)    # 9 cells, row-major, cell itself at index 4
"""

from __future__ import annotations

from typing import Dict, List, Optional

from . import geohash
from .config import EncoderSettings
from .errors import InvalidArgumentError
from .geo import decode_bounds
from .geohash import Direction
from .logging_config import get_logger
from .models import Cell, CellBounds

logger = get_logger(__name__)


class CellEncoder:
    """Encodes points at a fixed precision and looks up neighboring cells.

    Neighbors are computed with the table engine when the code fills whole
    base32 symbols (``2 * precision`` divisible by 5) and with the general
    engine otherwise.  The two differ at the edge of the world grid: the
    table engine raises :class:`geocell.errors.BoundaryExceededError`, the
    general engine wraps around.
    """

    def __init__(self, settings: Optional[EncoderSettings] = None):
        self.settings = settings or EncoderSettings()

    @property
    def precision(self) -> int:
        return self.settings.precision

    def _cell(self, binary: str, base32: Optional[str] = None) -> Cell:
        return Cell(binary=binary, base32=base32, precision=len(binary) // 2)

    def encode(self, lon: float, lat: float) -> Cell:
        """Encode a point into a :class:`Cell` at the configured precision."""
        binary = geohash.encode(lon, lat, self.precision)
        base32 = geohash.binary_to_base32(binary) if geohash.is_table_aligned(len(binary)) else None
        return self._cell(binary, base32)

    def from_base32(self, code: str) -> Cell:
        """Rebuild a cell at the configured precision from its base32 code.

        Raises:
            InvalidArgumentError: If the code does not hold exactly
                ``2 * precision`` bits.
        """
        bits = len(code) * geohash.BITS_PER_SYMBOL
        if bits != 2 * self.precision:
            raise InvalidArgumentError(
                f"base32 code must hold {2 * self.precision} bits at precision {self.precision}",
                field="code",
                value=code,
            )
        return self._table_cell(code)

    def _table_cell(self, code: str) -> Cell:
        return self._cell(geohash.base32_to_binary(code, len(code) * geohash.BITS_PER_SYMBOL), code)

    def neighbor(self, cell: Cell, direction: Direction) -> Cell:
        if cell.base32 is not None:
            return self._table_cell(geohash.neighbor_by_table(cell.base32, direction))
        return self._cell(geohash.neighbor(cell.binary, direction))

    def neighbors(self, cell: Cell) -> List[Cell]:
        """Return the 3x3 grid around *cell* (row-major, *cell* at index 4)."""
        if cell.base32 is not None:
            return [self._table_cell(c) for c in geohash.neighbors_by_table(cell.base32)]
        logger.debug("general_neighbor_engine", bits=len(cell.binary))
        return [self._cell(b) for b in geohash.neighbors(cell.binary)]

    def named_neighbors(self, cell: Cell) -> Dict[str, Cell]:
        """Like :meth:`neighbors` but keyed by position name (``"top_left"`` ...)."""
        grid = self.neighbors(cell)
        return {name: grid[i] for name, i in geohash.GRID_INDEX.items()}

    def bounds(self, cell: Cell) -> CellBounds:
        return decode_bounds(cell.binary)
