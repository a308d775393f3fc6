"""models.py

Pydantic value types exchanged by the encoder facade and the bounds decoder.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .geohash import MAX_PRECISION


class GeoPoint(BaseModel):
    """A (longitude, latitude) pair strictly inside the encodable range."""
    model_config = ConfigDict(frozen=True)

    lon: float = Field(gt=-180.0, lt=180.0)
    lat: float = Field(gt=-90.0, lt=90.0)


class CellBounds(BaseModel):
    """Rectangle covered by a cell code.

    Cells are half-open: a point on ``max_lon`` or ``max_lat`` belongs to the
    neighbouring cell, matching how :func:`geocell.geohash.encode` bisects.
    """
    model_config = ConfigDict(frozen=True)

    min_lon: float = Field(ge=-180.0, le=180.0)
    min_lat: float = Field(ge=-90.0, le=90.0)
    max_lon: float = Field(ge=-180.0, le=180.0)
    max_lat: float = Field(ge=-90.0, le=90.0)

    @model_validator(mode="after")
    def check_order(self) -> "CellBounds":
        if self.min_lon >= self.max_lon or self.min_lat >= self.max_lat:
            raise ValueError("bounds must have min < max on both axes")
        return self

    @property
    def width(self) -> float:
        """Longitude span in degrees."""
        return self.max_lon - self.min_lon

    @property
    def height(self) -> float:
        """Latitude span in degrees."""
        return self.max_lat - self.min_lat

    def contains(self, lon: float, lat: float) -> bool:
        return self.min_lon <= lon < self.max_lon and self.min_lat <= lat < self.max_lat


class Cell(BaseModel):
    """A grid cell as produced by :class:`geocell.encoder.CellEncoder`.

    ``base32`` is only set when the binary length fills whole base32 symbols,
    since only those codes are usable with the table engine.
    """
    model_config = ConfigDict(frozen=True)

    binary: str = Field(pattern=r"^[01]{2,64}$")
    base32: Optional[str] = Field(default=None, pattern=r"^[0-9b-hjkmnp-z]{1,13}$")
    precision: int = Field(ge=1, le=MAX_PRECISION)

    @model_validator(mode="after")
    def check_length(self) -> "Cell":
        if len(self.binary) != 2 * self.precision:
            raise ValueError("binary length must be twice the precision")
        return self

    @property
    def table_aligned(self) -> bool:
        return self.base32 is not None
