# conftest.py
import logging

import pytest
import structlog

from geocell.config import EncoderSettings
from geocell.encoder import CellEncoder


# (lon, lat) pairs well away from the grid edges
CITIES = {
    "beijing": (116.3, 39.9),
    "new_york": (-73.98, 40.75),
    "paris": (2.35, 48.86),
    "buenos_aires": (-58.4, -34.6),
    "sydney": (151.2, -33.9),
    "gulf_of_guinea": (0.1, 0.1),
    "just_south_west": (-0.1, -0.1),
}


@pytest.fixture(autouse=True)
def _reset_logging():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    structlog.reset_defaults()
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


@pytest.fixture
def beijing_binary() -> str:
    # encode(116.3, 39.9, 5)
    return "1110011101"


@pytest.fixture
def city_points():
    return list(CITIES.values())


@pytest.fixture
def aligned_encoder() -> CellEncoder:
    return CellEncoder(EncoderSettings(precision=5))


@pytest.fixture
def unaligned_encoder() -> CellEncoder:
    return CellEncoder(EncoderSettings(precision=3))
