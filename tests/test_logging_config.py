import json
import logging

from geocell.logging_config import configure_logging, get_logger


def _flush():
    for h in logging.getLogger().handlers:
        h.flush()


class TestConfigureLogging:
    def test_json_file_output(self, tmp_path):
        log_file = tmp_path / "logs" / "geocell.log"
        configure_logging(logging.INFO, log_file=log_file, json_output=True)
        get_logger("geocell.test").info("cells_written", count=9)
        _flush()

        record = json.loads(log_file.read_text().splitlines()[-1])
        assert record["event"] == "cells_written"
        assert record["count"] == 9
        assert record["level"] == "info"
        assert record["logger"] == "geocell.test"

    def test_level_filters(self, tmp_path):
        log_file = tmp_path / "geocell.log"
        configure_logging(logging.WARNING, log_file=log_file, json_output=True)
        logger = get_logger("geocell.test")
        logger.info("dropped")
        logger.warning("kept")
        _flush()

        events = [json.loads(line)["event"] for line in log_file.read_text().splitlines()]
        assert events == ["kept"]

    def test_sets_root_level(self):
        configure_logging(logging.DEBUG)
        assert logging.getLogger().level == logging.DEBUG

    def test_get_logger(self):
        logger = get_logger(__name__)
        assert hasattr(logger, "info")
        assert hasattr(logger, "warning")
