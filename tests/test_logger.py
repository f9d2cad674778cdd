# File: tests/test_logger.py
import io
import logging
from logging.handlers import RotatingFileHandler

import pytest

from krawl.logger import LOGGER_NAME, configure


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    configure()


def test_configure_writes_to_given_stream():
    buf = io.StringIO()
    lg = configure(level="DEBUG", stream=buf, log_format="%(levelname)s %(message)s")
    lg.debug("claimed %s", "https://site.com/")

    assert lg is logging.getLogger(LOGGER_NAME)
    assert buf.getvalue() == "DEBUG claimed https://site.com/\n"
    assert not lg.propagate


def test_configure_adds_rotating_file(tmp_path):
    log_file = tmp_path / "krawl.log"
    lg = configure(log_file=log_file, stream=io.StringIO())
    lg.info("Crawl started")

    file_handlers = [h for h in lg.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 5 * 1024 * 1024
    file_handlers[0].flush()
    assert "Crawl started" in log_file.read_text(encoding="utf-8")


def test_replace_handlers():
    configure(stream=io.StringIO())
    lg = configure(stream=io.StringIO())
    assert len(lg.handlers) == 1

    lg = configure(stream=io.StringIO(), replace_handlers=False)
    assert len(lg.handlers) == 2
