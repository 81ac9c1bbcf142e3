import logging
import math

import pytest

from animprogress.utils.logging import get_logger
from animprogress.utils.timeparse import parse_time


def test_parse_time():
    assert parse_time("250") == pytest.approx(250.0)
    assert parse_time("250ms") == pytest.approx(250.0)
    assert parse_time("1.5s") == pytest.approx(1500.0)
    assert parse_time("-0.5s") == pytest.approx(-500.0)
    assert parse_time("40%") == pytest.approx(40.0)
    assert parse_time("02:03") == pytest.approx(123000.0)
    assert parse_time("1:02:03.5") == pytest.approx(3723500.0)
    assert math.isinf(parse_time("infinity"))


@pytest.mark.parametrize("text", ["", "bad", "nan", "1:02s", "1:2:3:4", "5 minutes"])
def test_parse_time_rejects(text):
    with pytest.raises(ValueError):
        parse_time(text)


def test_logging():
    logger = get_logger("test")
    logger2 = get_logger("test", level="DEBUG")
    assert logger is logger2
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    logger.debug("debug message")
