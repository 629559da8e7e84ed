import logging
import re

from geodetics.utils.logging import LOGGER, warn_once


def test_logger():
    assert LOGGER.name == 'geodetics'
    assert LOGGER.level == logging.WARNING


def test_warn_once(caplog):
    warn_once('test logging once')
    assert 'test logging once' in caplog.text

    warn_once('test logging once')
    assert len(re.findall('test logging once', caplog.text)) == 1
