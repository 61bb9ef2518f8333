"""
Tests for hashiter.utils.funcs module.
"""
import logging
import pytest
from pydantic import ValidationError
from hashiter.utils.funcs import get_logger, type_check_call


@type_check_call
def _double(x: int) -> int:
    return 2 * x


@pytest.mark.unit
class TestFuncs:
    """Tests for the helper functions."""

    def test_get_logger(self):
        """get_logger returns a named logger at the requested level."""
        logger = get_logger('hashiter.test', logging.INFO)
        assert logger.name == 'hashiter.test'
        assert logger.level == logging.INFO
        assert get_logger('hashiter.test2').level == logging.DEBUG

    def test_type_check_call(self):
        """type_check_call validates the arguments."""
        assert _double(2) == 4
        with pytest.raises(ValidationError):
            _double('two')
