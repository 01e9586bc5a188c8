"""Tests for logging helpers."""
import logging

import megacp
from megacp.core.logging import get_logger


class TestGetLogger:
    """Test suite for get_logger."""
    
    def test_returns_named_logger(self):
        """Test the logger has the requested name."""
        assert get_logger('megacp.test').name == 'megacp.test'
    
    def test_propagates_to_root(self):
        """Test loggers propagate so basicConfig() handlers apply."""
        assert get_logger('megacp.test.propagate').propagate is True


class TestSetupLogging:
    """Test suite for setup_logging."""
    
    def test_sets_package_levels(self):
        """Test package loggers get the requested level."""
        megacp.setup_logging(logging.DEBUG)
        try:
            assert logging.getLogger('megacp').level == logging.DEBUG
            assert logging.getLogger('megacp.core.copy').level == logging.DEBUG
        finally:
            megacp.setup_logging(logging.NOTSET)
    
    def test_reaches_module_loggers_with_own_level(self):
        """Test loggers that set their own level at import follow the new level."""
        module_logger = get_logger('megacp.core.copy.example')
        module_logger.setLevel(logging.WARNING)
        
        megacp.setup_logging(logging.DEBUG)
        try:
            assert module_logger.isEnabledFor(logging.DEBUG)
        finally:
            megacp.setup_logging(logging.NOTSET)
