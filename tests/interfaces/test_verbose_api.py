"""
Unit tests for verbose logging functionality in ReleaseDownloader API.
"""

import logging
from unittest.mock import patch

from relfetch.interfaces.api import ReleaseDownloader
from relfetch.infrastructure.logger import logger


class TestVerboseLogging:
    """Test cases for verbose logging functionality."""

    def test_default_initialization(self):
        """ReleaseDownloader initializes with verbose=False by default."""
        downloader = ReleaseDownloader()
        assert downloader.verbose is False
        assert logger.level == logging.INFO

    def test_verbose_with_auth_token(self):
        """Verbose mode works together with an authentication token."""
        downloader = ReleaseDownloader(auth_token="test_token", verbose=True)
        assert downloader.verbose is True
        assert downloader.auth_token == "test_token"
        downloader.set_verbose(False)

    @patch('relfetch.interfaces.api.logger')
    def test_logger_level_verbose_true(self, mock_logger):
        """Logger level is set to DEBUG when verbose=True."""
        ReleaseDownloader(verbose=True)
        mock_logger.setLevel.assert_called_with(logging.DEBUG)

    @patch('relfetch.interfaces.api.logger')
    def test_logger_level_verbose_false(self, mock_logger):
        """Logger level is set to INFO when verbose=False."""
        ReleaseDownloader(verbose=False)
        mock_logger.setLevel.assert_called_with(logging.INFO)

    @patch('relfetch.interfaces.api.logger')
    def test_set_verbose_toggles_level(self, mock_logger):
        """set_verbose switches the level after construction."""
        downloader = ReleaseDownloader(verbose=False)
        downloader.set_verbose(True)

        assert downloader.verbose is True
        assert mock_logger.setLevel.call_count >= 2
        mock_logger.setLevel.assert_called_with(logging.DEBUG)

        downloader.set_verbose(False)
        assert downloader.verbose is False
        mock_logger.setLevel.assert_called_with(logging.INFO)

    def test_logger_is_package_logger(self):
        assert logger.name == "relfetch"
        assert logger.handlers
