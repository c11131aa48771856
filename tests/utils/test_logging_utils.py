"""
Tests for command line logging setup.
"""

import logging

import pytest

from structural_diary.utils.logging_utils import configure_logging


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_configure_logging_when_verbose_then_debug(self, restore_root_level):
        configure_logging(verbose=True)

        assert restore_root_level.level == logging.DEBUG

    def test_configure_logging_when_quiet_then_warning(self, restore_root_level):
        configure_logging(quiet=True)

        assert restore_root_level.level == logging.WARNING

    def test_configure_logging_when_default_then_info(self, restore_root_level):
        configure_logging()

        assert restore_root_level.level == logging.INFO
