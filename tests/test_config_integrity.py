"""
Tests for configuration integrity.

Verifies that the naming, timestamp and report constants are consistent
with each other and with the archive format.
"""

from datetime import datetime

from dmu import config


class TestConfigValues:

    def test_extension_matches_compression(self):
        assert config.ARCHIVE_EXTENSION.endswith(".gz")
        assert config.ARCHIVE_COMPRESSION == "gzip"

    def test_filename_date_format(self):
        assert datetime(2026, 3, 4).strftime(config.FILENAME_DATE_FORMAT) == "04_03_2026"

    def test_filename_template_fields(self):
        out = config.FILENAME_TEMPLATE.format(name="n", date="d", version="v", ext=".e")
        assert out == "n_d_vv.e"

    def test_timestamp_format_human_readable(self):
        stamp = datetime(2026, 10, 17, 21, 30, 5).strftime(config.TIMESTAMP_FORMAT)
        assert stamp == "Sat Oct 17 21:30:05 2026"

    def test_column_info_columns(self):
        assert config.COLUMN_INFO_COLUMNS == ["name", "unit", "ucd", "description"]

    def test_banner_width(self):
        assert len(config.BANNER_RULE) >= len(config.BANNER_TITLE)

    def test_default_console_level_valid(self):
        import logging
        assert isinstance(getattr(logging, config.DEFAULT_CONSOLE_LOG_LEVEL), int)
