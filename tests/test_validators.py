"""Tests for configuration validators."""

import pytest

from captionsync.config.validators import (
    parse_extensions,
    validate_extension,
    validate_language_code,
    validate_log_level,
)


class TestValidateExtension:
    """Tests for validate_extension function."""

    def test_plain(self):
        """Test plain extension."""
        assert validate_extension("srt") == "srt"

    def test_normalized(self):
        """Test leading dot, case and whitespace are normalized."""
        assert validate_extension(" .VTT ") == "vtt"

    def test_empty_fails(self):
        """Test empty extension fails."""
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_extension("")
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_extension(".")

    def test_invalid_characters_fail(self):
        """Test extensions with separators fail."""
        with pytest.raises(ValueError, match="Invalid extension"):
            validate_extension("s/rt")
        with pytest.raises(ValueError, match="Invalid extension"):
            validate_extension("en.srt")

    def test_custom_field_name_in_error(self):
        """Test custom field name appears in error."""
        with pytest.raises(ValueError, match="CAPTION_EXTENSIONS cannot be empty"):
            validate_extension("", field_name="CAPTION_EXTENSIONS")


class TestParseExtensions:
    """Tests for parse_extensions function."""

    def test_order_preserved(self):
        """Test priority order is kept."""
        assert parse_extensions("srt,vtt") == ["srt", "vtt"]

    def test_duplicates_removed(self):
        """Test first occurrence wins."""
        assert parse_extensions("vtt,srt,.VTT") == ["vtt", "srt"]

    def test_blank_entries_skipped(self):
        """Test stray commas are ignored."""
        assert parse_extensions(" vtt , ,srt,") == ["vtt", "srt"]

    def test_empty_fails(self):
        """Test empty list fails."""
        with pytest.raises(ValueError, match="At least one entry"):
            parse_extensions("")
        with pytest.raises(ValueError, match="At least one entry"):
            parse_extensions(None)
        with pytest.raises(ValueError, match="At least one entry"):
            parse_extensions(" , ")

    def test_invalid_entry_fails(self):
        """Test invalid entry fails the whole list."""
        with pytest.raises(ValueError, match="Invalid"):
            parse_extensions("vtt,s rt")


class TestValidateLanguageCode:
    """Tests for validate_language_code function."""

    def test_valid(self):
        """Test valid codes pass unchanged."""
        assert validate_language_code("en") == "en"
        assert validate_language_code(" fra ") == "fra"

    def test_unknown_marker_allowed(self):
        """Test unknown-language marker is accepted."""
        assert validate_language_code("00") == "00"

    def test_empty_fails(self):
        """Test empty code fails."""
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_language_code("  ")

    def test_separator_fails(self):
        """Test code containing the separator fails."""
        with pytest.raises(ValueError, match="cannot contain"):
            validate_language_code("en|fr")

    def test_invalid_fails(self):
        """Test non-language code fails."""
        with pytest.raises(ValueError, match="Invalid language code"):
            validate_language_code("2020")


class TestValidateLogLevel:
    """Tests for validate_log_level function."""

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    def test_valid_levels(self, level):
        """Test valid levels."""
        assert validate_log_level(level) == level

    def test_normalized(self):
        """Test lowercase and whitespace are normalized."""
        assert validate_log_level(" debug ") == "DEBUG"

    def test_invalid_level(self):
        """Test invalid level fails."""
        with pytest.raises(ValueError, match="Invalid log level"):
            validate_log_level("VERBOSE")
