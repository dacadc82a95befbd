"""Tests for caption language detection."""

import pytest

from captionsync.core.caption_paths import get_caption_path
from captionsync.core.language_detector import get_caption_language, split_language_qualifier
from captionsync.utils.constants import LANG_UNKNOWN


class TestGetCaptionLanguage:
    """Tests for get_caption_language function."""

    def test_two_letter_code(self):
        """Test ISO 639-1 qualifier is detected."""
        assert get_caption_language("movie.en.srt") == "en"

    def test_three_letter_code(self):
        """Test ISO 639-2 qualifier is detected."""
        assert get_caption_language("movie.eng.vtt") == "eng"

    def test_no_qualifier(self):
        """Test caption without qualifier is unknown."""
        assert get_caption_language("movie.srt") == LANG_UNKNOWN

    def test_single_char_qualifier(self):
        """Test single-character segment fails the length check."""
        assert get_caption_language("movie.x.srt") == LANG_UNKNOWN

    def test_numeric_segment(self):
        """Test numeric segments such as years are not languages."""
        assert get_caption_language("movie.2020.srt") == LANG_UNKNOWN
        assert get_caption_language("movie.00.srt") == LANG_UNKNOWN

    def test_release_tokens(self):
        """Test release tokens are not languages."""
        assert get_caption_language("Show.S01E02.1080p.srt") == LANG_UNKNOWN

    def test_with_directories(self):
        """Test directory parts are ignored."""
        assert get_caption_language("/media/tv/show.s01/episode.fr.srt") == "fr"

    def test_no_extension(self):
        """Test path without extension degrades to unknown."""
        assert get_caption_language("movie") == LANG_UNKNOWN

    def test_whitespace_in_qualifier(self):
        """Test segments containing spaces are not language codes."""
        assert get_caption_language("movie. en.srt") == LANG_UNKNOWN
        assert get_caption_language("movie.en .srt") == LANG_UNKNOWN

    def test_non_alphabetic_qualifier(self):
        """Test segments with digits or punctuation are not language codes."""
        assert get_caption_language("movie.e1.srt") == LANG_UNKNOWN
        assert get_caption_language("movie.en-.srt") == LANG_UNKNOWN

    def test_hidden_caption_file(self):
        """Test caption named only by its qualifier."""
        assert get_caption_language("dir/.en.srt") == "en"

    def test_empty_path(self):
        """Test empty path degrades to unknown."""
        assert get_caption_language("") == LANG_UNKNOWN

    @pytest.mark.parametrize("lang", ["en", "fr", "de", "ja", "pt", "eng", "fra", "deu"])
    def test_round_trip(self, lang):
        """Test detecting the language of a built caption path."""
        for ext in ("vtt", "srt"):
            caption = get_caption_path("/media/Some.Movie.2020.mkv", lang, ext)
            assert get_caption_language(caption) == lang


class TestSplitLanguageQualifier:
    """Tests for split_language_qualifier function."""

    def test_valid_qualifier(self):
        """Test valid qualifier is split off."""
        assert split_language_qualifier("movie.en") == ("movie", "en")

    def test_invalid_qualifier(self):
        """Test invalid qualifier leaves basename unchanged."""
        assert split_language_qualifier("movie.2020") == ("movie.2020", None)

    def test_whitespace_qualifier(self):
        """Test padded segment leaves basename unchanged."""
        assert split_language_qualifier("movie. en") == ("movie. en", None)
        assert split_language_qualifier("movie.en ") == ("movie.en ", None)

    def test_no_qualifier(self):
        """Test basename without dot."""
        assert split_language_qualifier("movie") == ("movie", None)
