"""Unit tests for syllable parsing."""

import pytest

from cccedict.models.entry import Syllable
from cccedict.parsers.syllable_parser import (
    parse_syllable,
    parse_syllables,
    split_syllables,
)


class TestParseSyllable:
    """Tests for splitting a single syllable into sound and tone."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("ni3", ("ni", "3")),
            ("hao3", ("hao", "3")),
            ("nei5", ("nei", "5")),
            ("maa1", ("maa", "1")),
            ("Bei3", ("Bei", "3")),
        ],
    )
    def test_sound_and_tone(self, token, expected):
        """Test that the trailing digit becomes the tone."""
        assert parse_syllable(token) == expected

    def test_no_tone(self):
        """Test that a toneless token keeps an empty tone."""
        syllable = parse_syllable("ma")
        assert syllable.sound == "ma"
        assert syllable.tone == ""

    def test_multi_digit_tone_is_opaque(self):
        """Test that tones are not validated or converted."""
        assert parse_syllable("life42") == Syllable("life", "42")

    def test_non_letter_sound_is_kept(self):
        """Test that CC-CEDICT's u: notation stays in the sound."""
        assert parse_syllable("lu:4") == Syllable("lu:", "4")

    def test_returns_syllable(self):
        """Test that the result is a Syllable, not a bare tuple."""
        assert isinstance(parse_syllable("ni3"), Syllable)


class TestSplitSyllables:
    """Tests for segmenting run-together syllables."""

    def test_run_together(self):
        """Test splitting 'zi4dian3' into two syllables."""
        assert split_syllables("zi4dian3") == ["zi4", "dian3"]

    def test_single(self):
        """Test that a lone syllable is one segment."""
        assert split_syllables("ni3") == ["ni3"]
        assert split_syllables("ma") == ["ma"]

    def test_trailing_toneless_syllable(self):
        """Test that a toneless tail is its own segment."""
        assert split_syllables("ni3ma") == ["ni3", "ma"]


class TestParseSyllables:
    """Tests for parsing a whole romanization section."""

    def test_space_separated(self):
        """Test parsing space-separated pinyin."""
        assert parse_syllables("ni3 hao3") == [("ni", "3"), ("hao", "3")]

    def test_irregular_spacing(self):
        """Test leading, trailing and missing spaces."""
        expected = [("ni", "3"), ("hao", "3"), ("ma", "5")]
        assert parse_syllables("ni3hao3 ma5") == expected
        assert parse_syllables(" ni3hao3 ma5 ") == expected

    def test_empty(self):
        """Test that empty content gives an empty list."""
        assert parse_syllables("") == []
        assert parse_syllables("   ") == []
