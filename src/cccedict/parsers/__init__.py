"""Parsers for CC-CEDICT lines and romanized syllables.

- syllable_parser: "ni3" -> Syllable("ni", "3")
- entry_parser: one dictionary line -> CedictEntry
"""

from cccedict.parsers.entry_parser import parse_entry
from cccedict.parsers.syllable_parser import (
    parse_syllable,
    parse_syllables,
    split_syllables,
)

__all__ = [
    "parse_entry",
    "parse_syllable",
    "parse_syllables",
    "split_syllables",
]
