"""Value types for parsed dictionary data."""

from cccedict.models.entry import Cedict, CedictEntry, Syllable

__all__ = [
    "Syllable",
    "CedictEntry",
    "Cedict",
]
