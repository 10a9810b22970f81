"""
cccedict: CC-CEDICT dictionary parser

Parses lines of the CC-CEDICT Chinese/English dictionary format, including the
cantonese.org extension that adds Jyutping in {...}, into structured entries.

**Version**: 0.1.0
**Key Dependencies**: pydantic, python-dotenv, loguru, tqdm
"""

from cccedict.errors import (
    CedictError,
    CedictParseError,
    MissingCharacters,
    SourceUnavailable,
    UnexpectedContent,
    UnterminatedDefinitions,
    UnterminatedJyutping,
    UnterminatedPinyin,
)
from cccedict.loader import load, load_path, load_stream, load_string
from cccedict.models import Cedict, CedictEntry, Syllable
from cccedict.parsers import parse_entry, parse_syllable

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Cedict",
    "CedictEntry",
    "Syllable",
    "parse_entry",
    "parse_syllable",
    "load",
    "load_path",
    "load_stream",
    "load_string",
    "CedictError",
    "CedictParseError",
    "MissingCharacters",
    "UnterminatedPinyin",
    "UnterminatedJyutping",
    "UnterminatedDefinitions",
    "UnexpectedContent",
    "SourceUnavailable",
]
