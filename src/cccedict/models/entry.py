"""Data models for CC-CEDICT entries.

Syllable is a plain NamedTuple so it compares equal to ``(sound, tone)`` tuples.
CedictEntry and Cedict are frozen pydantic models.
"""

from pathlib import Path
from typing import IO, Any, Dict, List, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_serializer


class Syllable(NamedTuple):
    """One romanized syllable: phonetic sound plus tone marker.

    While both jyutping and pinyin use numbers for tones, tones are kept as
    strings: they are never used arithmetically and variant notations exist.
    """

    sound: str
    tone: str = ""


class CedictEntry(BaseModel):
    """A single parsed dictionary line.

    Optional fields are None when the corresponding section was absent from
    the line, and a (possibly empty) tuple when it was present. Sequences are
    tuples so entries are immutable all the way down and hashable.
    """

    traditional: str = Field(..., min_length=1, description="Traditional characters")
    simplified: str = Field(..., min_length=1, description="Simplified characters")
    pinyin: Optional[Tuple[Syllable, ...]] = Field(
        None, description="Mandarin syllables from the [...] section"
    )
    jyutping: Optional[Tuple[Syllable, ...]] = Field(
        None, description="Cantonese syllables from the {...} section (cantonese.org)"
    )
    definitions: Optional[Tuple[str, ...]] = Field(
        None, description="Slash-delimited definitions, in source order"
    )
    comment: Optional[str] = Field(
        None, description="Trailing '# ...' annotation after the entry body"
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "json_schema_extra": {
            "example": {
                "traditional": "你好嗎",
                "simplified": "你好吗",
                "pinyin": [["ni", "3"], ["hao", "3"], ["ma", "5"]],
                "jyutping": [["nei", "5"], ["hou", "2"], ["maa", "1"]],
                "definitions": ["how are you?"],
                "comment": None,
            }
        },
    }

    @field_serializer("pinyin", "jyutping")
    def serialize_syllables(
        self, syllables: Optional[Tuple[Syllable, ...]]
    ) -> Optional[List[Dict[str, str]]]:
        if syllables is None:
            return None
        return [syllable._asdict() for syllable in syllables]

    @classmethod
    def from_line(cls, line: str) -> "CedictEntry":
        """Parse one dictionary line (see cccedict.parsers.entry_parser)."""
        from cccedict.parsers.entry_parser import parse_entry

        return parse_entry(line)


class Cedict(BaseModel):
    """An ordered, immutable collection of entries loaded from one source."""

    entries: Tuple[CedictEntry, ...] = Field(
        default_factory=tuple,
        description="Entries in the order their lines appeared in the source",
    )

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.entries)

    # Thin adapters over cccedict.loader

    @classmethod
    def from_str(cls, text: str, strict: bool = True) -> "Cedict":
        from cccedict.loader import load_string

        return load_string(text, strict=strict)

    @classmethod
    def from_file(cls, stream: IO[Any], strict: bool = True) -> "Cedict":
        from cccedict.loader import load_stream

        return load_stream(stream, strict=strict)

    @classmethod
    def from_path(cls, path: Union[str, Path], strict: bool = True) -> "Cedict":
        from cccedict.loader import load_path

        return load_path(path, strict=strict)
