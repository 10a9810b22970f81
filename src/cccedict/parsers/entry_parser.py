"""Line grammar parser for CC-CEDICT entries.

Expected format (cantonese.org extension adds the {...} section):
    TRAD SIMP [pin1 yin1] {jyut6 ping3} /def 1/def 2/ # optional comment

Every section after the two character fields is optional, but sections are only
recognized in this order. The line is scanned once, left to right.
"""

import re
from typing import Optional, Tuple, Type

from cccedict.constants import COMMENT_MARKER
from cccedict.errors import (
    CedictParseError,
    MissingCharacters,
    UnexpectedContent,
    UnterminatedDefinitions,
    UnterminatedJyutping,
    UnterminatedPinyin,
)
from cccedict.models.entry import CedictEntry, Syllable
from cccedict.parsers.syllable_parser import parse_syllables

PINYIN_DELIMITERS = ("[", "]")
JYUTPING_DELIMITERS = ("{", "}")
DEFINITION_DELIMITER = "/"

# Characters that open a section and therefore can never start a character field
SECTION_OPENERS = (PINYIN_DELIMITERS[0], JYUTPING_DELIMITERS[0], DEFINITION_DELIMITER)

_TOKEN_RE = re.compile(r"\S+")
_SPACE_RE = re.compile(r"\s*")


def _skip_whitespace(text: str, pos: int) -> int:
    return _SPACE_RE.match(text, pos).end()


def _read_characters(text: str, pos: int) -> Tuple[Optional[str], int]:
    """Read one whitespace-delimited character field starting at pos."""
    match = _TOKEN_RE.match(text, _skip_whitespace(text, pos))
    if not match or match.group().startswith(SECTION_OPENERS):
        return None, pos
    return match.group(), match.end()


def _read_syllable_section(
    text: str,
    pos: int,
    delimiters: Tuple[str, str],
    error_cls: Type[CedictParseError],
    line: str,
) -> Tuple[Optional[Tuple[Syllable, ...]], int]:
    """Read a bracketed romanization section if one starts at pos."""
    opener, closer = delimiters
    start = _skip_whitespace(text, pos)
    if not text.startswith(opener, start):
        return None, pos

    end = text.find(closer, start + 1)
    if end == -1:
        raise error_cls(f"'{opener}' is never closed with '{closer}'", line=line)

    return tuple(parse_syllables(text[start + 1:end])), end + 1


def _read_definitions(
    text: str, pos: int, line: str
) -> Tuple[Optional[Tuple[str, ...]], int]:
    """Read the /.../ section if one starts at pos.

    The section ends at the last '/' on the line, so definitions may themselves
    contain brackets, e.g. "/flip through a dictionary [colloquial]/".
    Consecutive slashes yield empty definitions; they are not collapsed.
    """
    start = _skip_whitespace(text, pos)
    if not text.startswith(DEFINITION_DELIMITER, start):
        return None, pos

    end = text.rfind(DEFINITION_DELIMITER)
    if end == start:
        raise UnterminatedDefinitions(
            f"'{DEFINITION_DELIMITER}' opens definitions but no closing "
            f"'{DEFINITION_DELIMITER}' follows",
            line=line,
        )

    body = text[start + 1:end]
    definitions = tuple(definition.strip() for definition in body.split(DEFINITION_DELIMITER))
    return definitions, end + 1


def _read_comment(text: str, pos: int, line: str) -> Optional[str]:
    rest = text[pos:].strip()
    if not rest:
        return None
    if rest.startswith(COMMENT_MARKER):
        return rest[len(COMMENT_MARKER):].strip()
    raise UnexpectedContent(f"Unexpected content after entry: {rest!r}", line=line)


def parse_entry(line: str) -> CedictEntry:
    """Parse one CC-CEDICT line into a CedictEntry.

    Args:
        line: A single dictionary line (surrounding whitespace is ignored)

    Returns:
        CedictEntry with pinyin/jyutping/definitions set only for the sections
        present on the line

    Raises:
        MissingCharacters: Fewer than two leading character fields
        UnterminatedPinyin: '[' without a matching ']'
        UnterminatedJyutping: '{' without a matching '}'
        UnterminatedDefinitions: A single '/' with nothing closing it
        UnexpectedContent: Trailing text that is neither a section nor a comment

    Example:
        >>> entry = parse_entry("你好嗎 你好吗 [ni3 hao3 ma5] {nei5 hou2 maa1} /how are you?/")
        >>> entry.jyutping[0]
        Syllable(sound='nei', tone='5')
    """
    text = line.strip()

    traditional, pos = _read_characters(text, 0)
    simplified, pos = _read_characters(text, pos) if traditional else (None, pos)
    if not traditional or not simplified:
        raise MissingCharacters(
            "Expected traditional and simplified characters at the start of the line",
            line=line,
        )

    pinyin, pos = _read_syllable_section(
        text, pos, PINYIN_DELIMITERS, UnterminatedPinyin, line
    )
    jyutping, pos = _read_syllable_section(
        text, pos, JYUTPING_DELIMITERS, UnterminatedJyutping, line
    )
    definitions, pos = _read_definitions(text, pos, line)
    comment = _read_comment(text, pos, line)

    return CedictEntry(
        traditional=traditional,
        simplified=simplified,
        pinyin=pinyin,
        jyutping=jyutping,
        definitions=definitions,
        comment=comment,
    )
