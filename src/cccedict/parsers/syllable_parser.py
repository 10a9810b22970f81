"""Split romanized syllables into sound and tone.

Works for both Mandarin pinyin ("ni3") and Cantonese jyutping ("nei5").
Parsing never fails: a token without a trailing tone number keeps an empty tone.
"""

import re
from typing import List

from cccedict.models.entry import Syllable

TONE_DIGITS = "0123456789"

# A run of non-digits followed by its (optional) tone digits, or a bare digit run
_SEGMENT_RE = re.compile(r"[^0-9]+[0-9]*|[0-9]+")


def parse_syllable(token: str) -> Syllable:
    """Split one syllable token into sound and tone.

    The tone is the trailing run of digits; everything before it is the sound,
    case preserved.

    Args:
        token: Romanized syllable (e.g., "ni3", "Bei3", "maa1", "ma")

    Returns:
        Syllable with empty tone when the token carries no tone number

    Example:
        >>> parse_syllable("nei5")
        Syllable(sound='nei', tone='5')
        >>> parse_syllable("ma")
        Syllable(sound='ma', tone='')
    """
    sound = token.rstrip(TONE_DIGITS)
    return Syllable(sound, token[len(sound):])


def split_syllables(token: str) -> List[str]:
    """Segment a token that runs several syllables together.

    CC-CEDICT occasionally omits the space between syllables ("zi4dian3").
    A tone number followed by more letters starts a new syllable.

    Example:
        >>> split_syllables("zi4dian3")
        ['zi4', 'dian3']
        >>> split_syllables("lu:4")
        ['lu:4']
    """
    return _SEGMENT_RE.findall(token)


def parse_syllables(text: str) -> List[Syllable]:
    """Parse the whitespace-separated contents of a [...] or {...} section."""
    return [
        parse_syllable(segment)
        for token in text.split()
        for segment in split_syllables(token)
    ]
