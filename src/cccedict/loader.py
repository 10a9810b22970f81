"""Load a whole CC-CEDICT source into a Cedict collection.

Comment lines ('#') and blank lines are skipped; every other line must parse.
By default the first malformed line aborts the load so a Cedict is never
silently incomplete. ``strict=False`` opts in to skipping bad lines instead.

Usage:
    >>> from cccedict.loader import load
    >>> cedict = load("你好 你好 [ni3 hao3] {nei5 hou2} /hello/")
    >>> len(cedict)
    1
"""

import io
import logging
from pathlib import Path
from typing import IO, Any, Iterable, Optional, Union

from cccedict.constants import CEDICT_ENCODING, COMMENT_MARKER
from cccedict.errors import CedictParseError, SourceUnavailable
from cccedict.models.entry import Cedict
from cccedict.parsers.entry_parser import parse_entry
from cccedict.utils.file_io import describe_source, iter_lines, open_text, text_stream

logger = logging.getLogger(__name__)

CedictSource = Union[str, bytes, bytearray, Path, IO[str], IO[bytes]]


def is_ignored(line: str) -> bool:
    """True for blank lines and comment lines."""
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_MARKER)


def _load_lines(lines: Iterable[str], source: str, strict: bool) -> Cedict:
    entries = []
    ignored = 0
    skipped = 0

    for line_number, line in enumerate(lines, start=1):
        if is_ignored(line):
            ignored += 1
            continue

        try:
            entries.append(parse_entry(line))
        except CedictParseError as e:
            e.line_number = line_number
            if strict:
                raise
            skipped += 1
            logger.warning(
                f"Skipping malformed line {line_number} in {source}: {e.message}",
                extra={"source": source, "line_number": line_number},
            )

    logger.info(
        f"Loaded {len(entries)} CC-CEDICT entries from {source}",
        extra={
            "source": source,
            "entry_count": len(entries),
            "ignored_count": ignored,
            "skipped_count": skipped,
        },
    )
    return Cedict(entries=tuple(entries))


def load_string(text: str, strict: bool = True) -> Cedict:
    """Load entries from in-memory dictionary text.

    Raises:
        CedictParseError: First malformed line (strict mode only)
    """
    return _load_lines(iter_lines(io.StringIO(text)), "<string>", strict)


def load_stream(
    stream: IO[Any],
    strict: bool = True,
    encoding: str = CEDICT_ENCODING,
    source_name: Optional[str] = None,
) -> Cedict:
    """Load entries from an open text or byte stream.

    The stream is read line by line and is left open for the caller to close.
    Byte streams are decoded incrementally with ``encoding``, so multi-byte
    encodings such as UTF-16 work.

    Raises:
        CedictParseError: First malformed line (strict mode only)
        SourceUnavailable: If the stream cannot be read or decoded
    """
    source = source_name or describe_source(stream)
    with text_stream(stream, encoding=encoding) as text:
        return _load_lines(iter_lines(text, encoding=encoding, source=source), source, strict)


def load_path(
    file_path: Union[str, Path], strict: bool = True, encoding: str = CEDICT_ENCODING
) -> Cedict:
    """Load entries from a dictionary file (plain text or .gz).

    The file is closed whether the load succeeds or fails.

    Raises:
        CedictParseError: First malformed line (strict mode only)
        SourceUnavailable: If the file is missing, unreadable or undecodable
    """
    with open_text(file_path, encoding=encoding) as f:
        return load_stream(f, strict=strict, encoding=encoding, source_name=str(file_path))


def load(
    source: CedictSource, *, strict: bool = True, encoding: str = CEDICT_ENCODING
) -> Cedict:
    """Load a Cedict from any supported source.

    Args:
        source: Dictionary text (str), raw bytes, a pathlib.Path, or an open
            text/byte stream. A str is always treated as dictionary text; pass
            a Path (or use load_path) to read a file.
        strict: Abort on the first malformed line (default: True). When False,
            malformed lines are logged and skipped.
        encoding: Encoding for bytes, byte streams and files (default: utf-8)

    Returns:
        Cedict with entries in source order

    Raises:
        CedictParseError: First malformed line (strict mode only)
        SourceUnavailable: If the source cannot be opened, read or decoded
    """
    if isinstance(source, Path):
        return load_path(source, strict=strict, encoding=encoding)
    if isinstance(source, str):
        return load_string(source, strict=strict)
    if isinstance(source, (bytes, bytearray)):
        try:
            text = bytes(source).decode(encoding)
        except UnicodeDecodeError as e:
            raise SourceUnavailable(
                f"Cannot decode dictionary bytes as {encoding}: {e}", source="<bytes>"
            ) from e
        return load_string(text, strict=strict)
    return load_stream(source, strict=strict, encoding=encoding)
