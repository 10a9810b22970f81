"""Source adapters for dictionary text.

Turns a filesystem path, a text stream or a byte stream into an iterator of
decoded lines. I/O and decoding failures surface as SourceUnavailable.
"""

import gzip
import io
import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Dict, Iterator, List, Optional, Union

from cccedict.constants import BYTE_ORDER_MARK, CEDICT_ENCODING
from cccedict.errors import SourceUnavailable

logger = logging.getLogger(__name__)


def describe_source(source: Any) -> str:
    """Short human-readable label for a source, used in logs and errors."""
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", None) or type(source).__name__


@contextmanager
def open_text(
    file_path: Union[str, Path], encoding: str = CEDICT_ENCODING
) -> Iterator[IO[str]]:
    """Open a dictionary file for reading text, closing it on exit.

    Files ending in ``.gz`` (the form CC-CEDICT is distributed in) are
    decompressed transparently.

    Raises:
        SourceUnavailable: If the file cannot be opened
    """
    file_path = Path(file_path)
    logger.debug(f"Opening dictionary source {file_path}")

    try:
        if file_path.suffix == ".gz":
            handle = gzip.open(file_path, "rt", encoding=encoding)
        else:
            handle = open(file_path, "r", encoding=encoding)
    except OSError as e:
        raise SourceUnavailable(
            f"Cannot open dictionary source {file_path}: {e}", source=str(file_path)
        ) from e

    with handle:
        yield handle


@contextmanager
def text_stream(
    stream: IO[Any], encoding: str = CEDICT_ENCODING
) -> Iterator[IO[Any]]:
    """Present a caller's stream as text without taking ownership of it.

    Binary file objects are wrapped in an ``io.TextIOWrapper`` so the codec
    sees the whole stream rather than one newline-split chunk at a time,
    which multi-byte encodings such as UTF-16 require. The wrapper is
    detached on exit, leaving the caller's stream open. Anything else is
    yielded unchanged.
    """
    if not isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        yield stream
        return

    wrapper = io.TextIOWrapper(stream, encoding=encoding)
    try:
        yield wrapper
    finally:
        if not stream.closed:
            wrapper.detach()


def iter_lines(
    stream: IO[Any], encoding: str = CEDICT_ENCODING, source: Optional[str] = None
) -> Iterator[str]:
    """Yield decoded lines from a text or byte stream.

    Byte lines are decoded one at a time with ``encoding``; wrap binary
    file objects with text_stream first. A leading byte order mark is
    dropped. The stream is not closed.

    Raises:
        SourceUnavailable: If reading or decoding the stream fails
    """
    source = source or describe_source(stream)
    first = True

    try:
        for raw in stream:
            line = raw.decode(encoding) if isinstance(raw, (bytes, bytearray)) else raw
            if first:
                line = line.removeprefix(BYTE_ORDER_MARK)
                first = False
            yield line
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(
            f"Cannot read dictionary source {source}: {e}", source=source
        ) from e


def write_json(
    data: Union[Dict[str, Any], List[Any]],
    file_path: Union[str, Path],
    indent: int = 2,
    ensure_ascii: bool = False,
) -> None:
    """Write data to a JSON file, creating parent directories.

    Args:
        data: Data to write (dict or list)
        file_path: Path to output JSON file
        indent: Number of spaces for indentation (default: 2)
        ensure_ascii: If False, Chinese characters are written as-is (default: False)
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=ensure_ascii)

    logger.info(f"Wrote JSON to {file_path}")
