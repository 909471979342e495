"""
UTF-16 stream decoding for Marktstammdatenregister dumps.

The registry exports its XML files as UTF-16. Most files start with a
byte-order mark, but not all of them do; files without a mark are big-endian.
The XML parser itself does not cope with this, so the raw bytes are decoded
here into a character stream before they reach the scanner.

The decoding is incremental: only one buffer of bytes is held at a time.
"""

import codecs
import io
from typing import BinaryIO, TextIO, Tuple

# Byte order used by the registry when a file carries no mark
DEFAULT_UTF16_CODEC = "utf-16-be"


def detect_utf16_encoding(head: bytes) -> Tuple[str, int]:
    """
    Pick the UTF-16 codec for a stream from its first bytes.

    Args:
        head: Leading bytes of the stream (at least two, if available)

    Returns:
        Tuple of (codec_name, bom_length)
        - codec_name: "utf-16-be" or "utf-16-le"
        - bom_length: Number of leading bytes to skip (2 for a mark, else 0)

    Examples:
        >>> detect_utf16_encoding(b'\\xff\\xfe<\\x00')
        ('utf-16-le', 2)
        >>> detect_utf16_encoding(b'\\x00<\\x00?')
        ('utf-16-be', 0)
    """
    if head.startswith(codecs.BOM_UTF16_BE):
        return "utf-16-be", len(codecs.BOM_UTF16_BE)
    if head.startswith(codecs.BOM_UTF16_LE):
        return "utf-16-le", len(codecs.BOM_UTF16_LE)
    return DEFAULT_UTF16_CODEC, 0


def open_utf16_stream(raw: BinaryIO) -> TextIO:
    """
    Wrap a binary stream into a decoded UTF-16 character stream.

    A leading byte-order mark is consumed and decides the byte order; without
    a mark big-endian is assumed. Decoding is strict: an odd number of bytes or
    a truncated/unpaired surrogate raises UnicodeDecodeError from read().

    Args:
        raw: Binary stream positioned at the start of the file

    Returns:
        Text stream yielding the decoded characters (no newline translation)

    Example:
        ```python
        with open("EinheitenSolar_1.xml", "rb") as raw:
            stream = open_utf16_stream(raw)
            scanner = ElementScanner(stream, [GENERATOR_SHAPE])
        ```
    """
    if not hasattr(raw, "peek"):
        raw = io.BufferedReader(raw)

    codec_name, bom_length = detect_utf16_encoding(raw.peek(2)[:2])
    if bom_length:
        raw.read(bom_length)

    return io.TextIOWrapper(raw, encoding=codec_name, errors="strict", newline="")
