"""
Unit tests for UTF-16 stream decoding

Tests cover:
1. Byte-order mark detection
2. Big-endian default without a mark
3. Strict error reporting for broken input
"""

import codecs
import io

import pytest

from mastr2gpx.streaming.encoding import detect_utf16_encoding, open_utf16_stream


# ============================================================================
# Detection
# ============================================================================

def test_detect_big_endian_bom():
    assert detect_utf16_encoding(codecs.BOM_UTF16_BE + b"\x00<") == ("utf-16-be", 2)


def test_detect_little_endian_bom():
    assert detect_utf16_encoding(codecs.BOM_UTF16_LE + b"<\x00") == ("utf-16-le", 2)


def test_detect_defaults_to_big_endian():
    assert detect_utf16_encoding(b"\x00<\x00?") == ("utf-16-be", 0)
    assert detect_utf16_encoding(b"") == ("utf-16-be", 0)


# ============================================================================
# Decoding
# ============================================================================

@pytest.mark.parametrize("raw", [
    "<a>Mühle</a>".encode("utf-16-be"),
    codecs.BOM_UTF16_BE + "<a>Mühle</a>".encode("utf-16-be"),
    codecs.BOM_UTF16_LE + "<a>Mühle</a>".encode("utf-16-le"),
])
def test_decodes_all_variants_to_same_text(raw):
    """Mark is stripped and byte order honoured; no mark means big-endian."""
    stream = open_utf16_stream(io.BytesIO(raw))
    assert stream.read() == "<a>Mühle</a>"


def test_reads_incrementally():
    text = "<root>" + "x" * 5000 + "</root>"
    stream = open_utf16_stream(io.BytesIO(text.encode("utf-16-be")))

    first = stream.read(100)
    assert first == text[:100]
    assert first + stream.read() == text


def test_surrogate_pairs_are_decoded():
    text = "<a>\U0001F31E</a>"
    stream = open_utf16_stream(io.BytesIO(codecs.BOM_UTF16_LE + text.encode("utf-16-le")))
    assert stream.read() == text


def test_odd_byte_count_raises():
    raw = "<a/>".encode("utf-16-be") + b"\x00"
    stream = open_utf16_stream(io.BytesIO(raw))
    with pytest.raises(UnicodeDecodeError):
        stream.read()


def test_truncated_surrogate_pair_raises():
    # High surrogate of U+1F31E without its low half
    raw = "<a>".encode("utf-16-be") + b"\xd8\x3c"
    stream = open_utf16_stream(io.BytesIO(raw))
    with pytest.raises(UnicodeDecodeError):
        stream.read()
