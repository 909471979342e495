"""
Streaming Dump Reader Module

Reads Marktstammdatenregister XML dumps record by record with a bounded
memory footprint, independent of the file size.

Key Components:
- encoding.py: UTF-16 byte-order detection and incremental decoding
- shapes.py: Record shape descriptors and the generator decoder
- scanner.py: Pull-based element scanner over ET.XMLPullParser
"""

from .encoding import open_utf16_stream, detect_utf16_encoding
from .shapes import RecordShape, GENERATOR_SHAPE, build_registry, decode_generator
from .scanner import ElementScanner

__all__ = [
    "open_utf16_stream",
    "detect_utf16_encoding",
    "RecordShape",
    "GENERATOR_SHAPE",
    "build_registry",
    "decode_generator",
    "ElementScanner",
]
