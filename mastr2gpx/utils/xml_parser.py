"""
XML helpers for ElementTree elements produced by the streaming scanner.

This module provides small functions to read tag names and typed text values
from dump elements. Namespaces are ignored: only local names are compared.
"""

from typing import Optional
import xml.etree.ElementTree as ET

from ..core.errors import FieldDecodeError


def local_name(tag: str) -> str:
    """
    Strip the namespace part from an ElementTree tag.

    Examples:
        >>> local_name('{http://www.topografix.com/GPX/1/1}wpt')
        'wpt'
        >>> local_name('EinheitSolar')
        'EinheitSolar'
    """
    if tag[:1] == "{":
        return tag.rpartition("}")[2]
    return tag


def element_text(elem: Optional[ET.Element]) -> str:
    """
    Return the character data of an element, or an empty string.

    The text is returned verbatim (not stripped), mirroring how string fields
    are stored in the dump.
    """
    if elem is None or elem.text is None:
        return ""
    return elem.text


def parse_float(tag: str, text: str) -> float:
    """
    Convert field text to float. Empty text yields 0.0.

    Raises:
        FieldDecodeError: if the text is not a decimal number
    """
    value = text.strip()
    if not value:
        return 0.0
    try:
        return float(value)
    except ValueError:
        raise FieldDecodeError(tag, text, "decimal")


def parse_int(tag: str, text: str) -> int:
    """
    Convert field text to int. Empty text yields 0.

    Raises:
        FieldDecodeError: if the text is not an integer
    """
    value = text.strip()
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        raise FieldDecodeError(tag, text, "integer")
