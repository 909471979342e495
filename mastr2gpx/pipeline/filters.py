"""
Record filters applied during extraction.

Filters are immutable callables taking a GeneratorRecord and returning True
when the record should be part of the result. They are configured once before
any file is read and combined with AND semantics.
"""

from dataclasses import dataclass
from typing import Iterable

from ..core.errors import ConfigurationError
from ..core.types import GeneratorRecord, RecordFilter


@dataclass(frozen=True)
class PostalCodeFilter:
    """Keep generators whose postal code equals the given one exactly."""
    postal_code: str

    def __call__(self, record: GeneratorRecord) -> bool:
        return record.postal_code == self.postal_code


@dataclass(frozen=True)
class BoundingBoxFilter:
    """
    Keep generators located inside a WGS84 bounding box (edges included).

    Attributes:
        left: Minimum longitude
        bottom: Minimum latitude
        right: Maximum longitude
        top: Maximum latitude

    Raises:
        ConfigurationError: if left > right or bottom > top
    """
    left: float
    bottom: float
    right: float
    top: float

    def __post_init__(self):
        if self.left > self.right or self.bottom > self.top:
            raise ConfigurationError(
                "Invalid bounding box coordinates, either left-right or top-bottom is inverted."
            )

    def __call__(self, record: GeneratorRecord) -> bool:
        return (
            self.left <= record.longitude <= self.right
            and self.bottom <= record.latitude <= self.top
        )


def parse_bounding_box(text: str) -> BoundingBoxFilter:
    """
    Parse a bounding box given as ``left,bottom,right,top``.

    Args:
        text: Four comma-separated decimal coordinates

    Returns:
        BoundingBoxFilter for the given box

    Raises:
        ConfigurationError: wrong field count, non-numeric field or inverted box

    Example:
        >>> parse_bounding_box("13.0,52.0,14.0,53.0")
        BoundingBoxFilter(left=13.0, bottom=52.0, right=14.0, top=53.0)
    """
    parts = text.split(",")
    if len(parts) != 4:
        raise ConfigurationError(
            "Expecting a bounding box in the format left,bottom,right,top. "
            "I.e. four comma-separated coordinates."
        )

    try:
        left, bottom, right, top = (float(p.strip()) for p in parts)
    except ValueError:
        raise ConfigurationError(f"Bounding box coordinates must be decimal numbers: {text!r}")

    return BoundingBoxFilter(left=left, bottom=bottom, right=right, top=top)


def has_location(record: GeneratorRecord) -> bool:
    """
    Whether a generator has coordinates on file.

    The dump uses latitude 0 / longitude 0 for "no location", so a real unit at
    exactly that point is dropped as well.
    """
    return not (record.latitude == 0 and record.longitude == 0)


def accepts_all(filters: Iterable[RecordFilter], record: GeneratorRecord) -> bool:
    """True if every filter accepts the record (also True for no filters)."""
    return all(f(record) for f in filters)
