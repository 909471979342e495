"""
Type definitions for the Marktstammdatenregister to GPX export pipeline.

This module provides the core data structures passed between the scanner,
the extraction pipeline and the GPX writer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class GeneratorRecord:
    """
    One solar generator unit decoded from an ``EinheitSolar`` element.

    Attributes:
        mastr_id: Registry number of the unit (EinheitMastrNummer)
        name: Display name of the unit (NameStromerzeugungseinheit), may be empty
        postal_code: Postal code of the site (Postleitzahl)
        net_power: Net nominal power in kW (Nettonennleistung)
        latitude: WGS84 latitude (Breitengrad), 0.0 when not on file
        longitude: WGS84 longitude (Laengengrad), 0.0 when not on file
        module_count: Number of solar modules (AnzahlModule)
    """
    mastr_id: str = ""
    name: str = ""
    postal_code: str = ""
    net_power: float = 0.0
    latitude: float = 0.0
    longitude: float = 0.0
    module_count: int = 0


@dataclass(frozen=True)
class GpxMetadata:
    """Metadata block of a GPX document."""
    name: str
    description: str


@dataclass(frozen=True)
class GpxWaypoint:
    """A single GPX waypoint (``wpt``)."""
    name: str
    description: str
    lat: float
    lon: float


class ScanStatus(Enum):
    """Outcome of one ElementScanner.advance() call."""
    RECORD_AVAILABLE = "record_available"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


@dataclass(frozen=True)
class ScanResult:
    """
    Result of advancing the scanner by one record.

    Attributes:
        status: Which of the three outcomes occurred
        record: Decoded record (only for RECORD_AVAILABLE)
        error: Failure cause (only for FAILED)
    """
    status: ScanStatus
    record: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.status is ScanStatus.RECORD_AVAILABLE


# Type aliases for clarity
RecordFilter = Callable[[GeneratorRecord], bool]
