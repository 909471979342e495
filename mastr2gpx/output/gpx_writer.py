"""
GPX 1.1 document assembly for exported generators.

The whole document is built in memory (it only holds waypoints, one per kept
generator) and written in one step, so a failed export never leaves a partial
file behind.
"""

import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Union
import xml.etree.ElementTree as ET

from ..core.constants import (
    FALLBACK_GENERATOR_NAME,
    GPX_METADATA_DESCRIPTION,
    GPX_METADATA_NAME,
    GPX_NAMESPACE,
    GPX_VERSION,
)
from ..core.types import GeneratorRecord, GpxMetadata, GpxWaypoint

# Serialize the GPX namespace as the default (unprefixed) one
ET.register_namespace("", GPX_NAMESPACE)

DEFAULT_METADATA = GpxMetadata(name=GPX_METADATA_NAME, description=GPX_METADATA_DESCRIPTION)


def _q(tag: str) -> str:
    return f"{{{GPX_NAMESPACE}}}{tag}"


def _format_coordinate(value: float) -> str:
    # Shortest round-trip form, e.g. 52.5 rather than 52.500000
    return repr(float(value))


def waypoint_from_generator(record: GeneratorRecord) -> GpxWaypoint:
    """
    Build the waypoint shown for one generator.

    Example:
        >>> record = GeneratorRecord(mastr_id="SEE9", net_power=9.84, module_count=30)
        >>> wp = waypoint_from_generator(record)
        >>> wp.name
        'Generator (SEE9)'
        >>> wp.description
        'Net power: 9.840000 kW (30 modules)'
    """
    name = record.name or FALLBACK_GENERATOR_NAME
    return GpxWaypoint(
        name=f"{name} ({record.mastr_id})",
        description=f"Net power: {record.net_power:f} kW ({record.module_count} modules)",
        lat=record.latitude,
        lon=record.longitude,
    )


def _append_text(parent: ET.Element, tag: str, text: str):
    # Empty values are omitted, like optional GPX elements
    if text:
        ET.SubElement(parent, _q(tag)).text = text


def build_gpx(waypoints: Iterable[GpxWaypoint], metadata: Optional[GpxMetadata] = None) -> ET.Element:
    """
    Assemble the GPX root element.

    Args:
        waypoints: Waypoints in output order
        metadata: Metadata block (defaults to the generator list title)

    Returns:
        ``gpx`` element with one ``metadata`` child and one ``wpt`` per waypoint
    """
    metadata = metadata or DEFAULT_METADATA

    root = ET.Element(_q("gpx"), {"version": GPX_VERSION})

    meta_elem = ET.SubElement(root, _q("metadata"))
    _append_text(meta_elem, "name", metadata.name)
    _append_text(meta_elem, "desc", metadata.description)

    for wp in waypoints:
        wpt = ET.SubElement(root, _q("wpt"), {
            "lat": _format_coordinate(wp.lat),
            "lon": _format_coordinate(wp.lon),
        })
        _append_text(wpt, "name", wp.name)
        _append_text(wpt, "desc", wp.description)

    return root


def serialize_gpx(root: ET.Element) -> bytes:
    """Serialize a GPX element tree to UTF-8 bytes with an XML declaration."""
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def write_gpx(path: Union[str, Path], data: bytes) -> None:
    """
    Atomically write GPX bytes to path.

    The data goes to a temporary file in the target directory first and is
    then moved into place.
    """
    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        # mkstemp creates 0600; give the result the usual umask-based mode
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
