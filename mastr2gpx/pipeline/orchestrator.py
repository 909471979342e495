"""
Main export orchestrator - directory of dumps to a single GPX file.

Phases:
1. Extraction: scan every dump file, skip unlocated records, apply filters
2. Assembly: build the GPX document in memory
3. Output: write the document atomically

Any failure before phase 3 leaves the output path untouched.
"""

from pathlib import Path
from typing import Union

from ..config import ExportConfig
from ..output.gpx_writer import build_gpx, serialize_gpx, waypoint_from_generator, write_gpx
from ..utils.logging import log
from .extraction import find_all_generators


def export_gpx_from_directory(directory: Union[str, Path], config: ExportConfig) -> int:
    """
    Export the generators of a dump directory to a GPX file.

    Args:
        directory: Directory holding the extracted dump
        config: Export configuration (output path, filters, file prefix)

    Returns:
        Number of waypoints written

    Raises:
        DirectoryAccessError, FileAccessError, RecordDecodeError: extraction failures
        OSError: the output file cannot be written
    """
    generators = find_all_generators(
        directory,
        filters=config.filters,
        file_prefix=config.file_prefix,
        debug=config.debug,
    )

    waypoints = [waypoint_from_generator(g) for g in generators]
    data = serialize_gpx(build_gpx(waypoints))
    write_gpx(config.output_path, data)

    log(f"GPX-Export finished! Wrote {len(waypoints)} waypoints to the file.")
    return len(waypoints)
