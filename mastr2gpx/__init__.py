"""
Marktstammdatenregister to GPX export.

Public API:
- export_gpx_from_directory: dump directory -> GPX file
- find_all_generators / find_generators: extraction without writing
- ElementScanner: streaming record scanner
"""

from .pipeline.orchestrator import export_gpx_from_directory
from .pipeline.extraction import find_all_generators, find_generators

from .streaming.scanner import ElementScanner

__all__ = [
    "export_gpx_from_directory",
    "find_all_generators",
    "find_generators",
    "ElementScanner",
]
