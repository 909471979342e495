"""
Generator extraction from a directory of Marktstammdatenregister dumps.

Each dump file gets its own scanner. Records without a location are skipped,
the remaining ones are kept only if every configured filter accepts them.
The first failing file aborts the whole extraction.
"""

from pathlib import Path
from typing import List, Sequence, TextIO, Union
import xml.etree.ElementTree as ET

from ..core.constants import DUMP_FILE_PREFIX
from ..core.errors import DirectoryAccessError, FileAccessError, RecordDecodeError
from ..core.types import GeneratorRecord, RecordFilter
from ..streaming.encoding import open_utf16_stream
from ..streaming.scanner import ElementScanner
from ..streaming.shapes import GENERATOR_SHAPE
from ..utils.logging import log
from .filters import accepts_all, has_location


def _log(message: str, debug: bool = False):
    """Internal logging function."""
    if debug:
        log(f"[EXTRACT] {message}")


def find_generators(
    stream: TextIO,
    filters: Sequence[RecordFilter] = (),
    debug: bool = False,
) -> List[GeneratorRecord]:
    """
    Extract the generators of one decoded dump.

    Args:
        stream: Decoded character stream of one dump file
        filters: Filters that must all accept a record
        debug: Enable debug logging

    Returns:
        Kept generators in document order

    Raises:
        ET.ParseError, UnicodeDecodeError, FieldDecodeError, OSError:
            the first failure reported by the scanner
    """
    scanner = ElementScanner(stream, [GENERATOR_SHAPE], debug=debug)
    result: List[GeneratorRecord] = []
    skipped_no_location = 0
    rejected = 0

    for generator in scanner:
        if not has_location(generator):
            skipped_no_location += 1
            continue
        if not accepts_all(filters, generator):
            rejected += 1
            continue
        result.append(generator)

    _log(
        f"kept={len(result)}, no_location={skipped_no_location}, filtered={rejected}",
        debug,
    )
    return result


def iter_dump_files(directory: Union[str, Path], file_prefix: str = DUMP_FILE_PREFIX) -> List[Path]:
    """
    List the dump files of a directory.

    Only regular files whose name starts with file_prefix are returned, sorted
    by name so repeated runs over the same directory see the same order.

    Raises:
        DirectoryAccessError: if the directory is missing or cannot be listed
    """
    directory = Path(directory)
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise DirectoryAccessError(f"Could not read directory: {e}") from e

    return [p for p in entries if p.name.startswith(file_prefix) and p.is_file()]


def find_all_generators(
    directory: Union[str, Path],
    filters: Sequence[RecordFilter] = (),
    file_prefix: str = DUMP_FILE_PREFIX,
    debug: bool = False,
) -> List[GeneratorRecord]:
    """
    Extract the generators of every dump file in a directory.

    Args:
        directory: Directory holding the extracted dump
        filters: Filters that must all accept a record
        file_prefix: Name prefix of the dump files to read
        debug: Enable debug logging

    Returns:
        Kept generators, file by file in name order, document order within a file

    Raises:
        DirectoryAccessError: directory missing or unreadable
        FileAccessError: a dump file cannot be opened
        RecordDecodeError: a dump file is not valid UTF-16 XML or holds bad values
    """
    generators: List[GeneratorRecord] = []

    for path in iter_dump_files(directory, file_prefix):
        log(f"Reading file {path.name}")

        try:
            raw = open(path, "rb")
        except OSError as e:
            raise FileAccessError(path, "Could not open file") from e

        with raw:
            try:
                generators.extend(find_generators(open_utf16_stream(raw), filters, debug))
            except (ET.ParseError, ValueError, OSError) as e:
                raise RecordDecodeError(path, e) from e

    _log(f"Total generators kept: {len(generators)}", debug)
    return generators
