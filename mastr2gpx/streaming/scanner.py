"""
Streaming XML Element Scanner - Core Implementation

Pulls typed records out of an XML character stream without building the whole
document tree.

Memory Usage: O(1 record) + open ancestor chain (vs. whole-document tree load)

Architecture:
1. ET.XMLPullParser - incremental event-driven parsing, fed chunk by chunk
2. Record-level pulling - the caller drives progress with advance()
3. Immediate memory release - elements outside a match are cleared and
   detached from their parent as soon as they end
4. Top-level matching only - once inside a matched sub-tree, nested tags are
   decoded as part of the record, never matched again
"""

from typing import Any, Iterator, List, Optional, Sequence, TextIO
import xml.etree.ElementTree as ET

from ..core.constants import DEFAULT_CHUNK_SIZE
from ..core.types import ScanResult, ScanStatus
from ..utils.logging import log
from ..utils.xml_parser import local_name
from .shapes import RecordShape, build_registry


def _log(message: str, debug: bool = False):
    """Internal logging function."""
    if debug:
        log(f"[SCAN] {message}")


_EXHAUSTED = ScanResult(ScanStatus.EXHAUSTED)


class ElementScanner:
    """
    Pull-based scanner yielding one record per matching XML element.

    The scanner goes through three states:
    - ready: advance() reads until the next match
    - exhausted: the input ended (terminal, not an error)
    - failed: a syntax, decoding or field error occurred (terminal, sticky)

    Example:
        ```python
        scanner = ElementScanner(stream, [GENERATOR_SHAPE])
        while True:
            result = scanner.advance()
            if not result.ok:
                break
            handle(scanner.record)
        if scanner.error is not None:
            raise scanner.error
        ```
    """

    def __init__(
        self,
        stream: TextIO,
        shapes: Sequence[RecordShape],
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        debug: bool = False,
    ):
        """
        Initialize the scanner. No input is read yet.

        Args:
            stream: Character stream holding one XML document
            shapes: Record shapes to match (at least one)
            chunk_size: Characters read from the stream per parser feed
            debug: Enable debug logging

        Raises:
            ValueError: if shapes is empty
        """
        self.registry = build_registry(shapes)
        self.chunk_size = chunk_size
        self.debug = debug

        self._stream = stream
        self._parser = ET.XMLPullParser(events=("start", "end"))
        self._stack: List[ET.Element] = []
        self._match: Optional[ET.Element] = None
        self._match_shape: Optional[RecordShape] = None
        self._record: Any = None
        self._error: Optional[BaseException] = None
        self._has_content = False
        self._eof = False
        self._exhausted = False
        self._count = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def advance(self) -> ScanResult:
        """
        Advance to the next element matching one of the registered shapes.

        Returns:
            ScanResult with status
            - RECORD_AVAILABLE: the decoded record (also available via .record)
            - EXHAUSTED: the input ended without further matches
            - FAILED: the first error; repeated on every later call
        """
        if self._error is not None:
            return ScanResult(ScanStatus.FAILED, error=self._error)
        if self._exhausted:
            return _EXHAUSTED

        try:
            record = self._next_record()
        except (ET.ParseError, ValueError, OSError) as e:
            # UnicodeDecodeError and FieldDecodeError are ValueErrors
            _log(f"Scan failed after {self._count} records: {e}", self.debug)
            self._record = None
            self._error = e
            return ScanResult(ScanStatus.FAILED, error=e)

        if record is None:
            _log(f"Scan complete: {self._count} records", self.debug)
            self._record = None
            self._exhausted = True
            return _EXHAUSTED

        self._count += 1
        self._record = record
        return ScanResult(ScanStatus.RECORD_AVAILABLE, record=record)

    @property
    def record(self) -> Any:
        """
        Most recent record produced by advance().

        Raises:
            RuntimeError: if the last advance() did not produce a record
        """
        if self._record is None:
            raise RuntimeError("No record available; call advance() first")
        return self._record

    @property
    def error(self) -> Optional[BaseException]:
        """First error encountered, or None. End of input is not an error."""
        return self._error

    def __iter__(self) -> Iterator:
        """
        Iterate over the remaining records.

        Raises:
            The stored failure cause once the scanner fails.
        """
        while True:
            result = self.advance()
            if result.status is ScanStatus.RECORD_AVAILABLE:
                yield result.record
            elif result.status is ScanStatus.EXHAUSTED:
                return
            else:
                raise result.error

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _next_record(self) -> Any:
        while True:
            # Events left over from the previous call are consumed first
            for event, elem in self._parser.read_events():
                record = self._handle_event(event, elem)
                if record is not None:
                    return record

            if self._eof:
                return None

            chunk = self._stream.read(self.chunk_size)
            if chunk:
                if not self._has_content and not chunk.isspace():
                    self._has_content = True
                self._parser.feed(chunk)
            else:
                self._eof = True
                # Empty or whitespace-only input holds no document to complete
                if self._has_content:
                    self._parser.close()

    def _handle_event(self, event: str, elem: ET.Element) -> Any:
        if event == "start":
            if self._match is None:
                shape = self.registry.get(local_name(elem.tag))
                if shape is not None:
                    self._match = elem
                    self._match_shape = shape
            self._stack.append(elem)
            return None

        self._stack.pop()

        if self._match is not None:
            if elem is not self._match:
                # Nested content of the current match
                return None
            shape = self._match_shape
            self._match = None
            self._match_shape = None
            try:
                return shape.decode(elem)
            finally:
                self._release(elem)

        self._release(elem)
        return None

    def _release(self, elem: ET.Element):
        """Free a finished element and detach it from its parent."""
        elem.clear()
        if self._stack:
            self._stack[-1].remove(elem)
