"""
Record shapes recognised by the element scanner.

A record shape pairs an XML local element name with a record type and the
function that decodes one matched sub-tree into that type. The scanner looks
shapes up by local name only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping, Optional
import xml.etree.ElementTree as ET

from ..core.constants import GENERATOR_FIELD_TAGS, GENERATOR_TAG
from ..core.types import GeneratorRecord
from ..utils.xml_parser import element_text, local_name, parse_float, parse_int


@dataclass(frozen=True)
class RecordShape:
    """
    Descriptor of one record type the scanner can materialise.

    Attributes:
        record_type: Class of the produced records
        decode: Builds a record from the matched element (children included)
        tag: Explicit XML local name; defaults to the record type's name
    """
    record_type: type
    decode: Callable[[ET.Element], Any]
    tag: Optional[str] = None

    @property
    def local_name(self) -> str:
        return self.tag or self.record_type.__name__


def build_registry(shapes: Iterable[RecordShape]) -> Mapping[str, RecordShape]:
    """
    Map local element names to shapes.

    Later shapes shadow earlier ones with the same local name. The returned
    mapping is read-only.

    Raises:
        ValueError: if no shape is given
    """
    registry: Dict[str, RecordShape] = {}
    for shape in shapes:
        registry[shape.local_name] = shape
    if not registry:
        raise ValueError("At least one record shape must be registered")
    return MappingProxyType(registry)


_FLOAT_FIELDS = {"net_power", "latitude", "longitude"}
_INT_FIELDS = {"module_count"}


def decode_generator(elem: ET.Element) -> GeneratorRecord:
    """
    Decode an ``EinheitSolar`` element into a GeneratorRecord.

    Only direct children are read. Unknown children are ignored, missing ones
    keep the zero value of their field.

    Raises:
        FieldDecodeError: if a numeric field holds non-numeric text
    """
    values: Dict[str, Any] = {}
    for child in elem:
        tag = local_name(child.tag)
        field_name = GENERATOR_FIELD_TAGS.get(tag)
        if field_name is None:
            continue

        text = element_text(child)
        if field_name in _FLOAT_FIELDS:
            values[field_name] = parse_float(tag, text)
        elif field_name in _INT_FIELDS:
            values[field_name] = parse_int(tag, text)
        else:
            values[field_name] = text

    return GeneratorRecord(**values)


GENERATOR_SHAPE = RecordShape(
    record_type=GeneratorRecord,
    decode=decode_generator,
    tag=GENERATOR_TAG,
)
