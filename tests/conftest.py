"""Shared fixtures: Marktstammdatenregister dump files."""

from pathlib import Path

import pytest

from tests.dumps import dump_xml, encode_dump, generator_xml


@pytest.fixture
def write_dump(tmp_path):
    """Factory writing a UTF-16 dump file into a temporary directory."""

    def _write(name: str, text: str, byte_order: str = "be", bom: bool = False) -> Path:
        path = tmp_path / name
        path.write_bytes(encode_dump(text, byte_order, bom))
        return path

    return _write


@pytest.fixture
def berlin_dump(write_dump):
    """One located and one unlocated generator, both in postal code 10115."""
    text = dump_xml(
        generator_xml("SEE900000000001", lat="52.5", lng="13.4", postal="10115"),
        generator_xml("SEE900000000002", lat="0", lng="0", postal="10115"),
    )
    return write_dump("EinheitenSolar_test.xml", text)
