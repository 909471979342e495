"""
End-to-end tests for the GPX export

Tests cover:
1. Scenarios from a dump directory to a GPX file
2. No output file on failure
"""

import xml.etree.ElementTree as ET

import pytest

from mastr2gpx.config import build_export_config
from mastr2gpx.core.constants import GPX_NAMESPACE
from mastr2gpx.core.errors import DirectoryAccessError, RecordDecodeError
from mastr2gpx.pipeline.orchestrator import export_gpx_from_directory
from tests.dumps import dump_xml, encode_dump, generator_xml

NS = {"gpx": GPX_NAMESPACE}


def test_export_with_postal_code_filter(berlin_dump, tmp_path):
    output = tmp_path / "out" / "berlin.gpx"
    output.parent.mkdir()
    config = build_export_config(output=str(output), postal_codes=["10115"])

    count = export_gpx_from_directory(berlin_dump.parent, config)

    assert count == 1
    root = ET.parse(output).getroot()
    waypoints = root.findall("gpx:wpt", NS)
    assert len(waypoints) == 1
    assert waypoints[0].get("lat") == "52.5"
    assert waypoints[0].get("lon") == "13.4"
    assert waypoints[0].find("gpx:name", NS).text == "Dach Nord (SEE900000000001)"


def test_export_with_bounding_box(berlin_dump, tmp_path):
    output = tmp_path / "box.gpx"
    config = build_export_config(output=str(output), bbox="13.0,52.0,14.0,53.0")

    assert export_gpx_from_directory(berlin_dump.parent, config) == 1
    assert len(ET.parse(output).getroot().findall("gpx:wpt", NS)) == 1


def test_export_without_matches_writes_empty_document(berlin_dump, tmp_path):
    output = tmp_path / "none.gpx"
    config = build_export_config(output=str(output), postal_codes=["80331"])

    assert export_gpx_from_directory(berlin_dump.parent, config) == 0
    root = ET.parse(output).getroot()
    assert root.findall("gpx:wpt", NS) == []
    assert root.find("gpx:metadata/gpx:name", NS).text == "Generator List"


def test_missing_directory_writes_nothing(tmp_path):
    output = tmp_path / "output.gpx"
    config = build_export_config(output=str(output))

    with pytest.raises(DirectoryAccessError):
        export_gpx_from_directory(tmp_path / "missing", config)

    assert not output.exists()


def test_decode_failure_writes_nothing(tmp_path):
    dumps = tmp_path / "dumps"
    dumps.mkdir()
    (dumps / "EinheitenSolar_1.xml").write_bytes(encode_dump(dump_xml(generator_xml("SEE1"))))
    broken = encode_dump(dump_xml(generator_xml("SEE2")))
    (dumps / "EinheitenSolar_2.xml").write_bytes(broken[:301])
    output = tmp_path / "output.gpx"

    with pytest.raises(RecordDecodeError, match="EinheitenSolar_2.xml"):
        export_gpx_from_directory(dumps, build_export_config(output=str(output)))

    assert not output.exists()
    assert list(tmp_path.glob("*.tmp")) == []


def test_failed_run_keeps_previous_output(tmp_path):
    output = tmp_path / "output.gpx"
    output.write_text("previous")

    with pytest.raises(DirectoryAccessError):
        export_gpx_from_directory(tmp_path / "missing", build_export_config(output=str(output)))

    assert output.read_text() == "previous"
