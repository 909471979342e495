"""
Constants for Marktstammdatenregister to GPX conversion.

This module defines the fixed literals used throughout the export pipeline,
including the dump file naming convention, the XML tags of the solar unit
records and the GPX output namespace.
"""

# ============================================================================
# Input (Marktstammdatenregister dump)
# ============================================================================

# Only files starting with this prefix are treated as solar unit dumps
DUMP_FILE_PREFIX = "EinheitenSolar_"

# Local name of one solar generator element in the dump
GENERATOR_TAG = "EinheitSolar"

# Child element local names -> GeneratorRecord fields
GENERATOR_FIELD_TAGS = {
    "EinheitMastrNummer": "mastr_id",
    "NameStromerzeugungseinheit": "name",
    "Postleitzahl": "postal_code",
    "Nettonennleistung": "net_power",
    "Breitengrad": "latitude",
    "Laengengrad": "longitude",
    "AnzahlModule": "module_count",
}

# Characters handed to the XML parser per feed() call
DEFAULT_CHUNK_SIZE = 64 * 1024

# ============================================================================
# Output (GPX 1.1)
# ============================================================================

GPX_NAMESPACE = "http://www.topografix.com/GPX/1/1"
GPX_VERSION = "1.1"

DEFAULT_OUTPUT = "output.gpx"

GPX_METADATA_NAME = "Generator List"
GPX_METADATA_DESCRIPTION = (
    "A list of generator waypoints, extracted from a Marktstammdatenregister data export."
)

# Used when a generator has no display name on file
FALLBACK_GENERATOR_NAME = "Generator"
