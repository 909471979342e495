"""Builders for Marktstammdatenregister dump documents used across the tests."""

import codecs


def generator_xml(
    mastr_id: str,
    lat: str = "52.5",
    lng: str = "13.4",
    postal: str = "10115",
    name: str = "Dach Nord",
    power: str = "9.84",
    modules: str = "30",
) -> str:
    """One EinheitSolar element as it appears in the dump."""
    return f'''  <EinheitSolar>
    <EinheitMastrNummer>{mastr_id}</EinheitMastrNummer>
    <NameStromerzeugungseinheit>{name}</NameStromerzeugungseinheit>
    <Postleitzahl>{postal}</Postleitzahl>
    <Nettonennleistung>{power}</Nettonennleistung>
    <Breitengrad>{lat}</Breitengrad>
    <Laengengrad>{lng}</Laengengrad>
    <AnzahlModule>{modules}</AnzahlModule>
  </EinheitSolar>
'''


def dump_xml(*elements: str) -> str:
    """Wrap generator elements into a complete dump document."""
    body = "".join(elements)
    return f'<?xml version="1.0" encoding="UTF-16"?>\n<EinheitenSolar>\n{body}</EinheitenSolar>\n'


def encode_dump(text: str, byte_order: str = "be", bom: bool = False) -> bytes:
    """Encode a document the way the registry export does (UTF-16)."""
    if byte_order == "be":
        data = text.encode("utf-16-be")
        mark = codecs.BOM_UTF16_BE
    else:
        data = text.encode("utf-16-le")
        mark = codecs.BOM_UTF16_LE
    return (mark if bom else b"") + data


