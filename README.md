# avmeta

Helpers for working with UPnP A/V and DLNA metadata in Python.

## Modules

- `avmeta.protocol_info`: the `ProtocolInfo` dataclass parses and formats
  `protocol:network:mime-type:additional-info` strings, including the DLNA
  `DLNA.ORG_PN`, `DLNA.ORG_PS`, `DLNA.ORG_CI`, `DLNA.ORG_OP` and
  `DLNA.ORG_FLAGS` parameters. Malformed strings raise `ProtocolError`
  (a `ValueError`).
- `avmeta.protocol_compat`: `is_compatible`, `is_transport_compatible`,
  `is_content_format_compatible` and `is_additional_info_compatible` decide
  whether two `ProtocolInfo` values match. Wildcards (`*`) and the
  parameterised LPCM type (`audio/L16;rate=...`) are handled.
- `avmeta.last_change_parser`: `LastChangeParser.parse_last_change` reads
  state variables for one AV instance from the LastChange XML sent by
  AVTransport and RenderingControl services.
- `avmeta.value_util`: `value_from_string` converts state-variable text into
  typed values (`"int"`, `"uint"`, `"boolean"`, `"double"`, ... or `str`,
  `int`, `float`, `bool`).
- `avmeta.xml_util` and `avmeta.xml_namespace`: look up child elements and
  typed attributes, set and unset child elements, compare and search nodes
  deeply, and declare the DIDL-Lite, Dublin Core, DLNA, PV and UPnP
  namespaces (`XMLNamespace`, `get_ns`, `lookup_namespace`,
  `create_namespace`) on lxml trees.
- `avmeta.xsd_data`: `XSDData(path)` loads an XML Schema (raising
  `ValueError` if it cannot) and `validate_doc` returns whether a document
  conforms.
- `avmeta.time_utils`: `seconds_from_time` and `seconds_to_time` convert
  between seconds and `H:MM:SS.000` durations.
- `avmeta.enums`: `FragmentResult`, the outcomes of applying DIDL-Lite
  fragments.

## Installation

```
pip install .
```

## Usage

### ProtocolInfo

```python
from avmeta.protocol_info import ProtocolInfo, ProtocolError
from avmeta.protocol_compat import is_compatible

info = ProtocolInfo.from_string(
    "http-get:*:audio/mpeg:DLNA.ORG_PN=MP3;DLNA.ORG_OP=01"
)
print(info.to_string())  # http-get:*:audio/mpeg:DLNA.ORG_PN=MP3;DLNA.ORG_OP=01

try:
    ProtocolInfo.from_string("not-a-protocol-info")
except ProtocolError as exc:
    print("invalid:", exc)

sink = ProtocolInfo.from_string("http-get:*:audio/mpeg:*")
print(is_compatible(info, sink))  # True
```

`to_string` raises `ValueError` if the protocol or MIME type is not set.

### LastChange events

```python
from avmeta.last_change_parser import LastChangeParser

xml = """<Event xmlns="urn:schemas-upnp-org:metadata-1-0/AVT/">
  <InstanceID val="0">
    <TransportState val="PLAYING"/>
    <NumberOfTracks val="12"/>
  </InstanceID>
</Event>"""

parser = LastChangeParser()
values = parser.parse_last_change(
    0, xml, {"TransportState": str, "NumberOfTracks": int}
)
# {"TransportState": "PLAYING", "NumberOfTracks": 12}
```

The result holds only the variables that the instance carries. If the event
does not mention the requested instance, `parse_last_change` returns `None`.
If the document is not well-formed XML, `LastChangeParseError` is raised.

### Durations

```python
from avmeta.time_utils import seconds_from_time, seconds_to_time

seconds_from_time("1:02:03.000")  # 3723
seconds_to_time(3723)             # "1:02:03.000"
```

## What it does not do

The package has no model of DIDL-Lite objects, items, containers or
resources, and no parser or writer for whole DIDL-Lite documents, media
collection (playlist) files, search criteria strings or ContentDirectory
LastChange events. The XML helpers work on plain lxml elements.

## Running the tests

```
pip install -e ".[test]"
pytest
```