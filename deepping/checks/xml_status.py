from __future__ import annotations

import xml.etree.ElementTree as ET

from deepping.checks.errors import ParseError

# Expected payload:
#
#   <TestReply>
#       <System>portal</System>
#       <Status Value="Ok"/>
#       <Description>Looking good</Description>
#   </TestReply>


def _first(root: ET.Element, tag: str) -> ET.Element | None:
    # iter() includes the root itself
    return next(root.iter(tag), None)


def parse_status(body: bytes | str, target: str = "") -> tuple[str, str]:
    try:
        root = ET.fromstring(body)
    except ET.ParseError as exc:
        raise ParseError("Unable to parse response", target=target) from exc

    status = _first(root, "Status")
    value = status.get("Value", "") if status is not None else ""

    desc = _first(root, "Description")
    description = "".join(desc.itertext()).strip() if desc is not None else ""

    return value, description
