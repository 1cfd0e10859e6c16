"""
WMS GetCapabilities parsing.

Turns a capabilities document into LayerRecords grouped by workspace.
GeoServer publishes layers as ``workspace:layer``; layers without a
workspace prefix cannot be filtered per workspace and are dropped.

Both WMS 1.1.1 (no namespace) and 1.3.0 (``http://www.opengis.net/wms``)
documents are accepted: elements are matched by local name.
"""

import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Set, Union

from wmspanel.config import GET_CAPABILITIES, WMS_PATH, WMS_SERVICE
from wmspanel.errors import CapabilitiesParseError
from wmspanel.infrastructure.logging import ComponentType, LoggerFactory
from wmspanel.models import Capabilities, LayerRecord

logger = LoggerFactory.create_logger(ComponentType.DISCOVERY, "capabilities")

WORKSPACE_SEPARATOR = ":"


def normalize_base_url(server_url: str) -> str:
    """Strip whitespace and a trailing slash from a server address."""
    url = server_url.strip()
    return url[:-1] if url.endswith("/") else url


def wms_endpoint(base_url: str) -> str:
    return f"{normalize_base_url(base_url)}{WMS_PATH}"


def capabilities_params(version: str = "1.3.0") -> Dict[str, str]:
    """Query parameters for a GetCapabilities request."""
    return {
        "service": WMS_SERVICE,
        "version": version,
        "request": GET_CAPABILITIES,
    }


def _local_name(tag) -> str:
    # Comments and processing instructions have callable tags
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _child_text(element: ET.Element, local_name: str) -> Optional[str]:
    """Text of the first direct child with the given local name, or None."""
    for child in element:
        if _local_name(child.tag) == local_name:
            return (child.text or "").strip()
    return None


def _service_exception_message(root: ET.Element) -> str:
    messages = [
        (el.text or "").strip()
        for el in root.iter()
        if _local_name(el.tag) == "ServiceException"
    ]
    return "; ".join(m for m in messages if m) or "unknown service exception"


def parse_layer_name(name: str) -> Optional[LayerRecord]:
    """
    Split a qualified ``workspace:layer`` name.

    Splits on the first separator only, so the bare name may itself
    contain ``:``. Returns None when either part is empty or the name
    carries no workspace.
    """
    workspace, sep, bare_name = name.partition(WORKSPACE_SEPARATOR)
    if not sep or not workspace or not bare_name:
        return None
    return LayerRecord(full_name=name, workspace=workspace, name=bare_name, title=name)


def parse_capabilities(document: Union[str, bytes]) -> Capabilities:
    """
    Parse a WMS capabilities document.

    Every ``Layer`` element after the first (the root container) is
    considered. Elements without a ``Name`` child are group layers and
    are skipped, as are names without a workspace prefix. ``Title``
    falls back to the qualified name. The first occurrence of a
    qualified name wins.

    Raises:
        CapabilitiesParseError: Document is not well-formed XML, or is a
            ServiceExceptionReport.
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise CapabilitiesParseError(f"Invalid capabilities document: {e}") from e

    if _local_name(root.tag) == "ServiceExceptionReport":
        raise CapabilitiesParseError(
            f"Server returned a service exception: {_service_exception_message(root)}"
        )

    layer_elements = [el for el in root.iter() if _local_name(el.tag) == "Layer"]

    records: List[LayerRecord] = []
    seen: Set[str] = set()
    workspaces: Set[str] = set()

    for element in layer_elements[1:]:
        name = _child_text(element, "Name")
        if not name:
            continue

        record = parse_layer_name(name)
        if record is None:
            logger.debug(f"Skipping layer without workspace prefix: {name}")
            continue
        if record.full_name in seen:
            continue

        title = _child_text(element, "Title")
        records.append(LayerRecord(
            full_name=record.full_name,
            workspace=record.workspace,
            name=record.name,
            title=title or record.full_name,
        ))
        seen.add(record.full_name)
        workspaces.add(record.workspace)

    logger.info(
        f"Found {len(workspaces)} workspaces and {len(records)} layers",
        extra={"custom_dimensions": {
            "workspace_count": len(workspaces),
            "layer_count": len(records),
            "layer_elements": len(layer_elements),
        }},
    )

    return Capabilities(layers=tuple(records), workspaces=frozenset(workspaces))
