"""
Component Service
=================

Flat extraction of components, ports and connectors together with the
references found in each component's subtree.

A component is any element with an identity or a non-empty UUID attribute.
References are collected from the whole subtree of a component, so a
reference nested inside a named descendant is counted once for the
descendant and once for every recorded ancestor.
"""

import logging
from typing import Any, Dict, List, Optional

from core.identity import resolve_identity
from core.raw_element import RawElement
from core.settings import (
    ASSEMBLY_CONNECTOR_TAG,
    COMPONENT_SKIP_TAGS,
    CONNECTOR_ENDPOINTS,
    INTERFACE_REF_TAGS,
    LOCATION_SEPARATOR,
    PORT_PROTOTYPE_TAGS,
    REFERENCE_SUFFIXES,
)

logger = logging.getLogger(__name__)


class Reference:
    """A -REF / -TREF / -IREF element found below a component."""

    def __init__(self, kind: str, tag: str, dest: str, value: str, path: str):
        self.kind = kind
        self.tag = tag
        self.dest = dest
        self.value = value
        self.path = path

    def to_dict(self) -> Dict[str, str]:
        return {
            "kind": self.kind,
            "type": self.tag,
            "dest": self.dest,
            "value": self.value,
            "path": self.path,
        }

    def __repr__(self):
        return f"Reference({self.tag!r}, dest={self.dest!r}, value={self.value!r})"


class ComponentRecord:
    """Catalogue entry for a named or UUID-carrying element."""

    def __init__(
        self,
        name: str,
        tag: str,
        uuid: str,
        location: str,
        references: List[Reference],
        depth: int,
        has_children: bool,
    ):
        self.name = name
        self.tag = tag
        self.uuid = uuid
        self.location = location
        self.references = references
        self.depth = depth
        self.has_children = has_children

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.tag,
            "uuid": self.uuid,
            "location": self.location,
            "references": [ref.to_dict() for ref in self.references],
            "depth": self.depth,
            "hasChildren": self.has_children,
        }

    def __repr__(self):
        return f"ComponentRecord({self.name!r}, {self.tag!r}, refs={len(self.references)})"


class ConnectorEndpoint:
    """Resolved component and port references of one connector side."""

    def __init__(self, component: str, component_path: str, port: str, port_path: str):
        self.component = component
        self.component_path = component_path
        self.port = port
        self.port_path = port_path

    def to_dict(self) -> Dict[str, str]:
        return {
            "component": self.component,
            "componentPath": self.component_path,
            "port": self.port,
            "portPath": self.port_path,
        }


class ConnectorRecord:
    def __init__(
        self,
        name: str,
        uuid: str,
        provider: Optional[ConnectorEndpoint],
        requester: Optional[ConnectorEndpoint],
        location: str,
    ):
        self.name = name
        self.uuid = uuid
        self.provider = provider
        self.requester = requester
        self.location = location

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "uuid": self.uuid,
            "provider": self.provider.to_dict() if self.provider else None,
            "requester": self.requester.to_dict() if self.requester else None,
            "location": self.location,
        }


class InterfaceReference:
    def __init__(self, tag: str, dest: str, value: str):
        self.tag = tag
        self.dest = dest
        self.value = value

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.tag, "dest": self.dest, "value": self.value}


class PortRecord:
    def __init__(
        self,
        name: str,
        kind: str,
        uuid: str,
        interface: Optional[InterfaceReference],
        location: str,
    ):
        self.name = name
        self.kind = kind
        self.uuid = uuid
        self.interface = interface
        self.location = location

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.kind,
            "uuid": self.uuid,
            "interface": self.interface.to_dict() if self.interface else None,
            "location": self.location,
        }


class ComponentAnalysis:
    """Result of :func:`extract_components`."""

    def __init__(
        self,
        components: Optional[List[ComponentRecord]] = None,
        types_by_category: Optional[Dict[str, List[ComponentRecord]]] = None,
        relationship_count: int = 0,
        connectors: Optional[List[ConnectorRecord]] = None,
        ports: Optional[List[PortRecord]] = None,
    ):
        self.components = components or []
        self.types_by_category = types_by_category or {}
        self.relationship_count = relationship_count
        self.connectors = connectors or []
        self.ports = ports or []


def reference_kind(tag: str) -> Optional[str]:
    """Return the reference suffix of a tag, or None for non-reference tags."""
    if not isinstance(tag, str):
        return None
    for suffix in REFERENCE_SUFFIXES:
        if tag.endswith(suffix):
            return suffix
    return None


def find_references(element: RawElement) -> List[Reference]:
    """
    Collect every reference element below ``element`` (not the element
    itself), in document order.

    Args:
        element: Component element

    Returns:
        List of References
    """
    references = []
    stack = [(child, (child.tag,)) for child in reversed(element.children)]
    while stack:
        node, path = stack.pop()
        kind = reference_kind(node.tag)
        if kind:
            references.append(Reference(
                kind=kind,
                tag=node.tag,
                dest=node.get_attribute("DEST"),
                value=node.text or "",
                path=LOCATION_SEPARATOR.join(path),
            ))
        stack.extend((child, path + (child.tag,)) for child in reversed(node.children))
    return references


def _find_endpoint(connector: RawElement, side: str) -> Optional[ConnectorEndpoint]:
    tags = CONNECTOR_ENDPOINTS[side]
    iref = connector.find_child(tags["iref"])
    if iref is None:
        return None

    component_ref = iref.find_child(tags["component"])
    port_ref = iref.find_child(tags["port"])
    return ConnectorEndpoint(
        component=component_ref.get_attribute("DEST") if component_ref is not None else "",
        component_path=(component_ref.text or "") if component_ref is not None else "",
        port=port_ref.get_attribute("DEST") if port_ref is not None else "",
        port_path=(port_ref.text or "") if port_ref is not None else "",
    )


def find_provider_ref(connector: RawElement) -> Optional[ConnectorEndpoint]:
    return _find_endpoint(connector, "provider")


def find_requester_ref(connector: RawElement) -> Optional[ConnectorEndpoint]:
    return _find_endpoint(connector, "requester")


def find_interface_ref(port: RawElement) -> Optional[InterfaceReference]:
    interface_ref = port.find_child(*INTERFACE_REF_TAGS)
    if interface_ref is None:
        return None
    return InterfaceReference(
        tag=interface_ref.tag,
        dest=interface_ref.get_attribute("DEST"),
        value=interface_ref.text or "",
    )


def extract_components(root: Optional[RawElement]) -> ComponentAnalysis:
    """
    Extract the component, port and connector catalogues of a document.

    The root element is never recorded; traversal starts at its children.

    Args:
        root: Document root element

    Returns:
        ComponentAnalysis (empty when the root is missing)
    """
    if not isinstance(root, RawElement):
        return ComponentAnalysis()

    result = ComponentAnalysis()
    stack = [(child, (), 0) for child in reversed(root.children)]

    while stack:
        element, parent_path, depth = stack.pop()
        if not element.tag or element.tag in COMPONENT_SKIP_TAGS:
            continue

        path = parent_path + (element.tag,)
        identity = resolve_identity(element)
        uuid = element.get_attribute("UUID")

        if identity or uuid:
            name = identity or element.tag
            location = LOCATION_SEPARATOR.join(path)
            references = find_references(element)
            result.relationship_count += len(references)

            record = ComponentRecord(
                name=name,
                tag=element.tag,
                uuid=uuid,
                location=location,
                references=references,
                depth=depth,
                has_children=bool(element.children),
            )
            result.components.append(record)
            result.types_by_category.setdefault(element.tag, []).append(record)

            if element.tag == ASSEMBLY_CONNECTOR_TAG:
                result.connectors.append(ConnectorRecord(
                    name=name,
                    uuid=uuid,
                    provider=find_provider_ref(element),
                    requester=find_requester_ref(element),
                    location=location,
                ))
            elif element.tag in PORT_PROTOTYPE_TAGS:
                result.ports.append(PortRecord(
                    name=name,
                    kind=element.tag,
                    uuid=uuid,
                    interface=find_interface_ref(element),
                    location=location,
                ))

        stack.extend((child, path, depth + 1) for child in reversed(element.children))

    logger.debug(
        "Extracted %d components, %d ports, %d connectors, %d references",
        len(result.components),
        len(result.ports),
        len(result.connectors),
        result.relationship_count,
    )
    return result
