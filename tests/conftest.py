"""Pytest configuration and fixtures for ARXML Structure Explorer tests."""

from pathlib import Path

import pytest

from builders import el, named, ref
from core.raw_element import RawElement
from managers.session_manager import ExplorerSession

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_arxml_path() -> Path:
    """Path to the sample ARXML document."""
    return FIXTURES_DIR / "sample.arxml"


@pytest.fixture
def simple_document() -> RawElement:
    """AUTOSAR > AR-PACKAGES > AR-PACKAGE Pkg1 > ELEMENTS > CompA > PORTS > PortOut."""
    return el(
        "AUTOSAR",
        el(
            "AR-PACKAGES",
            named(
                "AR-PACKAGE", "Pkg1",
                el(
                    "ELEMENTS",
                    named(
                        "APPLICATION-SW-COMPONENT-TYPE", "CompA",
                        el("PORTS", named("P-PORT-PROTOTYPE", "PortOut")),
                    ),
                ),
            ),
        ),
    )


@pytest.fixture
def connector_document() -> RawElement:
    """Composition with two component prototypes wired by an assembly connector."""
    connector = named(
        "ASSEMBLY-SW-CONNECTOR", "Conn1",
        el(
            "PROVIDER-IREF",
            ref("CONTEXT-COMPONENT-REF", "/Pkg/Top/CompA", "SW-COMPONENT-PROTOTYPE"),
            ref("TARGET-P-PORT-REF", "/Pkg/CompA/PortOut", "P-PORT-PROTOTYPE"),
        ),
        el(
            "REQUESTER-IREF",
            ref("CONTEXT-COMPONENT-REF", "/Pkg/Top/CompB", "SW-COMPONENT-PROTOTYPE"),
            ref("TARGET-R-PORT-REF", "/Pkg/CompB/PortIn", "R-PORT-PROTOTYPE"),
        ),
        attrs={"UUID": "conn-1"},
    )
    return el(
        "AUTOSAR",
        el(
            "AR-PACKAGES",
            named(
                "AR-PACKAGE", "Pkg",
                el(
                    "ELEMENTS",
                    named(
                        "COMPOSITION-SW-COMPONENT-TYPE", "Top",
                        el("CONNECTORS", connector),
                    ),
                ),
            ),
        ),
    )


@pytest.fixture
def search_document() -> RawElement:
    """Package with several speed-related elements at different depths."""
    return el(
        "AUTOSAR",
        el(
            "AR-PACKAGES",
            named(
                "AR-PACKAGE", "Pkg",
                el(
                    "ELEMENTS",
                    named(
                        "APPLICATION-SW-COMPONENT-TYPE", "SpeedSensor",
                        el("PORTS", named("P-PORT-PROTOTYPE", "Speed")),
                    ),
                    named("APPLICATION-SW-COMPONENT-TYPE", "Speed"),
                    named("SENDER-RECEIVER-INTERFACE", "SpeedIf"),
                    named("APPLICATION-PRIMITIVE-DATA-TYPE", "Torque"),
                ),
            ),
        ),
    )


@pytest.fixture
def loaded_session(search_document: RawElement) -> ExplorerSession:
    """Session with the search document imported."""
    session = ExplorerSession()
    session.load(search_document)
    return session
