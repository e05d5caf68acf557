"""
Output Formatter
================

Handles console output formatting.
Follows SRP: Only handles output formatting.
"""

import sys
from typing import Dict, List, Optional

from core.settings import LABEL_MAX_LENGTH
from services.component_service import ComponentRecord, ConnectorRecord, PortRecord
from services.hierarchy_service import NamedElement
from services.projection_service import DisplayNode
from services.search_service import QueryResult


def truncate(text: str, max_length: int = LABEL_MAX_LENGTH) -> str:
    if not text:
        return ""
    return text if len(text) <= max_length else f"{text[:max_length]}..."


class OutputFormatter:
    """
    Formatter for console output.

    Follows SRP: Only handles output formatting.
    """

    def print_header(self, title: str) -> None:
        """
        Print formatted header.

        Args:
            title: Header title
        """
        print("\n" + "=" * 80)
        print(f" {title}")
        print("=" * 80)

    def print_statistics_table(self, stats_text: str) -> None:
        """
        Print statistics table.

        Args:
            stats_text: Formatted statistics text
        """
        print(stats_text)

    def print_components(self, components: List[ComponentRecord]) -> None:
        """
        Print component records as a table.

        Args:
            components: Component records
        """
        print(f"{'Name':<30} {'Element Type':<36} {'Refs':<6} {'UUID':<36}")
        print("-" * 110)
        for record in components:
            print(
                f"{truncate(record.name, 28):<30} {truncate(record.tag, 34):<36} "
                f"{len(record.references):<6} {record.uuid or '-':<36}"
            )
        print(f"\n{len(components)} components")

    def print_ports(self, ports: List[PortRecord]) -> None:
        for port in ports:
            interface = port.interface
            target = f"{interface.value} [{interface.dest}]" if interface else "-"
            print(f"{port.name:<30} {port.kind:<20} -> {target}")
        print(f"\n{len(ports)} ports")

    def print_connectors(self, connectors: List[ConnectorRecord]) -> None:
        for connector in connectors:
            print(f"{connector.name} ({connector.uuid or 'no UUID'})")
            for side, endpoint in (("provider", connector.provider), ("requester", connector.requester)):
                if endpoint is None:
                    print(f"  {side:<10} -")
                    continue
                print(f"  {side:<10} {endpoint.component_path or '-'} / {endpoint.port_path or '-'}")
        print(f"\n{len(connectors)} connectors")

    def print_tree(
        self,
        nodes: List[DisplayNode],
        max_depth: Optional[int] = None,
        indent: int = 0
    ) -> None:
        """
        Print a display tree, matched nodes marked with "*".

        Args:
            nodes: Root nodes
            max_depth: Deepest level to print (None: everything)
            indent: Current indentation level
        """
        if max_depth is not None and indent > max_depth:
            return
        for node in nodes:
            marker = "*" if node.is_match else " "
            count = f" [{len(node.children)}]" if node.children else ""
            print(f"{'  ' * indent}{marker} {truncate(node.label)}{count}")
            self.print_tree(node.children, max_depth, indent + 1)

    def print_named_tree(
        self,
        elements: List[NamedElement],
        max_depth: Optional[int] = None,
        indent: int = 0
    ) -> None:
        """
        Print the named hierarchy as "name (TYPE)" lines.

        Args:
            elements: Root named elements
            max_depth: Deepest level to print (None: everything)
            indent: Current indentation level
        """
        if max_depth is not None and indent > max_depth:
            return
        for element in elements:
            print(f"{'  ' * indent}{truncate(element.identity)} ({element.tag})")
            self.print_named_tree(element.children, max_depth, indent + 1)

    def print_elements(self, element_type: str, entries: List[Dict[str, str]]) -> None:
        for entry in entries:
            print(f"{truncate(entry['name'], 28):<30} {entry['path']}")
        print(f"\n{len(entries)} {element_type} elements")

    def print_node_details(
        self,
        node: DisplayNode,
        category_label: str,
        related: List[ComponentRecord],
        snippet: str
    ) -> None:
        """
        Print details of one display node.

        Args:
            node: Display node
            category_label: Human-readable category
            related: Components referencing the node
            snippet: XML snippet of the node's source element
        """
        print(f"{'Label':<12} {node.label}")
        print(f"{'Key':<12} {node.key}")
        print(f"{'Path':<12} {' / '.join(node.path)}")
        print(f"{'Category':<12} {category_label}")
        print(f"{'Children':<12} {len(node.children)}")
        print("-" * 80)
        if related:
            print("Referenced by:")
            for record in related:
                print(f"  {record.name} ({record.tag})")
        else:
            print("Referenced by: -")
        print("-" * 80)
        print(snippet)

    def print_search_results(self, text: str, result: QueryResult, scope: str = "") -> None:
        """
        Print one page of search results.

        Args:
            text: Search text
            result: Query result
            scope: Category label appended to the header
        """
        if not result.filtered:
            self.print_info("Empty search text, nothing to filter")
            return

        suffix = f" in {scope}" if scope else ""
        print(
            f"{result.total_count} matches for '{text}'{suffix} "
            f"(page {result.page}/{max(result.page_count, 1)}, {result.page_size} per page)"
        )
        print("-" * 80)
        start = (result.page - 1) * result.page_size
        for offset, node in enumerate(result.page_items, start + 1):
            print(f"{offset:>5}. {truncate(node.label, 60)}")
            print(f"       {' / '.join(node.path)}  [{node.key}]")

    def print_error(self, message: str) -> None:
        """
        Print error message.

        Args:
            message: Error message
        """
        print(f"ERROR: {message}", file=sys.stderr)

    def print_warning(self, message: str) -> None:
        """
        Print warning message.

        Args:
            message: Warning message
        """
        print(f"WARNING: {message}", file=sys.stderr)

    def print_success(self, message: str) -> None:
        """
        Print success message.

        Args:
            message: Success message
        """
        print(f"✓ {message}")

    def print_info(self, message: str) -> None:
        """
        Print info message.

        Args:
            message: Info message
        """
        print(f"ℹ {message}")
