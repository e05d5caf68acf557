#!/usr/bin/env python3
"""
ARXML Structure Explorer - CLI Entry Point
==========================================

Command-line front end for the structure analysis engine.
This file is intentionally minimal, delegating all logic to specialized services.

Architecture:
- Services: Analysis (named hierarchy, components, projection, search, filtering, statistics)
- Managers: Coordination (categories, document loading, session snapshots)
- CLI: User interface (parsing, formatting)
- Core: Element model, identity resolution, traversal, settings

Usage:
    python Explorer_CLI.py system.arxml --summary
    python Explorer_CLI.py system.arxml --components --ports --connectors
    python Explorer_CLI.py system.arxml --search CompA --tree
    python Explorer_CLI.py system.arxml --named-tree --components --family PORT
"""

import logging
import sys

# Service layer
from services import StatisticsService
from services.filter_service import collect_keys
from services.projection_service import find_node

# Manager layer
from managers import DocumentManager, ExplorerSession

# CLI layer
from cli import CommandParser, OutputFormatter

from core.errors import AnalysisError, DocumentLoadError
from core.settings import CATEGORY_ALL


def show_summary(session: ExplorerSession, formatter: OutputFormatter) -> None:
    """
    Display named element statistics.

    Args:
        session: Loaded session
        formatter: Output formatter
    """
    stats_service = StatisticsService()
    snapshot = session.snapshot

    formatter.print_header("Named Element Statistics")
    table = stats_service.format_statistics_table(snapshot.hierarchy, snapshot.components)
    formatter.print_statistics_table(table)


def show_named_elements(args, session: ExplorerSession, formatter: OutputFormatter) -> None:
    """Display the named hierarchy and/or the elements of one type."""
    hierarchy = session.snapshot.hierarchy

    if args.named_tree:
        formatter.print_header("Named Element Tree")
        formatter.print_named_tree(hierarchy.tree, args.max_depth)
    if args.elements:
        formatter.print_header(f"Elements: {args.elements}")
        formatter.print_elements(args.elements, hierarchy.elements_by_type.get(args.elements, []))


def show_catalogues(args, session: ExplorerSession, formatter: OutputFormatter) -> None:
    """Display the requested component, port and connector catalogues."""
    stats_service = StatisticsService()
    components = session.snapshot.components

    if args.components:
        records = components.components
        if args.family:
            records = stats_service.filter_by_type_family(records, args.family)
        if args.refs:
            records = stats_service.filter_by_reference_count(records, args.refs)
        formatter.print_header("Components")
        formatter.print_components(records)
    if args.ports:
        formatter.print_header("Ports")
        formatter.print_ports(components.ports)
    if args.connectors:
        formatter.print_header("Assembly Connectors")
        formatter.print_connectors(components.connectors)


def show_search_and_tree(args, session: ExplorerSession, formatter: OutputFormatter) -> None:
    """Run the search (if any) and print results and/or the browsing tree."""
    view = session.search(
        args.search or "",
        mode=args.mode,
        category=args.category,
        page=args.page,
        page_size=args.page_size,
    )

    if args.search:
        scope = ""
        if args.category != CATEGORY_ALL:
            scope = session.categories.get_category_label(args.category)
        formatter.print_header(f"Search: {args.search}")
        formatter.print_search_results(args.search, view.result, scope)

    if args.tree:
        formatter.print_header("Display Tree")
        formatter.print_tree(view.tree, args.max_depth)
        formatter.print_info(f"{len(collect_keys(view.tree))} nodes in tree")


def show_details(args, session: ExplorerSession, formatter: OutputFormatter) -> bool:
    """
    Display one node of the display tree.

    Args:
        args: Parsed arguments (``details`` holds the node key)
        session: Loaded session
        formatter: Output formatter

    Returns:
        False if no node has the key
    """
    stats_service = StatisticsService()
    snapshot = session.snapshot

    node = find_node(snapshot.projection, args.details)
    if node is None:
        formatter.print_error(f"No tree node with key '{args.details}'")
        return False

    formatter.print_header(f"Details: {node.label}")
    formatter.print_node_details(
        node,
        session.categories.get_category_label(node.category),
        stats_service.find_related_components(node.identity, snapshot.components),
        stats_service.format_xml_snippet(node.source),
    )
    return True


def main(argv=None) -> None:
    """Main entry point for CLI."""
    # Parse arguments
    parser = CommandParser()
    args = parser.parse_args(argv)
    formatter = OutputFormatter()

    # Validate arguments
    if not parser.validate_args(args):
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Execute command
    try:
        root = DocumentManager().load(args.file)
        session = ExplorerSession()
        session.load(root)
        formatter.print_success(f"Loaded {args.file}")

        nothing_requested = not any([
            args.summary, args.components, args.ports, args.connectors, args.tree, args.search,
            args.named_tree, args.elements, args.details,
        ])
        if args.summary or nothing_requested:
            show_summary(session, formatter)
        show_named_elements(args, session, formatter)
        show_catalogues(args, session, formatter)
        if args.search or args.tree:
            show_search_and_tree(args, session, formatter)
        if args.details and not show_details(args, session, formatter):
            sys.exit(1)
    except (DocumentLoadError, AnalysisError) as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        formatter.print_warning("Operation cancelled by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
