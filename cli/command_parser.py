"""
Command Parser
==============

Handles CLI argument parsing.
Follows SRP: Only handles command-line argument parsing.
"""

import argparse
from typing import Any

from core.settings import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SEARCH_MODE,
    REFERENCE_COUNT_BUCKETS,
    SEARCH_MODES,
    TYPE_FAMILIES,
)
from managers.category_manager import CategoryManager


class CommandParser:
    """
    Parser for command-line arguments.

    Follows SRP: Only handles argument parsing.
    """

    def __init__(self):
        """Initialize command parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all options.

        Returns:
            Configured ArgumentParser
        """
        parser = argparse.ArgumentParser(
            description="ARXML Structure Explorer",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Named element statistics
  python Explorer_CLI.py system.arxml --summary

  # Component, port and connector catalogues
  python Explorer_CLI.py system.arxml --components --ports --connectors

  # Search ports named like "Speed", second page of 20
  python Explorer_CLI.py system.arxml --search speed --category port --page 2 --page-size 20

  # Browse the display tree three levels deep
  python Explorer_CLI.py system.arxml --tree --max-depth 3

  # Port components without references
  python Explorer_CLI.py system.arxml --components --family PORT --refs 0

  # Details of a node (keys are listed next to search results)
  python Explorer_CLI.py system.arxml --details 0-AR-PACKAGES-0-AR-PACKAGE-0
            """
        )

        parser.add_argument(
            "file",
            help="ARXML, XML or serialized JSON document"
        )

        # Report arguments
        parser.add_argument(
            "--summary",
            action="store_true",
            help="Display named element statistics"
        )

        parser.add_argument(
            "--components",
            action="store_true",
            help="List component records"
        )

        parser.add_argument(
            "--ports",
            action="store_true",
            help="List port prototypes and their interfaces"
        )

        parser.add_argument(
            "--connectors",
            action="store_true",
            help="List assembly connectors"
        )

        parser.add_argument(
            "--named-tree",
            action="store_true",
            help="Print the named element hierarchy"
        )

        parser.add_argument(
            "--elements",
            metavar="TYPE",
            help="List named elements of one type (e.g. P-PORT-PROTOTYPE)"
        )

        parser.add_argument(
            "--family",
            choices=list(TYPE_FAMILIES),
            help="Restrict --components to a type family"
        )

        parser.add_argument(
            "--refs",
            metavar="BUCKET",
            choices=[label for label, _, _ in REFERENCE_COUNT_BUCKETS],
            help="Restrict --components to a reference-count bucket"
        )

        parser.add_argument(
            "--details",
            metavar="KEY",
            help="Show details and an XML snippet for a display tree node key"
        )

        parser.add_argument(
            "--tree",
            action="store_true",
            help="Print the display tree (filtered when --search is given)"
        )

        parser.add_argument(
            "--max-depth",
            type=int,
            default=None,
            help="Limit printed tree depth"
        )

        # Search arguments
        parser.add_argument(
            "--search",
            help="Search text"
        )

        parser.add_argument(
            "--mode",
            choices=SEARCH_MODES,
            default=DEFAULT_SEARCH_MODE,
            help=f"Search mode (default: {DEFAULT_SEARCH_MODE})"
        )

        parser.add_argument(
            "--category",
            choices=CategoryManager().get_all_categories(),
            default="all",
            help="Restrict search to a category (default: all)"
        )

        parser.add_argument(
            "--page",
            type=int,
            default=1,
            help="Result page (default: 1)"
        )

        parser.add_argument(
            "--page-size",
            type=int,
            default=DEFAULT_PAGE_SIZE,
            help=f"Results per page (default: {DEFAULT_PAGE_SIZE})"
        )

        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Enable debug logging"
        )

        return parser

    def parse_args(self, args=None) -> Any:
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (default: sys.argv)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def validate_args(self, args: Any) -> bool:
        """
        Validate parsed arguments.

        Args:
            args: Parsed arguments namespace

        Returns:
            True if arguments are valid
        """
        if args.page < 1:
            print("Error: --page must be at least 1")
            return False

        if args.page_size < 1:
            print("Error: --page-size must be at least 1")
            return False

        if args.max_depth is not None and args.max_depth < 0:
            print("Error: --max-depth cannot be negative")
            return False

        if (args.family or args.refs) and not args.components:
            print("Error: --family and --refs filter --components")
            return False

        return True
