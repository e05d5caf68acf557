"""
CLI Package
===========

Command-line interface layer of the explorer.

Modules:
- CommandParser: Report, search and pagination options
- OutputFormatter: Tables, catalogues and tree rendering
"""

from .command_parser import CommandParser
from .output_formatter import OutputFormatter, truncate

__all__ = [
    'CommandParser',
    'OutputFormatter',
    'truncate',
]
