"""Parsers turning git stdout into records."""

from gitwrap.parsing.base import OutputParser, split_lines
from gitwrap.parsing.line_parser import LineParser
from gitwrap.parsing.log_parser import LOG_DELIMITER, LogParser, log_format
from gitwrap.parsing.status_parser import StatusParser
from gitwrap.parsing.tree_parser import TreeParser

__all__ = [
    "LOG_DELIMITER",
    "LineParser",
    "LogParser",
    "OutputParser",
    "StatusParser",
    "TreeParser",
    "log_format",
    "split_lines",
]
