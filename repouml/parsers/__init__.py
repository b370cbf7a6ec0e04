"""
Source code parsers.
"""

from repouml.parsers.source_parser import (
    ParseResult,
    SourceUnitParser,
    HeuristicSourceParser,
    detect_language,
)

__all__ = ['ParseResult', 'SourceUnitParser', 'HeuristicSourceParser', 'detect_language']
