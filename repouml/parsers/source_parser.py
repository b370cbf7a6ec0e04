"""
Source unit parsing module.

This module extracts a class description and its relationships from
the text of one source file. Extraction is a best-effort heuristic
built on regular expressions over common object-oriented syntax: it
does not understand nested braces, multi-line signatures, generics or
lambdas, and will both miss and over-report some members.
"""

import re
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from repouml.core.class_descriptor import ClassDescriptor
from repouml.core.enums import RelationshipKind, Visibility
from repouml.core.relationship import RelationshipEdge

logger = logging.getLogger(__name__)

# Types that never produce an association edge (exact, case-sensitive)
BUILTIN_TYPES = frozenset([
    "String", "int", "boolean", "float", "double",
    "void", "byte", "short", "long", "char",
])

SOURCE_EXTENSION_PATTERN = re.compile(r"\.(java|ts|js)$")

FIELD_PATTERN = re.compile(r"(private|public|protected)?\s+(\w+)\s+(\w+)\s*;")
METHOD_PATTERN = re.compile(
    r"(private|public|protected)?\s+(\w+)\s+(\w+)\s*\((.*?)\)\s*{"
)
EXTENDS_PATTERN = re.compile(r"class\s+(\w+)\s+extends\s+(\w+)")
IMPLEMENTS_PATTERN = re.compile(
    r"class\s+(\w+)(?:\s+extends\s+\w+)?\s+implements\s+([\w,\s]+)"
)
DECLARATION_PATTERN = re.compile(r"\b(?:class|interface)\s+\w+")

LANGUAGE_BY_EXTENSION = {
    "java": "java",
    "ts": "typescript",
    "tsx": "typescript",
    "js": "javascript",
    "jsx": "javascript",
    "py": "python",
    "cs": "csharp",
    "php": "php",
}

DEFAULT_LANGUAGE = "java"

# Languages whose syntax the heuristic extractor understands
SUPPORTED_LANGUAGES = frozenset(["java", "typescript", "javascript"])


@dataclass
class ParseResult:
    """
    Result of parsing one source file.

    class_descriptor is None when the file holds nothing class-like;
    relationships may still be present in that case.
    """

    class_descriptor: Optional[ClassDescriptor] = None
    relationships: list[RelationshipEdge] = field(default_factory=list)


def class_name_from_file(file_name: str) -> str:
    """Derive the class name by stripping a recognized source extension."""
    return SOURCE_EXTENSION_PATTERN.sub("", file_name)


def detect_language(file_name: str) -> str:
    """
    Detect the source language from a file name.

    Args:
        file_name: File name or path

    Returns:
        Language name, "java" when the extension is unknown
    """
    _, dot, extension = file_name.rpartition(".")
    if not dot:
        return DEFAULT_LANGUAGE
    return LANGUAGE_BY_EXTENSION.get(extension.lower(), DEFAULT_LANGUAGE)


class SourceUnitParser(ABC):
    """Interface for extracting structure from one source file."""

    @abstractmethod
    def parse(self, file_name: str, content: str) -> ParseResult:
        """
        Parse one source file.

        Args:
            file_name: Base name of the file
            content: Text content of the file

        Returns:
            The extracted class (if any) and relationships
        """


class HeuristicSourceParser(SourceUnitParser):
    """
    Regular-expression based extractor.

    The class name always comes from the file name. Fields are single
    line "[modifier] Type name;" statements, methods are
    "[modifier] ReturnType name(params) {" headers. Only the first
    "extends" and the first "implements" clause of a file are read.
    """

    def parse(self, file_name: str, content: str) -> ParseResult:
        result = ParseResult()
        if not content or not content.strip():
            return result

        class_name = class_name_from_file(file_name)
        descriptor = ClassDescriptor(class_name)

        for match in FIELD_PATTERN.finditer(content):
            visibility, field_type, name = match.groups()
            descriptor.add_field(name, field_type, Visibility.from_modifier(visibility))
            if field_type not in BUILTIN_TYPES:
                result.relationships.append(
                    RelationshipEdge(class_name, field_type, RelationshipKind.ASSOCIATION)
                )

        for match in METHOD_PATTERN.finditer(content):
            visibility, return_type, name, params = match.groups()
            descriptor.add_method(
                name, return_type, params.strip(), Visibility.from_modifier(visibility)
            )

        result.relationships.extend(self._inheritance(content))
        result.relationships.extend(self._realizations(content))

        if descriptor.is_empty() and not DECLARATION_PATTERN.search(content):
            logger.debug("No class-like structure found in %s", file_name)
            return result

        result.class_descriptor = descriptor
        return result

    def _inheritance(self, content: str) -> list[RelationshipEdge]:
        match = EXTENDS_PATTERN.search(content)
        if not match:
            return []
        return [RelationshipEdge(match.group(1), match.group(2), RelationshipKind.INHERITANCE)]

    def _realizations(self, content: str) -> list[RelationshipEdge]:
        match = IMPLEMENTS_PATTERN.search(content)
        if not match:
            return []
        interfaces = [name.strip() for name in match.group(2).split(",")]
        return [
            RelationshipEdge(match.group(1), name, RelationshipKind.REALIZATION)
            for name in interfaces
            if name
        ]


_default_parser = HeuristicSourceParser()


def parse(file_name: str, content: str) -> ParseResult:
    """Parse one source file with the heuristic extractor."""
    return _default_parser.parse(file_name, content)
