"""
PlantUML diagram generation module.

This module provides the PlantUMLAssembler class for folding parsed
source files into a single PlantUML class diagram.
"""

import logging
from typing import Iterable, List, Optional

from repouml.core.class_descriptor import ClassDescriptor
from repouml.core.class_registry import ClassRegistry
from repouml.core.source_file import SourceFile
from repouml.generators.normalizer import normalize
from repouml.parsers.source_parser import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    HeuristicSourceParser,
    SourceUnitParser,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Class Diagram"

STYLE_DIRECTIVES = {
    'default': [
        "skinparam class {",
        "  BackgroundColor White",
        "  ArrowColor Black",
        "  BorderColor Black",
        "}",
    ],
    'monochrome': [
        "skinparam monochrome true",
        "skinparam shadowing false",
        "skinparam class {",
        "  BackgroundColor White",
        "  ArrowColor Black",
        "  BorderColor Black",
        "}",
    ],
    'vibrant': [
        "skinparam shadowing true",
        "skinparam class {",
        "  BackgroundColor lightyellow",
        "  ArrowColor #33a6b8",
        "  BorderColor #33a6b8",
        "}",
    ],
}


class PlantUMLAssembler:
    """
    Assembler for PlantUML class diagrams from source files.

    Each file is parsed independently. Classes are collected in a
    ClassRegistry local to one assemble() call, so a later file that
    yields an already-seen class name replaces the earlier class.
    A file whose parsing fails is logged and skipped.
    """

    def __init__(
        self,
        parser: Optional[SourceUnitParser] = None,
        title: str = DEFAULT_TITLE,
        style: str = 'default',
    ):
        """
        Initialize the assembler.

        Args:
            parser: Source unit parser (defaults to the heuristic parser)
            title: Diagram title line
            style: Styling preset ('default', 'monochrome', 'vibrant')
        """
        self.parser = parser or HeuristicSourceParser()
        self.title = title
        self.style = style

    def collect(
        self, files: Iterable[SourceFile], language: str = DEFAULT_LANGUAGE
    ) -> ClassRegistry:
        """
        Parse files into a registry of classes and relationships.

        Args:
            files: Source files in processing order
            language: Source language of the files

        Returns:
            A ClassRegistry holding the parse results
        """
        registry = ClassRegistry()

        if language not in SUPPORTED_LANGUAGES:
            logger.warning("Unsupported language: %s", language)
            return registry

        for source in files or []:
            if not source.content:
                logger.debug("Empty content for file: %s", source.name)
                continue

            try:
                result = self.parser.parse(source.name, source.content)
            except Exception as e:
                logger.error("Error parsing file %s: %s", source.name, str(e))
                continue

            if result.class_descriptor is not None:
                registry.add_class(result.class_descriptor)
            registry.add_relationships(result.relationships)

        return registry

    def render(self, registry: ClassRegistry) -> str:
        """
        Render a registry as a normalized PlantUML document.

        Args:
            registry: Collected classes and relationships

        Returns:
            PlantUML code as string
        """
        lines = [f"title {self.title}", ""]
        lines.extend(self._get_style_directives(self.style))
        lines.append("")

        for descriptor in registry.classes:
            self._add_class(lines, descriptor)

        for edge in registry.relationships:
            lines.append(edge.render())

        return normalize("\n".join(lines))

    def assemble(
        self, files: Iterable[SourceFile], language: str = DEFAULT_LANGUAGE
    ) -> str:
        """
        Generate a PlantUML class diagram for the given files.

        Args:
            files: Source files in processing order
            language: Source language of the files

        Returns:
            Normalized PlantUML code
        """
        return self.render(self.collect(files, language))

    def _get_style_directives(self, style: str) -> List[str]:
        return STYLE_DIRECTIVES.get(style, STYLE_DIRECTIVES['default'])

    def _add_class(self, lines: List[str], descriptor: ClassDescriptor) -> None:
        """
        Add a class block to the diagram.

        Args:
            lines: List of diagram lines (modified in place)
            descriptor: Class to add
        """
        lines.append(f"class {descriptor.name} {{")
        for field_descriptor in descriptor.fields:
            lines.append(f"  {field_descriptor.render()}")
        for method in descriptor.methods:
            lines.append(f"  {method.render()}")
        lines.append("}")
        lines.append("")


def assemble(files: Iterable[SourceFile], language: str = DEFAULT_LANGUAGE) -> str:
    """Assemble a class diagram with the default parser and style."""
    return PlantUMLAssembler().assemble(files, language)


def error_diagram(title: str, notes: List[str]) -> str:
    """
    Build a diagram that reports a failure instead of a model.

    Args:
        title: Diagram title
        notes: Note texts, one note each

    Returns:
        Normalized PlantUML code
    """
    lines = [f"title {title}"]
    for index, note in enumerate(notes, start=1):
        text = " ".join(note.replace('"', "'").split())
        lines.append(f'note "{text}" as N{index}')
    return normalize("\n".join(lines))
