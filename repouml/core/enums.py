"""
Enumeration types used in diagram generation.

This module defines enumerations for member visibility, relationship
kinds and the diagram types the LLM path can produce.
"""

from enum import Enum


class Visibility(Enum):
    """
    Visibility of a field or method as written in the source.

    PACKAGE is used when a declaration carries no modifier.
    """
    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    PACKAGE = "package"

    @classmethod
    def from_modifier(cls, modifier: str) -> "Visibility":
        """Map an access modifier (or an empty string) to a Visibility."""
        if not modifier:
            return cls.PACKAGE
        return cls(modifier)


class RelationshipKind(Enum):
    """
    Kinds of relationships extracted from source files.

    The value of each member is the PlantUML arrow used to render it.
    """
    ASSOCIATION = "-->"
    INHERITANCE = "--|>"
    REALIZATION = "..|>"

    @property
    def arrow(self) -> str:
        return self.value


class DiagramType(Enum):
    """Diagram types that can be requested from the language model."""
    CLASS = "class"
    SEQUENCE = "sequence"
    ACTIVITY = "activity"
    COMPONENT = "component"
