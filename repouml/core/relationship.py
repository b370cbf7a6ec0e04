"""
Relationship representation module.

This module defines the RelationshipEdge record, which represents a
relationship between a class and another class or type name.
"""

from dataclasses import dataclass

from repouml.core.enums import RelationshipKind


@dataclass(frozen=True)
class RelationshipEdge:
    """
    A directed relationship between two named types.

    Association edges come from field types, inheritance edges from
    "extends" and realization edges from "implements". Edges are not
    deduplicated anywhere; identical edges render as separate lines.

    Attributes:
        source: Name of the class the edge starts from
        target: Name of the class or type the edge points to
        kind: Kind of relationship
    """

    source: str
    target: str
    kind: RelationshipKind

    def render(self) -> str:
        """Render the edge as a PlantUML relationship statement."""
        return f"{self.source} {self.kind.arrow} {self.target}"

    def is_inheritance(self) -> bool:
        """Check if this edge represents inheritance."""
        return self.kind == RelationshipKind.INHERITANCE

    def is_realization(self) -> bool:
        """Check if this edge represents interface realization."""
        return self.kind == RelationshipKind.REALIZATION

    def is_association(self) -> bool:
        """Check if this edge represents a field-typed association."""
        return self.kind == RelationshipKind.ASSOCIATION
