"""
Class registry module.

This module defines the ClassRegistry class, the container that one
diagram assembly uses to collect class descriptors and relationships.
"""

import logging
from typing import Iterable, Optional

from repouml.core.class_descriptor import ClassDescriptor
from repouml.core.relationship import RelationshipEdge

logger = logging.getLogger(__name__)


class ClassRegistry:
    """
    Insertion-ordered collection of classes and relationships.

    Classes are keyed by name. Registering a class whose name is already
    present replaces the earlier descriptor (last write wins) while the
    name keeps its original position in iteration order. Relationships
    are kept in the order they were added, duplicates included.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._classes: dict[str, ClassDescriptor] = {}
        self.relationships: list[RelationshipEdge] = []

    def add_class(self, descriptor: ClassDescriptor) -> bool:
        """
        Register a class descriptor.

        Args:
            descriptor: The descriptor to register

        Returns:
            True if an earlier descriptor with the same name was replaced
        """
        replaced = descriptor.name in self._classes
        if replaced:
            logger.debug("Replacing earlier descriptor for class %s", descriptor.name)
        self._classes[descriptor.name] = descriptor
        return replaced

    def add_relationships(self, edges: Iterable[RelationshipEdge]) -> None:
        """Append relationship edges in order."""
        self.relationships.extend(edges)

    def get_class(self, name: str) -> Optional[ClassDescriptor]:
        """
        Get a class by name.

        Args:
            name: Class name

        Returns:
            The registered descriptor or None
        """
        return self._classes.get(name)

    @property
    def classes(self) -> list[ClassDescriptor]:
        """Registered classes in iteration order."""
        return list(self._classes.values())

    def __len__(self) -> int:
        return len(self._classes)
