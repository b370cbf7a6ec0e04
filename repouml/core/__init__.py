"""
Core diagram modeling components.

This package contains the data structures shared by the parser, the
assembler and the ranker: source files, class descriptors and the
relationships between them.
"""

from repouml.core.enums import Visibility, RelationshipKind, DiagramType
from repouml.core.source_file import SourceFile, RankedFile
from repouml.core.class_descriptor import (
    ClassDescriptor,
    FieldDescriptor,
    MethodDescriptor,
)
from repouml.core.relationship import RelationshipEdge
from repouml.core.class_registry import ClassRegistry

__all__ = [
    'Visibility',
    'RelationshipKind',
    'DiagramType',
    'SourceFile',
    'RankedFile',
    'ClassDescriptor',
    'FieldDescriptor',
    'MethodDescriptor',
    'RelationshipEdge',
    'ClassRegistry',
]
