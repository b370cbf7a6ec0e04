"""
Class description module.

This module defines the ClassDescriptor class, which represents one
class extracted from a source file, together with the field and method
records it holds.
"""

from dataclasses import dataclass

from repouml.core.enums import Visibility


@dataclass(frozen=True)
class FieldDescriptor:
    """A single field declaration."""

    visibility: Visibility
    type: str
    name: str

    def render(self) -> str:
        return f"{self.visibility.value} {self.name}: {self.type}"


@dataclass(frozen=True)
class MethodDescriptor:
    """A single method declaration; parameters are kept as raw text."""

    visibility: Visibility
    return_type: str
    name: str
    parameters: str = ""

    def render(self) -> str:
        return f"{self.visibility.value} {self.name}({self.parameters}): {self.return_type}"


class ClassDescriptor:
    """
    Represents a class extracted from a source file.

    Fields and methods keep the order in which they were found in the
    source text. The name is the key used for deduplication when several
    descriptors are assembled into one diagram.
    """

    def __init__(self, name: str):
        """
        Initialize a new class descriptor.

        Args:
            name: Name of the class (derived from the file name)
        """
        self.name = name
        self.fields: list[FieldDescriptor] = []
        self.methods: list[MethodDescriptor] = []

    def add_field(
        self, name: str, field_type: str, visibility: Visibility = Visibility.PACKAGE
    ) -> FieldDescriptor:
        """
        Add a field to this class.

        Args:
            name: Name of the field
            field_type: Declared type of the field
            visibility: Visibility of the declaration

        Returns:
            The created FieldDescriptor
        """
        descriptor = FieldDescriptor(visibility=visibility, type=field_type, name=name)
        self.fields.append(descriptor)
        return descriptor

    def add_method(
        self,
        name: str,
        return_type: str,
        parameters: str = "",
        visibility: Visibility = Visibility.PACKAGE,
    ) -> MethodDescriptor:
        """
        Add a method to this class.

        Args:
            name: Name of the method
            return_type: Declared return type
            parameters: Raw parameter list text
            visibility: Visibility of the declaration

        Returns:
            The created MethodDescriptor
        """
        descriptor = MethodDescriptor(
            visibility=visibility,
            return_type=return_type,
            name=name,
            parameters=parameters,
        )
        self.methods.append(descriptor)
        return descriptor

    def is_empty(self) -> bool:
        """Check if the class has neither fields nor methods."""
        return not self.fields and not self.methods

    def __repr__(self) -> str:
        return (
            f"ClassDescriptor({self.name!r}, fields={len(self.fields)}, "
            f"methods={len(self.methods)})"
        )
