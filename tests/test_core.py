"""
Tests for core diagram modeling components.
"""

import unittest
from repouml.core.class_descriptor import ClassDescriptor, FieldDescriptor, MethodDescriptor
from repouml.core.relationship import RelationshipEdge
from repouml.core.class_registry import ClassRegistry
from repouml.core.enums import Visibility, RelationshipKind, DiagramType
from repouml.core.source_file import SourceFile, RankedFile

class TestClassDescriptor(unittest.TestCase):
    """Tests for the ClassDescriptor class."""

    def test_initialization(self):
        """Test basic initialization."""
        descriptor = ClassDescriptor("User")
        self.assertEqual(descriptor.name, "User")
        self.assertEqual(descriptor.fields, [])
        self.assertEqual(descriptor.methods, [])
        self.assertTrue(descriptor.is_empty())

    def test_add_field(self):
        """Test adding fields."""
        descriptor = ClassDescriptor("User")
        descriptor.add_field("name", "String", Visibility.PRIVATE)
        descriptor.add_field("age", "int")

        self.assertEqual(len(descriptor.fields), 2)
        self.assertEqual(descriptor.fields[0].name, "name")
        self.assertEqual(descriptor.fields[0].type, "String")
        self.assertEqual(descriptor.fields[0].visibility, Visibility.PRIVATE)
        self.assertEqual(descriptor.fields[1].visibility, Visibility.PACKAGE)
        self.assertFalse(descriptor.is_empty())

    def test_add_method(self):
        """Test adding methods."""
        descriptor = ClassDescriptor("User")
        descriptor.add_method("getName", "String", "", Visibility.PUBLIC)
        descriptor.add_method("setAge", "void", "int age", Visibility.PROTECTED)

        self.assertEqual(len(descriptor.methods), 2)
        self.assertEqual(descriptor.methods[0].name, "getName")
        self.assertEqual(descriptor.methods[0].return_type, "String")
        self.assertEqual(descriptor.methods[1].parameters, "int age")
        self.assertEqual(descriptor.methods[1].visibility, Visibility.PROTECTED)

    def test_render_members(self):
        """Test member rendering uses the visibility word."""
        field_descriptor = FieldDescriptor(Visibility.PRIVATE, "String", "name")
        method = MethodDescriptor(Visibility.PUBLIC, "void", "bark", "int times")

        self.assertEqual(field_descriptor.render(), "private name: String")
        self.assertEqual(method.render(), "public bark(int times): void")
        self.assertEqual(
            MethodDescriptor(Visibility.PACKAGE, "int", "size").render(),
            "package size(): int"
        )


class TestRelationshipEdge(unittest.TestCase):
    """Tests for the RelationshipEdge class."""

    def test_render(self):
        """Test arrow rendering for each kind."""
        self.assertEqual(
            RelationshipEdge("Dog", "Owner", RelationshipKind.ASSOCIATION).render(),
            "Dog --> Owner"
        )
        self.assertEqual(
            RelationshipEdge("Dog", "Animal", RelationshipKind.INHERITANCE).render(),
            "Dog --|> Animal"
        )
        self.assertEqual(
            RelationshipEdge("Dog", "Pet", RelationshipKind.REALIZATION).render(),
            "Dog ..|> Pet"
        )

    def test_kind_checks(self):
        """Test relationship kind check methods."""
        edge = RelationshipEdge("Dog", "Animal", RelationshipKind.INHERITANCE)
        self.assertTrue(edge.is_inheritance())
        self.assertFalse(edge.is_realization())
        self.assertFalse(edge.is_association())

    def test_equality(self):
        """Test that identical edges compare equal."""
        first = RelationshipEdge("A", "B", RelationshipKind.ASSOCIATION)
        second = RelationshipEdge("A", "B", RelationshipKind.ASSOCIATION)
        self.assertEqual(first, second)


class TestClassRegistry(unittest.TestCase):
    """Tests for the ClassRegistry class."""

    def test_add_class(self):
        """Test registering classes."""
        registry = ClassRegistry()
        self.assertFalse(registry.add_class(ClassDescriptor("A")))
        self.assertFalse(registry.add_class(ClassDescriptor("B")))

        self.assertEqual(len(registry), 2)
        self.assertEqual([c.name for c in registry.classes], ["A", "B"])
        self.assertIsNotNone(registry.get_class("A"))
        self.assertIsNone(registry.get_class("C"))

    def test_last_write_wins(self):
        """Test that a duplicate name replaces the earlier class in place."""
        registry = ClassRegistry()
        first = ClassDescriptor("A")
        first.add_field("x", "int")
        second = ClassDescriptor("A")
        second.add_method("run", "void")

        registry.add_class(first)
        registry.add_class(ClassDescriptor("B"))
        self.assertTrue(registry.add_class(second))

        self.assertEqual(len(registry), 2)
        self.assertEqual([c.name for c in registry.classes], ["A", "B"])
        self.assertIs(registry.get_class("A"), second)

    def test_relationships_not_deduplicated(self):
        """Test that identical edges are all kept."""
        registry = ClassRegistry()
        edge = RelationshipEdge("A", "B", RelationshipKind.ASSOCIATION)
        registry.add_relationships([edge])
        registry.add_relationships([edge])

        self.assertEqual(len(registry.relationships), 2)


class TestEnums(unittest.TestCase):
    """Tests for the enumeration types."""

    def test_visibility_from_modifier(self):
        """Test mapping access modifiers."""
        self.assertEqual(Visibility.from_modifier("private"), Visibility.PRIVATE)
        self.assertEqual(Visibility.from_modifier("public"), Visibility.PUBLIC)
        self.assertEqual(Visibility.from_modifier(""), Visibility.PACKAGE)
        self.assertEqual(Visibility.from_modifier(None), Visibility.PACKAGE)

    def test_relationship_arrows(self):
        """Test the arrow for each relationship kind."""
        self.assertEqual(RelationshipKind.ASSOCIATION.arrow, "-->")
        self.assertEqual(RelationshipKind.INHERITANCE.arrow, "--|>")
        self.assertEqual(RelationshipKind.REALIZATION.arrow, "..|>")

    def test_diagram_type_values(self):
        """Test diagram type lookup by value."""
        self.assertEqual(DiagramType("sequence"), DiagramType.SEQUENCE)
        with self.assertRaises(ValueError):
            DiagramType("deployment")


class TestSourceFile(unittest.TestCase):
    """Tests for the SourceFile records."""

    def test_ranked_from_source(self):
        """Test building a ranked file from a source file."""
        source = SourceFile("Dog.java", "src/Dog.java", "class Dog {}", 12)
        ranked = RankedFile.from_source(source, 0.7)

        self.assertEqual(ranked.name, "Dog.java")
        self.assertEqual(ranked.path, "src/Dog.java")
        self.assertEqual(ranked.content, "class Dog {}")
        self.assertEqual(ranked.size, 12)
        self.assertEqual(ranked.relevance_score, 0.7)

    def test_immutable(self):
        """Test that source files cannot be modified."""
        source = SourceFile("Dog.java", "Dog.java", "")
        with self.assertRaises(AttributeError):
            source.content = "changed"


if __name__ == '__main__':
    unittest.main()
