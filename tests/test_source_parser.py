"""
Tests for source unit parsing.
"""

import unittest
from repouml.parsers.source_parser import (
    HeuristicSourceParser,
    parse,
    class_name_from_file,
    detect_language,
)
from repouml.core.enums import Visibility, RelationshipKind
from repouml.core.relationship import RelationshipEdge

CUSTOMER_SOURCE = """public class Customer {
    private String name;
    private Account owner;
    int visits;

    public void deposit(int amount) {
    }

    String describe() {
    }
}
"""


class TestClassNames(unittest.TestCase):
    """Tests for class name and language detection."""

    def test_class_name_from_file(self):
        """Test stripping recognized source extensions."""
        self.assertEqual(class_name_from_file("Customer.java"), "Customer")
        self.assertEqual(class_name_from_file("service.ts"), "service")
        self.assertEqual(class_name_from_file("app.js"), "app")
        self.assertEqual(class_name_from_file("model.py"), "model.py")

    def test_detect_language(self):
        """Test language detection from extensions."""
        self.assertEqual(detect_language("Customer.java"), "java")
        self.assertEqual(detect_language("view.tsx"), "typescript")
        self.assertEqual(detect_language("app.JS"), "javascript")
        self.assertEqual(detect_language("Makefile"), "java")
        self.assertEqual(detect_language("main.go"), "java")


class TestHeuristicSourceParser(unittest.TestCase):
    """Tests for the HeuristicSourceParser class."""

    def setUp(self):
        """Set up test fixtures."""
        self.parser = HeuristicSourceParser()

    def test_fields(self):
        """Test field extraction and visibility defaults."""
        result = self.parser.parse("Customer.java", CUSTOMER_SOURCE)
        descriptor = result.class_descriptor

        self.assertIsNotNone(descriptor)
        self.assertEqual(descriptor.name, "Customer")
        self.assertEqual(
            [(f.visibility, f.type, f.name) for f in descriptor.fields],
            [
                (Visibility.PRIVATE, "String", "name"),
                (Visibility.PRIVATE, "Account", "owner"),
                (Visibility.PACKAGE, "int", "visits"),
            ]
        )

    def test_methods(self):
        """Test method extraction with raw parameters."""
        descriptor = self.parser.parse("Customer.java", CUSTOMER_SOURCE).class_descriptor

        self.assertEqual(len(descriptor.methods), 2)
        self.assertEqual(descriptor.methods[0].name, "deposit")
        self.assertEqual(descriptor.methods[0].return_type, "void")
        self.assertEqual(descriptor.methods[0].parameters, "int amount")
        self.assertEqual(descriptor.methods[0].visibility, Visibility.PUBLIC)
        self.assertEqual(descriptor.methods[1].name, "describe")
        self.assertEqual(descriptor.methods[1].parameters, "")
        self.assertEqual(descriptor.methods[1].visibility, Visibility.PACKAGE)

    def test_builtin_types_have_no_association(self):
        """Test that only non-builtin field types produce associations."""
        result = self.parser.parse("Customer.java", CUSTOMER_SOURCE)

        self.assertEqual(
            result.relationships,
            [RelationshipEdge("Customer", "Account", RelationshipKind.ASSOCIATION)]
        )

    def test_builtin_match_is_case_sensitive(self):
        """Test that a lowercase string type is not treated as builtin."""
        result = self.parser.parse("Note.ts", "class Note {\n  private string text;\n}")

        self.assertEqual(len(result.relationships), 1)
        self.assertEqual(result.relationships[0].target, "string")

    def test_inheritance_and_realization(self):
        """Test extends and implements clauses."""
        content = "class Dog extends Animal implements Runnable, Comparable {\n}"
        result = self.parser.parse("Dog.java", content)

        self.assertEqual(
            result.relationships,
            [
                RelationshipEdge("Dog", "Animal", RelationshipKind.INHERITANCE),
                RelationshipEdge("Dog", "Runnable", RelationshipKind.REALIZATION),
                RelationshipEdge("Dog", "Comparable", RelationshipKind.REALIZATION),
            ]
        )
        self.assertIsNotNone(result.class_descriptor)
        self.assertTrue(result.class_descriptor.is_empty())

    def test_realization_without_extends(self):
        """Test implements without a superclass."""
        content = "public class Cat implements Pet {\n}"
        result = self.parser.parse("Cat.java", content)

        self.assertEqual(
            result.relationships,
            [RelationshipEdge("Cat", "Pet", RelationshipKind.REALIZATION)]
        )

    def test_only_first_extends_is_read(self):
        """Test that a second extends clause is ignored."""
        content = "class A extends B {\n}\nclass C extends D {\n}"
        result = self.parser.parse("A.java", content)

        inheritance = [r for r in result.relationships if r.is_inheritance()]
        self.assertEqual(len(inheritance), 1)
        self.assertEqual(inheritance[0].target, "B")

    def test_class_name_comes_from_file_name(self):
        """Test that the declared name does not override the file name."""
        result = self.parser.parse("Other.java", "class Thing {\n  private int size;\n}")

        self.assertEqual(result.class_descriptor.name, "Other")

    def test_empty_content(self):
        """Test that empty content yields no class."""
        for content in ("", "   \n\t"):
            result = self.parser.parse("Empty.java", content)
            self.assertIsNone(result.class_descriptor)
            self.assertEqual(result.relationships, [])

    def test_no_class_like_structure(self):
        """Test that content without declarations or members yields no class."""
        result = self.parser.parse("util.js", "// just a comment\nconsole.log('hi')\n")

        self.assertIsNone(result.class_descriptor)
        self.assertEqual(result.relationships, [])

    def test_malformed_content_never_raises(self):
        """Test that odd content degrades to partial results."""
        result = parse("Broken.java", "class {{{ ((( ;;; extends implements")

        self.assertEqual(result.relationships, [])


if __name__ == '__main__':
    unittest.main()
