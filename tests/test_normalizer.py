"""
Tests for PlantUML text normalization.
"""

import unittest
from repouml.generators.normalizer import normalize, extract_body, START_MARKER, END_MARKER

SAMPLES = [
    "",
    "A --> B",
    "@startuml\nA\n@enduml",
    "```plantuml\n@startuml\nX\n@enduml\n```",
    "@startuml\nA\n@enduml\n@startuml\nB\n@enduml",
    "@enduml\nstray\n@startuml",
    "@start@endumluml",
    "```\n```\n```puml\nclass A\n```",
    "\n\n   \nclass A {\n}\n\n\n",
    "@startuml@startuml@enduml@enduml",
    "@enduml```",
]


class TestNormalize(unittest.TestCase):
    """Tests for the normalize function."""

    def test_empty_input(self):
        """Test that empty input yields an empty document."""
        self.assertEqual(normalize(""), "@startuml\n\n@enduml")
        self.assertEqual(normalize(None), "@startuml\n\n@enduml")

    def test_wraps_bare_body(self):
        """Test that markers are added around a bare body."""
        self.assertEqual(normalize("A --> B"), "@startuml\nA --> B\n@enduml")

    def test_fence_stripping(self):
        """Test that fenced code blocks are unwrapped."""
        result = normalize("```plantuml\n@startuml\nX\n@enduml\n```")
        self.assertNotIn("`", result)
        self.assertEqual(result, "@startuml\nX\n@enduml")

    def test_duplicate_marker_repair(self):
        """Test that concatenated diagrams are merged into one."""
        result = normalize("@startuml\nA\n@enduml\n@startuml\nB\n@enduml")
        self.assertEqual(result, "@startuml\nA\n\nB\n@enduml")

    def test_trailing_whitespace_trimmed(self):
        """Test that trailing whitespace before the end marker is removed."""
        self.assertEqual(normalize("class A\n\n   \n"), "@startuml\nclass A\n@enduml")

    def test_well_formed(self):
        """Test that each marker appears once, on the first and last lines."""
        for sample in SAMPLES:
            with self.subTest(sample=sample):
                result = normalize(sample)
                lines = result.split("\n")
                self.assertEqual(result.count(START_MARKER), 1)
                self.assertEqual(result.count(END_MARKER), 1)
                self.assertEqual(lines[0], START_MARKER)
                self.assertEqual(lines[-1], END_MARKER)

    def test_idempotent(self):
        """Test that normalizing twice changes nothing."""
        for sample in SAMPLES:
            with self.subTest(sample=sample):
                once = normalize(sample)
                self.assertEqual(normalize(once), once)

    def test_recombined_markers_removed(self):
        """Test that markers formed by removing inner markers are removed too."""
        self.assertEqual(extract_body("@start@endumluml"), "")


if __name__ == '__main__':
    unittest.main()
