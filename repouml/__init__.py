"""
RepoUML - PlantUML diagrams from source code repositories.

This package turns the code files of a repository into PlantUML
diagrams, either by heuristic parsing or with a large language model.
"""

__version__ = "0.1.0"

from repouml.generators.normalizer import normalize
from repouml.parsers.source_parser import parse
from repouml.generators.plantuml import assemble
from repouml.nlp.ranking import rank
