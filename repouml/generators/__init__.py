"""
Output generators for diagram generation.

This package provides the PlantUML assembler and the normalizer
applied to every emitted diagram.
"""

from repouml.generators.normalizer import normalize, extract_body
from repouml.generators.plantuml import PlantUMLAssembler, error_diagram

__all__ = ['normalize', 'extract_body', 'PlantUMLAssembler', 'error_diagram']
