"""
Utility functions and classes for diagram generation.

This package provides LLM interaction, repository file loading
and PlantUML server URLs.
"""

from repouml.utils.llm_client import LLMClient, ContextLengthExceededError
from repouml.utils.file_loader import RepositoryFileLoader
from repouml.utils.diagram_url import DiagramRenderer

__all__ = [
    'LLMClient',
    'ContextLengthExceededError',
    'RepositoryFileLoader',
    'DiagramRenderer'
]
