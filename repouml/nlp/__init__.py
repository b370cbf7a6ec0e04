"""
Prompt construction components.

This package contains the relevance ranker and the prompt builder
used by the language model path.
"""

from repouml.nlp.ranking import FileRelevanceRanker
from repouml.nlp.prompt_builder import ContextLimits, DiagramPromptBuilder

__all__ = ['FileRelevanceRanker', 'ContextLimits', 'DiagramPromptBuilder']
