"""
Configuration components for diagram generation.

This package provides settings and prompt templates.
"""

from repouml.config.settings import Settings
from repouml.config.prompts import PromptTemplates

__all__ = ['Settings', 'PromptTemplates']
