"""
Pipeline components for diagram generation.

This package provides pipeline implementations that orchestrate
the path from repository files to PlantUML diagrams.
"""

from repouml.pipelines.base_pipeline import Pipeline, PipelineResult
from repouml.pipelines.diagram_generation import DiagramGenerationPipeline

__all__ = ['Pipeline', 'PipelineResult', 'DiagramGenerationPipeline']
