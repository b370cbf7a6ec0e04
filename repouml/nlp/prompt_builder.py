"""
Prompt builder module for LLM interactions.

This module builds the bounded prompts sent to the language model:
ranked files are cut down to a maximum count and each file's content
is truncated to a length that depends on its relevance.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from repouml.config.prompts import PromptTemplates
from repouml.core.enums import DiagramType
from repouml.core.source_file import RankedFile


@dataclass(frozen=True)
class ContextLimits:
    """
    Bounds applied to the code context of one prompt.

    Files scoring above high_relevance_threshold get high_content_length
    characters; all other files get low_content_length.
    """

    max_files: int
    high_content_length: int
    low_content_length: int
    high_relevance_threshold: float = 0.7

    @classmethod
    def uniform(cls, max_files: int, content_length: int) -> "ContextLimits":
        return cls(max_files, content_length, content_length)

    def content_length_for(self, relevance_score: float) -> int:
        if relevance_score > self.high_relevance_threshold:
            return self.high_content_length
        return self.low_content_length


class DiagramPromptBuilder:
    """
    Builds prompts for diagram generation.

    This class combines the prompt templates with the ranked files,
    the optional focus context, the optional list of classes to include
    and free-form user instructions.
    """

    def __init__(self, templates: Optional[PromptTemplates] = None):
        """
        Initialize the prompt builder.

        Args:
            templates: Prompt templates (defaults to PromptTemplates())
        """
        self.templates = templates or PromptTemplates()

    def system_prompt(self, diagram_type: DiagramType) -> str:
        return self.templates.get_system_prompt(diagram_type)

    def instructions(
        self, diagram_type: DiagramType, custom_prompt: Optional[str] = None
    ) -> str:
        """
        Build the instruction part of the prompt.

        Args:
            diagram_type: Requested diagram type
            custom_prompt: Optional additional instructions from the user

        Returns:
            Instruction text
        """
        text = self.templates.get_instructions(diagram_type)
        if custom_prompt:
            text += self.templates.ADDITIONAL_INSTRUCTIONS.format(custom_prompt=custom_prompt)
        return text

    def truncate(self, content: str, max_length: int) -> str:
        """
        Truncate file content to a maximum length.

        Args:
            content: File content
            max_length: Maximum number of characters kept

        Returns:
            Content, with a truncation notice appended when it was cut
        """
        if len(content) <= max_length:
            return content
        return content[:max_length] + self.templates.TRUNCATION_SUFFIX

    def build_context(
        self,
        ranked_files: Iterable[RankedFile],
        limits: ContextLimits,
        focus_context: Optional[str] = None,
        included_classes: Optional[list[str]] = None,
    ) -> str:
        """
        Build the code context section of the prompt.

        Args:
            ranked_files: Files ordered by relevance
            limits: File count and content length bounds
            focus_context: Optional area of the code to focus on
            included_classes: Optional list of classes to restrict to

        Returns:
            Context text
        """
        context = self.templates.CONTEXT_HEADER
        if focus_context:
            context += self.templates.FOCUS_CLAUSE.format(focus_context=focus_context)
        context += ":\n\n"

        for ranked in list(ranked_files)[:limits.max_files]:
            max_length = limits.content_length_for(ranked.relevance_score)
            context += self.templates.FILE_SECTION.format(
                path=ranked.path,
                content=self.truncate(ranked.content, max_length),
            )

        if included_classes:
            context += self.templates.INCLUDED_CLASSES.format(
                class_names=", ".join(included_classes)
            )

        return context

    def build_user_prompt(
        self,
        ranked_files: Iterable[RankedFile],
        diagram_type: DiagramType,
        limits: ContextLimits,
        focus_context: Optional[str] = None,
        custom_prompt: Optional[str] = None,
        included_classes: Optional[list[str]] = None,
    ) -> str:
        """
        Build the full user prompt.

        Args:
            ranked_files: Files ordered by relevance
            diagram_type: Requested diagram type
            limits: File count and content length bounds
            focus_context: Optional area of the code to focus on
            custom_prompt: Optional additional instructions
            included_classes: Optional list of classes to restrict to

        Returns:
            Formatted prompt text
        """
        context = self.build_context(ranked_files, limits, focus_context, included_classes)
        closing = self.templates.CLOSING_REQUEST.format(diagram_type=diagram_type.value)
        return f"{context}\n\n{self.instructions(diagram_type, custom_prompt)}\n\n{closing}"
