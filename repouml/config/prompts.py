"""
Prompt templates for diagram generation.

This module provides the prompt templates used when a diagram is
requested from a language model, keeping the wording in one place so
it can be reviewed and overridden.
"""

from typing import Dict, Optional

from repouml.core.enums import DiagramType


class PromptTemplates:
    """
    Manages prompt templates for diagram generation.

    This class provides centralized storage and access to the system
    prompt, the per-diagram-type instructions and the closing request
    used in LLM prompts, with support for overrides.
    """

    # System prompt
    DEFAULT_SYSTEM_PROMPT = """You are an expert software architect who specializes in creating concise UML diagrams.
Focus only on the most essential elements and relationships. Return ONLY valid last version of PlantUML code without any explanations.
You are generating a {diagram_type} diagram. Pay special attention to the diagram type syntax:
- For class diagrams: Use class definitions with attributes and methods, and relationship arrows
- For sequence diagrams: Use actor/participant definitions and arrows with messages between them showing time-ordered interactions
- For activity diagrams: Use start/stop nodes, activities, decisions, and transitions
- For component diagrams: Use components, interfaces, and dependencies

Remember to use the specific PlantUML syntax required for {diagram_type} diagrams."""

    # Instructions per diagram type
    DEFAULT_INSTRUCTIONS = {
        DiagramType.CLASS: (
            "Create a concise class diagram showing only essential classes, attributes, "
            "methods, and relationships. Focus on clarity over completeness."
        ),
        DiagramType.SEQUENCE: (
            "Create a sequence diagram showing key interactions between components. "
            "Be concise and focus on main flow. Use proper PlantUML sequence diagram "
            "syntax with participants and message arrows. DO NOT create a class diagram."
        ),
        DiagramType.ACTIVITY: (
            "Create a simplified activity diagram showing the main application flow."
        ),
        DiagramType.COMPONENT: (
            "Create a component diagram showing major components and dependencies only."
        ),
    }

    CONTEXT_HEADER = "Analyze these code files and create a PlantUML diagram"
    FOCUS_CLAUSE = " focusing specifically on the {focus_context} functionality"
    FILE_SECTION = "--- {path} ---\n{content}\n\n"
    TRUNCATION_SUFFIX = "\n... (content truncated)"
    INCLUDED_CLASSES = "\nIMPORTANT: Include ONLY these classes in the diagram: {class_names}\n\n"
    ADDITIONAL_INSTRUCTIONS = " Additional instructions: {custom_prompt}"
    CLOSING_REQUEST = (
        "Create a minimal but accurate PlantUML {diagram_type} diagram. "
        "Respond with valid PlantUML code only"
    )

    def __init__(
        self,
        system_prompt: Optional[str] = None,
        instructions: Optional[Dict[DiagramType, str]] = None,
    ):
        """
        Initialize prompt templates.

        Args:
            system_prompt: Optional override of the system prompt template
            instructions: Optional overrides of per-type instructions
        """
        self.system_prompt = system_prompt or self.DEFAULT_SYSTEM_PROMPT
        self.instructions = dict(self.DEFAULT_INSTRUCTIONS)
        if instructions:
            self.instructions.update(instructions)

    def get_system_prompt(self, diagram_type: DiagramType) -> str:
        """
        Get the system prompt for a diagram type.

        Args:
            diagram_type: Requested diagram type

        Returns:
            Formatted system prompt
        """
        return self.system_prompt.format(diagram_type=diagram_type.value)

    def get_instructions(self, diagram_type: DiagramType) -> str:
        """
        Get the instruction sentence for a diagram type.

        Args:
            diagram_type: Requested diagram type

        Returns:
            Instruction text, empty if none is registered
        """
        return self.instructions.get(diagram_type, "")
