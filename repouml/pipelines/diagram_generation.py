"""
Diagram generation pipeline implementation.

This module implements the pipeline that turns the code files of a
repository into a PlantUML diagram, either by parsing the files
directly or by asking a language model to draw the diagram.
"""

import os
import logging
from typing import Iterable, Optional, Union

from repouml.config.settings import Settings
from repouml.core.enums import DiagramType
from repouml.core.source_file import SourceFile
from repouml.generators.normalizer import normalize
from repouml.generators.plantuml import PlantUMLAssembler, error_diagram
from repouml.nlp.prompt_builder import ContextLimits, DiagramPromptBuilder
from repouml.nlp.ranking import FileRelevanceRanker
from repouml.pipelines.base_pipeline import Pipeline, PipelineResult
from repouml.utils.diagram_url import DiagramRenderer
from repouml.utils.file_loader import RepositoryFileLoader
from repouml.utils.llm_client import ContextLengthExceededError, LLMClient

logger = logging.getLogger(__name__)

MODE_PARSE = "parse"
MODE_AI = "ai"


class DiagramGenerationPipeline(Pipeline):
    """
    Pipeline for diagram generation from repository code.

    Two paths are available:
    1. parse: heuristic extraction of classes and relationships,
       assembled into a class diagram
    2. ai: files are ranked, packed into a bounded prompt and sent to
       the language model; the reply is normalized

    Both paths end with a PlantUML server URL for the diagram.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        settings: Optional[Settings] = None,
        llm_client: Optional[LLMClient] = None,
    ):
        """
        Initialize the diagram generation pipeline.

        Args:
            api_key: OpenAI API key, required for the ai path
            model_name: LLM model name (defaults to the llm.model_name setting)
            settings: Optional custom settings
            llm_client: Optional preconfigured client, used instead of api_key
        """
        super().__init__("Diagram Generation")
        self.settings = settings or Settings()
        self.api_key = api_key
        self.model_name = model_name or self.settings.get("llm", "model_name")
        self.llm_client = llm_client
        self.files: list[SourceFile] = []

        self.ranker = FileRelevanceRanker()
        self.prompt_builder = DiagramPromptBuilder()
        self.assembler = PlantUMLAssembler(
            title=self.settings.get("output", "title"),
            style=self.settings.get("output", "diagram_style"),
        )
        self.renderer = DiagramRenderer(self.settings.get("output", "server_url"))

    def _get_llm_client(self) -> Optional[LLMClient]:
        """Create the LLM client on first use; None without an API key."""
        if self.llm_client is None and self.api_key:
            self.llm_client = LLMClient(
                api_key=self.api_key,
                model_name=self.model_name,
                max_retries=self.settings.get("llm", "max_retries"),
                retry_delay=self.settings.get("llm", "retry_delay"),
                temperature=self.settings.get("llm", "temperature"),
                max_tokens=self.settings.get("llm", "max_tokens"),
            )
        return self.llm_client

    def setup(
        self,
        path: Optional[str] = None,
        files: Optional[Iterable[SourceFile]] = None,
    ) -> bool:
        """
        Set up the pipeline with the files to analyze.

        Args:
            path: Root of a local repository checkout
            files: In-memory files, used instead of path when given

        Returns:
            True if setup successful, False otherwise
        """
        if files is not None:
            self.files = list(files)
        elif path:
            if not os.path.isdir(path):
                self.add_error(f"Repository path '{path}' not found.")
                return False
            loader = RepositoryFileLoader(
                path,
                max_files=self.settings.get("repository", "max_files"),
                max_file_size=self.settings.get("repository", "max_file_size"),
            )
            self.files = loader.load()
        else:
            self.add_error("Either a repository path or files are required")
            return False

        if not self.files:
            self.add_error("No suitable code files found in the repository")
            return False

        self.add_message(f"Loaded {len(self.files)} code files")
        return True

    def generate_from_code(
        self, files: Iterable[SourceFile], language: Optional[str] = None
    ) -> str:
        """
        Generate a class diagram by parsing the files.

        Args:
            files: Files to parse
            language: Source language (defaults to the output.language setting)

        Returns:
            Normalized PlantUML code
        """
        language = language or self.settings.get("output", "language")
        registry = self.assembler.collect(files, language)
        self.add_metric("class_count", len(registry))
        self.add_metric("relationship_count", len(registry.relationships))
        return self.assembler.render(registry)

    def generate_with_ai(
        self,
        files: Iterable[SourceFile],
        diagram_type: DiagramType = DiagramType.CLASS,
        focus_context: str = "",
        custom_prompt: str = "",
        included_classes: Optional[list[str]] = None,
    ) -> str:
        """
        Generate a diagram with the language model.

        Failures never propagate: a missing API key or a failed model
        call produce a diagram that describes the error.

        Args:
            files: Candidate files
            diagram_type: Requested diagram type
            focus_context: Optional area of the code to focus on
            custom_prompt: Optional additional instructions
            included_classes: Optional list of classes to restrict to

        Returns:
            Normalized PlantUML code
        """
        client = self._get_llm_client()
        if client is None:
            self.add_error("OpenAI API key is missing")
            return error_diagram(
                "AI UML Generation Error",
                ["OpenAI API key is missing", "Please configure your OPENAI_API_KEY"],
            )

        files = list(files)
        focused = bool(focus_context or custom_prompt or included_classes)
        limits, reduced_limits = self._context_limits(focused)

        try:
            try:
                raw = self._request_diagram(
                    client, files, diagram_type, limits,
                    focus_context, custom_prompt, included_classes,
                )
            except ContextLengthExceededError:
                self.add_warning("Context length exceeded, trying with reduced context")
                raw = self._request_diagram(
                    client, files, diagram_type, reduced_limits,
                    focus_context, custom_prompt, included_classes,
                )
        except Exception as e:
            self.add_error(f"Error generating AI UML diagram: {str(e)}")
            return error_diagram("UML Generation Error", [f"Error: {str(e)}"])

        return normalize(raw)

    def _context_limits(self, focused: bool) -> tuple[ContextLimits, ContextLimits]:
        """
        Get the normal and reduced prompt limits from the settings.

        Args:
            focused: Whether focus, classes or custom instructions were given

        Returns:
            Tuple containing (limits, reduced_limits)
        """
        max_files = self.settings.get("prompt", "max_files")
        reduced_max_files = self.settings.get("prompt", "reduced_max_files")

        if not focused:
            return (
                ContextLimits.uniform(max_files, self.settings.get("prompt", "content_length")),
                ContextLimits.uniform(
                    reduced_max_files, self.settings.get("prompt", "reduced_content_length")
                ),
            )

        threshold = self.settings.get("prompt", "high_relevance_threshold")
        lengths = self.settings.get("prompt", "focused_content_length")
        reduced = self.settings.get("prompt", "reduced_focused_content_length")
        return (
            ContextLimits(max_files, lengths["high"], lengths["low"], threshold),
            ContextLimits(reduced_max_files, reduced["high"], reduced["low"], threshold),
        )

    def _request_diagram(
        self,
        client: LLMClient,
        files: list[SourceFile],
        diagram_type: DiagramType,
        limits: ContextLimits,
        focus_context: str,
        custom_prompt: str,
        included_classes: Optional[list[str]],
    ) -> str:
        ranked = self.ranker.rank(files, focus_context, included_classes)
        prompt = self.prompt_builder.build_user_prompt(
            ranked,
            diagram_type,
            limits,
            focus_context=focus_context,
            custom_prompt=custom_prompt,
            included_classes=included_classes,
        )
        logger.info(
            "Requesting %s diagram for %d of %d files",
            diagram_type.value, min(limits.max_files, len(ranked)), len(ranked),
        )
        return client.call(prompt, self.prompt_builder.system_prompt(diagram_type))

    def execute(
        self,
        mode: str = MODE_PARSE,
        path: Optional[str] = None,
        files: Optional[Iterable[SourceFile]] = None,
        language: Optional[str] = None,
        diagram_type: Union[str, DiagramType] = DiagramType.CLASS,
        focus_context: str = "",
        custom_prompt: str = "",
        included_classes: Optional[list[str]] = None,
        output_dir: Optional[str] = None,
        diagram_name: str = "repository",
    ) -> PipelineResult:
        """
        Execute the diagram generation pipeline.

        Args:
            mode: "parse" or "ai"
            path: Root of a local repository checkout
            files: In-memory files, used instead of path when given
            language: Source language for the parse path
            diagram_type: Requested diagram type for the ai path
            focus_context: Optional area of the code to focus on
            custom_prompt: Optional additional instructions
            included_classes: Optional list of classes to restrict to
            output_dir: Directory to save the .puml file, if any
            diagram_name: Prefix of the saved file name

        Returns:
            Pipeline execution result
        """
        self._start_execution()

        if not self.setup(path=path, files=files):
            return self.create_result(False)

        try:
            diagram_type = DiagramType(diagram_type)
        except ValueError:
            self.add_error(f"Unsupported diagram type: {diagram_type}")
            return self.create_result(False)

        if mode == MODE_PARSE:
            if diagram_type != DiagramType.CLASS:
                self.add_warning("Parse mode only produces class diagrams")
                diagram_type = DiagramType.CLASS
            plantuml_code = self.generate_from_code(self.files, language)
        elif mode == MODE_AI:
            plantuml_code = self.generate_with_ai(
                self.files, diagram_type, focus_context, custom_prompt, included_classes
            )
        else:
            self.add_error(f"Unknown mode: {mode}")
            return self.create_result(False)

        outputs = self.renderer.render(plantuml_code)
        outputs["analyzed_files"] = len(self.files)

        if output_dir:
            plantuml_file = os.path.join(
                output_dir, f"{diagram_name}_{diagram_type.value}_diagram.puml"
            )
            try:
                os.makedirs(output_dir, exist_ok=True)
                with open(plantuml_file, "w", encoding="utf-8") as f:
                    f.write(outputs["plantuml_code"])
                outputs["plantuml_file"] = plantuml_file
                self.add_message(f"PlantUML diagram saved to {plantuml_file}")
            except OSError as e:
                self.add_error(f"Failed to save diagram: {str(e)}")

        return self.create_result(not self.has_errors(), outputs)
