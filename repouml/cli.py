"""
Command-line interface for the RepoUML tool.

This module provides the entry point for command-line usage, allowing
users to generate PlantUML diagrams from a local repository checkout.
"""

import os
import argparse
import logging

from repouml.config.settings import Settings
from repouml.core.enums import DiagramType
from repouml.pipelines.diagram_generation import MODE_AI, MODE_PARSE, DiagramGenerationPipeline


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the repouml command."""
    parser = argparse.ArgumentParser(
        description="RepoUML: Generate PlantUML diagrams from repository source code"
    )

    parser.add_argument(
        "--path",
        type=str,
        required=True,
        help="Path to the repository checkout"
    )

    parser.add_argument(
        "--mode",
        type=str,
        choices=[MODE_PARSE, MODE_AI],
        default=MODE_PARSE,
        help="Parse the code directly or ask the language model"
    )

    parser.add_argument(
        "--language",
        type=str,
        default=None,
        help="Source language for parse mode (java, typescript, javascript)"
    )

    parser.add_argument(
        "--diagram-type",
        type=str,
        choices=[t.value for t in DiagramType],
        default=DiagramType.CLASS.value,
        help="Diagram type for ai mode"
    )

    parser.add_argument(
        "--focus",
        type=str,
        default="",
        help="Area of the code to focus on"
    )

    parser.add_argument(
        "--classes",
        type=str,
        default="",
        help="Comma-separated class names to include"
    )

    parser.add_argument(
        "--prompt",
        type=str,
        default="",
        help="Additional instructions for the language model"
    )

    parser.add_argument(
        "--api-key",
        type=str,
        default=os.environ.get("OPENAI_API_KEY"),
        help="OpenAI API key (defaults to OPENAI_API_KEY environment variable)"
    )

    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="LLM model name"
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Output directory for the .puml file"
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a JSON settings file"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def main(argv=None):
    """Main entry point for the repouml command-line interface."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    settings = Settings(args.config)
    output_dir = args.output_dir or settings.get("output", "output_directory")
    included_classes = [name.strip() for name in args.classes.split(",") if name.strip()]

    pipeline = DiagramGenerationPipeline(
        api_key=args.api_key,
        model_name=args.model,
        settings=settings
    )

    result = pipeline.execute(
        mode=args.mode,
        path=args.path,
        language=args.language,
        diagram_type=args.diagram_type,
        focus_context=args.focus,
        custom_prompt=args.prompt,
        included_classes=included_classes or None,
        output_dir=output_dir,
        diagram_name=os.path.basename(os.path.abspath(args.path)) or "repository"
    )

    for error in result.errors:
        print(error)

    if "diagram_url" in result.outputs:
        print(f"Diagram URL: {result.outputs['diagram_url']}")
    if "plantuml_file" in result.outputs:
        print(f"PlantUML file: {result.outputs['plantuml_file']}")

    return 0 if result.success else 1


if __name__ == "__main__":
    exit(main())
