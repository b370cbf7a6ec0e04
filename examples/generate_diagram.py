"""
Simple diagram generation example.

This example demonstrates how to use the repouml package to generate
a PlantUML diagram from a local repository checkout.
"""

import os
import argparse
from repouml.pipelines.diagram_generation import DiagramGenerationPipeline
from repouml.config.settings import Settings

def main():
    """Run the example."""
    # Parse command line arguments
    parser = argparse.ArgumentParser(description="Diagram Generation Example")

    parser.add_argument(
        "--path",
        type=str,
        required=True,
        help="Path to the repository checkout"
    )

    parser.add_argument(
        "--api-key",
        type=str,
        default=os.environ.get("OPENAI_API_KEY"),
        help="OpenAI API key (defaults to OPENAI_API_KEY environment variable)"
    )

    parser.add_argument(
        "--focus",
        type=str,
        default="",
        help="Area of the code to focus on"
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        default="output",
        help="Directory to save output files"
    )

    args = parser.parse_args()

    # Configure settings
    settings = Settings()
    settings.set("output", "diagram_style", "vibrant")

    # Without an API key only the parse path is available
    mode = "ai" if args.api_key else "parse"

    pipeline = DiagramGenerationPipeline(
        api_key=args.api_key,
        settings=settings
    )

    print(f"Generating diagram for {args.path} in {mode} mode...")
    result = pipeline.execute(
        mode=mode,
        path=args.path,
        focus_context=args.focus,
        output_dir=args.output_dir
    )

    if result.success:
        print("\nDiagram generated successfully!")
        print(f"Execution time: {result.execution_time:.2f} seconds")
        print(f"Analyzed files: {result.outputs['analyzed_files']}")
        print(f"Diagram URL: {result.outputs['diagram_url']}")
        if "plantuml_file" in result.outputs:
            print(f"PlantUML file: {result.outputs['plantuml_file']}")
    else:
        print("\nDiagram generation failed.")
        for message in result.errors:
            print(f"  {message}")

if __name__ == "__main__":
    main()
