"""
RepoUML Package Setup Configuration

This file defines the metadata and dependencies for the 'repouml' package,
which provides a CLI tool for generating PlantUML diagrams from the source
code of a repository, either by heuristic parsing or with a language model.

Key Components:
- CLI entry point: 'repouml=repouml.cli:main'
- Core dependencies: LangChain, OpenAI, PlantUML
- Target audience: Developers documenting existing code bases
- License: MIT License
"""

from setuptools import setup, find_packages

setup(
    name="repouml",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "langchain_openai>=0.0.2",
        "langchain_core>=0.1.0",
        "openai>=1.3.0",
        "plantuml>=0.3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "repouml=repouml.cli:main",
        ],
    },
    description="RepoUML: PlantUML Diagrams from Repository Source Code",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.9",
)
