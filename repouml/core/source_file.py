"""
Source file records.

This module defines the immutable SourceFile record produced by the
file retrieval layer and the RankedFile produced by relevance ranking.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceFile:
    """
    A retrieved source file.

    Attributes:
        name: Base name of the file (e.g. "Customer.java")
        path: Repository-relative path using "/" separators
        content: Decoded text content
        size: Size of the file in bytes as reported by the source
    """

    name: str
    path: str
    content: str
    size: int = 0


@dataclass(frozen=True)
class RankedFile(SourceFile):
    """A SourceFile annotated with a relevance score in [0.0, 1.0]."""

    relevance_score: float = 0.0

    @classmethod
    def from_source(cls, source: SourceFile, relevance_score: float) -> "RankedFile":
        return cls(
            name=source.name,
            path=source.path,
            content=source.content,
            size=source.size,
            relevance_score=relevance_score,
        )
