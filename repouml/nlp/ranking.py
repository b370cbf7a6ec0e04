"""
File relevance ranking module.

This module scores retrieved files against an optional focus phrase
and an optional list of class names, so that the most relevant files
are the ones kept when a prompt has to be cut down to a fixed number
of files.
"""

import re
import logging
from typing import Iterable, Optional

from repouml.core.source_file import RankedFile, SourceFile

logger = logging.getLogger(__name__)


class FileRelevanceRanker:
    """
    Deterministic relevance scorer for source files.

    Each focus term longer than MIN_TERM_LENGTH characters adds
    PATH_MATCH_SCORE when it appears in the file path, and
    OCCURRENCE_SCORE per occurrence in the content up to
    MAX_OCCURRENCE_SCORE. Each class name adds DECLARATION_SCORE when the
    content declares it and USAGE_SCORE when the content mentions it.
    The total is capped at MAX_SCORE.
    """

    NEUTRAL_SCORE = 0.5
    MIN_TERM_LENGTH = 3
    PATH_MATCH_SCORE = 0.4
    OCCURRENCE_SCORE = 0.03
    MAX_OCCURRENCE_SCORE = 0.3
    DECLARATION_SCORE = 0.7
    USAGE_SCORE = 0.3
    MAX_SCORE = 1.0

    def rank(
        self,
        files: Optional[Iterable[SourceFile]],
        focus_phrase: Optional[str] = "",
        explicit_class_names: Optional[Iterable[str]] = None,
    ) -> list[RankedFile]:
        """
        Rank files by relevance.

        Args:
            files: Candidate files
            focus_phrase: Free-text description of the area of interest
            explicit_class_names: Class names the caller wants included

        Returns:
            Files with scores, highest first; equal scores keep input order
        """
        files = list(files or [])
        class_names = [name for name in (explicit_class_names or []) if name]
        terms = self.focus_terms(focus_phrase)

        if not (focus_phrase or "").strip() and not class_names:
            return [RankedFile.from_source(f, self.NEUTRAL_SCORE) for f in files]

        ranked = [
            RankedFile.from_source(f, self.score_file(f, terms, class_names))
            for f in files
        ]
        # sorted() is stable, which keeps truncation to a prefix deterministic
        ranked = sorted(ranked, key=lambda f: f.relevance_score, reverse=True)

        logger.debug(
            "Ranked %d files for focus %r and %d class names",
            len(ranked), focus_phrase, len(class_names),
        )
        return ranked

    def focus_terms(self, focus_phrase: Optional[str]) -> list[str]:
        """Split a focus phrase into lowercase terms worth matching."""
        return [
            term for term in (focus_phrase or "").lower().split()
            if len(term) > self.MIN_TERM_LENGTH
        ]

    def score_file(
        self, source: SourceFile, terms: list[str], class_names: list[str]
    ) -> float:
        """
        Score a single file.

        Args:
            source: File to score
            terms: Lowercase focus terms
            class_names: Explicit class names

        Returns:
            Relevance score in [0.0, 1.0]
        """
        score = 0.0
        lower_path = source.path.lower()
        content = source.content or ""

        for term in terms:
            if term in lower_path:
                score += self.PATH_MATCH_SCORE
            occurrences = len(re.findall(re.escape(term), content, re.IGNORECASE))
            score += min(self.MAX_OCCURRENCE_SCORE, occurrences * self.OCCURRENCE_SCORE)

        for name in class_names:
            escaped = re.escape(name)
            if re.search(rf"(class|interface)\s+{escaped}\b", content, re.IGNORECASE):
                score += self.DECLARATION_SCORE
            if re.search(rf"\b{escaped}\b", content, re.IGNORECASE):
                score += self.USAGE_SCORE

        return min(self.MAX_SCORE, score)


def rank(
    files: Optional[Iterable[SourceFile]],
    focus_phrase: Optional[str] = "",
    explicit_class_names: Optional[Iterable[str]] = None,
) -> list[RankedFile]:
    """Rank files with the default scorer."""
    return FileRelevanceRanker().rank(files, focus_phrase, explicit_class_names)
