"""
PlantUML text normalization module.

This module repairs diagram text from any source (the assembler or a
language model) into a single document with exactly one @startuml
marker on the first line and exactly one @enduml marker on the last.
"""

import re
from typing import Optional

START_MARKER = "@startuml"
END_MARKER = "@enduml"

# A whole line that opens or closes a fenced code block, e.g. ```plantuml
_FENCE_LINE = re.compile(r"^[ \t]*```[\w.+-]*[ \t]*$\n?", re.MULTILINE)

# A closing fence left at the end of a content line, e.g. @enduml```
_TRAILING_FENCE = re.compile(r"```[ \t]*$", re.MULTILINE)

# An end marker immediately followed by a start marker (concatenated diagrams)
_MARKER_SEAM = re.compile(re.escape(END_MARKER) + r"\s*" + re.escape(START_MARKER))

_LEADING_BLANK_LINES = re.compile(r"\A\s*\n")


def _clean_body(text: str) -> str:
    text = _FENCE_LINE.sub("", text)
    text = _TRAILING_FENCE.sub("", text)
    text = _MARKER_SEAM.sub("\n", text)
    text = text.replace(START_MARKER, "")
    text = text.replace(END_MARKER, "")
    text = text.rstrip()
    return _LEADING_BLANK_LINES.sub("", text)


def extract_body(text: Optional[str]) -> str:
    """
    Strip fences and markers from diagram text.

    Cleaning repeats until nothing changes, because removing one token
    can join its neighbours into a new one (e.g. "@start@endumluml").
    Every pass only deletes characters, so the loop terminates.

    Args:
        text: Raw diagram text, possibly None

    Returns:
        The diagram body without markers or fences
    """
    body = text or ""
    while True:
        cleaned = _clean_body(body)
        if cleaned == body:
            return body
        body = cleaned


def normalize(text: Optional[str]) -> str:
    """
    Normalize diagram text into a well-formed PlantUML document.

    The result always matches "@startuml\\n<body>\\n@enduml" with each
    marker present exactly once, and normalize(normalize(x)) equals
    normalize(x). Empty input yields "@startuml\\n\\n@enduml".

    Args:
        text: Raw diagram text

    Returns:
        Normalized PlantUML document
    """
    return f"{START_MARKER}\n{extract_body(text)}\n{END_MARKER}"
