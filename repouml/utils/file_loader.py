"""
Repository file loading utilities.
"""

import os
import re
import logging
from typing import Iterable

from repouml.core.source_file import SourceFile

logger = logging.getLogger(__name__)

CODE_EXTENSIONS = (
    ".java", ".js", ".jsx", ".ts", ".tsx", ".py", ".cs", ".php",
    ".rb", ".go", ".swift", ".kt", ".cpp", ".c", ".h",
)

EXCLUDE_PATTERNS = [
    re.compile(pattern)
    for pattern in (
        r"node_modules", r"\.git", r"\.vscode", r"\.idea", r"dist/", r"build/",
        r"\.env", r"package-lock\.json", r"yarn\.lock", r"test",
        r"\.md$", r"\.json$", r"\.css$", r"\.scss$", r"\.html$",
        r"\.svg$", r"\.png$", r"\.jpg$", r"\.jpeg$", r"\.gif$",
    )
]


def is_code_file(path: str) -> bool:
    """
    Check if a repository path points to a code file worth analyzing.

    Args:
        path: Repository-relative path using "/" separators

    Returns:
        True if the path has a code extension and no excluded segment
    """
    name = path.rsplit("/", 1)[-1].lower()
    if not name.endswith(CODE_EXTENSIONS):
        return False
    return not any(pattern.search(path) for pattern in EXCLUDE_PATTERNS)


class RepositoryFileLoader:
    """Loads source files from a local repository checkout."""

    def __init__(self, root: str, max_files: int = 15, max_file_size: int = 100000):
        """
        Initialize the file loader.

        Args:
            root: Root directory of the repository
            max_files: Maximum number of code files to read
            max_file_size: Files larger than this many bytes are skipped
        """
        self.root = root
        self.max_files = max_files
        self.max_file_size = max_file_size

    def list_files(self) -> list[str]:
        """
        List all files under the root.

        Returns:
            Sorted repository-relative paths using "/" separators
        """
        if not os.path.isdir(self.root):
            return []

        paths = []
        for directory, _, filenames in os.walk(self.root):
            for filename in filenames:
                full_path = os.path.join(directory, filename)
                relative = os.path.relpath(full_path, self.root)
                paths.append(relative.replace(os.sep, "/"))
        return sorted(paths)

    def filter_code_files(self, paths: Iterable[str]) -> list[str]:
        """
        Keep code files and drop excluded paths.

        Args:
            paths: Repository-relative paths

        Returns:
            Paths of code files, in input order
        """
        return [path for path in paths if is_code_file(path)]

    def load(self) -> list[SourceFile]:
        """
        Read the code files of the repository.

        Only the first max_files code files are considered; oversized
        and unreadable files are skipped.

        Returns:
            list of SourceFile records
        """
        code_files = self.filter_code_files(self.list_files())
        logger.info("Found %d code files under %s", len(code_files), self.root)

        files = []
        for path in code_files[:self.max_files]:
            full_path = os.path.join(self.root, *path.split("/"))
            try:
                size = os.path.getsize(full_path)
                if size > self.max_file_size:
                    logger.info("Skipping large file %s (%d bytes)", path, size)
                    continue

                with open(full_path, "r", encoding="utf-8", errors="replace") as f:
                    content = f.read()
            except OSError as e:
                logger.error("Error reading %s: %s", path, str(e))
                continue

            files.append(
                SourceFile(
                    name=path.rsplit("/", 1)[-1],
                    path=path,
                    content=content,
                    size=size,
                )
            )

        return files
