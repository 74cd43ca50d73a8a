"""Pathspec-based document discovery.

This module uses the pathspec library for gitignore handling (negation
patterns, double-star globs, nested gitignore files) when collecting the
markdown documents of a project.
"""

import logging
from pathlib import Path
from typing import Iterable

import pathspec

logger = logging.getLogger(__name__)


# Default ignore patterns when no .gitignore exists
DEFAULT_IGNORE_PATTERNS: list[str] = [
    "node_modules/",
    "venv/",
    ".venv/",
    "__pycache__/",
    ".git/",
    "dist/",
    "build/",
    "vendor/",
    ".idea/",
    ".vscode/",
    "*.egg-info/",
    ".tox/",
    ".pytest_cache/",
    ".mypy_cache/",
    "target/",  # Rust/Java
]

DEFAULT_DOC_PATTERNS: tuple[str, ...] = ("*.md",)


def _read_spec(gitignore_path: Path) -> "pathspec.GitIgnoreSpec | None":
    try:
        lines = gitignore_path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read {gitignore_path}: {e}")
        return None
    return pathspec.GitIgnoreSpec.from_lines(lines)


class PathspecFilter:
    """File filter based on pathspec library with nested gitignore support."""

    def __init__(self, root: Path, include_nested: bool = True):
        """
        Initialize the filter.

        Args:
            root: Documentation root path
            include_nested: Whether to include nested .gitignore files
        """
        self.root = root
        self._include_nested = include_nested
        self._root_spec = self._load_gitignore()
        self._nested_specs: dict[Path, pathspec.GitIgnoreSpec] = {}
        if include_nested:
            self._load_nested_gitignores()

    def _load_gitignore(self) -> pathspec.GitIgnoreSpec:
        """Load root .gitignore file, falling back to the default patterns."""
        gitignore_path = self.root / ".gitignore"
        spec = _read_spec(gitignore_path) if gitignore_path.is_file() else None
        if spec is None:
            spec = pathspec.GitIgnoreSpec.from_lines(DEFAULT_IGNORE_PATTERNS)
        return spec

    def _load_nested_gitignores(self) -> None:
        """Load nested .gitignore files from subdirectories."""
        for gitignore_path in self.root.rglob(".gitignore"):
            if gitignore_path.parent == self.root:
                continue  # root already loaded
            spec = _read_spec(gitignore_path)
            if spec is not None:
                self._nested_specs[gitignore_path.parent] = spec

    def should_ignore(self, path: Path) -> bool:
        """
        Check if a file should be ignored.

        The root .gitignore applies to every file; a nested .gitignore
        applies to files in its directory and below, deepest first.
        """
        try:
            relative = path.relative_to(self.root)
        except ValueError:
            if path.is_absolute():
                return False
            relative = path

        if self._root_spec.match_file(relative.as_posix()):
            return True

        if not self._include_nested:
            return False

        sorted_dirs = sorted(
            self._nested_specs,
            key=lambda p: len(p.parts),
            reverse=True,
        )
        for gitignore_dir in sorted_dirs:
            try:
                local = (self.root / relative).relative_to(gitignore_dir)
            except ValueError:
                continue
            if self._nested_specs[gitignore_dir].match_file(local.as_posix()):
                return True

        return False

    def filter_paths(self, paths: Iterable[Path]) -> list[Path]:
        """Filter paths, returning those that should NOT be ignored."""
        return [p for p in paths if not self.should_ignore(p)]


def find_documents(
    root: Path,
    patterns: Iterable[str] = DEFAULT_DOC_PATTERNS,
    respect_gitignore: bool = True,
) -> list[Path]:
    """
    Collect the markdown documents under a root.

    Args:
        root: Directory to search, or a single document
        patterns: Glob patterns matched against file names
        respect_gitignore: Skip files ignored by .gitignore rules

    Returns:
        Sorted list of document paths
    """
    if root.is_file():
        return [root]

    found: set[Path] = set()
    for pattern in patterns:
        found.update(p for p in root.rglob(pattern) if p.is_file())

    documents = sorted(found)
    if respect_gitignore:
        documents = PathspecFilter(root).filter_paths(documents)

    logger.debug(f"Found {len(documents)} documents under {root}")
    return documents
