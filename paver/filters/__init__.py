"""Document discovery for paver.

This module provides pathspec-based gitignore filtering for
collecting the markdown documents of a project.
"""

from paver.filters.pathspec_filter import (
    DEFAULT_DOC_PATTERNS,
    DEFAULT_IGNORE_PATTERNS,
    PathspecFilter,
    find_documents,
)

__all__ = [
    "DEFAULT_DOC_PATTERNS",
    "DEFAULT_IGNORE_PATTERNS",
    "PathspecFilter",
    "find_documents",
]
