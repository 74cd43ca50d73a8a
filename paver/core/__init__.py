"""
Core Layer - 核心层

包含 Markdown 章节模型和代码块分类器。
"""

from paver.core.classifier import (
    PROMPT_MARKERS,
    SHELL_LANGUAGES,
    block_lines,
    has_prompt_marker,
    is_executable_block,
    normalize_language,
)
from paver.core.parser import (
    CodeBlock,
    DocumentDecodeError,
    ParsedDoc,
    Section,
    load_document,
    parse_document,
)

__all__ = [
    # classifier
    "PROMPT_MARKERS",
    "SHELL_LANGUAGES",
    "block_lines",
    "has_prompt_marker",
    "is_executable_block",
    "normalize_language",
    # parser
    "CodeBlock",
    "DocumentDecodeError",
    "ParsedDoc",
    "Section",
    "load_document",
    "parse_document",
]
