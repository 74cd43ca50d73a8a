"""
paver - PAVED 文档工具

将 Markdown 文档解析为章节模型，并从 Verification 章节中提取可执行的验证规格。
"""

from paver.core.parser import (
    CodeBlock,
    DocumentDecodeError,
    ParsedDoc,
    Section,
    load_document,
    parse_document,
)
from paver.parsing.commands import extract_commands
from paver.verification.spec import (
    MatcherKind,
    OutputMatcher,
    VerificationItem,
    VerificationSpec,
    extract_verification_spec,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CodeBlock",
    "DocumentDecodeError",
    "ParsedDoc",
    "Section",
    "load_document",
    "parse_document",
    "extract_commands",
    "MatcherKind",
    "OutputMatcher",
    "VerificationItem",
    "VerificationSpec",
    "extract_verification_spec",
]
