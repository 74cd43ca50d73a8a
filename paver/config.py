"""
配置模块 - check 命令的运行配置

配置只来自命令行选项和环境变量，不读取配置文件。
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from paver.filters.pathspec_filter import DEFAULT_DOC_PATTERNS


DOCS_ROOT_ENVVAR = "PAVER_DOCS_ROOT"

OutputFormat = Literal["rich", "json"]
OUTPUT_FORMATS: tuple[str, ...] = ("rich", "json")


def validate_output_format(output_format: str) -> None:
    """
    校验输出格式

    Raises:
        ValueError: 未知的输出格式
    """
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format: {output_format} "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
        )


@dataclass
class CheckConfig:
    """
    check 命令配置

    Attributes:
        docs_root: 文档根目录或单个文档
        patterns: 文档文件名的 glob 模式
        respect_gitignore: 是否遵守 .gitignore 规则
        require_verification: 缺少 Verification 章节是否算错误
        output_format: 输出格式 (rich, json)
        verbose: 是否输出详细信息
    """
    docs_root: Path = field(default_factory=lambda: Path("."))
    patterns: tuple[str, ...] = DEFAULT_DOC_PATTERNS
    respect_gitignore: bool = True
    require_verification: bool = False
    output_format: OutputFormat = "rich"
    verbose: bool = False

    def __post_init__(self) -> None:
        validate_output_format(self.output_format)
        if not self.patterns:
            self.patterns = DEFAULT_DOC_PATTERNS
