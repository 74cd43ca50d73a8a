"""
代码块分类器 - 判断围栏代码块是否包含可执行的 shell 命令

规则：
1. 语言标记属于 SHELL_LANGUAGES：可执行
2. 无语言标记或未知标记：至少一行以提示符（"$ " 或 "> "）开头时可执行
3. 其他情况：不可执行
"""

from typing import Optional


# 视为 shell 的语言标记（小写比较）
SHELL_LANGUAGES: frozenset[str] = frozenset({
    "bash",
    "sh",
    "shell",
    "zsh",
    "console",
})

# shell 提示符标记
PROMPT_MARKERS: tuple[str, ...] = ("$ ", "> ")


def normalize_language(info: Optional[str]) -> Optional[str]:
    """
    从 fence 信息字符串中取出语言标记

    Args:
        info: 围栏后的信息字符串（如 "bash title=build"）

    Returns:
        第一个单词；为空时返回 None
    """
    if not info:
        return None
    parts = info.split()
    return parts[0] if parts else None


def block_lines(content: str) -> list[str]:
    """
    按 \\n 拆分代码块内容（与 markdown-it 的行号一致）

    \\x0c、\\u2028 等字符不断行；末尾换行后的空串被丢弃。
    """
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def has_prompt_marker(content: str) -> bool:
    """任一行去除首尾空白后以提示符开头"""
    return any(
        line.strip().startswith(PROMPT_MARKERS)
        for line in block_lines(content)
    )


def is_executable_block(language: Optional[str], content: str) -> bool:
    """
    判断代码块是否可执行

    Args:
        language: 语言标记，可能为 None
        content: 代码块内容

    Returns:
        是否应从中提取命令
    """
    if language and language.lower() in SHELL_LANGUAGES:
        return True
    return has_prompt_marker(content)
