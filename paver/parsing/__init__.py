"""
Parsing Layer - 解析层

负责从可执行代码块中提取命令。
"""

from paver.parsing.commands import extract_commands

__all__ = [
    "extract_commands",
]
