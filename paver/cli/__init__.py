"""
CLI Layer - 命令行接口层

提供命令行入口。
"""

from paver.cli.app import app, check, show, version

__all__ = [
    "app",
    "check",
    "show",
    "version",
]
