"""
Reporters Layer - 报告层

包含 Rich 终端报告器和 JSON 报告器。
"""

from paver.reporters.base import Reporter
from paver.reporters.rich_reporter import RichReporter
from paver.reporters.json_reporter import JsonReporter

__all__ = [
    "Reporter",
    "RichReporter",
    "JsonReporter",
]
