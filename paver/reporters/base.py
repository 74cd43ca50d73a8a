"""
报告器基类 - 定义报告器接口
"""

from typing import Protocol

from paver.core.parser import ParsedDoc
from paver.verification.checker import CheckResult
from paver.verification.spec import VerificationSpec


class Reporter(Protocol):
    """报告器协议"""

    def report(self, result: CheckResult, target: str) -> None:
        """生成报告"""
        ...

    def report_document(self, doc: ParsedDoc, spec: VerificationSpec | None) -> None:
        """输出单个文档"""
        ...
