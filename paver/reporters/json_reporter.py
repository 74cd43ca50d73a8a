"""
JSON 报告器 - 输出 JSON 格式报告
"""

import json
import sys
from typing import TextIO

from paver.core.parser import ParsedDoc
from paver.verification.checker import CheckResult
from paver.verification.spec import VerificationSpec


class JsonReporter:
    """JSON 报告器"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def report(self, result: CheckResult, target: str) -> None:
        """生成 JSON 格式报告"""
        report_data = {
            "target": target,
            "documents": [doc.to_dict() for doc in result.documents],
            "stats": result.stats,
            "summary": {
                "total_documents": result.stats.get("documents", 0),
                "errors": result.stats.get("errors", 0),
                "passed": result.passed,
            },
        }

        self._dump(report_data)

    def report_document(self, doc: ParsedDoc, spec: VerificationSpec | None) -> None:
        """输出单个文档的章节和验证规格"""
        self._dump({
            "path": str(doc.path),
            "sections": [
                {
                    "name": section.name,
                    "level": section.level,
                    "start_line": section.start_line,
                    "code_blocks": [
                        {
                            "language": block.language,
                            "line_number": block.line_number,
                            "is_executable": block.is_executable,
                        }
                        for block in section.code_blocks
                    ],
                }
                for section in doc.sections
            ],
            "spec": spec.to_dict() if spec else None,
        })

    def _dump(self, data: dict) -> None:
        json_str = json.dumps(data, indent=2, ensure_ascii=False)
        print(json_str, file=self.output)
