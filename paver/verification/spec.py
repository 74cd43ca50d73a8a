"""Verification specification model.

This module defines the structured verification data extracted from the
``Verification`` section of a PAVED document, and the builder that
produces it from a parsed document.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
import re
from typing import Any, Optional

from paver.core.parser import ParsedDoc
from paver.parsing.commands import extract_commands


VERIFICATION_SECTION = "Verification"
DEFAULT_EXIT_CODE = 0
DEFAULT_TIMEOUT_SECS = 30


class MatcherKind(Enum):
    """Output matching policy."""
    CONTAINS = "contains"
    REGEX = "regex"
    EXIT_CODE_ONLY = "exit_code_only"


@dataclass(frozen=True)
class OutputMatcher:
    """Matcher for verifying command output."""
    kind: MatcherKind
    value: Optional[str] = None

    @classmethod
    def contains(cls, substring: str) -> "OutputMatcher":
        return cls(MatcherKind.CONTAINS, substring)

    @classmethod
    def regex(cls, pattern: str) -> "OutputMatcher":
        return cls(MatcherKind.REGEX, pattern)

    @classmethod
    def exit_code_only(cls) -> "OutputMatcher":
        return cls(MatcherKind.EXIT_CODE_ONLY)

    def matches(self, output: str) -> bool:
        """
        Apply the policy to captured stdout.

        Raises:
            re.error: The regex pattern is invalid
        """
        if self.kind is MatcherKind.CONTAINS:
            return (self.value or "") in output
        if self.kind is MatcherKind.REGEX:
            return re.search(self.value or "", output) is not None
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OutputMatcher":
        return cls(MatcherKind(data["kind"]), data.get("value"))


@dataclass(frozen=True)
class VerificationItem:
    """A single command to execute and the outcome it should produce."""
    command: str
    working_dir: Optional[Path] = None
    expected_exit_code: Optional[int] = DEFAULT_EXIT_CODE
    expected_output: Optional[OutputMatcher] = None
    timeout_secs: Optional[int] = DEFAULT_TIMEOUT_SECS

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "command": self.command,
            "working_dir": str(self.working_dir) if self.working_dir else None,
            "expected_exit_code": self.expected_exit_code,
            "expected_output": (
                self.expected_output.to_dict() if self.expected_output else None
            ),
            "timeout_secs": self.timeout_secs,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VerificationItem":
        """Deserialize from dictionary."""
        working_dir = data.get("working_dir")
        expected_output = data.get("expected_output")
        return cls(
            command=data["command"],
            working_dir=Path(working_dir) if working_dir else None,
            expected_exit_code=data.get("expected_exit_code", DEFAULT_EXIT_CODE),
            expected_output=(
                OutputMatcher.from_dict(expected_output) if expected_output else None
            ),
            timeout_secs=data.get("timeout_secs", DEFAULT_TIMEOUT_SECS),
        )


@dataclass(frozen=True)
class VerificationSpec:
    """Verification commands extracted from one document."""
    source_file: Path
    section_line: int
    items: tuple[VerificationItem, ...]

    @property
    def commands(self) -> list[str]:
        return [item.command for item in self.items]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "source_file": str(self.source_file),
            "section_line": self.section_line,
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VerificationSpec":
        """Deserialize from dictionary."""
        return cls(
            source_file=Path(data["source_file"]),
            section_line=data["section_line"],
            items=tuple(VerificationItem.from_dict(item) for item in data["items"]),
        )


def extract_verification_spec(doc: ParsedDoc) -> Optional[VerificationSpec]:
    """
    Extract a verification specification from a parsed document.

    Only executable code blocks contribute commands. Every item carries the
    default expectations (exit code 0, 30 second timeout, no output matcher).

    Args:
        doc: Parsed document

    Returns:
        The spec, or None when the document has no Verification section,
        the section has no code blocks, or no command was found
    """
    section = doc.get_section(VERIFICATION_SECTION)
    if section is None or not section.code_blocks:
        return None

    items = [
        VerificationItem(command=command)
        for block in section.code_blocks
        if block.is_executable
        for command in extract_commands(block.content)
    ]

    if not items:
        return None

    return VerificationSpec(
        source_file=doc.path,
        section_line=section.start_line,
        items=tuple(items),
    )
