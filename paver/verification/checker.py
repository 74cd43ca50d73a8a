"""Batch verification-spec checking.

Loads each document, parses it and extracts its verification spec.
Documents are independent: a failure in one is recorded on its result
and never stops the batch.
"""

from dataclasses import dataclass, field
from enum import Enum
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from paver.core.parser import DocumentDecodeError, load_document
from paver.verification.spec import VerificationSpec, extract_verification_spec

logger = logging.getLogger(__name__)


class DocumentStatus(Enum):
    """Per-document check outcome."""
    VERIFIED = "verified"
    MISSING = "missing"
    ERROR = "error"


@dataclass
class DocumentResult:
    """Check result for one document."""
    path: Path
    spec: Optional[VerificationSpec] = None
    error: Optional[str] = None

    @property
    def status(self) -> DocumentStatus:
        if self.error is not None:
            return DocumentStatus.ERROR
        if self.spec is None:
            return DocumentStatus.MISSING
        return DocumentStatus.VERIFIED

    @property
    def command_count(self) -> int:
        return len(self.spec.items) if self.spec else 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "path": str(self.path),
            "status": self.status.value,
            "error": self.error,
            "spec": self.spec.to_dict() if self.spec else None,
        }


@dataclass
class CheckResult:
    """
    Aggregate check result.

    Attributes:
        documents: Per-document results, in input order
        stats: Counters (documents, verified, missing, errors, commands)
    """
    documents: list[DocumentResult] = field(default_factory=list)
    stats: dict[str, int] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.stats.get("errors", 0) == 0


def check_document(path: Path) -> DocumentResult:
    """Load one document and extract its verification spec."""
    try:
        doc = load_document(path)
    except DocumentDecodeError as e:
        logger.warning(str(e))
        return DocumentResult(path=path, error=str(e))
    except OSError as e:
        logger.warning(f"Failed to read {path}: {e}")
        return DocumentResult(path=path, error=f"Failed to read {path}: {e}")

    spec = extract_verification_spec(doc)
    if spec is None:
        logger.debug(f"{path}: no verification spec")
    else:
        logger.debug(f"{path}: {len(spec.items)} verification commands")
    return DocumentResult(path=path, spec=spec)


def check_documents(
    paths: Iterable[Path],
    require_verification: bool = False,
) -> CheckResult:
    """
    Check a batch of documents.

    Args:
        paths: Documents to check
        require_verification: Count documents without a spec as errors

    Returns:
        CheckResult with per-document results and stats
    """
    result = CheckResult(documents=[check_document(path) for path in paths])

    statuses = [doc.status for doc in result.documents]
    missing = statuses.count(DocumentStatus.MISSING)
    errors = statuses.count(DocumentStatus.ERROR)
    if require_verification:
        errors += missing

    result.stats = {
        "documents": len(result.documents),
        "verified": statuses.count(DocumentStatus.VERIFIED),
        "missing": missing,
        "errors": errors,
        "commands": sum(doc.command_count for doc in result.documents),
    }
    return result
