"""Verification module.

This module provides extraction of verification specs from PAVED
documents and batch checking over a set of documents.
"""

from paver.verification.spec import (
    DEFAULT_EXIT_CODE,
    DEFAULT_TIMEOUT_SECS,
    VERIFICATION_SECTION,
    MatcherKind,
    OutputMatcher,
    VerificationItem,
    VerificationSpec,
    extract_verification_spec,
)
from paver.verification.checker import (
    CheckResult,
    DocumentResult,
    DocumentStatus,
    check_document,
    check_documents,
)

__all__ = [
    # spec
    "DEFAULT_EXIT_CODE",
    "DEFAULT_TIMEOUT_SECS",
    "VERIFICATION_SECTION",
    "MatcherKind",
    "OutputMatcher",
    "VerificationItem",
    "VerificationSpec",
    "extract_verification_spec",
    # checker
    "CheckResult",
    "DocumentResult",
    "DocumentStatus",
    "check_document",
    "check_documents",
]
