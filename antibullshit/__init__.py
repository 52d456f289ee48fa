"""
Anti-Bullshit — Claim Analysis and Manipulation Detection Tools

Classifies claims against four epistemological frameworks and
suggests how to cross-check them. Deterministic, regex-based,
no network calls.

Public API:
  - dispatch:                  Run a tool by name (analyze_claim, validate_sources, check_manipulation)
  - FRAMEWORKS:                The rubric table (empirical, responsible, harmonic, pluralistic)
  - validate_with_framework:   Requirements + confidence for a claim
  - get_validation_suggestions: One verification line per requirement
  - detect_evidence:           Evidence flags for a claim
  - extract_sources:           Citation-like phrases with surrounding context
  - detect_manipulation:       Manipulation tactics present in text

Usage:
    from antibullshit import dispatch
    result = dispatch("analyze_claim", {"text": "...", "framework": "empirical"})
    print(result.text)
"""

__version__ = "0.1.0"

from antibullshit.frameworks import (
    FRAMEWORKS,
    EvidenceFlags,
    Framework,
    ValidationResult,
    get_framework,
    get_validation_suggestions,
    list_frameworks,
    validate_with_framework,
)
from antibullshit.detector import (
    DetectedSource,
    detect_evidence,
    detect_manipulation,
    extract_sources,
)
from antibullshit.errors import (
    InternalError,
    InvalidArgumentError,
    MethodNotFoundError,
    ToolError,
)
from antibullshit.tools import TOOLS, ToolResult, dispatch

__all__ = [
    "FRAMEWORKS",
    "EvidenceFlags",
    "Framework",
    "ValidationResult",
    "get_framework",
    "get_validation_suggestions",
    "list_frameworks",
    "validate_with_framework",
    "DetectedSource",
    "detect_evidence",
    "detect_manipulation",
    "extract_sources",
    "InternalError",
    "InvalidArgumentError",
    "MethodNotFoundError",
    "ToolError",
    "TOOLS",
    "ToolResult",
    "dispatch",
]
