"""
Validation Frameworks — The Rubric Table

Four fixed epistemological rubrics. Each one defines:
  1. The requirements a claim must meet under that tradition
  2. How much confidence the detected evidence earns

The table is frozen. Requirements and confidence rules are code,
not configuration, and cannot change at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class EvidenceFlags:
    """Keyword evidence signals detected in a claim."""
    has_empirical: bool = False
    serves_wellbeing: bool = False
    maintains_harmony: bool = False


@dataclass(frozen=True)
class ValidationResult:
    """Requirements and confidence for one claim under one framework."""
    requirements: list[str]
    confidence: str             # "low", "medium", "high"


@dataclass(frozen=True)
class Framework:
    """
    A validation framework. The requirement list is fixed and ordered;
    the confidence function maps EvidenceFlags to a coarse label.
    """
    name: str
    description: str
    requirements: tuple[str, ...]
    confidence: Callable[[EvidenceFlags], str]

    def validate_claim(self, claim: str) -> list[str]:
        # Requirements do not depend on the claim text.
        return list(self.requirements)


# ============================================================
# CONFIDENCE RULES
# ============================================================

def _single_flag(attr: str) -> Callable[[EvidenceFlags], str]:
    def confidence(evidence: EvidenceFlags) -> str:
        return "high" if getattr(evidence, attr) else "low"
    return confidence


def _pluralistic_confidence(evidence: EvidenceFlags) -> str:
    scores = [
        1 if evidence.has_empirical else 0,
        1 if evidence.serves_wellbeing else 0,
        1 if evidence.maintains_harmony else 0,
    ]
    avg = sum(scores) / len(scores)
    if avg > 0.7:
        return "high"
    if avg > 0.3:
        return "medium"
    return "low"


# ============================================================
# THE TABLE
# ============================================================

FRAMEWORKS: dict[str, Framework] = {
    "empirical": Framework(
        name="empirical",
        description="Western empirical framework focused on evidence and logic",
        requirements=(
            "Verifiable evidence from multiple sources",
            "Logical consistency across different contexts",
            "Reproducible results with documented methodology",
            "Cross-referenced academic and scientific sources",
            "Peer-reviewed validation where applicable",
        ),
        confidence=_single_flag("has_empirical"),
    ),
    "responsible": Framework(
        name="responsible",
        description="Indigenous framework focused on responsible truth and community impact",
        requirements=(
            "Benefits community wellbeing with documented impact",
            "Aligns with traditional knowledge and modern research",
            "Respects natural balance and sustainable practices",
            "Verified by diverse community perspectives",
            "Supported by both qualitative and quantitative evidence",
        ),
        confidence=_single_flag("serves_wellbeing"),
    ),
    "harmonic": Framework(
        name="harmonic",
        description="Eastern framework focused on harmony and contextual truth",
        requirements=(
            "Maintains balance across different domains",
            "Considers context from multiple viewpoints",
            "Integrates perspectives from various disciplines",
            "Synthesizes traditional and modern knowledge",
            "Demonstrates coherence across different frameworks",
        ),
        confidence=_single_flag("maintains_harmony"),
    ),
    "pluralistic": Framework(
        name="pluralistic",
        description="Pluralistic framework that combines multiple validation approaches",
        requirements=(
            "Consider multiple ways of knowing and validate across frameworks",
            "Evaluate contextual appropriateness in different settings",
            "Assess practical outcomes with measurable metrics",
            "Check alignment with community values and scientific consensus",
            "Cross-reference academic, practical, and community sources",
            "Integrate insights from diverse knowledge systems",
        ),
        confidence=_pluralistic_confidence,
    ),
}


# ============================================================
# LOOKUPS
# ============================================================

def get_framework(name: str) -> Framework:
    """Look up a framework. Raises KeyError for unknown names."""
    return FRAMEWORKS[name]


def validate_with_framework(
    claim: str,
    framework: str,
    evidence: EvidenceFlags,
) -> ValidationResult:
    """Requirements plus confidence for a claim under the given framework."""
    validator = get_framework(framework)
    return ValidationResult(
        requirements=validator.validate_claim(claim),
        confidence=validator.confidence(evidence),
    )


def get_validation_suggestions(claim: str, framework: str) -> list[str]:
    """One verification line per requirement, in requirement order."""
    requirements = get_framework(framework).validate_claim(claim)
    return [f'Verify if claim "{claim}" meets requirement: {req}' for req in requirements]


def list_frameworks() -> list[dict]:
    """
    Describe every framework.

    Used by the GET /frameworks endpoint to expose the rubric table.
    """
    return [
        {
            "name": fw.name,
            "description": fw.description,
            "requirements": list(fw.requirements),
        }
        for fw in FRAMEWORKS.values()
    ]
