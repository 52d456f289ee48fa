"""
Detector — Keyword and Phrase Detection

Three deterministic regex passes over raw text:
  - evidence:      which evidence signals a claim carries
  - sources:       citation-like phrases and the text around them
  - manipulation:  which manipulation tactics appear at least once

Detection is intentionally approximate. Substring hits count
("data" matches "database"); the phrase lists are the contract.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from antibullshit.frameworks import EvidenceFlags


# ============================================================
# EVIDENCE SIGNALS
# ============================================================

_EMPIRICAL = re.compile(r"evidence|study|research|data", re.IGNORECASE)
_WELLBEING = re.compile(r"benefit|improve|help|support", re.IGNORECASE)
_HARMONY = re.compile(r"balance|harmony|integrate", re.IGNORECASE)


def detect_evidence(text: str) -> EvidenceFlags:
    """Compute all three evidence flags for a piece of text."""
    return EvidenceFlags(
        has_empirical=bool(_EMPIRICAL.search(text)),
        serves_wellbeing=bool(_WELLBEING.search(text)),
        maintains_harmony=bool(_HARMONY.search(text)),
    )


# ============================================================
# SOURCE EXTRACTION
# ============================================================

SOURCE_PATTERN = re.compile(
    r"according to|cited by|reported by|study by|research by|experts|scientists",
    re.IGNORECASE,
)

# Context window around each match, measured from the match start
CONTEXT_BEFORE = 30
CONTEXT_AFTER = 70


@dataclass(frozen=True)
class DetectedSource:
    """A citation-like phrase and the text surrounding it."""
    context: str
    type: str = "citation"


def extract_sources(text: str) -> list[DetectedSource]:
    """Find citation phrases left to right. Matches never overlap."""
    sources = []
    for match in SOURCE_PATTERN.finditer(text):
        start = max(0, match.start() - CONTEXT_BEFORE)
        end = min(len(text), match.start() + CONTEXT_AFTER)
        sources.append(DetectedSource(context=text[start:end].strip()))
    return sources


# ============================================================
# MANIPULATION TACTICS
# ============================================================

# Declaration order is reporting order.
MANIPULATION_PATTERNS: dict[str, re.Pattern] = {
    "emotional": re.compile(
        r"fear|urgent|must act|limited time|don't wait|before it's too late",
        re.IGNORECASE,
    ),
    "social": re.compile(
        r"everyone knows|nobody wants|you don't want to be|don't miss out",
        re.IGNORECASE,
    ),
    "authority": re.compile(
        r"experts say|scientists claim|studies show|research proves",
        re.IGNORECASE,
    ),
    "scarcity": re.compile(
        r"limited time|exclusive|rare opportunity|don't miss out",
        re.IGNORECASE,
    ),
}


def detect_manipulation(text: str) -> list[str]:
    """Names of the tactics present in text, in declaration order."""
    return [
        name for name, pattern in MANIPULATION_PATTERNS.items()
        if pattern.search(text)
    ]
