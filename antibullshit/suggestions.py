"""
Cross-Reference Suggestions

Static, templated lines that tell a human (or another agent) where to
look next. Nothing here performs a search; the lines are advice only.

Each builder returns a fresh list: five generic lines, then the
triplets that apply, in a fixed order.
"""

from __future__ import annotations


# ============================================================
# CLAIM ANALYSIS
# ============================================================

def claim_cross_references(text: str, framework: str) -> list[str]:
    """Cross-reference lines for analyze_claim."""
    prompts = [
        f'Use Exa MCP server to search for general information: "{text}"',
        f'Use Brave Search for independent web sources: "{text}"',
        f'Search ArXiv for preprints and technical papers: "{text}"',
        f'Use Google Scholar MCP server to find peer-reviewed research: "{text}"',
        "Cross-reference findings between academic and general sources to identify consensus or conflicts",
    ]

    if framework in ("empirical", "pluralistic"):
        prompts.extend([
            "Compare methodologies between ArXiv papers and peer-reviewed research",
            "Analyze replication status across different studies",
            "Cross-validate findings between academic databases",
        ])

    if framework in ("responsible", "pluralistic"):
        prompts.extend([
            f'Use Exa MCP server to search for community impact studies: "{text}"',
            "Cross-reference academic findings with community experiences",
            "Compare traditional knowledge with modern research findings",
        ])

    if framework in ("harmonic", "pluralistic"):
        prompts.extend([
            f'Use Exa MCP server to search for alternative perspectives: "{text}"',
            "Compare Eastern and Western research approaches",
            "Synthesize findings across different knowledge systems",
        ])

    return prompts


# ============================================================
# SOURCE VALIDATION
# ============================================================

def source_validation_prompts(context: str, framework: str) -> list[str]:
    """Validation lines for a single detected source."""
    prompts = [
        f'Use Exa MCP server to verify credibility of: "{context}"',
        f'Use Brave Search to find independent verification: "{context}"',
        f'Search ArXiv for related technical papers: "{context}"',
        f'Use Google Scholar MCP server to check academic citations: "{context}"',
        "Cross-reference findings between different platforms to establish credibility",
    ]

    if framework in ("empirical", "pluralistic"):
        prompts.extend([
            "Compare methodologies and results across different studies",
            "Verify replication status and reproducibility",
            "Cross-validate findings between different research groups",
        ])

    if framework in ("responsible", "pluralistic"):
        prompts.extend([
            f'Use Exa MCP server to search for community perspectives: "{context}"',
            "Compare academic findings with real-world impacts",
            "Cross-reference with local knowledge and experiences",
        ])

    if framework in ("harmonic", "pluralistic"):
        prompts.extend([
            "Compare perspectives across different cultural contexts",
            "Synthesize findings from multiple knowledge systems",
            "Identify areas of consensus and divergence",
        ])

    return prompts


# ============================================================
# MANIPULATION CHECK
# ============================================================

def manipulation_validation_prompts(text: str, detected: list[str]) -> list[str]:
    """Validation lines for check_manipulation, driven by detected tactics."""
    prompts = [
        f'Use Exa MCP server to search for factual information: "{text}"',
        f'Use Brave Search for independent fact-checking: "{text}"',
        f'Search ArXiv for technical analysis: "{text}"',
        f'Use Google Scholar MCP server to find peer-reviewed research: "{text}"',
        "Cross-reference findings across different platforms to establish truth",
    ]

    if "authority" in detected:
        prompts.extend([
            "Use Google Scholar MCP server to verify credibility of cited authorities",
            "Cross-reference authority claims with independent research",
            "Compare expert opinions across different fields",
        ])

    if "emotional" in detected:
        prompts.extend([
            "Use Exa MCP server to find balanced, non-emotional discussions",
            "Compare emotional appeals with empirical evidence",
            "Cross-validate claims across multiple neutral sources",
        ])

    if "social" in detected or "scarcity" in detected:
        prompts.extend([
            "Verify claims using multiple independent sources",
            "Cross-reference marketing claims with factual data",
            "Compare urgency claims with historical patterns",
        ])

    return prompts
