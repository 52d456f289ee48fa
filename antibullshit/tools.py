"""
Tools — Dispatch and Report Assembly

  - analyze_claim:       rubric requirements, confidence, cross-references
  - validate_sources:    citation phrases and how to check each one
  - check_manipulation:  manipulation tactics and how to counter them

Every call returns a ToolResult: a human-readable report and a
structured payload carrying the same data.

Argument validation runs before the tool name is looked up, and an
unknown name is rejected before any detector runs.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from pydantic import BaseModel, ValidationError

from antibullshit.config import settings
from antibullshit.detector import detect_evidence, detect_manipulation, extract_sources
from antibullshit.errors import (
    InternalError,
    InvalidArgumentError,
    MethodNotFoundError,
    ToolError,
)
from antibullshit.frameworks import (
    FRAMEWORKS,
    get_validation_suggestions,
    validate_with_framework,
)
from antibullshit.logging import get_logger
from antibullshit.schemas.tools import (
    AnalyzeClaimResult,
    CheckManipulationResult,
    EvidenceModel,
    SourceModel,
    ToolArguments,
    ValidateSourcesResult,
    ValidationModel,
)
from antibullshit.suggestions import (
    claim_cross_references,
    manipulation_validation_prompts,
    source_validation_prompts,
)

logger = get_logger("tools")


@dataclass
class ToolResult:
    """Dual-format tool output."""
    text: str
    payload: BaseModel

    def content(self) -> list[dict]:
        """Protocol content blocks: the report, then the payload as JSON."""
        return [
            {"type": "text", "text": self.text},
            {"type": "text", "text": self.payload.model_dump_json(indent=2)},
        ]


def resolve_framework(value: Any, default: str) -> str:
    """Use value when it names a known framework, otherwise the default."""
    if isinstance(value, str) and value in FRAMEWORKS:
        return value
    return default


def _bullets(lines: list[str]) -> str:
    return "\n".join(f"- {line}" for line in lines)


# ============================================================
# HANDLERS
# ============================================================

def analyze_claim(args: ToolArguments, default_framework: str) -> ToolResult:
    framework = resolve_framework(args.framework, default_framework)
    evidence = detect_evidence(args.text)
    validation = validate_with_framework(args.text, framework, evidence)
    suggestions = get_validation_suggestions(args.text, framework)
    cross_references = claim_cross_references(args.text, framework)

    numbered = "\n".join(f"{i}. {line}" for i, line in enumerate(suggestions, 1))
    text = (
        f"Analysis using {framework} framework:\n\n"
        f"Requirements:\n{numbered}\n\n"
        f"Confidence level: {validation.confidence}\n\n"
        f"Suggested cross-references:\n{_bullets(cross_references)}"
    )
    payload = AnalyzeClaimResult(
        framework=framework,
        validation=ValidationModel(
            requirements=validation.requirements,
            confidence=validation.confidence,
        ),
        evidence=EvidenceModel(
            has_empirical=evidence.has_empirical,
            serves_wellbeing=evidence.serves_wellbeing,
            maintains_harmony=evidence.maintains_harmony,
        ),
        suggestions=suggestions,
        cross_references=cross_references,
    )
    return ToolResult(text=text, payload=payload)


def validate_sources(args: ToolArguments, default_framework: str) -> ToolResult:
    framework = resolve_framework(args.framework, default_framework)
    sources = extract_sources(args.text)

    prompts: list[str] = []
    for source in sources:
        prompts.extend(source_validation_prompts(source.context, framework))

    text = (
        f"Source validation using {framework} framework:\n\n"
        f"Found {len(sources)} sources to validate.\n\n"
        f"Validation steps:\n{_bullets(prompts)}"
    )
    payload = ValidateSourcesResult(
        framework=framework,
        sources=[SourceModel(type=s.type, context=s.context) for s in sources],
        validation_prompts=prompts,
    )
    return ToolResult(text=text, payload=payload)


def check_manipulation(args: ToolArguments, default_framework: str) -> ToolResult:
    detected = detect_manipulation(args.text)
    prompts = manipulation_validation_prompts(args.text, detected)

    text = (
        f"Manipulation check results:\n\n"
        f"Detected patterns: {', '.join(detected) or 'None'}\n\n"
        f"Suggested validation:\n{_bullets(prompts)}"
    )
    payload = CheckManipulationResult(
        detected_patterns=detected,
        validation_prompts=prompts,
    )
    return ToolResult(text=text, payload=payload)


TOOLS: dict[str, Callable[[ToolArguments, str], ToolResult]] = {
    "analyze_claim": analyze_claim,
    "validate_sources": validate_sources,
    "check_manipulation": check_manipulation,
}


# ============================================================
# DISPATCH
# ============================================================

def _log_fields(payload: BaseModel) -> dict:
    """Per-tool summary fields for the completion log line."""
    if isinstance(payload, AnalyzeClaimResult):
        return {
            "framework": payload.framework,
            "confidence": payload.validation.confidence,
        }
    if isinstance(payload, ValidateSourcesResult):
        return {
            "framework": payload.framework,
            "sources_count": len(payload.sources),
        }
    if isinstance(payload, CheckManipulationResult):
        return {"patterns": payload.detected_patterns}
    return {}


def parse_arguments(arguments: Any) -> ToolArguments:
    """Validate raw tool arguments. Raises InvalidArgumentError."""
    try:
        return ToolArguments.model_validate(arguments)
    except ValidationError:
        raise InvalidArgumentError() from None


def dispatch(
    name: str,
    arguments: Any,
    default_framework: Optional[str] = None,
) -> ToolResult:
    """
    Run a tool by name.

    Args:
        name: One of analyze_claim, validate_sources, check_manipulation.
        arguments: Raw arguments; must carry a string `text`.
        default_framework: Used when the call names no valid framework.
            Defaults to the configured VALIDATION_FRAMEWORK.

    Raises:
        InvalidArgumentError: `text` missing or not a string.
        MethodNotFoundError: unknown tool name.
        InternalError: anything else that went wrong inside the tool.
    """
    if default_framework is None:
        default_framework = settings.VALIDATION_FRAMEWORK

    args = parse_arguments(arguments)

    handler = TOOLS.get(name)
    if handler is None:
        raise MethodNotFoundError(name)

    start = time.time()
    try:
        result = handler(args, default_framework)
    except ToolError:
        raise
    except Exception as e:
        logger.error(
            f"Tool {name} failed",
            extra={"tool": name, "error": str(e), "error_type": type(e).__name__},
            exc_info=True,
        )
        raise InternalError(e) from e

    logger.info(
        f"Tool {name} complete",
        extra={
            "tool": name,
            "duration_ms": round((time.time() - start) * 1000, 2),
            **_log_fields(result.payload),
        },
    )
    return result
