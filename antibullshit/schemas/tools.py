"""
Tool Schemas — Arguments, Payloads and Definitions

Pydantic models for the three tools, shared by the stdio server
and the HTTP API.
"""

from __future__ import annotations

from typing import Any, Optional
from pydantic import BaseModel, Field, StrictStr

from antibullshit.config import FRAMEWORK_NAMES


# ============================================================
# ARGUMENTS
# ============================================================

class ToolArguments(BaseModel):
    """Arguments accepted by every tool. Unknown keys are ignored."""
    text: StrictStr = Field(..., description="The text to analyze.")
    # Anything that is not a known framework name falls back to the default.
    framework: Any = None


# ============================================================
# PAYLOADS
# ============================================================

class EvidenceModel(BaseModel):
    has_empirical: bool
    serves_wellbeing: bool
    maintains_harmony: bool


class ValidationModel(BaseModel):
    requirements: list[str]
    confidence: str


class AnalyzeClaimResult(BaseModel):
    """analyze_claim structured payload."""
    framework: str
    validation: ValidationModel
    evidence: EvidenceModel
    suggestions: list[str]
    cross_references: list[str]


class SourceModel(BaseModel):
    type: str = "citation"
    context: str


class ValidateSourcesResult(BaseModel):
    """validate_sources structured payload."""
    framework: str
    sources: list[SourceModel]
    validation_prompts: list[str]


class CheckManipulationResult(BaseModel):
    """check_manipulation structured payload."""
    detected_patterns: list[str]
    validation_prompts: list[str]


# ============================================================
# HTTP RESPONSES
# ============================================================

class TextContent(BaseModel):
    type: str = "text"
    text: str


class ToolResponse(BaseModel):
    """POST /tools/{name} response body."""
    content: list[TextContent]
    result: dict


class ErrorResponse(BaseModel):
    code: int
    detail: str


class FrameworkInfo(BaseModel):
    name: str
    description: str
    requirements: list[str]


class FrameworksResponse(BaseModel):
    default: str
    frameworks: list[FrameworkInfo]


class HealthResponse(BaseModel):
    status: str
    version: str
    default_framework: str
    tools: list[str]
    error: Optional[str] = None


# ============================================================
# TOOL DEFINITIONS
# ============================================================

TOOL_DEFINITIONS: list[dict] = [
    {
        "name": "analyze_claim",
        "description": "Analyze a claim using multiple epistemological frameworks and suggest validation steps",
        "inputSchema": {
            "type": "object",
            "properties": {
                "text": {
                    "type": "string",
                    "description": "Claim to analyze",
                },
                "framework": {
                    "type": "string",
                    "description": "Validation framework to use (empirical, responsible, harmonic, or pluralistic)",
                    "enum": list(FRAMEWORK_NAMES),
                },
            },
            "required": ["text"],
        },
    },
    {
        "name": "validate_sources",
        "description": "Validate sources and evidence using configured framework",
        "inputSchema": {
            "type": "object",
            "properties": {
                "text": {
                    "type": "string",
                    "description": "Text containing claims and sources to validate",
                },
                "framework": {
                    "type": "string",
                    "description": "Validation framework to use",
                    "enum": list(FRAMEWORK_NAMES),
                },
            },
            "required": ["text"],
        },
    },
    {
        "name": "check_manipulation",
        "description": "Check for manipulation tactics across different cultural contexts",
        "inputSchema": {
            "type": "object",
            "properties": {
                "text": {
                    "type": "string",
                    "description": "Text to analyze for manipulation",
                },
            },
            "required": ["text"],
        },
    },
]
