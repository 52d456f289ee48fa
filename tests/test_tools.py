"""
Tests for the dispatcher — tool output, framework resolution,
and the error taxonomy.
"""

from __future__ import annotations

import json
import logging

import pytest

from antibullshit import tools
from antibullshit.errors import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    InternalError,
    InvalidArgumentError,
    MethodNotFoundError,
)
from antibullshit.tools import dispatch, resolve_framework


# ============================================================
# ANALYZE CLAIM
# ============================================================

class TestAnalyzeClaim:

    def test_pluralistic_has_all_triplets(self):
        result = dispatch("analyze_claim", {"text": "Coffee helps focus", "framework": "pluralistic"})
        refs = result.payload.cross_references
        assert len(refs) == 14
        assert refs[5] == "Compare methodologies between ArXiv papers and peer-reviewed research"
        assert refs[8] == 'Use Exa MCP server to search for community impact studies: "Coffee helps focus"'
        assert refs[11] == 'Use Exa MCP server to search for alternative perspectives: "Coffee helps focus"'

    def test_empirical_has_only_its_triplet(self):
        result = dispatch("analyze_claim", {"text": "Coffee helps focus", "framework": "empirical"})
        refs = result.payload.cross_references
        assert len(refs) == 8
        assert refs[-1] == "Cross-validate findings between academic databases"

    @pytest.mark.parametrize("framework,last", [
        ("responsible", "Compare traditional knowledge with modern research findings"),
        ("harmonic", "Synthesize findings across different knowledge systems"),
    ])
    def test_single_framework_triplets(self, framework, last):
        result = dispatch("analyze_claim", {"text": "claim", "framework": framework})
        refs = result.payload.cross_references
        assert len(refs) == 8
        assert refs[-1] == last

    def test_generic_lines_use_text(self):
        result = dispatch("analyze_claim", {"text": "Salt is bad", "framework": "empirical"})
        assert result.payload.cross_references[0] == (
            'Use Exa MCP server to search for general information: "Salt is bad"'
        )

    def test_confidence_and_evidence(self):
        result = dispatch("analyze_claim", {"text": "New research data", "framework": "empirical"})
        assert result.payload.validation.confidence == "high"
        assert result.payload.evidence.has_empirical is True
        assert result.payload.evidence.serves_wellbeing is False

    def test_pluralistic_medium(self):
        result = dispatch("analyze_claim", {"text": "Research supports it", "framework": "pluralistic"})
        assert result.payload.validation.confidence == "medium"

    def test_report_layout(self):
        result = dispatch("analyze_claim", {"text": "Tea is healthy", "framework": "harmonic"})
        lines = result.text.split("\n")
        assert lines[0] == "Analysis using harmonic framework:"
        assert lines[2] == "Requirements:"
        assert lines[3] == (
            '1. Verify if claim "Tea is healthy" meets requirement: '
            "Maintains balance across different domains"
        )
        assert "Confidence level: low" in result.text
        assert "Suggested cross-references:\n- Use Exa MCP server" in result.text

    def test_suggestions_in_payload(self):
        result = dispatch("analyze_claim", {"text": "x", "framework": "pluralistic"})
        assert len(result.payload.suggestions) == 6
        assert result.payload.framework == "pluralistic"

    def test_content_blocks(self):
        result = dispatch("analyze_claim", {"text": "x", "framework": "empirical"})
        content = result.content()
        assert len(content) == 2
        assert content[0]["text"] == result.text
        payload = json.loads(content[1]["text"])
        assert payload["framework"] == "empirical"
        assert payload["validation"]["confidence"] == "low"


# ============================================================
# FRAMEWORK RESOLUTION
# ============================================================

class TestFrameworkResolution:

    def test_explicit_valid(self):
        assert resolve_framework("harmonic", "pluralistic") == "harmonic"

    @pytest.mark.parametrize("value", [None, "", "astrology", 3, ["empirical"]])
    def test_falls_back_to_default(self, value):
        assert resolve_framework(value, "responsible") == "responsible"

    def test_dispatch_uses_default(self):
        result = dispatch("analyze_claim", {"text": "x"}, default_framework="empirical")
        assert result.payload.framework == "empirical"

    def test_invalid_framework_uses_default(self):
        result = dispatch(
            "validate_sources", {"text": "x", "framework": "nope"},
            default_framework="harmonic",
        )
        assert result.payload.framework == "harmonic"


# ============================================================
# VALIDATE SOURCES
# ============================================================

class TestValidateSources:

    def test_prompts_per_source(self):
        text = "A study by Dr. Lee, according to recent reports, shows X"
        result = dispatch("validate_sources", {"text": text, "framework": "empirical"})
        assert len(result.payload.sources) == 2
        assert len(result.payload.validation_prompts) == 2 * 8
        assert "Found 2 sources to validate." in result.text

    def test_prompt_blocks_follow_source_order(self):
        text = "x" * 40 + " cited by the board. " + "y" * 80 + " reported by the press."
        result = dispatch("validate_sources", {"text": text, "framework": "empirical"})
        sources = result.payload.sources
        prompts = result.payload.validation_prompts
        assert len(sources) == 2
        assert len(prompts) == 16
        assert prompts[0] == f'Use Exa MCP server to verify credibility of: "{sources[0].context}"'
        assert prompts[8] == f'Use Exa MCP server to verify credibility of: "{sources[1].context}"'
        assert "cited by" in sources[0].context
        assert "reported by" in sources[1].context

    def test_pluralistic_prompt_count(self):
        result = dispatch("validate_sources", {"text": "experts agree", "framework": "pluralistic"})
        assert len(result.payload.validation_prompts) == 14
        assert result.payload.validation_prompts[0] == (
            'Use Exa MCP server to verify credibility of: "experts agree"'
        )

    def test_no_sources(self):
        result = dispatch("validate_sources", {"text": "Nothing cited here."})
        assert result.payload.sources == []
        assert result.payload.validation_prompts == []
        assert "Found 0 sources to validate." in result.text

    def test_report_header(self):
        result = dispatch("validate_sources", {"text": "x", "framework": "responsible"})
        assert result.text.startswith("Source validation using responsible framework:")

    def test_source_payload_shape(self):
        result = dispatch("validate_sources", {"text": "scientists say so"})
        source = result.payload.sources[0]
        assert source.type == "citation"
        assert source.context == "scientists say so"


# ============================================================
# CHECK MANIPULATION
# ============================================================

class TestCheckManipulation:

    def test_no_patterns(self):
        result = dispatch("check_manipulation", {"text": "The meeting is at 3pm."})
        assert result.payload.detected_patterns == []
        assert len(result.payload.validation_prompts) == 5
        assert "Detected patterns: None" in result.text

    def test_emotional_and_scarcity(self):
        text = "Act now — limited time, exclusive offer, before it's too late!"
        result = dispatch("check_manipulation", {"text": text})
        assert result.payload.detected_patterns == ["emotional", "scarcity"]
        assert "Detected patterns: emotional, scarcity" in result.text
        prompts = result.payload.validation_prompts
        assert len(prompts) == 11
        assert prompts[5] == "Use Exa MCP server to find balanced, non-emotional discussions"
        assert prompts[8] == "Verify claims using multiple independent sources"

    def test_social_and_scarcity_triplet_once(self):
        result = dispatch("check_manipulation", {"text": "Don't miss out on this exclusive deal"})
        assert result.payload.detected_patterns == ["social", "scarcity"]
        assert len(result.payload.validation_prompts) == 8

    def test_authority_triplet_first(self):
        text = "Experts say you must act."
        result = dispatch("check_manipulation", {"text": text})
        prompts = result.payload.validation_prompts
        assert len(prompts) == 11
        assert prompts[5] == "Use Google Scholar MCP server to verify credibility of cited authorities"
        assert prompts[8] == "Use Exa MCP server to find balanced, non-emotional discussions"

    def test_framework_ignored(self):
        result = dispatch("check_manipulation", {"text": "fine", "framework": "empirical"})
        assert not hasattr(result.payload, "framework")


# ============================================================
# ERRORS
# ============================================================

class TestErrors:

    @pytest.mark.parametrize("name", ["analyze_claim", "validate_sources", "check_manipulation", "bogus"])
    @pytest.mark.parametrize("arguments", [None, {}, {"text": 42}, {"text": None}, {"framework": "empirical"}])
    def test_invalid_argument_regardless_of_name(self, name, arguments):
        with pytest.raises(InvalidArgumentError) as exc:
            dispatch(name, arguments)
        assert exc.value.code == INVALID_PARAMS
        assert exc.value.message == "Text parameter is required and must be a string"

    def test_unknown_tool(self):
        with pytest.raises(MethodNotFoundError) as exc:
            dispatch("summarize", {"text": "x"})
        assert exc.value.code == METHOD_NOT_FOUND
        assert exc.value.message == "Unknown tool: summarize"

    def test_unknown_tool_runs_no_detector(self, monkeypatch):
        def explode(text):
            raise AssertionError("detector should not run")

        monkeypatch.setattr(tools, "detect_evidence", explode)
        monkeypatch.setattr(tools, "extract_sources", explode)
        monkeypatch.setattr(tools, "detect_manipulation", explode)
        with pytest.raises(MethodNotFoundError):
            dispatch("summarize", {"text": "x"})

    def test_unexpected_failure_is_wrapped(self, monkeypatch):
        def explode(text):
            raise ValueError("regex engine on fire")

        monkeypatch.setattr(tools, "detect_evidence", explode)
        with pytest.raises(InternalError) as exc:
            dispatch("analyze_claim", {"text": "x"})
        assert exc.value.code == INTERNAL_ERROR
        assert exc.value.message == "Error analyzing text: regex engine on fire"
        assert isinstance(exc.value.original, ValueError)

    def test_tool_errors_are_not_rewrapped(self, monkeypatch):
        def reject(text):
            raise InvalidArgumentError("nested rejection")

        monkeypatch.setattr(tools, "detect_manipulation", reject)
        with pytest.raises(InvalidArgumentError) as exc:
            dispatch("check_manipulation", {"text": "x"})
        assert exc.value.message == "nested rejection"

    def test_extra_arguments_ignored(self):
        result = dispatch("check_manipulation", {"text": "calm", "verbose": True})
        assert result.payload.detected_patterns == []


# ============================================================
# LOGGING
# ============================================================

class TestCompletionLog:
    """Each tool logs its own summary fields on completion."""

    def _completion(self, caplog, name, arguments):
        caplog.set_level(logging.INFO, logger="antibullshit.tools")
        dispatch(name, arguments)
        return [r for r in caplog.records if r.getMessage() == f"Tool {name} complete"][-1]

    def test_analyze_claim_logs_confidence(self, caplog):
        record = self._completion(
            caplog, "analyze_claim", {"text": "New data", "framework": "empirical"},
        )
        assert record.framework == "empirical"
        assert record.confidence == "high"

    def test_validate_sources_logs_count(self, caplog):
        record = self._completion(
            caplog, "validate_sources", {"text": "experts and scientists", "framework": "harmonic"},
        )
        assert record.framework == "harmonic"
        assert record.sources_count == 2

    def test_check_manipulation_logs_patterns(self, caplog):
        record = self._completion(caplog, "check_manipulation", {"text": "Studies show it"})
        assert record.patterns == ["authority"]
