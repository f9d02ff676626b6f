"""Orchestrator: resume / job description fit analysis.

Pipeline:
1. Truncate resume text, trim job description
2. Build the evaluation prompt
3. Single LLM call (failures captured as diagnostics, never raised)
4. Recover a JSON object from the reply
5. Validate each field into an AnalysisResult, defaulting bad values
"""

import logging
from typing import Any

from config import settings
from models.responses import AnalysisResult
from services import prompt_builder
from services.llm_client import LLMClient
from services.reply_parser import parse_model_reply

logger = logging.getLogger(__name__)

LIST_FIELDS = {
    "matchedKeywords": "matched_keywords",
    "missingKeywords": "missing_keywords",
    "strengths": "strengths",
    "suggestions": "suggestions",
}


def _valid_score(value: Any) -> int | None:
    # bool is an int subclass; floats such as 72.5 are rejected outright
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if not 0 <= value <= 100:
        return None
    return value


def _valid_str_list(value: Any) -> list[str]:
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    return []


def to_analysis_result(raw: str, parsed: dict[str, Any] | None) -> AnalysisResult:
    """Map a parsed reply onto the response contract, field by field."""
    if parsed is None:
        return AnalysisResult(ai_raw=raw)

    fields: dict[str, Any] = {
        name: _valid_str_list(parsed.get(key)) for key, name in LIST_FIELDS.items()
    }
    summary = parsed.get("summary")
    fields["summary"] = summary if isinstance(summary, str) else ""
    fields["ats_score"] = _valid_score(parsed.get("atsScore"))

    if "atsScore" in parsed and fields["ats_score"] is None:
        logger.warning("Discarding invalid atsScore from model: %r", parsed["atsScore"])

    return AnalysisResult(ai_raw=raw, ai_parsed=parsed, **fields)


def prepare_inputs(resume_text_full: str, job_description: str) -> tuple[str, str]:
    return resume_text_full[: settings.resume_char_limit], job_description.strip()


async def analyze(
    resume_text_full: str,
    job_description: str,
    llm_client: LLMClient,
) -> AnalysisResult:
    """Run the fit analysis. Never raises; failures become diagnostic text."""
    resume_text, jd_text = prepare_inputs(resume_text_full, job_description)
    if not resume_text.strip():
        logger.warning("Analyzing with empty resume text")

    prompt = prompt_builder.build_analysis_prompt(resume_text, jd_text)

    try:
        raw = await llm_client.generate(prompt)
    except Exception as e:
        logger.error("LLM API error (%s): %s", llm_client.model_name, e)
        return AnalysisResult(ai_raw=str(e) or type(e).__name__)

    return to_analysis_result(raw, parse_model_reply(raw))
