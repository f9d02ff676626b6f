from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AnalysisResult(BaseModel):
    """Normalized verdict returned to the caller.

    ``ai_raw`` always carries the model's raw text (or the failure message)
    for diagnostics. List and summary fields are never absent, so consumers
    can rely on every key.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ai_raw: str = ""
    ai_parsed: dict[str, Any] | None = None
    ats_score: int | None = None
    matched_keywords: list[str] = []
    missing_keywords: list[str] = []
    summary: str = ""
    strengths: list[str] = []
    suggestions: list[str] = []


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
