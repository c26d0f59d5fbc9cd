from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MAX_TEXT_CHARS = 50000


class AnalysisRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_text: str = Field(default="", alias="resumeText", max_length=MAX_TEXT_CHARS)
    job_description: str | None = Field(default=None, alias="jobDescription", max_length=MAX_TEXT_CHARS)


class AnalysisResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_score: float = Field(alias="resumeScore", ge=0, le=100)
    match_percentage: float | None = Field(default=None, alias="matchPercentage", ge=0, le=100)
    strengths: list[str] = Field(min_length=5, max_length=5)
    weaknesses: list[str] = Field(min_length=5, max_length=5)


class ExtractTextResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    source_type: Literal["pdf", "docx"] = Field(alias="sourceType")


class APIErrorResponse(BaseModel):
    error: str
    code: str
    details: str | None = None
