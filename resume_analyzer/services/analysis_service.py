from __future__ import annotations

import json
import logging
import math
import time
from typing import Any

from resume_analyzer.ai.config import AIConfig, load_ai_config
from resume_analyzer.ai.factory import get_ai_client
from resume_analyzer.ai.types import ChatMessage, CompletionClient
from resume_analyzer.core.config import settings
from resume_analyzer.core.errors import (
    InvalidRequestError,
    UpstreamCallError,
    UpstreamEmptyResponseError,
    UpstreamInvalidSchemaError,
    UpstreamMalformedResponseError,
)
from resume_analyzer.prompt.analysis import BULLET_COUNT, build_analysis_prompt, has_job_description
from resume_analyzer.schemas.analysis import AnalysisRequest

logger = logging.getLogger(__name__)

ANALYSIS_TEMPERATURE = 0.3
ANALYSIS_MAX_OUTPUT_TOKENS = 1000


def _reject_constant(token: str) -> Any:
    raise ValueError(f"invalid JSON constant {token!r}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _has_non_finite(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, dict):
        return any(_has_non_finite(item) for item in value.values())
    if isinstance(value, list):
        return any(_has_non_finite(item) for item in value)
    return False


def _in_percent_range(value: Any) -> bool:
    return _is_number(value) and 0 <= value <= 100


def _excerpt(content: str) -> str:
    limit = settings.log_details_max_chars
    if len(content) <= limit:
        return content
    return content[:limit] + "..."


def _schema_problems(parsed: Any) -> list[str]:
    if not isinstance(parsed, dict):
        return ["response is not a JSON object"]
    problems: list[str] = []
    if not _is_number(parsed.get("resumeScore")):
        problems.append("resumeScore must be a number")
    for field in ("strengths", "weaknesses"):
        if not isinstance(parsed.get(field), list):
            problems.append(f"{field} must be an array")
    if _has_non_finite(parsed):
        problems.append("numbers must be finite")
    return problems


def _strict_problems(parsed: dict[str, Any], *, job_description_given: bool) -> list[str]:
    problems: list[str] = []
    if not _in_percent_range(parsed["resumeScore"]):
        problems.append("resumeScore must be between 0 and 100")

    match = parsed.get("matchPercentage")
    if job_description_given and not _in_percent_range(match):
        problems.append("matchPercentage must be between 0 and 100 when a job description is given")
    if not job_description_given and match is not None:
        problems.append("matchPercentage must be null without a job description")

    for field in ("strengths", "weaknesses"):
        items = parsed[field]
        if len(items) != BULLET_COUNT or not all(isinstance(item, str) and item.strip() for item in items):
            problems.append(f"{field} must contain exactly {BULLET_COUNT} non-empty strings")
    return problems


class AnalysisGateway:
    """Sends one analysis prompt to the completion endpoint and validates the JSON reply.

    The provider configuration is injected at construction; when no client is
    given one is built from it on each call, so a missing credential surfaces
    as an upstream call failure rather than a startup error.
    """

    def __init__(
        self,
        config: AIConfig | None = None,
        *,
        client: CompletionClient | None = None,
        strict: bool = False,
    ):
        self._config = config or load_ai_config()
        self._client = client
        self._strict = strict

    @property
    def model(self) -> str:
        return self._config.model

    def _get_client(self) -> CompletionClient:
        if self._client is not None:
            return self._client
        return get_ai_client(self._config)

    async def analyze(self, request: AnalysisRequest) -> dict[str, Any]:
        if not request.resume_text or not request.resume_text.strip():
            raise InvalidRequestError("Resume text is required")

        job_description_given = has_job_description(request.job_description)
        prompt = build_analysis_prompt(request.resume_text, request.job_description)
        started = time.perf_counter()

        try:
            client = self._get_client()
            content = await client.complete(
                [ChatMessage(role="user", content=prompt)],
                temperature=ANALYSIS_TEMPERATURE,
                max_tokens=ANALYSIS_MAX_OUTPUT_TOKENS,
            )
        except Exception as exc:  # noqa: BLE001 - every transport/auth failure maps to one error kind
            logger.warning(
                "analysis_upstream_call_failed model=%s prompt_len=%s: %s",
                self.model,
                len(prompt),
                exc,
            )
            raise UpstreamCallError(details=str(exc) or exc.__class__.__name__) from exc

        latency_ms = int((time.perf_counter() - started) * 1000)
        if not content:
            logger.warning("analysis_upstream_empty model=%s latency_ms=%s", self.model, latency_ms)
            raise UpstreamEmptyResponseError()

        try:
            parsed = json.loads(content, parse_constant=_reject_constant)
        except ValueError as exc:
            logger.warning("analysis_upstream_malformed model=%s content=%r", self.model, _excerpt(content))
            raise UpstreamMalformedResponseError(details=content) from exc

        problems = _schema_problems(parsed)
        if not problems and self._strict:
            problems = _strict_problems(parsed, job_description_given=job_description_given)
        if problems:
            logger.warning(
                "analysis_upstream_invalid_schema model=%s problems=%s content=%r",
                self.model,
                problems,
                _excerpt(content),
            )
            raise UpstreamInvalidSchemaError(details=content)

        logger.info(
            "analysis_completed model=%s latency_ms=%s job_description=%s strict=%s",
            self.model,
            latency_ms,
            job_description_given,
            self._strict,
        )
        return parsed


def get_analysis_gateway() -> AnalysisGateway:
    return AnalysisGateway(load_ai_config(), strict=settings.analysis_strict_validation)
