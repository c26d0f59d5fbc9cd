from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ResumeAnalyzerError(RuntimeError):
    """Base error converted to an ``{error, code, details}`` JSON body at the API boundary."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, details: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message, "code": self.code}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class InvalidRequestError(ResumeAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"
    default_message = "Invalid request"


class DocumentExtractionError(ResumeAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "extraction_error"
    default_message = "Failed to extract text from file"


class UnsupportedFormatError(DocumentExtractionError):
    code = "unsupported_format"
    default_message = "Unsupported file format. Please upload a PDF or Word document (.docx)."


class EmptyOrCorruptDocumentError(DocumentExtractionError):
    code = "empty_or_corrupt"
    default_message = "Could not extract text from the file. The file may be empty or corrupted."


class ExtractionFailedError(DocumentExtractionError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "extraction_failure"
    default_message = "Failed to extract text from file"


class PayloadTooLargeError(DocumentExtractionError):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    code = "payload_too_large"
    default_message = "File too large."


class UpstreamError(ResumeAnalyzerError):
    code = "upstream_error"
    default_message = "Failed to analyze resume"


class UpstreamEmptyResponseError(UpstreamError):
    code = "upstream_empty_response"
    default_message = "No response from the language model"


class UpstreamMalformedResponseError(UpstreamError):
    code = "upstream_malformed_response"
    default_message = "Failed to parse the language model response"


class UpstreamInvalidSchemaError(UpstreamError):
    code = "upstream_invalid_schema"
    default_message = "Invalid response structure from the language model"


class UpstreamCallError(UpstreamError):
    code = "upstream_call_failure"
    default_message = "Failed to analyze resume"


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


async def _resume_analyzer_error_handler(request: Request, exc: ResumeAnalyzerError) -> JSONResponse:
    _ = request
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def _request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_validation_failed path=%s", request.url.path)
    error = InvalidRequestError("Invalid request body", details=_format_validation_errors(exc) or None)
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResumeAnalyzerError, _resume_analyzer_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_error_handler)
