import asyncio

from fastapi import APIRouter, File, Request, UploadFile

from resume_analyzer.core.config import settings
from resume_analyzer.core.errors import InvalidRequestError, PayloadTooLargeError
from resume_analyzer.core.rate_limit import rate_limit
from resume_analyzer.parsing.extract import extract_text
from resume_analyzer.schemas.analysis import APIErrorResponse, ExtractTextResponse

router = APIRouter()

READ_CHUNK_BYTES = 64 * 1024


async def _read_upload(file: UploadFile, limit: int) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > limit:
            raise PayloadTooLargeError(
                f"File too large. Maximum allowed size is {limit // (1024 * 1024)} MB."
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.post(
    "/extract",
    response_model=ExtractTextResponse,
    responses={400: {"model": APIErrorResponse}, 413: {"model": APIErrorResponse}, 500: {"model": APIErrorResponse}},
    summary="Extract plain text from an uploaded PDF or Word resume",
)
@rate_limit()
async def extract(request: Request, file: UploadFile | None = File(default=None)):
    _ = request
    if file is None:
        raise InvalidRequestError("No file provided")

    filename = file.filename or ""
    content = await _read_upload(file, settings.max_upload_bytes)
    document = await asyncio.to_thread(extract_text, filename, content)
    return ExtractTextResponse(text=document.text, source_type=document.kind.value)
