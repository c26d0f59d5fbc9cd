from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from resume_analyzer.core.rate_limit import rate_limit
from resume_analyzer.schemas.analysis import AnalysisRequest, AnalysisResponse, APIErrorResponse
from resume_analyzer.services.analysis_service import AnalysisGateway, get_analysis_gateway

router = APIRouter()


@router.post(
    "/analyze",
    responses={
        200: {"model": AnalysisResponse},
        400: {"model": APIErrorResponse},
        500: {"model": APIErrorResponse},
    },
    summary="Score a resume and list its strengths and weaknesses",
)
@rate_limit()
async def analyze(
    request: Request,
    payload: AnalysisRequest,
    gateway: AnalysisGateway = Depends(get_analysis_gateway),
):
    _ = request
    result = await gateway.analyze(payload)
    # The model's object is forwarded as-is; AnalysisResponse only documents the shape.
    return JSONResponse(content=result)
