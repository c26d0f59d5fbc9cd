from fastapi import APIRouter

from resume_analyzer.ai.config import load_ai_config
from resume_analyzer.core.config import settings

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report liveness and the configured analysis model.")
async def health_check():
    cfg = load_ai_config()
    return {
        "status": "healthy",
        "model": cfg.model,
        "strictValidation": settings.analysis_strict_validation,
    }
