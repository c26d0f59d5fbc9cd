import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from resume_analyzer.api.analyze import router as analyze_router
from resume_analyzer.api.extract import router as extract_router
from resume_analyzer.api.health import router as health_router
from resume_analyzer.core.config import settings
from resume_analyzer.core.errors import register_exception_handlers
from resume_analyzer.core.rate_limit import limiter

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="Resume Analyzer API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_origin_regex=settings.cors_allow_origin_regex,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)
register_exception_handlers(app)

app.include_router(health_router, prefix="/api", tags=["Health"])
app.include_router(extract_router, prefix="/api", tags=["Extract"])
app.include_router(analyze_router, prefix="/api", tags=["Analyze"])
