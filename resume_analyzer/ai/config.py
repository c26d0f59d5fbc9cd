import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str | None = None
    base_url: str | None = None
    timeout_s: float = 30.0


def load_ai_config() -> AIConfig:
    """Read provider settings from the environment at call time, not at import."""
    provider = (os.getenv("AI_PROVIDER") or "openai").strip().lower()
    model = (os.getenv("AI_MODEL") or "gpt-4o-mini").strip()
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip() or None
    base_url = (os.getenv("OPENAI_BASE_URL") or "").strip() or None
    try:
        timeout_s = float(os.getenv("OPENAI_TIMEOUT_S", "30"))
    except ValueError:
        timeout_s = 30.0
    return AIConfig(
        provider=provider,
        model=model,
        api_key=api_key,
        base_url=base_url,
        timeout_s=timeout_s,
    )
