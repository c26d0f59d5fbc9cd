from resume_analyzer.ai.config import AIConfig, load_ai_config
from resume_analyzer.ai.types import CompletionClient

from resume_analyzer.ai.providers.openai_provider import OpenAIProvider


def get_ai_client(cfg: AIConfig | None = None) -> CompletionClient:
    cfg = cfg or load_ai_config()

    if cfg.provider == "openai":
        return OpenAIProvider(
            model=cfg.model,
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
        )

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
