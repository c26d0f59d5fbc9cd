from __future__ import annotations

import os
from typing import Optional, Sequence

from openai import AsyncOpenAI

from resume_analyzer.ai.types import ChatMessage


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        max_retries: int = 0,
        json_mode: bool = True,
    ):
        self._model = model
        self._json_mode = json_mode
        key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is missing")

        # max_retries=0: a failed call is reported once, never replayed.
        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(base_url or None),
            timeout=timeout_s,
            max_retries=max_retries,
        )

    @property
    def model(self) -> str:
        return self._model

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        temperature: float,
        max_tokens: int,
    ) -> str | None:
        payload = [{"role": m.role, "content": m.content} for m in messages]

        create_kwargs = {
            "model": self._model,
            "messages": payload,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if self._json_mode:
            create_kwargs["response_format"] = {"type": "json_object"}

        response = await self._client.chat.completions.create(**create_kwargs)
        if not response.choices:
            return None
        return response.choices[0].message.content
