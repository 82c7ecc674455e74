from __future__ import annotations

import time
from typing import Sequence

from app.llm_client import GenerationProvider
from app.services import logger as log_service

DEGRADED_MESSAGE = "Limit reached. Please try again later after some time."


class FallbackChain:
    """Try each provider once, in order, until one returns non-empty text.

    When every provider fails the chain returns DEGRADED_MESSAGE instead of
    raising, so callers always get a reply to show and persist.
    """

    def __init__(self, providers: Sequence[GenerationProvider], *, caller: str = "chat"):
        self.providers = list(providers)
        self.caller = caller

    async def generate(self, prompt: str, system: str, *, max_tokens: int) -> str:
        for provider in self.providers:
            model = getattr(provider, "model", "")
            t0 = time.monotonic()
            try:
                text = await provider.generate(prompt, system, max_tokens=max_tokens)
            except Exception as e:
                log_service.log_llm_call(
                    provider=provider.name,
                    model=model,
                    caller=self.caller,
                    duration_ms=int((time.monotonic() - t0) * 1000),
                    status="failed",
                    error=f"{type(e).__name__}: {e}",
                )
                continue

            elapsed_ms = int((time.monotonic() - t0) * 1000)
            if not text or not text.strip():
                log_service.log_llm_call(
                    provider=provider.name,
                    model=model,
                    caller=self.caller,
                    duration_ms=elapsed_ms,
                    status="failed",
                    error="empty completion",
                )
                continue

            log_service.log_llm_call(
                provider=provider.name,
                model=model,
                caller=self.caller,
                duration_ms=elapsed_ms,
            )
            return text

        log_service.log_event(
            event_type="generation_degraded",
            message="All generation providers failed",
            caller=self.caller,
            providers=[p.name for p in self.providers],
        )
        return DEGRADED_MESSAGE
