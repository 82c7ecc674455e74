from __future__ import annotations

import asyncio

from loguru import logger

from app.agents.intent import IntentClassifier, RegexIntentClassifier, news_topic
from app.agents.query_rewriter import QueryRewriter
from app.config import settings
from app.llm_client import GenerationProvider
from app.llm_client import provider as get_provider
from app.llm_client import providers as configured_providers
from app.models.chat import ChatReply, Intent
from app.services import context_store, formatting, prompt_composer, search_aggregator
from app.services import logger as log_service
from app.services.fallback_chain import FallbackChain
from app.tools import news_api


class ChatOrchestrator:
    """Answers one chat message.

    Flow:
      1. Classify the message (chit-chat, news, general)
      2. Chit-chat: short reply from the fallback chain, no search
      3. News: fetch live headlines and format them
      4. General: rewrite the query, then search and read history
         concurrently, compose a sourced prompt and generate
      5. Link bare URLs in generated text

    `respond` never persists; `handle` also appends the turn.
    """

    def __init__(
        self,
        *,
        providers: list[GenerationProvider] | None = None,
        rewriter: QueryRewriter | None = None,
        classifier: IntentClassifier | None = None,
    ):
        chain_providers = configured_providers() if providers is None else providers
        self.chain = FallbackChain(chain_providers)
        self.rewriter = rewriter or QueryRewriter(get_provider(settings.rewrite_provider))
        self.classifier = classifier or RegexIntentClassifier()

    async def respond(self, message: str, session_id: str) -> ChatReply:
        intent = self.classifier.classify(message)
        log_service.log_event(
            event_type="chat_request",
            message="Chat request classified",
            session_id=session_id,
            intent=intent.value,
        )

        if intent is Intent.CHIT_CHAT:
            text = await self._chit_chat(message)
        elif intent is Intent.NEWS:
            text = await self._news(message)
        else:
            text = await self._general(message, session_id)

        return ChatReply(
            intent=intent,
            text=text,
            suggestions=formatting.follow_up_suggestions(message),
        )

    async def handle(self, message: str, session_id: str) -> ChatReply:
        reply = await self.respond(message, session_id)
        await context_store.append_turn(session_id, message, reply.text)
        return reply

    async def _chit_chat(self, message: str) -> str:
        request = prompt_composer.compose_chit_chat(message)
        text = await self.chain.generate(
            request.prompt,
            request.system_prompt,
            max_tokens=settings.chat_max_tokens,
        )
        return formatting.autolink_urls(text)

    async def _news(self, message: str) -> str:
        topic = news_topic(message)
        articles = await news_api.get_live_news(topic)
        if not articles:
            return formatting.NEWS_UNAVAILABLE
        return formatting.format_news(articles)

    async def _general(self, message: str, session_id: str) -> str:
        rewritten = await self.rewriter.rewrite(message)

        results, history = await asyncio.gather(
            search_aggregator.aggregate(rewritten),
            context_store.get_history(session_id, settings.context_window_turns),
        )
        logger.info(f"Composing answer from {len(results)} sources and {len(history)} prior turns")

        request = prompt_composer.compose_general(message, rewritten, results, history)
        text = await self.chain.generate(
            request.prompt,
            request.system_prompt,
            max_tokens=settings.answer_max_tokens,
        )
        return formatting.autolink_urls(text)
