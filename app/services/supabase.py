from __future__ import annotations

import asyncio
from typing import Any

from supabase import Client, create_client

from app.config import settings


def get_client() -> Client:
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


_client: Client | None = None


def client() -> Client:
    global _client
    if _client is None:
        _client = get_client()
    return _client


async def _execute(query: Any) -> Any:
    """Run blocking Supabase query execution in a worker thread."""
    return await asyncio.to_thread(query.execute)


# --- Conversations ---


async def insert_turn(session_id: str, user_message: str, bot_response: str) -> dict[str, Any]:
    row = {
        "session_id": session_id,
        "user_message": user_message,
        "bot_response": bot_response,
    }
    result = await _execute(client().table(settings.conversations_table).insert(row))
    return result.data[0] if result.data else row


async def get_recent_turns(session_id: str, limit: int) -> list[dict[str, Any]]:
    """Most recent turns for a session, newest first."""
    result = await _execute(
        client()
        .table(settings.conversations_table)
        .select("user_message, bot_response, created_at")
        .eq("session_id", session_id)
        .order("created_at", desc=True)
        .limit(limit)
    )
    return result.data or []
