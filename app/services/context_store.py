"""Bounded conversation history on top of the Supabase conversations table.

Reads degrade to an empty history and writes are best-effort: neither ever
raises into the request that uses them.
"""
from __future__ import annotations

from app.config import settings
from app.models.chat import HistoryTurn
from app.services import logger as log_service
from app.services import supabase as db


async def get_history(session_id: str, n: int | None = None) -> list[HistoryTurn]:
    """Return at most `n` prior turns for the session, oldest first."""
    limit = settings.context_window_turns if n is None else n
    if limit <= 0:
        return []
    try:
        rows = await db.get_recent_turns(session_id, limit)
    except Exception as e:
        log_service.log_db_operation(
            "select", settings.conversations_table, "failed", details=session_id, error=str(e)
        )
        return []

    log_service.log_db_operation(
        "select", settings.conversations_table, "success", details=f"{session_id}: {len(rows)} rows"
    )
    return [
        HistoryTurn(user=row.get("user_message") or "", bot=row.get("bot_response") or "")
        for row in reversed(rows[:limit])
    ]


async def append_turn(session_id: str, user_message: str, bot_response: str) -> bool:
    """Persist one completed exchange. Failure is logged, never raised."""
    try:
        await db.insert_turn(session_id, user_message, bot_response)
    except Exception as e:
        log_service.log_db_operation(
            "insert", settings.conversations_table, "failed", details=session_id, error=str(e)
        )
        return False
    log_service.log_db_operation("insert", settings.conversations_table, "success", details=session_id)
    return True
