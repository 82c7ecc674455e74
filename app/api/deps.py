from __future__ import annotations

from app.agents.orchestrator import ChatOrchestrator

_orchestrator: ChatOrchestrator | None = None


def get_orchestrator() -> ChatOrchestrator:
    """Process-wide orchestrator; holds no per-request state."""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = ChatOrchestrator()
    return _orchestrator
