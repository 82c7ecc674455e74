from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException

from app.agents.orchestrator import ChatOrchestrator
from app.api.deps import get_orchestrator
from app.models.schemas import ChatRequest, ChatResponse, ErrorResponse
from app.services import context_store

router = APIRouter(tags=["chat"])


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    request: ChatRequest,
    background_tasks: BackgroundTasks,
    orchestrator: ChatOrchestrator = Depends(get_orchestrator),
):
    """Answer one message. The turn is stored after the reply is sent."""
    message = request.message or ""
    session_id = request.session_id or ""
    if not message.strip() or not session_id.strip():
        raise HTTPException(status_code=400, detail="Message and session_id are required")

    reply = await orchestrator.respond(message, session_id)
    background_tasks.add_task(context_store.append_turn, session_id, message, reply.text)
    return ChatResponse(response=reply.text, suggestions=reply.suggestions)
