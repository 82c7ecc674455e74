from __future__ import annotations

from pydantic import BaseModel


# --- Requests ---


class ChatRequest(BaseModel):
    # Optional here so missing fields get the 400 error body, not a 422.
    message: str | None = None
    session_id: str | None = None


# --- Responses ---


class ChatResponse(BaseModel):
    response: str
    suggestions: list[str] = []


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
