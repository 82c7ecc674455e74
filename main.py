"""BoTesh - search-grounded chat assistant

Simple CLI for asking one question, or serving the HTTP API.
"""

import argparse
import asyncio
import uuid

from app.agents.orchestrator import ChatOrchestrator
from app.config import settings


async def ask(message: str, session_id: str):
    """Answer one message and store the turn."""
    orchestrator = ChatOrchestrator()
    reply = await orchestrator.handle(message, session_id)

    print(f"[{reply.intent.value}] session {session_id}")
    print("-" * 50)
    print(reply.text)
    if reply.suggestions:
        print("\nTry next:")
        for suggestion in reply.suggestions:
            print(f"  - {suggestion}")


def serve():
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


def main():
    parser = argparse.ArgumentParser(description="BoTesh chat assistant")
    parser.add_argument("--query", "-q", help="Message to answer")
    parser.add_argument("--session", "-s", help="Session id (default: a new random id)")
    parser.add_argument("--serve", action="store_true", help="Run the HTTP API on HOST:PORT")

    args = parser.parse_args()

    if args.serve:
        serve()
        return
    if not args.query:
        parser.error("either --query or --serve is required")

    asyncio.run(ask(args.query, args.session or f"cli-{uuid.uuid4().hex[:8]}"))


if __name__ == "__main__":
    main()
