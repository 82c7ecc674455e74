from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from app.api.routes import chat
from app.config import settings
from app.models.schemas import HealthResponse
from app.services import logger as log_service


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_service.log_event(
        event_type="startup",
        message="BoTesh API starting",
        providers=settings.generation_provider_list,
    )
    yield


app = FastAPI(
    title="BoTesh",
    description="Search-grounded chat assistant with provider fallback",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(HTTPException)
async def http_error(request: Request, exc: HTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def malformed_request(request: Request, exc: RequestValidationError):
    logger.warning(f"Malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"Unhandled error in {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Routes
app.include_router(chat.router)


@app.get("/health", response_model=HealthResponse)
async def health():
    return {"status": "ok"}
