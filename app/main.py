"""Main FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
from app.config import settings
from app.core.room_relay import room_relay
import logging

from app.api.chat import router as chat_router, llm_client
from app.api.rooms import router as rooms_router

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manages application startup and shutdown events."""
    # Startup
    logger.info("Starting Mind's Soul AI Backend")
    if not llm_client.is_configured:
        logger.error("GOOGLE_API_KEY is not set! Chat requests will fail until it is.")

    yield

    # Shutdown
    logger.info("Shutting down Mind's Soul AI Backend")
    room_relay.clear()


app = FastAPI(
    title="Mind's Soul AI Backend",
    description="Supportive chat with 10-day plan generation, plus room messaging",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat_router)
app.include_router(rooms_router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Liveness string."""
    return "Mind's Soul AI Backend is running!"


@app.get("/health")
async def health_check():
    """Performs a health check of the API and its dependent services."""
    return {
        "status": "healthy",
        "model_configured": llm_client.is_configured,
        "active_connections": room_relay.active_connections,
        "active_rooms": room_relay.active_rooms,
    }


@app.get("/rooms")
async def get_rooms():
    """(Admin) Gets information about all active rooms."""
    return room_relay.get_room_info()
