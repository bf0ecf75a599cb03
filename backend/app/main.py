import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import get_evaluator, router
from app.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


# =============================================================================
# LIFESPAN: Startup and Shutdown Logic
# =============================================================================
#
# Everything BEFORE 'yield' runs once on startup, everything AFTER on shutdown.
# No database here; the only resource is the shared OpenAI client behind
# get_evaluator(), created on the first request and closed on shutdown.
#
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""

    # === STARTUP ===
    # Warn only; /health must still answer without a key
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; trust score requests will fail")

    yield

    # === SHUTDOWN ===
    # Close the OpenAI client's connection pool, if a request ever opened it
    if get_evaluator.cache_info().currsize:
        await get_evaluator().client.close()
        get_evaluator.cache_clear()


app = FastAPI(
    title="Developer Trust Score",
    description="LLM-simulated reputation analysis of a developer's public profiles",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
