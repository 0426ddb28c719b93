"""
Study Assistant Server - Powered by Claude Agent SDK

FastAPI server with:
- Topic explanations generated by Claude
- Mixed quizzes (multiple-choice + theory) generated from topic notes
- Local multiple-choice grading and AI grading of theory answers
- Personalized feedback delivered after the preliminary result
- Saved notes persisted in AgentFS
"""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

import app_state  # noqa: E402
from config import get_config  # noqa: E402
from routers import notes_router, tutor_router  # noqa: E402

config = get_config()

logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("server")


# =============================================================================
# FASTAPI APP
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage app lifecycle."""
    logger.info(f"Starting Study Assistant (model: {config.model.value})...")
    yield
    await app_state.cleanup()
    logger.info("Study Assistant stopped")


app = FastAPI(
    title="Study Assistant",
    description="AI-powered learning assistant: explanations, quizzes and graded results",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tutor_router)
app.include_router(notes_router)


# =============================================================================
# HEALTH ENDPOINTS
# =============================================================================


@app.get("/")
async def root():
    """Health check."""
    return {
        "status": "ok",
        "message": "Study Assistant - Claude Agent SDK",
        "active_sessions": len(app_state.sessions),
    }


@app.get("/health")
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "model": config.model.value,
        "active_sessions": len(app_state.sessions),
        "notes_store": "active" if app_state.agentfs is not None else "idle",
        "config": config.to_dict(),
    }


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8001)
