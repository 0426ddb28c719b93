"""Core module - shared state and helper functions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from config import get_config
from tutor.engine.grading import GradingOrchestrator
from tutor.llm.client import ReasoningClient
from tutor.storage.note_store import NoteStore
from tutor.storage.session_store import SessionStore

if TYPE_CHECKING:
    from agentfs_sdk import AgentFS

logger = logging.getLogger(__name__)

# =============================================================================
# CONFIGURATION
# =============================================================================

AGENTFS_DIR = Path.cwd() / ".agentfs"

# Global instances
agentfs: Optional[AgentFS] = None
sessions = SessionStore()
reasoning_client: Optional[ReasoningClient] = None
orchestrator: Optional[GradingOrchestrator] = None


# =============================================================================
# DEPENDENCIES
# =============================================================================


async def get_agentfs() -> AgentFS:
    """Get AgentFS instance (opened lazily, shared by the note store)."""
    global agentfs

    if agentfs is None:
        from agentfs_sdk import AgentFS, AgentFSOptions

        agentfs_id = get_config().agentfs_id
        agentfs = await AgentFS.open(AgentFSOptions(id=agentfs_id))
        logger.info(f"AgentFS aberto: {agentfs_id}")

    return agentfs


async def get_note_store() -> NoteStore:
    """Dependency para obter NoteStore."""
    return NoteStore(await get_agentfs())


def get_session_store() -> SessionStore:
    """Dependency para obter o registro de sessões."""
    return sessions


def get_reasoning_client() -> ReasoningClient:
    """Dependency para obter ReasoningClient (instância única)."""
    global reasoning_client
    if reasoning_client is None:
        reasoning_client = ReasoningClient()
    return reasoning_client


def get_grading_orchestrator() -> GradingOrchestrator:
    """Dependency para obter GradingOrchestrator (instância única)."""
    global orchestrator
    if orchestrator is None:
        orchestrator = GradingOrchestrator(get_reasoning_client())
    return orchestrator


async def cleanup():
    """Cleanup resources on shutdown."""
    global agentfs

    for session in sessions.all():
        if session.feedback_task and not session.feedback_task.done():
            session.feedback_task.cancel()

    if agentfs is not None:
        try:
            await agentfs.close()
            logger.info("AgentFS closed!")
        except Exception as e:
            logger.warning(f"Error closing agentfs: {e}")
        agentfs = None
