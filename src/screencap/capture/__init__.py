"""Capture package - backends, tool chains and the orchestrator."""

from .external_tool import ExternalToolBackend
from .fullscreen import FullscreenBackend
from .orchestrator import CaptureOrchestrator, CaptureOutcome
from .tool_chains import TOOL_CHAINS, ToolSpec, get_tool_chain, run_tool_chain

__all__ = [
    "CaptureOrchestrator",
    "CaptureOutcome",
    "ExternalToolBackend",
    "FullscreenBackend",
    "TOOL_CHAINS",
    "ToolSpec",
    "get_tool_chain",
    "run_tool_chain",
]
