"""Installation orchestrator for Proxy MCP."""

from .bootstrap import STAGES, InstallContext, PipelineResult, Stage, full_install, run_pipeline

__all__ = [
    "STAGES",
    "InstallContext",
    "PipelineResult",
    "Stage",
    "full_install",
    "run_pipeline",
]
