"""orchestrator — SpherePatternOrchestrator public API."""

from knitsphere.orchestrator.pipeline import OrchestratorOutput, SpherePatternOrchestrator

__all__ = ["OrchestratorOutput", "SpherePatternOrchestrator"]
