"""Top-level operations composed from loaders, repositories and agents."""

from projectkit.actions.render_agent import RenderAgentAction
from projectkit.actions.render_doc_standard import RenderDocStandardAction
from projectkit.actions.update import IngestedArtifacts, UpdateAction
from projectkit.actions.validate_doc_standard import ValidateDocStandardAction

__all__ = [
    "IngestedArtifacts",
    "RenderAgentAction",
    "RenderDocStandardAction",
    "UpdateAction",
    "ValidateDocStandardAction",
]
