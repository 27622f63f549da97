"""Loaders for the YAML-backed artifact categories."""

from projectkit.loaders.base import YamlArtifactLoader
from projectkit.models.instruction import Instructions
from projectkit.models.mcp import McpServer
from projectkit.models.standard import Standard
from projectkit.models.workflow import Workflow


class InstructionLoader(YamlArtifactLoader[Instructions]):
    kind = "instructions"
    model = Instructions


class WorkflowLoader(YamlArtifactLoader[Workflow]):
    kind = "workflows"
    model = Workflow


class StandardLoader(YamlArtifactLoader[Standard]):
    kind = "standards"
    model = Standard


class McpServerLoader(YamlArtifactLoader[McpServer]):
    kind = "mcp servers"
    model = McpServer
