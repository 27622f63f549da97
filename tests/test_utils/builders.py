"""Builders for valid artifact documents and source trees."""

from pathlib import Path
from typing import Any

import yaml

from projectkit.models.instruction import Instructions
from projectkit.models.mcp import McpServer
from projectkit.models.skill import Skill
from projectkit.models.standard import Standard
from projectkit.models.workflow import Workflow


def write_yaml(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return path


def standard_data(
    standard_id: str = "error-handling", name: str = "Error Handling"
) -> dict[str, Any]:
    return {
        "metadata": {
            "id": standard_id,
            "name": name,
            "version": "1.0.0",
            "tags": ["errors"],
            "scope": {"languages": ["en"]},
        },
        "specification": {
            "purpose": "Make failures visible and actionable.",
            "goals": ["Every error carries its cause."],
        },
        "requirements": {
            "rules": [
                {
                    "level": "must",
                    "statement": "Wrap errors with the failing step.",
                    "rationale": "Context shortens debugging sessions.",
                }
            ]
        },
        "examples": {
            "good": [
                {
                    "title": "Wrapped error",
                    "language": "go",
                    "snippet": 'return fmt.Errorf("load: %w", err)',
                    "reason": "The cause stays inspectable.",
                }
            ]
        },
    }


def workflow_data(workflow_id: str = "release", name: str = "Release") -> dict[str, Any]:
    return {
        "metadata": {
            "id": workflow_id,
            "name": name,
            "description": "Cut a release",
            "version": "1.0.0",
        },
        "steps": [
            {
                "id": "tag",
                "name": "Tag",
                "description": "Tag the release commit",
                "instructions": ["Run git tag"],
            }
        ],
    }


def mcp_data(name: str = "search", executable: str = "/usr/bin/search") -> dict[str, Any]:
    return {"name": name, "stdio": {"executablePath": executable}}


def make_instructions(category: str, rules: list[str]) -> Instructions:
    return Instructions(category=category, rules=rules)


def make_standard(standard_id: str = "error-handling", name: str = "Error Handling") -> Standard:
    return Standard.model_validate(standard_data(standard_id, name))


def make_workflow(workflow_id: str = "release", name: str = "Release") -> Workflow:
    return Workflow.model_validate(workflow_data(workflow_id, name))


def make_mcp_server(name: str = "search", executable: str = "/usr/bin/search") -> McpServer:
    return McpServer.model_validate(mcp_data(name, executable))


def make_skill(
    name: str = "git-commit",
    description: str = "Commit staged changes",
    instructions: str = "Write a conventional commit message.\n",
    scripts: dict[str, bytes] | None = None,
) -> Skill:
    return Skill.model_validate(
        {
            "metadata": {"name": name, "description": description},
            "instructions": instructions,
            "scripts": {
                script_name: {"contentType": "application/x-sh", "content": content}
                for script_name, content in (scripts or {}).items()
            },
        }
    )


def write_skill_dir(
    root: Path,
    dir_name: str,
    name: str = "git-commit",
    description: str = "Commit staged changes",
    instructions: str = "Write a conventional commit message.\n",
    scripts: dict[str, bytes] | None = None,
) -> Path:
    skill_dir = root / dir_name
    write_yaml(skill_dir / "metadata.yaml", {"name": name, "description": description})
    (skill_dir / "instructions.md").write_text(instructions, encoding="utf-8")
    for script_name, content in (scripts or {}).items():
        script_path = skill_dir / "scripts" / script_name
        script_path.parent.mkdir(parents=True, exist_ok=True)
        script_path.write_bytes(content)
    return skill_dir
