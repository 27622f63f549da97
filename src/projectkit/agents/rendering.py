"""File rendering shared by the built-in agents."""

import re
import shutil
from pathlib import Path

from projectkit.errors import AgentRenderError
from projectkit.models.instruction import Instructions
from projectkit.models.skill import Skill

SKILL_FILE_NAME = "SKILL.md"
SKILL_SCRIPTS_DIR = "scripts"
SCRIPT_MODE = 0o755

_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def category_heading(category: str) -> str:
    """Turn a category token into a spaced Title Case heading.

    ``user-communication`` and ``userCommunication`` both become
    ``User Communication``.
    """
    words = _WORD_RE.findall(category)
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def render_instructions_document(title: str, instructions: list[Instructions]) -> str:
    parts = [f"# {title}\n\n"]
    for entry in instructions:
        parts.append(f"## {category_heading(entry.category)}\n\n")
        parts.extend(f"- {rule}\n" for rule in entry.rules)
        parts.append("\n")
    return "".join(parts)


def render_skill_document(skill: Skill) -> str:
    return (
        "---\n"
        f"name: {skill.metadata.name}\n"
        f"description: {skill.metadata.description}\n"
        "---\n\n"
        f"{skill.instructions}"
    )


def write_text(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as err:
        raise AgentRenderError(path, str(err)) from err


def _child_path(parent: Path, name: str) -> Path:
    """Join ``name`` onto ``parent``, rejecting names that leave it."""
    child = parent / name
    if child.resolve().parent != parent.resolve():
        raise AgentRenderError(child, f"name {name!r} escapes {parent}")
    return child


def rebuild_skill_tree(skills_dir: Path, skills: list[Skill]) -> None:
    """Replace ``skills_dir`` with one sub-directory per skill."""
    layout = []
    for skill in skills:
        skill_dir = _child_path(skills_dir, skill.metadata.name)
        scripts_dir = skill_dir / SKILL_SCRIPTS_DIR
        scripts = [
            (_child_path(scripts_dir, name), script)
            for name, script in skill.scripts.items()
        ]
        layout.append((skill, skill_dir, scripts))

    try:
        if skills_dir.exists():
            shutil.rmtree(skills_dir)
    except OSError as err:
        raise AgentRenderError(skills_dir, str(err)) from err

    for skill, skill_dir, scripts in layout:
        write_text(skill_dir / SKILL_FILE_NAME, render_skill_document(skill))

        for script_path, script in scripts:
            try:
                script_path.parent.mkdir(parents=True, exist_ok=True)
                script_path.write_bytes(script.content)
                script_path.chmod(SCRIPT_MODE)
            except OSError as err:
                raise AgentRenderError(script_path, str(err)) from err
