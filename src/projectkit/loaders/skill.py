"""Loader for skills, which live in directories rather than single files.

Layout of one skill::

    <skill>/
        metadata.yaml      name and description
        instructions.md    body of the skill
        scripts/           optional helper scripts, one file each
"""

from pathlib import Path

from projectkit.io.documents import load_yaml_document, read_bytes, read_text, validate_document
from projectkit.loaders.base import ArtifactLoader
from projectkit.models.skill import Script, Skill, SkillMetadata, content_type_for

SKILL_METADATA_FILE = "metadata.yaml"
SKILL_INSTRUCTIONS_FILE = "instructions.md"
SKILL_SCRIPTS_DIR = "scripts"


class SkillLoader(ArtifactLoader[Skill]):
    kind = "skills"

    def accepts(self, entry: Path) -> bool:
        return entry.is_dir()

    def load_entry(self, entry: Path) -> Skill:
        metadata = load_yaml_document(SkillMetadata, entry / SKILL_METADATA_FILE)
        instructions = read_text(entry / SKILL_INSTRUCTIONS_FILE)
        scripts = self._load_scripts(entry / SKILL_SCRIPTS_DIR)

        return validate_document(
            Skill,
            {"metadata": metadata, "instructions": instructions, "scripts": scripts},
            entry,
        )

    def _load_scripts(self, scripts_dir: Path) -> dict[str, Script]:
        if not scripts_dir.is_dir():
            return {}

        scripts: dict[str, Script] = {}
        for script_path in sorted(scripts_dir.iterdir(), key=lambda path: path.name):
            if script_path.is_dir():
                continue
            scripts[script_path.name] = Script(
                content_type=content_type_for(script_path.name),
                content=read_bytes(script_path),
            )
        return scripts
