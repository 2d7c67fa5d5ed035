"""Frontmatter parsing and discovery helpers for bundled templates."""

from __future__ import annotations

from pathlib import Path

import yaml

SKILL_FILENAME = "SKILL.md"


def split_frontmatter(text: str) -> tuple[dict[str, object], str]:
    """Split a ``---`` delimited YAML header from a markdown body.

    Text without a well-formed header comes back untouched with empty metadata.
    """
    lines = text.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, text

    end_idx = next((i for i in range(1, len(lines)) if lines[i].strip() == "---"), None)
    if end_idx is None:
        return {}, text

    header = "\n".join(lines[1:end_idx])
    body = "\n".join(lines[end_idx + 1 :])

    try:
        data = yaml.safe_load(header) or {}
    except yaml.YAMLError:
        return {}, text

    if not isinstance(data, dict):
        return {}, body

    return data, body


def frontmatter_field(text: str, key: str) -> str:
    frontmatter, _ = split_frontmatter(text)
    return str(frontmatter.get(key, "") or "").strip()


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def list_skill_templates(skills_dir: Path) -> dict[str, Path]:
    """Map skill name to its ``<name>/SKILL.md`` file."""
    if not skills_dir.is_dir():
        return {}

    results: dict[str, Path] = {}
    for entry in skills_dir.iterdir():
        if not entry.is_dir():
            continue
        candidate = entry / SKILL_FILENAME
        if candidate.is_file():
            results[entry.name] = candidate
    return results


def list_markdown_templates(directory: Path) -> dict[str, Path]:
    """Map file stem to path for every ``*.md`` file directly under directory."""
    if not directory.is_dir():
        return {}
    return {p.stem: p for p in directory.glob("*.md") if p.is_file()}
