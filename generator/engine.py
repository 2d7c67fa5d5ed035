"""Template index for skills, agents and commands.

Templates ship with the package under ``generator/templates`` using the same
layout they are written out with:

- ``skills/<name>/SKILL.md``
- ``agents/<name>.md``
- ``commands/<name>.md``

The index is read once when an Engine is created and never changes afterwards.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List

from utils import get_logger

from .errors import TemplateNotFoundError
from .parser import frontmatter_field, list_markdown_templates, list_skill_templates, read_text
from .types import ItemType, TemplateInfo

logger = get_logger(__name__)

BUILTIN_TEMPLATES_DIR = Path(__file__).parent / "templates"

_DISCOVERY: Dict[ItemType, Callable[[Path], Dict[str, Path]]] = {
    ItemType.SKILL: list_skill_templates,
    ItemType.AGENT: list_markdown_templates,
    ItemType.COMMAND: list_markdown_templates,
}


class Engine:
    """Read-only store of raw template content keyed by item type and name."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = Path(templates_dir) if templates_dir else BUILTIN_TEMPLATES_DIR
        self.templates: dict[ItemType, dict[str, str]] = {}
        self._load()

    def _load(self) -> None:
        for item_type, discover in _DISCOVERY.items():
            category_dir = self.templates_dir / item_type.plural
            self.templates[item_type] = {
                name: read_text(path) for name, path in sorted(discover(category_dir).items())
            }
            logger.debug(
                f"Loaded {len(self.templates[item_type])} {item_type} template(s) from {category_dir}"
            )

    def _templates_for(self, item_type: Any) -> dict[str, str] | None:
        # "skill" == ItemType.SKILL for a str enum; only real members are keys
        if not isinstance(item_type, ItemType):
            return None
        return self.templates.get(item_type)

    def list(self, item_type: Any) -> List[str]:
        """Return template names for a type in alphabetical order.

        Anything that is not an ItemType, plain strings included, has no
        templates and returns an empty list.
        """
        return sorted(self._templates_for(item_type) or {})

    def generate(self, item_type: Any, name: str) -> str:
        """Return the content registered for ``(item_type, name)``.

        Raises:
            TemplateNotFoundError: If the type has no templates or the name is absent
        """
        templates = self._templates_for(item_type)
        if templates is None:
            raise TemplateNotFoundError(item_type, name, type_known=False)

        content = templates.get(name)
        if content is None:
            raise TemplateNotFoundError(item_type, name)
        return content

    def describe(self, item_type: Any) -> List[TemplateInfo]:
        """Return name and frontmatter description for every template of a type."""
        return [
            TemplateInfo(
                item_type=item_type,
                name=name,
                description=frontmatter_field(self.templates[item_type][name], "description"),
            )
            for name in self.list(item_type)
        ]
