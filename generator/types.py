"""Data models for prompt generation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import UnknownItemTypeError


class ItemType(str, Enum):
    """Category of a generated item. Decides template partition and output layout."""

    SKILL = "skill"
    AGENT = "agent"
    COMMAND = "command"

    def __str__(self) -> str:
        return self.value

    @property
    def plural(self) -> str:
        return f"{self.value}s"

    @classmethod
    def parse(cls, value: str) -> "ItemType":
        """Convert user input such as ``skill`` or ``Agents`` into an ItemType.

        Raises:
            UnknownItemTypeError: If the value names no known category
        """
        normalized = str(value).strip().lower()
        for item_type in cls:
            if normalized in (item_type.value, item_type.plural):
                return item_type
        raise UnknownItemTypeError(value)


@dataclass(frozen=True)
class WriterConfig:
    """Where generated items go.

    Attributes:
        output_dir: Base output directory; a leading ``~`` is expanded on use
        dry_run: Print content to stdout instead of writing files
    """

    output_dir: str
    dry_run: bool = False


@dataclass(frozen=True)
class TemplateInfo:
    item_type: ItemType
    name: str
    description: str
