"""Orchestrate template lookup and output writing."""

from __future__ import annotations

from typing import Any, List, TextIO

from utils import get_logger

from .engine import Engine
from .errors import GenerationError, PromptGeneratorError
from .types import TemplateInfo, WriterConfig
from .writer import Writer

logger = get_logger(__name__)


class Generator:
    """Single entry point for generating, batch generating and listing items."""

    def __init__(
        self,
        config: WriterConfig,
        engine: Engine | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.config = config
        self.engine = engine or Engine()
        self.writer = Writer(config, stream=stream)

    async def generate(self, item_type: Any, name: str) -> str:
        """Generate one item and write it out.

        Returns:
            Path of the written file, or an empty string on dry run

        Raises:
            GenerationError: If the template lookup or the write fails
        """
        try:
            content = self.engine.generate(item_type, name)
        except PromptGeneratorError as e:
            raise GenerationError(f"failed to generate content: {e}") from e

        try:
            await self.writer.write(item_type, name, content)
        except (PromptGeneratorError, OSError) as e:
            raise GenerationError(f"failed to write content: {e}") from e

        if self.config.dry_run:
            return ""
        return self.writer.get_output_path(item_type, name)

    async def generate_all(self, item_type: Any) -> List[str]:
        """Generate every template of a type, stopping at the first failure.

        Items processed before a failure stay on disk; later items are not attempted.
        """
        written: List[str] = []
        for name in self.engine.list(item_type):
            path = await self.generate(item_type, name)
            if path:
                written.append(path)
        logger.info(f"Generated {len(written)} {item_type}(s) into {self.config.output_dir}")
        return written

    def list(self, item_type: Any) -> List[str]:
        return self.engine.list(item_type)

    def describe(self, item_type: Any) -> List[TemplateInfo]:
        return self.engine.describe(item_type)
