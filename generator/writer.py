"""Resolve output locations and persist generated content."""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path
from typing import Any, TextIO

import aiofiles
import aiofiles.os

from utils import get_logger

from .errors import HomeDirectoryError, OutputWriteError, UnknownItemTypeError
from .types import ItemType, WriterConfig

logger = get_logger(__name__)

DIR_MODE = 0o755
FILE_MODE = 0o644


def _user_home_dir() -> str:
    try:
        return str(Path.home())
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryError(f"failed to get user home directory: {e}") from e


class Writer:
    """Write generated items under the configured output directory, or to stdout on dry run."""

    def __init__(self, config: WriterConfig, stream: TextIO | None = None) -> None:
        self.config = config
        self.stream = stream

    async def write(self, item_type: Any, name: str, content: str) -> None:
        """Persist content for an item.

        In dry-run mode the content plus a trailing newline goes to the stream and
        nothing touches the file system. Otherwise parent directories are created
        (0755) and the file is written with exactly ``content`` (0644).

        Raises:
            UnknownItemTypeError: If item_type is not an ItemType
            HomeDirectoryError: If ``~`` cannot be expanded
            OutputWriteError: If a directory or the file cannot be written
        """
        if self.config.dry_run:
            stream = self.stream or sys.stdout
            stream.write(f"{content}\n")
            stream.flush()
            return

        output_path = self.get_output_path(item_type, name)
        parent_dir = os.path.dirname(output_path)

        try:
            await aiofiles.os.makedirs(parent_dir, mode=DIR_MODE, exist_ok=True)
        except OSError as e:
            raise OutputWriteError("create parent directory", parent_dir, str(e)) from e

        try:
            async with aiofiles.open(output_path, "w", encoding="utf-8", newline="") as handle:
                await handle.write(content)
            await asyncio.to_thread(os.chmod, output_path, FILE_MODE)
        except OSError as e:
            raise OutputWriteError("write file", output_path, str(e)) from e

        logger.debug(f"Wrote {item_type} '{name}' to {output_path} ({len(content)} chars)")

    def get_output_path(self, item_type: Any, name: str) -> str:
        """Return where an item is written.

        - skill: ``<output_dir>/skills/<name>/SKILL.md``
        - agent: ``<output_dir>/agents/<name>.md``
        - command: ``<output_dir>/commands/<name>.md``

        The name is used as given, so separators in it produce nested directories.
        A leading separator is dropped, so an absolute name nests under the
        category directory instead of replacing the output directory.
        """
        if not isinstance(item_type, ItemType):
            raise UnknownItemTypeError(item_type)

        output_dir = self.expand_home_dir(self.config.output_dir)
        # Absolute names nest under the category directory
        name = name.lstrip(os.sep)

        if item_type is ItemType.SKILL:
            relative_path = os.path.join("skills", name, "SKILL.md")
        elif item_type is ItemType.AGENT:
            relative_path = os.path.join("agents", f"{name}.md")
        elif item_type is ItemType.COMMAND:
            relative_path = os.path.join("commands", f"{name}.md")
        else:
            raise UnknownItemTypeError(item_type)

        return os.path.normpath(os.path.join(output_dir, relative_path))

    @staticmethod
    def expand_home_dir(path: str) -> str:
        """Expand a leading ``~`` or ``~/`` to the home directory.

        Only those two shapes are expanded. ``~user`` and tildes further into the
        path are returned unchanged.
        """
        if not path.startswith("~"):
            return path

        home_dir = _user_home_dir()

        if path == "~":
            return home_dir

        if path.startswith("~/"):
            return os.path.join(home_dir, path[2:])

        return path
