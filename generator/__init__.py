"""Prompt template generation for skills, agents and commands."""

from .engine import BUILTIN_TEMPLATES_DIR, Engine
from .errors import (
    GenerationError,
    HomeDirectoryError,
    OutputWriteError,
    PromptGeneratorError,
    TemplateNotFoundError,
    UnknownItemTypeError,
)
from .generator import Generator
from .types import ItemType, TemplateInfo, WriterConfig
from .writer import Writer

__all__ = [
    "BUILTIN_TEMPLATES_DIR",
    "Engine",
    "GenerationError",
    "Generator",
    "HomeDirectoryError",
    "ItemType",
    "OutputWriteError",
    "PromptGeneratorError",
    "TemplateInfo",
    "TemplateNotFoundError",
    "UnknownItemTypeError",
    "Writer",
    "WriterConfig",
]
