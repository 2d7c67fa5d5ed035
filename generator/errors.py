"""Exceptions raised by the generation engine, writer and generator."""

from __future__ import annotations

from typing import Any


class PromptGeneratorError(Exception):
    """Base class for all prompt generation errors."""


class TemplateNotFoundError(PromptGeneratorError, LookupError):
    """Raised when no template is registered for a type or a (type, name) pair."""

    def __init__(self, item_type: Any, name: str, type_known: bool = True) -> None:
        self.item_type = item_type
        self.name = name
        if type_known:
            message = f"template {name} not found for type {item_type}"
        else:
            message = f"no templates found for type: {item_type}"
        super().__init__(message)


class UnknownItemTypeError(PromptGeneratorError, ValueError):
    """Raised when a value is not one of the known item types."""

    def __init__(self, item_type: Any) -> None:
        self.item_type = item_type
        super().__init__(f"unknown item type: {item_type}")


class HomeDirectoryError(PromptGeneratorError, RuntimeError):
    """Raised when the current user's home directory cannot be determined."""


class OutputWriteError(PromptGeneratorError):
    """Raised when a directory or file cannot be created on disk."""

    def __init__(self, operation: str, path: str, reason: str) -> None:
        self.operation = operation
        self.path = path
        super().__init__(f"failed to {operation} {path}: {reason}")


class GenerationError(PromptGeneratorError, RuntimeError):
    """Raised by Generator when producing or persisting an item fails."""
