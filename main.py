"""Main entry point for prompt-generator."""

import argparse
import asyncio
import importlib.metadata
from typing import List, Optional, Sequence

from config import Config, ensure_config
from generator import Generator, ItemType, PromptGeneratorError, WriterConfig
from utils import get_log_file_path, get_logger, setup_logger, terminal_ui
from utils.runtime import ensure_runtime_dirs

logger = get_logger(__name__)


def _item_type_arg(value: str) -> ItemType:
    try:
        return ItemType.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prompt-generator",
        description="Generate Claude Code prompts for skills, agents, and commands from templates.",
    )

    try:
        version = importlib.metadata.version("prompt-generator")
    except importlib.metadata.PackageNotFoundError:
        version = "dev"
    parser.add_argument("--version", "-V", action="version", version=f"prompt-generator {version}")

    parser.add_argument(
        "--output",
        "-o",
        default=Config.OUTPUT_DIR,
        help=f"Output directory (default: {Config.OUTPUT_DIR})",
    )
    parser.add_argument(
        "--dry-run",
        "-d",
        action="store_true",
        help="Print to stdout instead of writing files",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Write debug logs to ~/.prompt-generator/logs/",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a specific item")
    generate.add_argument(
        "item_type",
        type=_item_type_arg,
        metavar="{skill,agent,command}",
        help="Kind of item to generate",
    )
    generate.add_argument("name", help="Template name, see `list`")

    list_cmd = subparsers.add_parser("list", help="List available items")
    list_cmd.add_argument(
        "item_type",
        type=_item_type_arg,
        metavar="{skills,agents,commands}",
        help="Kind of item to list",
    )

    generate_all = subparsers.add_parser(
        "generate-all",
        help="Generate all items, or all items of one type",
    )
    generate_all.add_argument(
        "item_type",
        nargs="?",
        type=_item_type_arg,
        metavar="{skills,agents,commands}",
        help="Only generate this type",
    )

    return parser


async def _run_generate(gen: Generator, item_type: ItemType, name: str) -> None:
    try:
        path = await gen.generate(item_type, name)
    except PromptGeneratorError as e:
        raise PromptGeneratorError(f"failed to generate {item_type} {name}: {e}") from e

    if path:
        terminal_ui.print_success(f"Generated {item_type} '{name}' at {path}")


async def _run_generate_all(gen: Generator, item_types: List[ItemType]) -> None:
    for item_type in item_types:
        try:
            written = await gen.generate_all(item_type)
        except PromptGeneratorError as e:
            raise PromptGeneratorError(f"failed to generate all {item_type.plural}: {e}") from e

        if not gen.config.dry_run and written:
            terminal_ui.print_success(f"Generated {len(written)} {item_type}(s)")


def _run_list(gen: Generator, item_type: ItemType) -> None:
    templates = gen.describe(item_type)
    if not templates:
        terminal_ui.print_info(f"No {item_type.plural} available")
        return

    terminal_ui.print_templates(
        f"Available {item_type.plural}",
        [(t.name, t.description) for t in templates],
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    ensure_config()
    if args.verbose:
        ensure_runtime_dirs(create_logs=True)
        setup_logger(Config.LOG_LEVEL)

    try:
        Config.validate()
    except ValueError as e:
        terminal_ui.print_error(str(e), title="Configuration Error")
        return 1

    gen = Generator(WriterConfig(output_dir=args.output, dry_run=args.dry_run))
    logger.debug(f"Running {args.command} with output={args.output} dry_run={args.dry_run}")

    try:
        if args.command == "generate":
            asyncio.run(_run_generate(gen, args.item_type, args.name))
        elif args.command == "generate-all":
            item_types = [args.item_type] if args.item_type else list(ItemType)
            asyncio.run(_run_generate_all(gen, item_types))
        elif args.command == "list":
            _run_list(gen, args.item_type)
    except PromptGeneratorError as e:
        logger.debug(f"{args.command} failed: {e}", exc_info=True)
        terminal_ui.print_error(str(e))
        log_file = get_log_file_path()
        if log_file:
            terminal_ui.print_info(f"Details logged to {log_file}")
        return 1

    return 0
