"""
Command-line driver for metac.

Runs one schema file through the generator and reports the outcome.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .codegen import (
    GenerationResult,
    ObjectRegistry,
    RegistryError,
    generate_from_text,
    get_generator,
    list_all_language_info,
    meta_parse,
)
from .codegen.core.config import ConfigError, get_config_manager
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)

# Initialize rich console
console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="metac",
        description="Generate C struct declarations from an object schema file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  metac data.meta data.h
  metac --suffix Rec --max-fields 64 data.meta data.h
  metac --include common.meta game.meta game.h
  metac --list-languages
        """.strip(),
    )

    parser.add_argument("input", nargs="?", help="Schema file to read")
    parser.add_argument("output", nargs="?", help="Generated file to write")

    parser.add_argument(
        "--language", "-l", default="c", help="Target language (default: c)"
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--include",
        "-I",
        metavar="FILE",
        action="append",
        default=[],
        help="Schema file whose objects may be referenced (repeatable)",
    )

    # Generation options
    gen_group = parser.add_argument_group("generation options")
    gen_group.add_argument(
        "--suffix", metavar="TEXT", help="Suffix appended to generated struct names"
    )
    gen_group.add_argument(
        "--indent", type=int, metavar="N", help="Spaces used to indent members"
    )
    gen_group.add_argument(
        "--max-fields", type=int, metavar="N", help="Field limit per object"
    )
    gen_group.add_argument(
        "--max-objects", type=int, metavar="N", help="Object limit per run"
    )

    # Output options
    out_group = parser.add_argument_group("output options")
    verbosity = out_group.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug log and metadata"
    )
    verbosity.add_argument(
        "--quiet", "-q", action="store_true", help="Only report errors"
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )
    info_group.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the command-line driver.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, quiet=args.quiet)

    if args.list_languages:
        return _list_languages()

    if not args.input or not args.output:
        console.print("[red]✗[/red] Both an input and an output file are required")
        return 1

    try:
        config = _build_config(args)
        registry = _load_includes(args, config)
        result = meta_parse(
            args.input,
            args.output,
            registry=registry,
            config=config,
            language=args.language,
        )
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1
    except RegistryError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        logger.debug("Generator setup failed", exc_info=True)
        return 1

    return _report(result, args)


def _build_config(args: argparse.Namespace) -> dict[str, Any]:
    """Build configuration overrides from CLI arguments."""
    config: dict[str, Any] = {}

    if args.config:
        try:
            config.update(_read_config_file(args.config, args.language))
        except ConfigError as e:
            raise CLIError(f"Configuration error: {e}") from e

    if args.suffix is not None:
        config["struct_suffix"] = args.suffix

    if args.indent is not None:
        config["indent_size"] = args.indent

    if args.max_fields is not None:
        config["max_fields"] = args.max_fields

    if args.max_objects is not None:
        config["max_objects"] = args.max_objects

    return config


def _read_config_file(path: str, language: str) -> dict[str, Any]:
    """Read a JSON configuration file into a flat dict of overrides."""
    manager = get_config_manager()
    loaded = manager.get_config(language, config_file=path)
    for warning in manager.validate_config(loaded):
        logger.warning("%s: %s", path, warning)

    overrides = {
        name: getattr(loaded, name)
        for name in loaded.__dataclass_fields__
        if name != "custom"
    }
    overrides.update(loaded.custom)
    return overrides


def _load_includes(
    args: argparse.Namespace, config: dict[str, Any]
) -> ObjectRegistry | None:
    """Parse included schema files into a shared registry."""
    if not args.include:
        return None

    try:
        generator = get_generator(args.language, config)
    except RegistryError as e:
        raise CLIError(str(e)) from e

    registry = ObjectRegistry(generator.config.max_objects)

    for include in args.include:
        path = Path(include)
        try:
            text = path.read_text(encoding=generator.config.encoding)
        except (OSError, UnicodeError) as e:
            raise CLIError(f"Cannot read included schema {path}: {e}") from e

        result = generate_from_text(
            text, registry=registry, config=generator.config, language=args.language
        )
        logger.info(
            "Included %s (%d object(s))", path, result.metadata.get("object_count", 0)
        )

    return registry


def _report(result: GenerationResult, args: argparse.Namespace) -> int:
    """Print the outcome of a generation run."""
    if not result.success:
        message = escape(result.error_message or "")
        console.print(f"[red]✗ Error in code generation:[/red] {message}")
        return 1

    if not args.quiet:
        console.print(
            f"[green]✓[/green] Code generation succeeded: [cyan]{args.output}[/cyan]"
        )

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print()
        console.print(metadata_table)

    # Each warning was already logged as it was found
    if result.warnings and not args.quiet:
        console.print(
            f"[yellow]⚠️  {len(result.warnings)} warning(s)[/yellow] "
            "written to the output as comments"
        )

    return 0


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(lang_name, info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] metac [dim]input.meta output.h[/dim] "
            "--language [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )

    return 0
