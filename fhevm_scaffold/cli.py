"""Command-line entry points.

Installed as three console scripts::

    create-example <example> [output-dir]
    create-category <category> [output-dir]
    generate-docs <example>|--all

and also reachable as ``python -m fhevm_scaffold.cli <command> ...``.
Every entry point returns a process exit code: 0 on success, 1 on any
reported failure.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from rich.table import Table

from .config import Config
from .exceptions import ScaffoldError
from .registry import Registry
from .reporter.docs_gen import ALL, DocsGenerator
from .scaffolder.category_gen import CategoryGenerator
from .scaffolder.example_gen import ExampleGenerator
from .utils import console, print_error, print_next_steps, print_success, print_summary_table


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------


def _examples_epilog(registry: Registry) -> str:
    lines = ["Available examples:"]
    lines += [f"  {e.name:<32} {e.description}" for e in registry.examples()]
    lines += ["", "Example:", "  create-example fhe-counter ./my-fhe-counter"]
    return "\n".join(lines)


def _categories_epilog(registry: Registry) -> str:
    lines = ["Available categories:"]
    for c in registry.categories():
        lines.append(f"  {c.name}")
        lines.append(f"    {c.description}")
        lines.append(f"    Examples: {', '.join(c.examples)}")
    lines += ["", "Example:", "  create-category voting ./my-voting-examples"]
    return "\n".join(lines)


def print_examples(registry: Registry) -> None:
    table = Table(title="Available examples", show_header=True, header_style="bold cyan")
    table.add_column("Example", style="green", no_wrap=True)
    table.add_column("Category", style="dim")
    table.add_column("Description")
    for e in registry.examples():
        table.add_row(e.name, e.category, e.description)
    console.print(table)


def print_categories(registry: Registry) -> None:
    table = Table(title="Available categories", show_header=True, header_style="bold cyan")
    table.add_column("Category", style="green", no_wrap=True)
    table.add_column("Description")
    table.add_column("Examples")
    for c in registry.categories():
        table.add_row(c.name, c.description, ", ".join(c.examples))
    console.print(table)


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def _add_root_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Examples repository root (default: $FHEVM_ROOT_DIR or the current directory)",
    )


def _generator_parser(prog: str, noun: str, epilog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description=f"Generate a standalone FHEVM Hardhat project for one {noun}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    parser.add_argument(noun, nargs="?", help=f"{noun.capitalize()} identifier")
    parser.add_argument("output_dir", nargs="?", type=Path, help="Destination directory")
    parser.add_argument("--list", action="store_true", help=f"List available {noun}s and exit")
    _add_root_option(parser)
    return parser


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def create_example_main(argv: Sequence[str] | None = None, registry: Registry | None = None) -> int:
    """``create-example <example> [output-dir]``."""
    registry = registry or Registry()
    parser = _generator_parser("create-example", "example", _examples_epilog(registry))
    args = parser.parse_args(argv)

    if args.list or not args.example:
        console.print("[bold cyan]FHEVM Example Generator[/bold cyan]")
        console.print("Usage: create-example <example> [output-dir]", markup=False)
        print_examples(registry)
        return 0

    config = Config.from_env(root_dir=args.root)
    destination = args.output_dir or config.default_destination(config.example_prefix, args.example)
    generator = ExampleGenerator(config, registry)
    try:
        result = asyncio.run(generator.generate(args.example, destination))
    except (ScaffoldError, OSError) as exc:
        print_error(str(exc))
        return 1

    print_success(f'FHEVM example "{result.identifier}" created successfully!')
    print_summary_table(
        {
            "Output": str(result.output_dir),
            "Contract": ", ".join(result.contracts),
            "Test": ", ".join(result.tests),
            "Created": ", ".join(result.created),
        },
        title="Generated project",
    )
    print_next_steps(result.output_dir)
    return 0


def create_category_main(argv: Sequence[str] | None = None, registry: Registry | None = None) -> int:
    """``create-category <category> [output-dir]``."""
    registry = registry or Registry()
    parser = _generator_parser("create-category", "category", _categories_epilog(registry))
    args = parser.parse_args(argv)

    if args.list or not args.category:
        console.print("[bold cyan]FHEVM Category Generator[/bold cyan]")
        console.print("Usage: create-category <category> [output-dir]", markup=False)
        print_categories(registry)
        return 0

    config = Config.from_env(root_dir=args.root)
    destination = args.output_dir or config.default_destination(config.category_prefix, args.category)
    generator = CategoryGenerator(config, registry)
    try:
        result = asyncio.run(generator.generate(args.category, destination))
    except (ScaffoldError, OSError) as exc:
        print_error(str(exc))
        return 1

    print_success(
        f'FHEVM category "{result.identifier}" created with {result.included_count} example(s)!'
    )
    print_summary_table(
        {
            "Output": str(result.output_dir),
            "Contracts": ", ".join(result.contracts) or "(none)",
            "Skipped": ", ".join(result.skipped) or "(none)",
        },
        title="Generated project",
    )
    print_next_steps(result.output_dir)
    return 0


def generate_docs_main(argv: Sequence[str] | None = None, registry: Registry | None = None) -> int:
    """``generate-docs <example>|--all``."""
    registry = registry or Registry()
    parser = argparse.ArgumentParser(
        prog="generate-docs",
        description="Generate GitBook documentation pages for FHEVM examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_examples_epilog(registry).replace(
            "create-example fhe-counter ./my-fhe-counter", "generate-docs fhe-counter"
        ),
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument("example", nargs="?", help="Example identifier")
    target.add_argument("--all", action="store_true", help="Generate every registered example")
    _add_root_option(parser)
    args = parser.parse_args(argv)

    if not args.all and not args.example:
        parser.print_usage()
        print_examples(registry)
        return 1

    config = Config.from_env(root_dir=args.root)
    generator = DocsGenerator(config, registry)
    try:
        report = asyncio.run(generator.generate(ALL if args.all else args.example))
    except (ScaffoldError, OSError) as exc:
        print_error(str(exc))
        return 1

    summary = {name: "generated" for name in report.generated}
    summary.update({name: f"FAILED: {reason}" for name, reason in report.failed.items()})
    print_summary_table(summary, title="Documentation")
    if not report.ok:
        print_error(f"{len(report.failed)} page(s) failed to generate")
        return 1
    print_success(f"Index updated: {config.index_path}")
    return 0


_COMMANDS: dict[str, Callable[..., int]] = {
    "create-example": create_example_main,
    "create-category": create_category_main,
    "generate-docs": generate_docs_main,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Dispatcher for ``python -m fhevm_scaffold.cli <command> ...``."""
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] not in _COMMANDS:
        console.print(f"Usage: python -m fhevm_scaffold.cli {{{','.join(_COMMANDS)}}} ...")
        return 1
    return _COMMANDS[argv[0]](argv[1:])


if __name__ == "__main__":
    sys.exit(main())
