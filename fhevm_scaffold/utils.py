"""Shared utility functions for the FHEVM scaffolding toolchain.

Provides Rich-based console reporting, identifier/name helpers, and small
file-system helpers shared by the generators.
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def normalise_identifier(name: str) -> str:
    """Lowercase *name* and drop hyphens and underscores.

    Used to compare example identifiers with contract file stems::

        normalise_identifier("encrypted-voting") -> "encryptedvoting"
        normalise_identifier("EncryptedVoting") -> "encryptedvoting"
    """
    return re.sub(r"[-_]", "", name.strip().lower())


def title_from_name(name: str) -> str:
    """Turn a kebab-case identifier into a display title.

    Examples::

        title_from_name("fhe-counter") -> "FHE Counter"
        title_from_name("public-decrypt-single-value") -> "Public Decrypt Single Value"
    """
    acronyms = {"fhe", "fhevm", "acl", "erc20", "erc7984"}
    words = [w for w in re.split(r"[-_\s]+", name.strip()) if w]
    return " ".join(w.upper() if w.lower() in acronyms else w.capitalize() for w in words)


def code_language(path: str | Path) -> str:
    """Return the fenced-code language tag for a source file."""
    suffix = Path(path).suffix.lower()
    return {
        ".sol": "solidity",
        ".ts": "typescript",
        ".js": "javascript",
        ".json": "json",
    }.get(suffix, "")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def top_level_entries(path: str | Path) -> list[str]:
    """Return the sorted names directly under *path*."""
    return sorted(p.name for p in Path(path).iterdir())


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(step: int, title: str) -> None:
    """Print a numbered step header."""
    console.print()
    console.print(Rule(f"[bold cyan] Step {step}: {title} [/bold cyan]", style="cyan"))


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_next_steps(project_dir: Path) -> None:
    """Print the commands needed to build and test a generated project."""
    try:
        shown = project_dir.resolve().relative_to(Path.cwd().resolve())
    except ValueError:
        shown = project_dir
    body = "\n".join([
        f"cd {shown}",
        "npm install",
        "npm run compile",
        "npm run test",
    ])
    console.print(Panel(body, title="Next steps", border_style="yellow", expand=False))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print a blue informational message."""
    console.print(f"[blue]{escape(message)}[/blue]")
