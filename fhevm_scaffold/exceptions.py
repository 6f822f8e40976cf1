"""Error types raised by the scaffolding toolchain.

All of them derive from ``ScaffoldError`` so the CLI can report every
expected failure with a single ``except`` clause.  Plain ``OSError`` is
deliberately left unwrapped for genuine read/write failures.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all toolchain errors."""


class NotFoundError(ScaffoldError):
    """Raised when an example or category identifier is not registered."""

    def __init__(self, kind: str, identifier: str, available: list[str]) -> None:
        self.kind = kind
        self.identifier = identifier
        self.available = list(available)
        listing = "\n".join(f"  - {name}" for name in self.available)
        super().__init__(
            f"Unknown {kind}: {identifier}\n\nAvailable {kind}s:\n{listing}"
        )


class AlreadyExistsError(ScaffoldError):
    """Raised when the destination directory is already present."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Output directory already exists: {self.path}")


class SourceMissingError(ScaffoldError):
    """Raised when a file the registry points at is not on disk."""

    def __init__(self, path: str | Path, identifier: str = "") -> None:
        self.path = Path(path)
        self.identifier = identifier
        prefix = f"{identifier}: " if identifier else ""
        super().__init__(f"{prefix}source file not found: {self.path}")


class SourceUnreadableError(ScaffoldError):
    """Raised when a source file exists but is not valid UTF-8 text."""

    def __init__(self, path: str | Path, identifier: str = "", reason: str = "") -> None:
        self.path = Path(path)
        self.identifier = identifier
        self.reason = reason
        prefix = f"{identifier}: " if identifier else ""
        suffix = f" ({reason})" if reason else ""
        super().__init__(f"{prefix}source file is not valid UTF-8: {self.path}{suffix}")
