"""FHEVM scaffolding configuration.

Centralised, typed configuration for the generators.  All settings use
Pydantic v2 models so they can be validated at construction time and serialised
to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

# Build-artifact directories that are never copied out of the base template.
DEFAULT_EXCLUDED_DIRS: tuple[str, ...] = (
    "node_modules",
    "artifacts",
    "cache",
    "coverage",
    "types",
    "dist",
    "typechain-types",
    "fhevmTemp",
)


class Config(BaseModel):
    """Global toolchain configuration.

    Every directory field is relative to ``root_dir`` (the examples
    repository checkout).  Instances are typically created once by the CLI
    entry point and then passed to the generators.
    """

    root_dir: Path = Field(default=Path("."))
    template_dir: str = Field(default="base-template")
    contracts_dir: str = Field(default="contracts")
    tests_dir: str = Field(default="test")
    docs_dir: str = Field(default="docs")
    output_dir: str = Field(default="output")
    index_file: str = Field(default="SUMMARY.md")

    placeholder_contract: str = Field(
        default="ExampleContract.sol",
        description="Template contract removed from every generated project",
    )
    placeholder_test_glob: str = Field(
        default="*.ts",
        description="Template tests matching this glob are removed",
    )

    example_prefix: str = Field(default="fhevm-example")
    category_prefix: str = Field(default="fhevm-category")

    excluded_dirs: tuple[str, ...] = Field(default=DEFAULT_EXCLUDED_DIRS)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def template_path(self) -> Path:
        """Root of the base Hardhat template."""
        return self.root_dir / self.template_dir

    @property
    def contracts_path(self) -> Path:
        """Directory holding the source example contracts."""
        return self.root_dir / self.contracts_dir

    @property
    def tests_path(self) -> Path:
        """Directory holding the source example tests."""
        return self.root_dir / self.tests_dir

    @property
    def docs_path(self) -> Path:
        """Directory where documentation pages are written."""
        return self.root_dir / self.docs_dir

    @property
    def index_path(self) -> Path:
        """Path to the navigation index file."""
        return self.docs_path / self.index_file

    @property
    def output_path(self) -> Path:
        """Root for generated projects when no destination is given."""
        return self.root_dir / self.output_dir

    def default_destination(self, prefix: str, identifier: str) -> Path:
        """Return ``<output>/<prefix>-<identifier>``."""
        return self.output_path / f"{prefix}-{identifier}"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.  Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            FHEVM_ROOT_DIR, FHEVM_OUTPUT_DIR, FHEVM_DOCS_DIR, FHEVM_TEMPLATE_DIR.

        Keyword *overrides* win over the environment; ``None`` values are
        ignored so CLI flags can be passed straight through.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("FHEVM_ROOT_DIR"):
            kwargs["root_dir"] = Path(os.environ["FHEVM_ROOT_DIR"])
        if os.environ.get("FHEVM_OUTPUT_DIR"):
            kwargs["output_dir"] = os.environ["FHEVM_OUTPUT_DIR"]
        if os.environ.get("FHEVM_DOCS_DIR"):
            kwargs["docs_dir"] = os.environ["FHEVM_DOCS_DIR"]
        if os.environ.get("FHEVM_TEMPLATE_DIR"):
            kwargs["template_dir"] = os.environ["FHEVM_TEMPLATE_DIR"]

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
