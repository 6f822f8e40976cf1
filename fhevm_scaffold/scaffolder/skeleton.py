"""Shared steps for materialising a project from the base template.

Both the example and the category generators start the same way: refuse an
existing destination, copy the base Hardhat template, and strip its
placeholder contract and tests.  ``SkeletonGenerator`` holds those steps;
subclasses add their own files on top.
"""

from __future__ import annotations

import asyncio
import json
import shutil
from pathlib import Path

from pydantic import BaseModel, Field

from ..config import Config
from ..exceptions import AlreadyExistsError, SourceMissingError
from ..registry import Registry
from ..utils import print_info, print_success, top_level_entries
from .copier import copy_directory
from .templates import TemplateRenderer, write_file


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class GenerationResult(BaseModel):
    """What a generator run produced on disk."""

    identifier: str
    kind: str = Field(..., description="'example' or 'category'")
    output_dir: Path
    created: list[str] = Field(
        default_factory=list, description="Top-level entries of the generated project"
    )
    contracts: list[str] = Field(
        default_factory=list, description="Contract file names copied into contracts/"
    )
    tests: list[str] = Field(
        default_factory=list, description="Test file names copied into test/"
    )
    skipped: list[str] = Field(
        default_factory=list, description="Example identifiers that could not be located"
    )

    @property
    def included_count(self) -> int:
        return len(self.contracts)


# ---------------------------------------------------------------------------
# Base generator
# ---------------------------------------------------------------------------


class SkeletonGenerator:
    """Base class for generators that start from the Hardhat template."""

    def __init__(
        self,
        config: Config | None = None,
        registry: Registry | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or Config()
        self.registry = registry or Registry()
        self.renderer = renderer or TemplateRenderer()

    # -- Preconditions -----------------------------------------------------

    def ensure_destination_free(self, destination: Path) -> None:
        """Raise ``AlreadyExistsError`` if *destination* is already present."""
        if destination.exists():
            raise AlreadyExistsError(destination)

    # -- Skeleton ----------------------------------------------------------

    async def copy_template(self, destination: Path) -> int:
        """Copy the base template into *destination*."""
        template = self.config.template_path
        if not template.is_dir():
            raise SourceMissingError(template)
        count = await asyncio.to_thread(
            copy_directory, template, destination, self.config.excluded_dirs
        )
        print_success(f"Template copied ({count} files)")
        return count

    async def remove_placeholders(self, project_root: Path) -> list[str]:
        """Delete the template's placeholder contract and tests.

        Returns:
            Names of the removed files.
        """
        return await asyncio.to_thread(self._remove_placeholders, project_root)

    def _remove_placeholders(self, project_root: Path) -> list[str]:
        removed: list[str] = []
        contract = project_root / "contracts" / self.config.placeholder_contract
        if contract.is_file():
            contract.unlink()
            removed.append(contract.name)

        test_dir = project_root / "test"
        if test_dir.is_dir():
            for test_file in sorted(test_dir.glob(self.config.placeholder_test_glob)):
                if test_file.is_file():
                    test_file.unlink()
                    removed.append(test_file.name)
        return removed

    async def copy_source(self, source: Path, target_dir: Path) -> str:
        """Copy a single contract or test file into *target_dir*.

        Returns:
            The file name written.
        """
        await asyncio.to_thread(_copy_into, source, target_dir)
        return source.name

    async def rename_package(self, project_root: Path, name: str, description: str) -> bool:
        """Point ``package.json`` at the generated project's name.

        Returns ``False`` when the template has no ``package.json``.
        """
        package_json = project_root / "package.json"
        if not package_json.is_file():
            return False
        await asyncio.to_thread(_update_package_json, package_json, name, description)
        print_info(f"package.json renamed to {name}")
        return True

    # -- Reporting ---------------------------------------------------------

    def build_result(self, identifier: str, kind: str, project_root: Path, **kwargs) -> GenerationResult:
        return GenerationResult(
            identifier=identifier,
            kind=kind,
            output_dir=project_root,
            created=top_level_entries(project_root),
            **kwargs,
        )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _copy_into(source: Path, target_dir: Path) -> None:
    target_dir.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, target_dir / source.name)


def _update_package_json(path: Path, name: str, description: str) -> None:
    data = json.loads(path.read_text(encoding="utf-8"))
    data["name"] = name
    if description:
        data["description"] = description
    write_file(path, json.dumps(data, indent=2) + "\n")
