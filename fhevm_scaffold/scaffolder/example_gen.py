"""Standalone project generation for a single example.

Copies the base Hardhat template, swaps the placeholder contract and test
for the example's own files, and writes a README describing the example.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from ..exceptions import SourceMissingError
from ..registry import ExampleDescriptor
from ..utils import print_info, print_step, print_success
from .skeleton import GenerationResult, SkeletonGenerator


class ExampleGenerator(SkeletonGenerator):
    """Instantiates one registered example into a standalone project."""

    async def generate(self, example_id: str, destination: str | Path) -> GenerationResult:
        """Generate the project for *example_id* at *destination*.

        All preconditions are checked before the filesystem is touched, so a
        failed lookup or an existing destination leaves nothing behind.

        Raises:
            NotFoundError: *example_id* is not registered.
            AlreadyExistsError: *destination* already exists.
            SourceMissingError: the registered contract or test is missing.
        """
        example = self.registry.resolve_example(example_id)
        project_root = Path(destination)
        self.ensure_destination_free(project_root)
        contract_src, test_src = self._sources(example)

        print_info(f"Creating FHEVM example: {example.name}")
        print_info(f"Output directory: {project_root}")

        print_step(1, "Copying template")
        await self.copy_template(project_root)

        print_step(2, "Copying contract and test")
        removed = await self.remove_placeholders(project_root)
        if removed:
            print_info(f"Removed template files: {', '.join(removed)}")
        contract_name = await self.copy_source(contract_src, project_root / "contracts")
        print_success(f"Copied contract: {contract_name}")
        test_name = await self.copy_source(test_src, project_root / "test")
        print_success(f"Copied test: {test_name}")

        print_step(3, "Updating project configuration")
        await self.rename_package(
            project_root,
            f"{self.config.example_prefix}-{example.name}",
            example.description,
        )
        await self._update_deploy_script(project_root, Path(contract_name).stem)

        print_step(4, "Generating README")
        await self.renderer.render_to_file(
            "example_readme.md.j2",
            project_root / "README.md",
            self._build_context(example, contract_name, test_name),
        )
        print_success("README.md generated")

        return self.build_result(
            example.name,
            "example",
            project_root,
            contracts=[contract_name],
            tests=[test_name],
        )

    # -- Helpers -----------------------------------------------------------

    def _sources(self, example: ExampleDescriptor) -> tuple[Path, Path]:
        """Return the contract and test paths, failing if either is absent."""
        contract = self.config.root_dir / example.contract
        test = self.config.root_dir / example.test
        for path in (contract, test):
            if not path.is_file():
                raise SourceMissingError(path, example.name)
        return contract, test

    def _build_context(
        self, example: ExampleDescriptor, contract_name: str, test_name: str
    ) -> dict[str, Any]:
        return {
            "name": example.name,
            "title": example.display_title,
            "description": example.description,
            "category": example.category,
            "contract_name": contract_name,
            "test_name": test_name,
        }

    async def _update_deploy_script(self, project_root: Path, contract_stem: str) -> bool:
        """Point the template deploy script at the example contract."""
        deploy = project_root / "deploy" / "deploy.ts"
        placeholder = Path(self.config.placeholder_contract).stem
        if not deploy.is_file() or placeholder == contract_stem:
            return False
        text = await asyncio.to_thread(deploy.read_text, encoding="utf-8")
        if placeholder not in text:
            return False
        await asyncio.to_thread(
            deploy.write_text, text.replace(placeholder, contract_stem), encoding="utf-8"
        )
        print_info(f"deploy/deploy.ts now deploys {contract_stem}")
        return True
