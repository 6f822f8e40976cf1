"""Project generation for a whole category of examples.

Bundles every example listed in a category into one Hardhat project.
Lookups are best-effort: an example whose contract cannot be located is
skipped with a warning and the rest of the category is still generated.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from ..registry import CategoryDescriptor
from ..utils import normalise_identifier, print_info, print_step, print_success, print_warning
from .skeleton import GenerationResult, SkeletonGenerator


class LocatedExample(BaseModel):
    """Source files found for one category member."""

    name: str
    description: str = ""
    contract: Path
    test: Path | None = None
    via_search: bool = False


class CategoryGenerator(SkeletonGenerator):
    """Instantiates every example of a category into a single project."""

    async def generate(self, category_id: str, destination: str | Path) -> GenerationResult:
        """Generate the project for *category_id* at *destination*.

        Raises:
            NotFoundError: *category_id* is not registered.
            AlreadyExistsError: *destination* already exists.
        """
        category = self.registry.resolve_category(category_id)
        project_root = Path(destination)
        self.ensure_destination_free(project_root)

        print_info(f"Creating FHEVM category: {category.name}")
        print_info(f"Output directory: {project_root}")

        print_step(1, "Copying template")
        await self.copy_template(project_root)

        print_step(2, "Copying contracts and tests")
        await self.remove_placeholders(project_root)

        located, skipped = await asyncio.to_thread(self.locate_examples, category)
        contracts: list[str] = []
        tests: list[str] = []
        included: list[dict[str, Any]] = []
        for item in located:
            contract_name = await self.copy_source(item.contract, project_root / "contracts")
            contracts.append(contract_name)
            suffix = " (found by name search)" if item.via_search else ""
            print_success(f"Copied contract: {contract_name}{suffix}")
            if item.test is None:
                print_warning(f"No test found for {item.name}")
            elif item.test.name in tests:
                print_warning(f"Skipping test for {item.name}: {item.test.name} is already included")
            else:
                tests.append(await self.copy_source(item.test, project_root / "test"))
            included.append({
                "name": item.name,
                "contract_name": contract_name,
                "description": item.description,
            })

        print_step(3, "Updating project configuration")
        await self.rename_package(
            project_root,
            f"{self.config.category_prefix}-{category.name}",
            category.description,
        )

        print_step(4, "Generating README")
        await self.renderer.render_to_file(
            "category_readme.md.j2",
            project_root / "README.md",
            {
                "category_name": category.name,
                "description": category.description,
                "contracts": included,
            },
        )
        print_success("README.md generated")
        print_info(f"Included {len(contracts)} of {len(category.examples)} examples")

        return self.build_result(
            category.name,
            "category",
            project_root,
            contracts=contracts,
            tests=tests,
            skipped=skipped,
        )

    # -- Lookup ------------------------------------------------------------

    def locate_examples(self, category: CategoryDescriptor) -> tuple[list[LocatedExample], list[str]]:
        """Resolve every category member to source files.

        Returns:
            ``(located, skipped)`` in category order.  Members that are not
            registered, have no locatable contract, or resolve to a contract
            already included are reported in *skipped*.
        """
        located: list[LocatedExample] = []
        skipped: list[str] = []
        seen: set[str] = set()

        for name in category.examples:
            item = self._locate(name)
            if item is None:
                print_warning(f"Skipping {name}: no contract found")
                skipped.append(name)
                continue
            if item.contract.name in seen:
                print_warning(f"Skipping {name}: {item.contract.name} is already included")
                skipped.append(name)
                continue
            seen.add(item.contract.name)
            located.append(item)

        return located, skipped

    def _locate(self, name: str) -> LocatedExample | None:
        root = self.config.root_dir
        description = ""
        contract: Path | None = None
        test: Path | None = None
        via_search = False

        if self.registry.has_example(name):
            example = self.registry.resolve_example(name)
            description = example.description
            if (root / example.contract).is_file():
                contract = root / example.contract
            if (root / example.test).is_file():
                test = root / example.test

        if contract is None:
            contract = search_contract(self.config.contracts_path, name)
            via_search = contract is not None
        if contract is None:
            return None

        if test is None:
            test = search_test(self.config.tests_path, contract.stem)

        return LocatedExample(
            name=name,
            description=description,
            contract=contract,
            test=test,
            via_search=via_search,
        )


# ---------------------------------------------------------------------------
# Best-effort file search
# ---------------------------------------------------------------------------

def search_contract(contracts_dir: Path, name: str) -> Path | None:
    """Find the first ``*.sol`` file whose stem contains *name*.

    Both sides are compared with hyphens and underscores removed and case
    ignored, so ``encrypted-voting`` matches ``EncryptedVoting.sol``.
    Candidates are scanned recursively in sorted path order.
    """
    if not contracts_dir.is_dir():
        return None
    needle = normalise_identifier(name)
    if not needle:
        return None
    for candidate in sorted(contracts_dir.rglob("*.sol")):
        if candidate.is_file() and needle in normalise_identifier(candidate.stem):
            return candidate
    return None


def search_test(tests_dir: Path, contract_stem: str) -> Path | None:
    """Find a ``*.ts`` test whose stem equals *contract_stem*, ignoring case."""
    if not tests_dir.is_dir():
        return None
    wanted = contract_stem.lower()
    for candidate in sorted(tests_dir.rglob("*.ts")):
        if candidate.is_file() and candidate.stem.lower() == wanted:
            return candidate
    return None
