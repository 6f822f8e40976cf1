"""GitBook documentation generator for registered examples.

Produces one markdown page per example (description, usage hint and the
contract/test sources in tabs) and keeps the ``SUMMARY.md`` navigation
index in sync.  A single page run appends to the index; an ``--all`` run
rewrites it from scratch.  Both paths yield the same index content for the
same set of pages.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

from pydantic import BaseModel, Field

from ..config import Config
from ..exceptions import SourceMissingError, SourceUnreadableError
from ..registry import ExampleDescriptor, Registry
from ..scaffolder.templates import TemplateRenderer, write_file
from ..utils import print_error, print_info, print_success

ALL = "--all"

INDEX_HEADER = "# Table of contents\n\n"

_INDEX_ENTRY_RE = re.compile(r"^\* \[.*\]\((?P<path>[^)]+)\)\s*$")


# ---------------------------------------------------------------------------
# Data Models
# ---------------------------------------------------------------------------

class DocEntry(BaseModel):
    """Everything needed to render one documentation page."""

    name: str
    title: str
    description: str = ""
    category: str = ""
    contract_name: str
    contract_text: str
    test_name: str
    test_text: str
    output_path: Path

    @property
    def index_line(self) -> str:
        return format_index_entry(self.title, self.output_path.name)


class DocsReport(BaseModel):
    """Outcome of a docs run."""

    generated: list[str] = Field(default_factory=list)
    failed: dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


# ---------------------------------------------------------------------------
# DocsGenerator
# ---------------------------------------------------------------------------

class DocsGenerator:
    """Writes example documentation pages and the navigation index."""

    def __init__(
        self,
        config: Config | None = None,
        registry: Registry | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or Config()
        self.registry = registry or Registry()
        self.renderer = renderer or TemplateRenderer()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def generate(self, target: str) -> DocsReport:
        """Generate docs for one example identifier or for ``ALL``.

        A single identifier that is unknown raises ``NotFoundError`` and one
        whose sources are missing raises ``SourceMissingError`` (or
        ``SourceUnreadableError`` when a source is not UTF-8); in all
        cases nothing is written.  In ``ALL`` mode per-page failures are
        collected in the report and the remaining pages still run.
        """
        if target == ALL:
            return await self.generate_all()

        entry = await self.generate_page(target)
        await asyncio.to_thread(self.append_to_index, entry)
        return DocsReport(generated=[entry.name])

    async def generate_all(self) -> DocsReport:
        """Generate every registered page, then rebuild the index."""
        report = DocsReport()
        entries: list[DocEntry] = []

        for name in self.registry.example_names():
            try:
                entry = await self.generate_page(name)
            except (SourceMissingError, SourceUnreadableError, OSError) as exc:
                print_error(f"Page not generated: {exc}")
                report.failed[name] = str(exc)
                continue
            entries.append(entry)
            report.generated.append(name)

        await asyncio.to_thread(self.rebuild_index, entries)
        print_info(
            f"Generated {len(report.generated)} page(s), {len(report.failed)} failed"
        )
        return report

    async def generate_page(self, example_id: str) -> DocEntry:
        """Render and write the page for *example_id* (index untouched)."""
        example = self.registry.resolve_example(example_id)
        entry = await asyncio.to_thread(self.build_entry, example)

        await self.renderer.render_to_file(
            "doc_page.md.j2",
            entry.output_path,
            {
                "name": entry.name,
                "title": entry.title,
                "description": entry.description,
                "category": entry.category,
                "contract_name": entry.contract_name,
                "contract_text": entry.contract_text.rstrip("\n"),
                "test_name": entry.test_name,
                "test_text": entry.test_text.rstrip("\n"),
            },
        )
        print_success(f"Documentation written to {entry.output_path}")
        return entry

    def build_entry(self, example: ExampleDescriptor) -> DocEntry:
        """Read the example sources and assemble its ``DocEntry``."""
        contract = self.config.root_dir / example.contract
        test = self.config.root_dir / example.test
        for path in (contract, test):
            if not path.is_file():
                raise SourceMissingError(path, example.name)

        return DocEntry(
            name=example.name,
            title=example.display_title,
            description=example.description,
            category=example.category,
            contract_name=contract.name,
            contract_text=_read_source(contract, example.name),
            test_name=test.name,
            test_text=_read_source(test, example.name),
            output_path=self.page_path(example.name),
        )

    def page_path(self, example_id: str) -> Path:
        return self.config.docs_path / f"{example_id}.md"

    # ------------------------------------------------------------------
    # Navigation index
    # ------------------------------------------------------------------

    def append_to_index(self, entry: DocEntry) -> bool:
        """Add *entry* to the index unless its page is already listed.

        Returns:
            ``True`` if a line was appended.
        """
        index = self.config.index_path
        if not index.is_file():
            write_file(index, INDEX_HEADER + entry.index_line)
            return True

        content = index.read_text(encoding="utf-8")
        if entry.output_path.name in read_index_paths(content):
            return False
        if content and not content.endswith("\n"):
            content += "\n"
        write_file(index, content + entry.index_line)
        return True

    def rebuild_index(self, entries: list[DocEntry]) -> Path:
        """Rewrite the index with exactly *entries*, in order."""
        index = self.config.index_path
        write_file(index, INDEX_HEADER + "".join(e.index_line for e in entries))
        return index


# ---------------------------------------------------------------------------
# Index helpers
# ---------------------------------------------------------------------------

def format_index_entry(title: str, relative_path: str) -> str:
    """Return one index line, newline included."""
    return f"* [{title}]({relative_path})\n"


def read_index_paths(content: str) -> list[str]:
    """Return the page paths listed in an index, in file order."""
    paths: list[str] = []
    for line in content.splitlines():
        match = _INDEX_ENTRY_RE.match(line)
        if match:
            paths.append(match.group("path"))
    return paths


def _read_source(path: Path, identifier: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SourceUnreadableError(path, identifier, exc.reason) from exc
