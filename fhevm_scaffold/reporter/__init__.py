"""Documentation generation for the registered FHEVM examples."""

from fhevm_scaffold.reporter.docs_gen import ALL, DocEntry, DocsGenerator, DocsReport

__all__ = ["ALL", "DocEntry", "DocsGenerator", "DocsReport"]
