"""FHEVM project scaffolding -- standalone example and category projects.

Every generated project starts as a copy of the repository's Hardhat
``base-template`` with its placeholder contract and tests replaced.

Quick usage::

    from fhevm_scaffold.config import Config
    from fhevm_scaffold.scaffolder import ExampleGenerator

    generator = ExampleGenerator(Config(root_dir=Path("/path/to/examples")))
    result = await generator.generate("fhe-counter", "/tmp/fhe-counter")
"""

from fhevm_scaffold.scaffolder.category_gen import CategoryGenerator
from fhevm_scaffold.scaffolder.copier import copy_directory
from fhevm_scaffold.scaffolder.example_gen import ExampleGenerator
from fhevm_scaffold.scaffolder.skeleton import GenerationResult
from fhevm_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "CategoryGenerator",
    "ExampleGenerator",
    "GenerationResult",
    "TemplateRenderer",
    "copy_directory",
]
