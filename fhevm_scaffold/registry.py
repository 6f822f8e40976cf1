"""Example and category registry.

Static lookup tables mapping example identifiers to their contract and test
sources, and category identifiers to ordered lists of examples.  Adding a
new example means adding an entry to ``EXAMPLES_MAP`` (and, optionally,
listing it in a category).
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import NotFoundError
from .utils import title_from_name


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


class ExampleDescriptor(BaseModel):
    """One demonstration contract paired with its test."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Kebab-case identifier")
    contract: str = Field(..., description="Contract path relative to the repository root")
    test: str = Field(..., description="Test path relative to the repository root")
    description: str = Field(default="")
    category: str = Field(default="basic", description="Category tag used in docs")
    title: str = Field(default="", description="Display title; derived from name when empty")

    @property
    def display_title(self) -> str:
        return self.title or title_from_name(self.name)


class CategoryDescriptor(BaseModel):
    """A named, ordered group of examples bundled into one project."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = Field(default="")
    examples: tuple[str, ...] = Field(default=())


def _example(name: str, contract: str, test: str, description: str, category: str, **kw: str) -> ExampleDescriptor:
    return ExampleDescriptor(
        name=name, contract=contract, test=test, description=description, category=category, **kw
    )


# ---------------------------------------------------------------------------
# Built-in tables
# ---------------------------------------------------------------------------

EXAMPLES_MAP: dict[str, ExampleDescriptor] = {
    e.name: e
    for e in (
        _example(
            "fhe-counter",
            "contracts/basic/FHECounter.sol",
            "test/basic/FHECounter.ts",
            "Encrypted counter that can be incremented and decremented without revealing its value",
            "basic",
        ),
        _example(
            "encrypt-single-value",
            "contracts/basic/encrypt/EncryptSingleValue.sol",
            "test/basic/encrypt/EncryptSingleValue.ts",
            "Store a single encrypted value submitted with an input proof",
            "basic",
        ),
        _example(
            "encrypt-multiple-values",
            "contracts/basic/encrypt/EncryptMultipleValues.sol",
            "test/basic/encrypt/EncryptMultipleValues.ts",
            "Submit several encrypted values of different types with one input proof",
            "basic",
        ),
        _example(
            "user-decrypt-single-value",
            "contracts/basic/decrypt/UserDecryptSingleValue.sol",
            "test/basic/decrypt/UserDecryptSingleValue.ts",
            "Grant a user permission to decrypt one encrypted value off-chain",
            "decryption",
        ),
        _example(
            "user-decrypt-multiple-values",
            "contracts/basic/decrypt/UserDecryptMultipleValues.sol",
            "test/basic/decrypt/UserDecryptMultipleValues.ts",
            "Grant a user permission to decrypt several encrypted values at once",
            "decryption",
        ),
        _example(
            "public-decrypt-single-value",
            "contracts/basic/decrypt/PublicDecryptSingleValue.sol",
            "test/basic/decrypt/PublicDecryptSingleValue.ts",
            "Mark an encrypted value as publicly decryptable and verify the clear result",
            "decryption",
        ),
        _example(
            "fhe-add",
            "contracts/operations/FHEAdd.sol",
            "test/operations/FHEAdd.ts",
            "Homomorphic addition of two encrypted integers",
            "operations",
        ),
        _example(
            "fhe-if-then-else",
            "contracts/operations/FHEIfThenElse.sol",
            "test/operations/FHEIfThenElse.ts",
            "Branch-free conditional selection over encrypted values",
            "operations",
        ),
        _example(
            "fhe-min-max",
            "contracts/operations/FHEMinMax.sol",
            "test/operations/FHEMinMax.ts",
            "Encrypted minimum and maximum using comparison operators",
            "operations",
        ),
        _example(
            "access-control",
            "contracts/access-control/AccessControl.sol",
            "test/access-control/AccessControl.ts",
            "Permission grants with allow, allowThis and allowTransient",
            "access-control",
        ),
        _example(
            "input-proof",
            "contracts/access-control/InputProof.sol",
            "test/access-control/InputProof.ts",
            "Why input proofs bind ciphertexts to a contract and a sender",
            "access-control",
        ),
        _example(
            "encrypted-voting",
            "contracts/voting/EncryptedVoting.sol",
            "test/voting/EncryptedVoting.ts",
            "Private ballot with homomorphic vote tallying and a public result reveal",
            "voting",
        ),
        _example(
            "public-voting",
            "contracts/voting/PublicVoting.sol",
            "test/voting/PublicVoting.ts",
            "Voting with encrypted ballots and publicly decryptable aggregate totals",
            "voting",
        ),
        _example(
            "blind-auction",
            "contracts/auctions/BlindAuction.sol",
            "test/auctions/BlindAuction.ts",
            "Sealed-bid auction comparing encrypted bids to find the winner",
            "auctions",
        ),
        _example(
            "confidential-token",
            "contracts/tokens/ConfidentialToken.sol",
            "test/tokens/ConfidentialToken.ts",
            "Fungible token with encrypted balances and transfer amounts",
            "tokens",
        ),
    )
}

CATEGORIES_MAP: dict[str, CategoryDescriptor] = {
    c.name: c
    for c in (
        CategoryDescriptor(
            name="basic",
            description="Basic FHEVM examples: encrypted state, input proofs and counters",
            examples=("fhe-counter", "encrypt-single-value", "encrypt-multiple-values"),
        ),
        CategoryDescriptor(
            name="decryption",
            description="User and public decryption flows for encrypted values",
            examples=(
                "user-decrypt-single-value",
                "user-decrypt-multiple-values",
                "public-decrypt-single-value",
            ),
        ),
        CategoryDescriptor(
            name="operations",
            description="Homomorphic arithmetic, comparison and selection operators",
            examples=("fhe-add", "fhe-if-then-else", "fhe-min-max"),
        ),
        CategoryDescriptor(
            name="access-control",
            description="Permission grants and input proof validation",
            examples=("access-control", "input-proof"),
        ),
        CategoryDescriptor(
            name="voting",
            description="Voting system examples demonstrating privacy-preserving aggregation and access control",
            examples=("encrypted-voting", "public-voting"),
        ),
        CategoryDescriptor(
            name="auctions",
            description="Sealed-bid auctions built on encrypted comparisons",
            examples=("blind-auction",),
        ),
    )
}


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class Registry:
    """Read-only view over the example and category tables.

    The built-in tables are used unless explicit mappings are supplied
    (tests pass small ad-hoc registries).  Iteration order is registration
    order.
    """

    def __init__(
        self,
        examples: Mapping[str, ExampleDescriptor] | None = None,
        categories: Mapping[str, CategoryDescriptor] | None = None,
    ) -> None:
        self._examples = dict(EXAMPLES_MAP if examples is None else examples)
        self._categories = dict(CATEGORIES_MAP if categories is None else categories)

    def resolve_example(self, name: str) -> ExampleDescriptor:
        try:
            return self._examples[name]
        except KeyError:
            raise NotFoundError("example", name, sorted(self._examples)) from None

    def resolve_category(self, name: str) -> CategoryDescriptor:
        try:
            return self._categories[name]
        except KeyError:
            raise NotFoundError("category", name, sorted(self._categories)) from None

    def has_example(self, name: str) -> bool:
        return name in self._examples

    def example_names(self) -> list[str]:
        return list(self._examples)

    def category_names(self) -> list[str]:
        return list(self._categories)

    def examples(self) -> list[ExampleDescriptor]:
        return list(self._examples.values())

    def categories(self) -> list[CategoryDescriptor]:
        return list(self._categories.values())

    def examples_in_category(self, tag: str) -> list[ExampleDescriptor]:
        """Return the examples whose ``category`` tag equals *tag*."""
        return [e for e in self._examples.values() if e.category == tag]

    def validate(self) -> list[tuple[str, str]]:
        """Return ``(category, example)`` pairs that do not resolve."""
        return [
            (category.name, example)
            for category in self._categories.values()
            for example in category.examples
            if example not in self._examples
        ]
