"""Shared pytest fixtures for the FHEVM scaffolding test suite.

Provides reusable fixtures for:
- A throwaway examples repository (base template, contracts, tests)
- A small ``alpha``/``beta`` registry and matching categories
- A ``Config`` rooted at the throwaway repository
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from fhevm_scaffold.config import Config
from fhevm_scaffold.registry import CategoryDescriptor, ExampleDescriptor, Registry


# ---------------------------------------------------------------------------
# Source payloads
# ---------------------------------------------------------------------------

ALPHA_SOL = """// SPDX-License-Identifier: BSD-3-Clause-Clear
pragma solidity ^0.8.24;

import { FHE, euint32, externalEuint32 } from "@fhevm/solidity/lib/FHE.sol";

contract A {
    euint32 private _value;

    function setValue(externalEuint32 input, bytes calldata proof) external {
        _value = FHE.fromExternal(input, proof);
        FHE.allowThis(_value);
        FHE.allow(_value, msg.sender);
    }
}
"""

ALPHA_TS = """import { expect } from "chai";

describe("A", function () {
  it("stores an encrypted value", async function () {
    expect(true).to.equal(true);
  });
});
"""

BETA_SOL = "// SPDX-License-Identifier: BSD-3-Clause-Clear\npragma solidity ^0.8.24;\n\ncontract B {}\n"
BETA_TS = 'describe("B", function () {});\n'
DELTA_SOL = "pragma solidity ^0.8.24;\n\ncontract DeltaVault {}\n"
DELTA_TS = 'describe("DeltaVault", function () {});\n'

DEPLOY_TS = """import { DeployFunction } from "hardhat-deploy/types";

const func: DeployFunction = async function (hre) {
  const deployed = await hre.deployments.deploy("ExampleContract", { from: (await hre.getNamedAccounts()).deployer });
  console.log(`ExampleContract contract: `, deployed.address);
};
export default func;
func.tags = ["ExampleContract"];
"""


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Repository layout
# ---------------------------------------------------------------------------

@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """A throwaway examples repository.

    Layout::

        base-template/   Hardhat template with placeholder contract/test and
                         build-artifact directories that must never be copied
        contracts/       A.sol, B.sol, nested/DeltaVault.sol
        test/            A.ts, B.ts, nested/DeltaVault.ts
    """
    root = tmp_path / "examples-repo"
    template = root / "base-template"

    _write(template / "contracts" / "ExampleContract.sol", "contract ExampleContract {}\n")
    _write(template / "test" / "ExampleContract.ts", 'describe("ExampleContract", () => {});\n')
    _write(template / "test" / "helpers.ts", "export const helper = 1;\n")
    _write(template / "deploy" / "deploy.ts", DEPLOY_TS)
    _write(template / "tasks" / "accounts.ts", 'import { task } from "hardhat/config";\n')
    _write(template / "hardhat.config.ts", "export default {};\n")
    _write(
        template / "package.json",
        json.dumps({"name": "fhevm-hardhat-template", "version": "0.0.1"}, indent=2) + "\n",
    )
    # Build artifacts, at the top level and nested.
    _write(template / "node_modules" / "chai" / "index.js", "module.exports = {};\n")
    _write(template / "artifacts" / "build-info" / "x.json", "{}\n")
    _write(template / "cache" / "solidity-files-cache.json", "{}\n")
    _write(template / "tasks" / "coverage" / "index.html", "<html></html>\n")
    _write(template / "deploy" / "nested" / "dist" / "bundle.js", "void 0;\n")

    _write(root / "contracts" / "A.sol", ALPHA_SOL)
    _write(root / "contracts" / "B.sol", BETA_SOL)
    _write(root / "contracts" / "nested" / "DeltaVault.sol", DELTA_SOL)
    _write(root / "test" / "A.ts", ALPHA_TS)
    _write(root / "test" / "B.ts", BETA_TS)
    _write(root / "test" / "nested" / "DeltaVault.ts", DELTA_TS)
    return root


@pytest.fixture
def config(repo_root: Path) -> Config:
    """Configuration rooted at the throwaway repository."""
    return Config(root_dir=repo_root)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@pytest.fixture
def examples() -> dict[str, ExampleDescriptor]:
    """Example table: two valid entries, one with missing files, one found only by search."""
    return {
        "alpha": ExampleDescriptor(
            name="alpha",
            contract="contracts/A.sol",
            test="test/A.ts",
            description="Alpha stores a single encrypted value",
            category="basic",
        ),
        "beta": ExampleDescriptor(
            name="beta",
            contract="contracts/B.sol",
            test="test/B.ts",
            description="Beta is an empty contract",
            category="basic",
        ),
        "gamma": ExampleDescriptor(
            name="gamma",
            contract="contracts/G.sol",
            test="test/G.ts",
            description="Gamma has no sources on disk",
            category="broken",
        ),
        "delta": ExampleDescriptor(
            name="delta",
            contract="contracts/moved/Delta.sol",
            test="test/moved/Delta.ts",
            description="Delta moved to a different file",
            category="basic",
        ),
    }


@pytest.fixture
def categories() -> dict[str, CategoryDescriptor]:
    return {
        "greek": CategoryDescriptor(
            name="greek",
            description="Greek letters, one of them without sources",
            examples=("alpha", "gamma", "beta"),
        ),
        "searchable": CategoryDescriptor(
            name="searchable",
            description="Members resolved through the file search",
            examples=("delta", "unregistered"),
        ),
    }


@pytest.fixture
def registry(examples, categories) -> Registry:
    return Registry(examples=examples, categories=categories)


@pytest.fixture
def valid_registry(examples) -> Registry:
    """Registry containing only the examples whose sources exist."""
    return Registry(
        examples={k: examples[k] for k in ("alpha", "beta")},
        categories={},
    )
