"""Tests for the command-line entry points (fhevm_scaffold.cli).

Covers the exit-code contract of create-example, create-category and
generate-docs, default output directories, and the identifier listings.
"""

from __future__ import annotations

import pytest

from fhevm_scaffold.cli import (
    create_category_main,
    create_example_main,
    generate_docs_main,
    main,
)
from fhevm_scaffold.registry import Registry

pytestmark = pytest.mark.unit


class TestCreateExample:
    def test_success(self, repo_root, registry: Registry, tmp_path):
        out = tmp_path / "out1"
        code = create_example_main(["alpha", str(out), "--root", str(repo_root)], registry=registry)

        assert code == 0
        assert (out / "contracts" / "A.sol").is_file()
        assert (out / "test" / "A.ts").is_file()
        assert not (out / "contracts" / "B.sol").exists()

    def test_unknown_identifier(self, repo_root, registry: Registry, tmp_path, capsys):
        out = tmp_path / "out2"
        code = create_example_main(["zeta", str(out), "--root", str(repo_root)], registry=registry)

        assert code == 1
        assert not out.exists()
        output = capsys.readouterr().out
        assert "Unknown example: zeta" in output
        assert "alpha" in output

    def test_existing_destination(self, repo_root, registry: Registry, tmp_path):
        out = tmp_path / "out"
        args = ["alpha", str(out), "--root", str(repo_root)]
        assert create_example_main(args, registry=registry) == 0
        assert create_example_main(args, registry=registry) == 1

    def test_missing_sources(self, repo_root, registry: Registry, tmp_path):
        out = tmp_path / "out"
        assert create_example_main(["gamma", str(out), "--root", str(repo_root)], registry=registry) == 1
        assert not out.exists()

    def test_default_output_dir(self, repo_root, registry: Registry):
        assert create_example_main(["beta", "--root", str(repo_root)], registry=registry) == 0
        assert (repo_root / "output" / "fhevm-example-beta" / "contracts" / "B.sol").is_file()

    def test_no_identifier_lists_examples(self, registry: Registry, capsys):
        assert create_example_main([], registry=registry) == 0
        output = capsys.readouterr().out
        assert "alpha" in output
        assert "beta" in output

    def test_list_flag(self, registry: Registry, capsys):
        assert create_example_main(["--list"], registry=registry) == 0
        assert "delta" in capsys.readouterr().out

    def test_help_lists_examples(self, registry: Registry, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_example_main(["--help"], registry=registry)
        assert exc_info.value.code == 0
        assert "Available examples:" in capsys.readouterr().out


class TestCreateCategory:
    def test_partial_category_succeeds_with_warning(self, repo_root, registry: Registry, tmp_path, capsys):
        out = tmp_path / "greek"
        code = create_category_main(["greek", str(out), "--root", str(repo_root)], registry=registry)

        assert code == 0
        assert sorted(p.name for p in (out / "contracts").iterdir()) == ["A.sol", "B.sol"]
        output = capsys.readouterr().out
        assert "Warning" in output
        assert "gamma" in output
        assert output.count("Skipping gamma") == 1
        assert "was not included" not in output

    def test_unknown_category(self, repo_root, registry: Registry, tmp_path):
        out = tmp_path / "latin"
        assert create_category_main(["latin", str(out), "--root", str(repo_root)], registry=registry) == 1
        assert not out.exists()

    def test_default_output_dir(self, repo_root, registry: Registry):
        assert create_category_main(["greek", "--root", str(repo_root)], registry=registry) == 0
        assert (repo_root / "output" / "fhevm-category-greek" / "README.md").is_file()

    def test_no_identifier_lists_categories(self, registry: Registry, capsys):
        assert create_category_main([], registry=registry) == 0
        output = capsys.readouterr().out
        assert "greek" in output
        assert "searchable" in output


class TestGenerateDocs:
    def test_single_page(self, repo_root, valid_registry: Registry):
        assert generate_docs_main(["alpha", "--root", str(repo_root)], registry=valid_registry) == 0
        assert (repo_root / "docs" / "alpha.md").is_file()
        assert (repo_root / "docs" / "SUMMARY.md").is_file()

    def test_all_success(self, repo_root, valid_registry: Registry):
        assert generate_docs_main(["--all", "--root", str(repo_root)], registry=valid_registry) == 0
        assert (repo_root / "docs" / "beta.md").is_file()

    def test_all_with_failures(self, repo_root, registry: Registry, capsys):
        code = generate_docs_main(["--all", "--root", str(repo_root)], registry=registry)

        assert code == 1
        assert (repo_root / "docs" / "alpha.md").is_file()
        assert (repo_root / "docs" / "beta.md").is_file()
        output = capsys.readouterr().out
        assert "gamma" in output
        assert "alpha" in output

    def test_all_with_undecodable_source(self, repo_root, valid_registry: Registry, capsys):
        (repo_root / "contracts" / "A.sol").write_bytes(b"contract A { // \xff\xfe }\n")
        code = generate_docs_main(["--all", "--root", str(repo_root)], registry=valid_registry)

        assert code == 1
        assert (repo_root / "docs" / "beta.md").is_file()
        assert "Error" in capsys.readouterr().out

    def test_single_undecodable_source(self, repo_root, valid_registry: Registry, capsys):
        (repo_root / "contracts" / "A.sol").write_bytes(b"\xff\xfe\x00")
        assert generate_docs_main(["alpha", "--root", str(repo_root)], registry=valid_registry) == 1
        assert "not valid UTF-8" in capsys.readouterr().out
        assert not (repo_root / "docs").exists()

    def test_unknown_identifier(self, repo_root, valid_registry: Registry):
        assert generate_docs_main(["omega", "--root", str(repo_root)], registry=valid_registry) == 1
        assert not (repo_root / "docs").exists()

    def test_missing_target(self, valid_registry: Registry):
        assert generate_docs_main([], registry=valid_registry) == 1

    def test_identifier_and_all_conflict(self, valid_registry: Registry):
        with pytest.raises(SystemExit) as exc_info:
            generate_docs_main(["alpha", "--all"], registry=valid_registry)
        assert exc_info.value.code == 2


class TestDispatcher:
    def test_unknown_command(self):
        assert main(["frobnicate"]) == 1

    def test_no_command(self):
        assert main([]) == 1

    def test_dispatches(self, monkeypatch, repo_root, tmp_path):
        monkeypatch.setenv("FHEVM_ROOT_DIR", str(repo_root))
        assert main(["create-example", "--list"]) == 0
