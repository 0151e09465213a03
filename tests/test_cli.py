from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List

import pytest
from click.testing import CliRunner

import pkgcreate.checks.javascript as javascript_mod
from pkgcreate.cli import cli as pkgcreate_cli
from pkgcreate.config import CONFIG_RELATIVE_PATH


def make_root(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    (root / "packages").mkdir(parents=True)
    (root / "package.json").write_text('{"name": "acme"}', encoding="utf-8")
    return root


def test_create_interactive(tmp_path: Path) -> None:
    root = make_root(tmp_path)
    runner = CliRunner()
    # name, directory (default), type, description, author, tests, linting, confirm
    result = runner.invoke(
        pkgcreate_cli,
        ["--root", str(root), "create"],
        input="demo\n\nshared\nd\na\ny\nn\ny\n",
    )
    assert result.exit_code == 0, result.output

    package_dir = root / "packages" / "demo"
    for relative in (
        "README.md",
        "package.json",
        "tsconfig.json",
        "src/index.ts",
        "src/types.ts",
        "src/utils.ts",
        "vitest.config.ts",
        "test-setup.ts",
    ):
        assert (package_dir / relative).is_file(), relative
    assert "// Common types for demo" in (package_dir / "src" / "types.ts").read_text()
    assert "acme" in (package_dir / "README.md").read_text()
    assert "Package 'demo' created successfully!" in result.output
    assert "yarn build (to build the library)" in result.output


def test_create_cancelled(tmp_path: Path) -> None:
    root = make_root(tmp_path)
    result = CliRunner().invoke(
        pkgcreate_cli,
        ["--root", str(root), "create"],
        input="demo\n\nbackend\n\n\nn\ny\nn\n",
    )
    assert result.exit_code == 0, result.output
    assert "Package creation cancelled." in result.output
    assert not (root / "packages" / "demo").exists()


def test_create_conflict_exits_non_zero(tmp_path: Path) -> None:
    root = make_root(tmp_path)
    existing = root / "packages" / "demo"
    existing.mkdir()
    (existing / "mine.txt").write_text("keep")

    result = CliRunner().invoke(
        pkgcreate_cli,
        ["--root", str(root), "create"],
        input="demo\n\nclient\n\n\nn\ny\ny\n",
    )
    assert result.exit_code == 1
    assert "already exists" in result.output
    assert [p.name for p in existing.iterdir()] == ["mine.txt"]


def test_create_rejects_unknown_type(tmp_path: Path) -> None:
    root = make_root(tmp_path)
    result = CliRunner().invoke(
        pkgcreate_cli, ["--root", str(root), "create"], input="demo\n\nmobile\n"
    )
    assert result.exit_code == 1
    assert "client, backend, or shared" in result.output


def test_smoke_test_no_clean(tmp_path: Path) -> None:
    root = make_root(tmp_path)
    result = CliRunner().invoke(pkgcreate_cli, ["--root", str(root), "smoke-test", "--no-clean"])
    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in (root / "packages").iterdir()) == [
        "smoke-backend",
        "smoke-client",
        "smoke-shared",
    ]


def test_smoke_test_install_failures_exit_zero(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    root = make_root(tmp_path)
    calls: List[List[str]] = []

    def failing(command: List[str], cwd: Path | None = None) -> None:
        calls.append(command)
        raise subprocess.CalledProcessError(1, command)

    monkeypatch.setattr(javascript_mod, "run", failing)

    result = CliRunner().invoke(pkgcreate_cli, ["--root", str(root), "smoke-test", "--install"])
    assert result.exit_code == 0, result.output
    assert calls == [["yarn", "install"]] * 3
    assert "Install/test failed for smoke-client" in result.output
    assert list((root / "packages").iterdir()) == []


def test_smoke_test_uses_configured_commands(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    root = make_root(tmp_path)
    config = root / CONFIG_RELATIVE_PATH
    config.parent.mkdir(parents=True)
    config.write_text("commands:\n  install: pnpm install\n  test: pnpm vitest run\n")
    calls: List[List[str]] = []
    monkeypatch.setattr(
        javascript_mod, "run", lambda command, cwd=None: calls.append(command)
    )

    nested = root / "packages"
    result = CliRunner().invoke(pkgcreate_cli, ["--root", str(nested), "smoke-test", "--install"])
    assert result.exit_code == 0, result.output
    assert calls[:3] == [
        ["pnpm", "install"],
        ["yarn", "type-check"],
        ["pnpm", "vitest", "run"],
    ]


def test_smoke_test_missing_templates_exits_non_zero(tmp_path: Path) -> None:
    root = make_root(tmp_path)
    config = root / CONFIG_RELATIVE_PATH
    config.parent.mkdir(parents=True)
    config.write_text("templates_dir: does/not/exist\n")

    result = CliRunner().invoke(pkgcreate_cli, ["--root", str(root), "smoke-test"])
    assert result.exit_code == 1
    assert "Templates directory not found" in result.output


def test_check_templates(tmp_path: Path) -> None:
    root = make_root(tmp_path)
    ok = CliRunner().invoke(pkgcreate_cli, ["--root", str(root), "check-templates"])
    assert ok.exit_code == 0, ok.output
    assert "MISS" not in ok.output

    config = root / CONFIG_RELATIVE_PATH
    config.parent.mkdir(parents=True)
    config.write_text("templates_dir: templates\n")
    (root / "templates" / "common").mkdir(parents=True)
    (root / "templates" / "common" / "README.md").write_text("# {{packageName}}")

    missing = CliRunner().invoke(pkgcreate_cli, ["--root", str(root), "check-templates"])
    assert missing.exit_code == 2
    assert "MISS" in missing.output


def test_list_detail(tmp_path: Path) -> None:
    root = make_root(tmp_path)
    result = CliRunner().invoke(pkgcreate_cli, ["--root", str(root), "list", "--detail"])
    assert result.exit_code == 0, result.output
    assert "client" in result.output
    assert "src/components/Widget.tsx" in result.output
    assert "test/test-setup.ts" in result.output
    assert "(verbatim)" in result.output
