from __future__ import annotations

from pathlib import Path

import pytest

from pkgcreate.config.workspace import BUNDLED_TEMPLATES_ROOT
from pkgcreate.options import PackageOptions, PackageType
from pkgcreate.templates import find_missing_templates, required_templates, resolve_files

ROOT = Path("/templates")


@pytest.mark.parametrize("kind", list(PackageType))
@pytest.mark.parametrize("include_tests", [False, True])
def test_destinations_unique_and_non_empty(kind: PackageType, include_tests: bool) -> None:
    options = PackageOptions(
        package_name="demo", package_type=kind, include_tests=include_tests
    )
    files = resolve_files(options, ROOT)
    destinations = [f.destination for f in files]

    assert destinations
    assert len(destinations) == len(set(destinations))
    assert destinations[:3] == ["README.md", "package.json", "tsconfig.json"]


def test_shared_with_tests_resolves_expected_files() -> None:
    options = PackageOptions(
        package_name="demo",
        directory_name="demo",
        package_type=PackageType.SHARED,
        description="d",
        author="a",
        include_tests=True,
    )
    files = {f.destination: f for f in resolve_files(options, ROOT)}

    assert set(files) == {
        "README.md",
        "package.json",
        "tsconfig.json",
        "src/index.ts",
        "src/types.ts",
        "src/utils.ts",
        "vitest.config.ts",
        "test-setup.ts",
    }
    assert files["package.json"].source == ROOT / "shared" / "shared-package.json"
    assert files["README.md"].source == ROOT / "common" / "README.md"
    assert files["vitest.config.ts"].is_template is False
    assert files["test-setup.ts"].is_template is False
    assert files["src/utils.ts"].is_template is True


def test_client_files() -> None:
    options = PackageOptions(
        package_name="ui", package_type=PackageType.CLIENT, include_tests=True
    )
    files = {f.destination: f.source for f in resolve_files(options, ROOT)}

    assert files["src/index.tsx"] == ROOT / "client" / "src-index.tsx"
    assert files["src/components/Widget.tsx"] == ROOT / "client" / "src-component.tsx"
    assert files["test/test-setup.ts"] == ROOT / "client" / "test-setup.ts"
    assert files["tsconfig.json"] == ROOT / "client" / "client-tsconfig.json"


def test_backend_without_tests_has_no_test_files() -> None:
    options = PackageOptions(package_name="api", package_type=PackageType.BACKEND)
    destinations = [f.destination for f in resolve_files(options, ROOT)]

    assert destinations == ["README.md", "package.json", "tsconfig.json", "src/index.ts"]


def test_required_templates_cover_each_kind_once() -> None:
    required = required_templates(ROOT)

    assert len(required) == len(set(required))
    assert ROOT / "common" / "README.md" in required
    assert ROOT / "backend" / "backend-index.ts" in required
    assert ROOT / "shared" / "vitest.config.ts" not in required
    assert len(required) == 13


def test_bundled_templates_are_complete() -> None:
    assert find_missing_templates(BUNDLED_TEMPLATES_ROOT) == []
    for kind in PackageType:
        assert (BUNDLED_TEMPLATES_ROOT / kind.value / "vitest.config.ts").is_file()
        assert (BUNDLED_TEMPLATES_ROOT / kind.value / "test-setup.ts").is_file()


def test_missing_templates_reported(tmp_path: Path) -> None:
    (tmp_path / "common").mkdir()
    (tmp_path / "common" / "README.md").write_text("# {{packageName}}")

    missing = find_missing_templates(tmp_path)

    assert tmp_path / "common" / "README.md" not in missing
    assert tmp_path / "client" / "client-package.json" in missing
    assert len(missing) == 12
