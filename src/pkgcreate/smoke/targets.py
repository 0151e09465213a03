"""The fixed synthetic packages exercised by the smoke test."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple

from ..options import PackageOptions, PackageType


@dataclass(frozen=True)
class SmokeTarget:
    name: str
    package_type: PackageType

    def options(self) -> PackageOptions:
        return PackageOptions(
            package_name=self.name,
            directory_name=self.name,
            package_type=self.package_type,
            description=f"Smoke test {self.package_type.value} package",
            author="smoke-test",
            include_tests=True,
            include_linting=False,
        )


SMOKE_TARGETS: Tuple[SmokeTarget, ...] = (
    SmokeTarget("smoke-client", PackageType.CLIENT),
    SmokeTarget("smoke-backend", PackageType.BACKEND),
    SmokeTarget("smoke-shared", PackageType.SHARED),
)

# Relative path and contents of the one test each smoke package is guaranteed to have.
SMOKE_TESTS: Dict[PackageType, Tuple[str, str]] = {
    PackageType.CLIENT: (
        "test/dummy.test.tsx",
        """import { render, screen } from "@testing-library/react";

describe("dummy client", () => {
	it("renders", () => {
		render(<div>Hello from Client App</div>);
		expect(screen.getByText(/Hello from Client App/i)).toBeInTheDocument();
	});
});
""",
    ),
    PackageType.BACKEND: (
        "src/dummy.test.ts",
        """import { describe, it, expect } from "vitest";

describe("dummy backend", () => {
	it("math", () => {
		expect(1 + 1).toBe(2);
	});
});
""",
    ),
    PackageType.SHARED: (
        "test/dummy.test.ts",
        """import { describe, it, expect } from "vitest";

describe("dummy shared", () => {
	it("truthy", () => {
		expect(true).toBe(true);
	});
});
""",
    ),
}


def write_smoke_test(package_dir: Path, package_type: PackageType) -> Path:
    """Write the minimal test file for ``package_type`` into ``package_dir``."""
    relative, content = SMOKE_TESTS[package_type]
    test_path = package_dir / relative
    test_path.parent.mkdir(parents=True, exist_ok=True)
    test_path.write_text(content, encoding="utf-8")
    return test_path
