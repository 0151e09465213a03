"""Smoke test: create, verify and tear down throwaway packages.

Targets run one after another. A target's failure is reported and the run
moves on; only unexpected errors escape ``run_smoke_test``.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional

from rich.table import Table

from ..checks import run_package_checks
from ..config import Workspace
from ..errors import PackageExistsError
from ..templates import ensure_templates_root, materialize, read_workspace_name, resolve_files
from ..utils import console
from .guard import CleanupResult, StagedTarget
from .targets import SMOKE_TARGETS, SmokeTarget, write_smoke_test


class Verification(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class TargetReport:
    target: SmokeTarget
    created: bool = False
    verification: Verification = Verification.SKIPPED
    cleanup: CleanupResult = CleanupResult.KEPT
    error: Optional[str] = None


def run_smoke_test(
    workspace: Workspace,
    targets: Iterable[SmokeTarget] = SMOKE_TARGETS,
    install: bool = False,
    no_clean: bool = False,
) -> List[TargetReport]:
    """Run the create/verify/cleanup cycle for each target in order."""
    ensure_templates_root(workspace.templates_root)
    workspace_name = read_workspace_name(workspace.root)

    reports: List[TargetReport] = []
    for target in targets:
        console.print(
            f"\n📦 Smoke target: {target.name} ({target.package_type.value})",
            style="bold blue",
        )
        reports.append(
            _run_target(workspace, target, workspace_name, install, not no_clean)
        )

    print_summary(reports)
    return reports


def _run_target(
    workspace: Workspace,
    target: SmokeTarget,
    workspace_name: str,
    install: bool,
    clean: bool,
) -> TargetReport:
    report = TargetReport(target)
    package_dir = workspace.packages_dir / target.name
    staged = StagedTarget(workspace.packages_dir, package_dir, clean=clean)

    with staged:
        try:
            _create_target(workspace, target, package_dir, workspace_name)
        except (PackageExistsError, OSError) as e:
            report.error = str(e)
            console.print(f"❌ Could not create {target.name}: {e}", style="bold red")
        else:
            report.created = True
            if install:
                report.verification = _verify_target(target, package_dir, workspace)
            else:
                console.print(
                    f"Created package {target.name}; run `yarn install` and tests manually to verify"
                )

    report.cleanup = staged.cleanup
    return report


def _create_target(
    workspace: Workspace, target: SmokeTarget, package_dir: Path, workspace_name: str
) -> None:
    options = target.options()
    materialize(
        package_dir,
        resolve_files(options, workspace.templates_root),
        options,
        workspace=workspace_name,
    )
    test_path = write_smoke_test(package_dir, target.package_type)
    console.print(f"📄 Created: {test_path.relative_to(package_dir).as_posix()}")


def _verify_target(
    target: SmokeTarget, package_dir: Path, workspace: Workspace
) -> Verification:
    try:
        run_package_checks(package_dir, workspace.commands)
    except (subprocess.CalledProcessError, OSError) as e:
        console.print(f"❌ Install/test failed for {target.name}: {e}", style="bold red")
        return Verification.FAILED
    return Verification.PASSED


def print_summary(reports: List[TargetReport]) -> None:
    table = Table(title="Smoke test summary")
    table.add_column("Target")
    table.add_column("Created")
    table.add_column("Verification")
    table.add_column("Cleanup")
    for report in reports:
        verification_style = {
            Verification.PASSED: "green",
            Verification.FAILED: "red",
            Verification.SKIPPED: "dim",
        }[report.verification]
        table.add_row(
            report.target.name,
            "yes" if report.created else "[red]no[/red]",
            f"[{verification_style}]{report.verification.value}[/{verification_style}]",
            report.cleanup.value,
        )
    console.print(table)
