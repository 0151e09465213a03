"""CLI interface for pkgcreate - workspace package scaffolder."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from .config import Workspace, load_workspace
from .errors import PackageCreateError
from .options import PackageOptions, PackageType, collect_package_options
from .smoke import run_smoke_test
from .templates import check_templates, create_package, resolve_files
from .utils import console


def _ask(question: str, default: Optional[str]) -> str:
    if default is None:
        return click.prompt(question, default="", show_default=False)
    return click.prompt(question, default=default)


def _confirm(question: str, default: bool) -> bool:
    return click.confirm(question, default=default)


def _print_options(options: PackageOptions) -> None:
    console.print("\n📋 Package Configuration:")
    console.print(f"   Name: {options.package_name}")
    console.print(f"   Directory: {options.directory_name}")
    console.print(f"   Type: {options.package_type.value}")
    console.print(f"   Description: {options.description}")
    console.print(f"   Author: {options.author}")
    console.print(f"   Tests: {'Yes' if options.include_tests else 'No'}")
    console.print(f"   Linting: {'Yes' if options.include_linting else 'No'}")


def _fail(error: PackageCreateError) -> NoReturn:
    console.print(f"\n❌ Error: {error}", style="bold red")
    raise SystemExit(1)


@click.group()
@click.option(
    "--root",
    "root",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="PKGCREATE_ROOT",
    default=None,
    help="Directory to start workspace discovery from (default: current directory).",
)
@click.pass_context
def cli(ctx: click.Context, root: Optional[Path]) -> None:
    """Create and smoke-test workspace packages."""
    ctx.ensure_object(dict)
    ctx.obj["root"] = root


def _workspace(ctx: click.Context) -> Workspace:
    try:
        return load_workspace(ctx.obj.get("root"))
    except PackageCreateError as e:
        _fail(e)


@cli.command("create")
@click.pass_context
def create_cmd(ctx: click.Context) -> None:
    """
    Interactively create a new package under the workspace packages directory.

    Prompts for name, directory, type (client/backend/shared), description,
    author and whether to include test setup, then renders the matching
    templates into packages/<directory>.
    """
    workspace = _workspace(ctx)
    console.print("🚀 Package Creator\n", style="bold")
    try:
        options = collect_package_options(_ask, _confirm)
        _print_options(options)
        if not click.confirm("\n✅ Create this package?", default=True):
            console.print("❌ Package creation cancelled.")
            return
        create_package(options, workspace)
    except PackageCreateError as e:
        _fail(e)


@cli.command("smoke-test")
@click.option("--install", is_flag=True, help="Install, type-check and test each package.")
@click.option(
    "--no-clean",
    "no_clean",
    is_flag=True,
    help="Leave generated packages (and any backups) on disk for inspection.",
)
@click.pass_context
def smoke_test_cmd(ctx: click.Context, install: bool, no_clean: bool) -> None:
    """
    Generate one throwaway package per kind and verify it.

    Pre-existing smoke-* directories are moved aside first and restored
    afterwards. Per-package failures are reported but do not change the exit
    status.
    """
    workspace = _workspace(ctx)
    try:
        run_smoke_test(workspace, install=install, no_clean=no_clean)
    except PackageCreateError as e:
        _fail(e)


@cli.command("check-templates")
@click.pass_context
def check_templates_cmd(ctx: click.Context) -> None:
    """Verify that every required template file exists (exit 2 if any is missing)."""
    workspace = _workspace(ctx)
    ok = True
    for path, present in check_templates(workspace.templates_root):
        if present:
            console.print(f"OK   {path}", style="green")
        else:
            console.print(f"MISS {path}", style="bold red")
            ok = False
    if not ok:
        sys.exit(2)


@cli.command("list")
@click.option("--detail", "detail", is_flag=True, default=False)
@click.pass_context
def list_cmd(ctx: click.Context, detail: bool) -> None:
    """
    List package kinds and, with --detail, the template files each one uses.
    """
    workspace = _workspace(ctx)
    for kind in PackageType:
        print(kind.value)
        if not detail:
            continue
        probe = PackageOptions(
            package_name=f"example-{kind.value}", package_type=kind, include_tests=True
        )
        for template_file in resolve_files(probe, workspace.templates_root):
            mode = "template" if template_file.is_template else "verbatim"
            print(f"  {template_file.destination} <- {template_file.source} ({mode})")
