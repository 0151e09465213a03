"""Package options: the record that drives template resolution and substitution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .errors import InvalidOptionsError


class PackageType(str, Enum):
    """Kind of workspace package to generate."""

    CLIENT = "client"
    BACKEND = "backend"
    SHARED = "shared"


@dataclass(frozen=True)
class PackageOptions:
    """Immutable description of a package to generate.

    ``directory_name`` defaults to ``package_name`` and must be a single path
    component, since it names the package directory under the packages root.
    """

    package_name: str
    package_type: PackageType
    directory_name: str = ""
    description: str = ""
    author: str = ""
    include_tests: bool = False
    include_linting: bool = True

    def __post_init__(self) -> None:
        if not self.package_name.strip():
            raise InvalidOptionsError("Package name is required!")
        try:
            package_type = PackageType(self.package_type)
        except ValueError:
            raise InvalidOptionsError(
                "Package type must be: client, backend, or shared"
            ) from None
        # frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, "package_type", package_type)
        if not self.directory_name:
            object.__setattr__(self, "directory_name", self.package_name)
        _check_directory_name(self.directory_name)


def _check_directory_name(name: str) -> None:
    if name in (".", "..") or "/" in name or "\\" in name or "\0" in name:
        raise InvalidOptionsError(
            f"Directory name '{name}' must be a single directory name"
        )


AskFunc = Callable[[str, Optional[str]], str]
ConfirmFunc = Callable[[str, bool], bool]


def collect_package_options(ask: AskFunc, confirm: ConfirmFunc) -> PackageOptions:
    """Build validated ``PackageOptions`` from an abstract question source.

    ``ask(question, default)`` returns the raw answer (empty string when the
    user just hits enter and no default applies); ``confirm(question, default)``
    returns a yes/no answer.
    """
    package_name = ask("📦 Package name (e.g., my-awesome-package)", None).strip()
    if not package_name:
        raise InvalidOptionsError("Package name is required!")

    directory_name = ask("📁 Directory name", package_name).strip() or package_name

    type_answer = ask("🏗️  Package type (client/backend/shared)", "shared").strip()
    try:
        package_type = PackageType((type_answer or "shared").lower())
    except ValueError:
        raise InvalidOptionsError(
            "Package type must be: client, backend, or shared"
        ) from None

    description = ask(
        "📝 Package description", f"A {package_type.value} package for {package_name}"
    ).strip()
    author = ask("👤 Author name", "Your Name").strip()
    include_tests = confirm("🧪 Include test setup?", False)
    include_linting = confirm("🔍 Include ESLint configuration?", True)

    return PackageOptions(
        package_name=package_name,
        directory_name=directory_name,
        package_type=package_type,
        description=description,
        author=author,
        include_tests=include_tests,
        include_linting=include_linting,
    )
