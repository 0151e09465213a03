"""Verification checks for generated packages."""

from .javascript import CHECK_ORDER, run_package_checks

__all__ = ["CHECK_ORDER", "run_package_checks"]
