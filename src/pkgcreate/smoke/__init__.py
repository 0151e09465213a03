"""Smoke test of the package templates."""

from .guard import BackedUp, CleanupResult, Fresh, Occupied, StagedTarget
from .runner import TargetReport, Verification, run_smoke_test
from .targets import SMOKE_TARGETS, SmokeTarget, write_smoke_test

__all__ = [
    "BackedUp",
    "CleanupResult",
    "Fresh",
    "Occupied",
    "StagedTarget",
    "TargetReport",
    "Verification",
    "run_smoke_test",
    "SMOKE_TARGETS",
    "SmokeTarget",
    "write_smoke_test",
]
