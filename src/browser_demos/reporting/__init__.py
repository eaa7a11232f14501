"""
Reporting module for browser-demos.

Runs named asynchronous checks sequentially and reports pass/fail
outcomes with a final summary.
"""

from browser_demos.reporting.reporter import (
    Check,
    CheckResult,
    CheckStatus,
    OutcomeCounter,
    RunSummary,
    TestRunReporter,
    ensure,
    execute_check,
    success_rate,
)

__all__ = [
    "Check",
    "CheckResult",
    "CheckStatus",
    "OutcomeCounter",
    "RunSummary",
    "TestRunReporter",
    "ensure",
    "execute_check",
    "success_rate",
]
