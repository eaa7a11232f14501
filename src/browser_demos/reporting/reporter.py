"""
Test run reporting for sequential asynchronous UI checks.

A check is a named zero-argument coroutine function. ``execute_check``
runs one and captures its outcome as a ``CheckResult``; ``TestRunReporter``
builds on it to keep pass/fail counters and print progress lines and a
final summary.

Checks always run one at a time. They usually share a single browser
page, so the next check must not start before the previous one settles.
No timeout is applied here; per-operation timeouts belong to Playwright.
"""

import time
import traceback
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable

from rich.console import Console
from rich.markup import escape

from browser_demos.core.exceptions import CheckFailedError
from browser_demos.utils.logging import get_logger

logger = get_logger(__name__)

Check = Callable[[], Awaitable[Any]]

SUMMARY_TITLE = "======= TEST SUMMARY ======="
SUMMARY_RULE = "============================"


class CheckStatus(str, Enum):
    """Outcome kinds of a single check."""

    PASSED = "passed"
    FAILED = "failed"


@dataclass
class CheckResult:
    """
    Outcome of one check invocation.

    On success ``value`` holds whatever the check returned; on failure
    ``error`` holds the raised exception and ``traceback`` its formatted
    stack.
    """

    name: str
    status: CheckStatus
    value: Any = None
    error: Exception | None = None
    traceback: str = ""
    duration_ms: float = 0.0

    @property
    def passed(self) -> bool:
        return self.status is CheckStatus.PASSED

    @property
    def error_detail(self) -> str:
        """One-line description of the failure, empty for passed checks."""
        if self.error is None:
            return ""
        message = str(self.error)
        name = type(self.error).__name__
        return f"{name}: {message}" if message else name


@dataclass
class OutcomeCounter:
    """Running totals for one reporting session."""

    total: int = 0
    passed: int = 0
    failed: int = 0


def success_rate(passed: int, total: int) -> int | None:
    """
    Percentage of passed checks, rounded to the nearest integer.

    Halves round up (12.5 -> 13). Returns None when nothing ran.
    """
    if total <= 0:
        return None
    return (200 * passed + total) // (2 * total)


@dataclass(frozen=True)
class RunSummary:
    """Aggregate numbers for a finished session."""

    total: int
    passed: int
    failed: int

    @property
    def success_rate(self) -> int | None:
        return success_rate(self.passed, self.total)

    @property
    def success_rate_text(self) -> str:
        rate = self.success_rate
        return "N/A" if rate is None else f"{rate}%"

    def lines(self) -> list[str]:
        """Summary block as plain text lines."""
        return [
            SUMMARY_TITLE,
            f"Total: {self.total}",
            f"Passed: {self.passed}",
            f"Failed: {self.failed}",
            f"Success rate: {self.success_rate_text}",
            SUMMARY_RULE,
        ]


async def execute_check(name: str, check: Check) -> CheckResult:
    """
    Await ``check`` and capture its outcome.

    Any ``Exception`` raised by the check becomes a failed result. Task
    cancellation and interpreter exits are not check failures and
    propagate to the caller.

    Args:
        name: Human-readable check label
        check: Zero-argument coroutine function

    Returns:
        CheckResult describing the outcome
    """
    start = time.perf_counter()
    try:
        value = await check()
    except Exception as e:
        return CheckResult(
            name=name,
            status=CheckStatus.FAILED,
            error=e,
            traceback=traceback.format_exc(),
            duration_ms=(time.perf_counter() - start) * 1000,
        )

    return CheckResult(
        name=name,
        status=CheckStatus.PASSED,
        value=value,
        duration_ms=(time.perf_counter() - start) * 1000,
    )


def ensure(condition: Any, message: str) -> None:
    """
    Fail the current check unless ``condition`` is truthy.

    Raises:
        CheckFailedError: If the condition is falsy
    """
    if not condition:
        raise CheckFailedError(message)


class TestRunReporter:
    """
    Runs named checks one after another and reports their outcomes.

    Each reporter owns its counters, so independent sessions never share
    state. A failing check is recorded and printed, then the session moves
    on to the next one.

    Example:
        >>> reporter = TestRunReporter()
        >>> await reporter.run("home page loads", check_home_page)
        >>> await reporter.run("search works", check_search)
        >>> reporter.summary()
    """

    # Keep pytest from collecting this class
    __test__ = False

    def __init__(
        self,
        console: Console | None = None,
        show_tracebacks: bool = True,
    ) -> None:
        """
        Initialize an empty reporting session.

        Args:
            console: Rich console for report output (stdout if None)
            show_tracebacks: Print the failing check's stack after its error line
        """
        self.console = console or Console()
        self.show_tracebacks = show_tracebacks
        self.counter = OutcomeCounter()
        self.results: list[CheckResult] = []

    @property
    def total(self) -> int:
        return self.counter.total

    @property
    def passed(self) -> int:
        return self.counter.passed

    @property
    def failed(self) -> int:
        return self.counter.failed

    @property
    def has_failures(self) -> bool:
        return self.counter.failed > 0

    async def run(self, name: str, check: Check) -> CheckResult:
        """
        Run one check and record its outcome.

        Never raises for a failing check; the failure is printed and
        returned in the result.

        Args:
            name: Human-readable check label
            check: Zero-argument coroutine function

        Returns:
            CheckResult for this invocation
        """
        self.counter.total += 1
        self.console.print(f"\n{escape('[TEST]')} {escape(name)}")

        result = await execute_check(name, check)
        self.results.append(result)

        if result.passed:
            self.counter.passed += 1
            self.console.print(f"[green]✅ PASSED:[/green] {escape(name)}")
            logger.debug(f"Check passed in {result.duration_ms:.0f}ms: {name}")
        else:
            self.counter.failed += 1
            self.console.print(f"[red]❌ FAILED:[/red] {escape(name)}")
            self.console.print(f"[red]{escape(result.error_detail)}[/red]")
            if self.show_tracebacks and result.traceback:
                self.console.print(escape(result.traceback.rstrip()), style="dim")
            logger.debug(f"Check failed: {name}: {result.error_detail}")

        return result

    def summary(self) -> RunSummary:
        """
        Print the summary block and return its numbers.

        Safe to call when no check has run; the success rate is then
        reported as N/A.
        """
        summary = RunSummary(
            total=self.counter.total,
            passed=self.counter.passed,
            failed=self.counter.failed,
        )

        lines = summary.lines()
        self.console.print()
        self.console.print(lines[0], style="bold")
        for line in lines[1:-1]:
            self.console.print(line)
        self.console.print(lines[-1], style="bold")
        self.console.print()

        return summary
