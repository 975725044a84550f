"""Run example cases and collect their outcomes.

Each case runs to completion on its own; a failure never stops the run
unless ``fail_fast`` is requested. Outcomes distinguish a failed check
(`Outcome.FAILED`) from an unexpected exception (`Outcome.ERRORED`).
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .registry import ExampleCase

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Result of running one example case."""

    PASSED = "passed"
    FAILED = "failed"
    ERRORED = "errored"


@dataclass(frozen=True, slots=True)
class CaseResult:
    """Outcome of a single example case."""

    case: ExampleCase
    outcome: Outcome
    duration: float
    message: str = ""

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASSED


@dataclass(frozen=True, slots=True)
class RunReport:
    """Outcomes of a run, in execution order."""

    results: tuple[CaseResult, ...]

    def count(self, outcome: Outcome) -> int:
        return sum(1 for result in self.results if result.outcome is outcome)

    @property
    def ok(self) -> bool:
        """True when every case that ran passed (an empty run is ok)."""
        return all(result.passed for result in self.results)

    def summary(self) -> str:
        """One-line human-readable summary, e.g. ``"12 passed, 1 failed"``."""
        parts = [
            f"{self.count(outcome)} {outcome.value}"
            for outcome in Outcome
            if self.count(outcome) or outcome is Outcome.PASSED
        ]
        return ", ".join(parts)


def run_case(case: ExampleCase) -> CaseResult:
    """Run *case* and classify its outcome."""
    start = time.perf_counter()
    try:
        case()
    except AssertionError as e:
        outcome, message = Outcome.FAILED, str(e) or type(e).__name__
    except Exception as e:  # pylint: disable=broad-exception-caught
        outcome, message = Outcome.ERRORED, f"{type(e).__name__}: {e}"
        logger.debug("Example %s raised unexpectedly", case.name, exc_info=True)
    else:
        outcome, message = Outcome.PASSED, ""
    duration = time.perf_counter() - start
    logger.debug("Example %s %s in %.4fs", case.name, outcome.value, duration)
    return CaseResult(case=case, outcome=outcome, duration=duration, message=message)


def run_cases(cases: Iterable[ExampleCase], fail_fast: bool = False) -> RunReport:
    """Run *cases* in order and return a report.

    Args:
        cases: Cases to run.
        fail_fast: Stop after the first case that does not pass.
    """
    results: list[CaseResult] = []
    for case in cases:
        result = run_case(case)
        results.append(result)
        if not result.passed:
            logger.warning(
                "Example %s %s: %s", case.name, result.outcome.value, result.message
            )
            if fail_fast:
                logger.info("Stopping after first unsuccessful example (fail-fast)")
                break
    report = RunReport(results=tuple(results))
    logger.info("Ran %d examples: %s", len(report.results), report.summary())
    return report
