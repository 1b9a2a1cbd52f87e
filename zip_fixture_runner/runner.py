"""Runs the fixture table against the Zippopotam API, one isolated pipeline per case.

Each case is build request -> send -> validate -> extract -> assert. Any
classified failure is recorded on that case's result and the run moves on.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable

from .errors import HarnessError, PlaceNameMismatchError
from .fixtures import ZIP_CODES_AND_PLACES, ZipCase, validate_cases
from .services.zippopotam_service import ZippopotamService

logger = logging.getLogger(__name__)


def check_place_name(actual: str, expected: str) -> None:
    if actual != expected:
        raise PlaceNameMismatchError(expected, actual)


@dataclass(frozen=True)
class CaseResult:
    case: ZipCase
    actual: str | None = None
    error: Exception | None = None

    @property
    def passed(self) -> bool:
        return self.error is None

    @property
    def failure_kind(self) -> str | None:
        return None if self.error is None else type(self.error).__name__

    def describe(self) -> str:
        label = f"{self.case.country_code}/{self.case.zip_code}"
        if self.passed:
            return f"PASS {label}: {self.actual}"
        return f"FAIL {label}: {self.failure_kind}: {self.error}"


@dataclass(frozen=True)
class RunReport:
    results: tuple[CaseResult, ...]

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def failures(self) -> tuple[CaseResult, ...]:
        return tuple(result for result in self.results if not result.passed)

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def summary(self) -> str:
        lines = [result.describe() for result in self.results]
        lines.append(f"{len(self.results) - len(self.failures)} passed, {len(self.failures)} failed")
        return "\n".join(lines)


class FixtureRunner:
    def __init__(self, service: ZippopotamService):
        self.service = service

    async def run_case(self, case: ZipCase) -> CaseResult:
        actual = None
        try:
            actual = await self.service.get_place_name(case.country_code, case.zip_code)
            check_place_name(actual, case.expected_place_name)
        except (HarnessError, AssertionError) as e:
            logger.warning("%s/%s failed with %s: %s", case.country_code, case.zip_code, type(e).__name__, e)
            return CaseResult(case, actual, e)

        logger.info("%s/%s -> %s", case.country_code, case.zip_code, actual)
        return CaseResult(case, actual)

    async def run(
        self, cases: Iterable[tuple[str, str, str]] = ZIP_CODES_AND_PLACES, parallel: bool = False
    ) -> RunReport:
        """Run every case and collect the results in fixture order.

        The table is validated up front; a ConfigurationError aborts the run
        before any request is sent.
        """
        validated = validate_cases(cases)
        if parallel:
            results = await asyncio.gather(*(self.run_case(case) for case in validated))
        else:
            results = [await self.run_case(case) for case in validated]

        report = RunReport(tuple(results))
        logger.info("Fixture run finished: %d cases, %d failed", len(report.results), len(report.failures))
        return report
