"""Case harness — runs input/expected pairs through the parser and reports results.

A failing case is recorded and the batch continues; the report says whether
every case passed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from pratt.core.buffers import DEFAULT_CAPACITY
from pratt.core.manifest import CaseSpec
from pratt.core.parser import try_parse
from pratt.core.results import ParseOutcome

logger = logging.getLogger(__name__)

REFERENCE_CASES: tuple[CaseSpec, ...] = tuple(
    CaseSpec(input=source, expected=expected)
    for source, expected in [
        ("a", "a"),
        ("~a", "a~"),
        ("~~a", "a~~"),
        ("a+b", "ab+"),
        ("a*b", "ab*"),
        ("a*~b", "ab~*"),
        ("a+b+c", "ab+c+"),
        ("a+b-c", "ab+c-"),
        ("a-b+c", "ab-c+"),
        ("a*b*c", "ab*c*"),
        ("a=b=c", "abc=="),
        ("a+b*c", "abc*+"),
        ("(a+b)*c", "ab+c*"),
        ("a*b+c", "ab*c+"),
        ("a=b+c", "abc+="),
    ]
)


class CaseResult(BaseModel):
    case: CaseSpec
    outcome: ParseOutcome

    model_config = ConfigDict(frozen=True)

    @property
    def passed(self) -> bool:
        if self.case.error is not None:
            return self.outcome.error_kind == self.case.error
        return self.outcome.ok and self.outcome.output == self.case.expected

    @property
    def expected_text(self) -> str:
        if self.case.error is not None:
            return f"error: {self.case.error}"
        return self.case.expected or ""

    @property
    def actual_text(self) -> str:
        if self.outcome.ok:
            return self.outcome.output or ""
        return f"error: {self.outcome.error_kind}"

    def describe(self) -> str:
        """One-line report in the form ``parse(a+b) = ab+, expected: ab+``."""
        return f"parse({self.case.input}) = {self.actual_text}, expected: {self.expected_text}"


class HarnessReport(BaseModel):
    results: list[CaseResult]

    @property
    def failures(self) -> list[CaseResult]:
        return [r for r in self.results if not r.passed]

    @property
    def passed(self) -> bool:
        return not self.failures


def run_cases(cases: Iterable[CaseSpec], capacity: int = DEFAULT_CAPACITY) -> HarnessReport:
    results = []
    for case in cases:
        logger.info("TEST: parsing %s", case.input)
        result = CaseResult(case=case, outcome=try_parse(case.input, capacity))
        if not result.passed:
            logger.warning("FAILURE: %s", result.describe())
        results.append(result)

    report = HarnessReport(results=results)
    logger.info("%d/%d cases passed", len(results) - len(report.failures), len(results))
    return report
