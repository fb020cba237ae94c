"""Tests for the case harness."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pratt.core.errors import ErrorKind
from pratt.core.manifest import CaseSpec, load_manifest
from pratt.harness import REFERENCE_CASES, run_cases


def test_reference_cases_all_pass() -> None:
    report = run_cases(REFERENCE_CASES)
    assert len(report.results) == 15
    assert report.passed
    assert report.failures == []


def test_failure_does_not_stop_batch() -> None:
    cases = [
        CaseSpec(input="a+b", expected="a+b"),
        CaseSpec(input="(a"),
        CaseSpec(input="a*b", expected="ab*"),
    ]
    report = run_cases(cases)
    assert len(report.results) == 3
    assert not report.passed
    assert [r.case.input for r in report.failures] == ["a+b", "(a"]
    assert report.results[2].passed


def test_expected_error_passes() -> None:
    report = run_cases([CaseSpec(input="a)", error=ErrorKind.TRAILING_INPUT)])
    assert report.passed


def test_wrong_error_kind_fails() -> None:
    report = run_cases([CaseSpec(input="a)", error=ErrorKind.UNMATCHED_DELIMITER)])
    assert not report.passed
    assert report.failures[0].actual_text == "error: trailing_input"


def test_capacity_is_applied() -> None:
    report = run_cases([CaseSpec(input="a+b", error=ErrorKind.OUTPUT_OVERFLOW)], capacity=3)
    assert report.passed


def test_describe() -> None:
    report = run_cases([CaseSpec(input="a+b", expected="ba+")])
    assert report.failures[0].describe() == "parse(a+b) = ab+, expected: ba+"


def test_logs_each_case(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="pratt.harness"):
        run_cases([CaseSpec(input="a", expected="a"), CaseSpec(input="b", expected="a")])
    messages = [r.getMessage() for r in caplog.records]
    assert "TEST: parsing a" in messages
    assert "FAILURE: parse(b) = b, expected: a" in messages


def test_example_manifest_passes() -> None:
    path = Path(__file__).parents[2] / "examples" / "pratt.toml"
    manifest = load_manifest(path)
    report = run_cases(manifest.cases, manifest.parser.capacity)
    assert report.passed
