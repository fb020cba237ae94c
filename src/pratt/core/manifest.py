import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from pratt.core.buffers import DEFAULT_CAPACITY
from pratt.core.errors import ErrorKind

MANIFEST_NAME = "pratt.toml"


class ManifestError(Exception):
    """Raised when pratt.toml is malformed."""


@dataclass
class ParserConfig:
    """Parser limits."""

    capacity: int = DEFAULT_CAPACITY  # output characters, end marker included


@dataclass
class CaseSpec:
    """
    One input/expected pair for the case harness.

    Exactly one of ``expected`` (postfix text) or ``error`` (failure kind)
    is set.
    """

    input: str
    expected: str | None = None
    error: ErrorKind | None = None


@dataclass
class ProjectManifest:
    parser: ParserConfig = field(default_factory=ParserConfig)
    cases: list[CaseSpec] = field(default_factory=list)


def _load_case(index: int, data: object) -> CaseSpec:
    if not isinstance(data, dict):
        raise ManifestError(f"cases[{index}]: expected a table, got {data!r}")
    if "input" not in data:
        raise ManifestError(f"cases[{index}]: missing 'input'")

    expected = data.get("expected")
    error_name = data.get("error")
    if (expected is None) == (error_name is None):
        raise ManifestError(f"cases[{index}]: set exactly one of 'expected' or 'error'")

    error = None
    if error_name is not None:
        try:
            error = ErrorKind(error_name)
        except ValueError:
            choices = ", ".join(k.value for k in ErrorKind)
            raise ManifestError(
                f"cases[{index}]: unknown error kind {error_name!r} (expected one of: {choices})"
            ) from None

    return CaseSpec(input=str(data["input"]), expected=expected, error=error)


def load_manifest(path: Path) -> ProjectManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"{path}: {e}") from e

    parser_data = data.get("parser", {})
    if not isinstance(parser_data, dict):
        raise ManifestError(f"parser must be a table, got {parser_data!r}")
    capacity = parser_data.get("capacity", DEFAULT_CAPACITY)
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
        raise ManifestError(f"parser.capacity must be a positive integer, got {capacity!r}")

    cases_data = data.get("cases", [])
    if not isinstance(cases_data, list):
        raise ManifestError(f"cases must be an array of tables, got {cases_data!r}")
    cases = [_load_case(i, case) for i, case in enumerate(cases_data)]

    return ProjectManifest(parser=ParserConfig(capacity=capacity), cases=cases)
