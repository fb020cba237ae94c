"""Version lookup for pratt."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION = "pratt-rpn"

# src/pratt/_version.py -> repository root
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Version of the installed distribution, else of a source checkout."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        pass
    if _PYPROJECT.exists():
        project = tomllib.loads(_PYPROJECT.read_text(encoding="utf-8")).get("project", {})
        if project.get("name") == DISTRIBUTION:
            return project.get("version", "0.0.0")
    return "0.0.0"
