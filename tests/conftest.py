"""Conformance fixture loader for seqmatch.

Loads YAML fixtures from spec/tests/ and converts them to seqmatch types
for parametrized testing. Matcher fixtures (01-03) describe a matcher config
plus cases; config fixtures (04) describe configs that must be rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from seqmatch import SourceConfig, parse_source_config

SPEC_DIR = Path(__file__).resolve().parent.parent / "spec" / "tests"


@dataclass
class FixtureCase:
    """A single test case from a matcher conformance fixture."""

    fixture_name: str
    case_name: str
    config: dict[str, Any]
    actual: SourceConfig
    expect: bool
    description: str | None = None
    mismatch: str | None = None
    pulls: int | None = None


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_matcher_fixtures() -> list[FixtureCase]:
    """Load all matcher conformance fixtures (01-03)."""
    cases: list[FixtureCase] = []
    for subdir in sorted(SPEC_DIR.iterdir()):
        if not subdir.is_dir():
            continue
        if not subdir.name.startswith(("01_", "02_", "03_")):
            continue
        for yaml_file in sorted(subdir.glob("*.yaml")):
            cases.extend(_load_matcher_file(yaml_file))
    return cases


def _load_matcher_file(path: Path) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[FixtureCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            for case in doc["cases"]:
                cases.append(
                    FixtureCase(
                        fixture_name=doc["name"],
                        case_name=case["name"],
                        config=doc["matcher"],
                        actual=parse_source_config(case["actual"]),
                        expect=case["expect"],
                        description=case.get("description"),
                        mismatch=case.get("mismatch"),
                        pulls=case.get("pulls"),
                    )
                )
    return cases


def load_config_error_fixtures() -> list[dict[str, Any]]:
    """Load all config error fixtures (04)."""
    fixtures: list[dict[str, Any]] = []
    config_dir = SPEC_DIR / "04_config"
    if not config_dir.exists():
        return fixtures
    for yaml_file in sorted(config_dir.glob("*.yaml")):
        with yaml_file.open() as f:
            for doc in yaml.safe_load_all(f):
                if doc is None:
                    continue
                doc["_source"] = yaml_file.name
                fixtures.append(doc)
    return fixtures
