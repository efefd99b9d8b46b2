"""Benchmark fixtures and configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURE_FILE = Path(__file__).parent.parent / "tests" / "fixtures" / "modeline_test.txt"


@pytest.fixture
def fixture_text() -> str:
    """100-line file with modelines in the first and last five lines."""
    if not FIXTURE_FILE.exists():
        pytest.skip("modeline fixture not found")
    return FIXTURE_FILE.read_text(encoding="utf-8")


@pytest.fixture
def large_document() -> list[str]:
    """Generate a large source (~100k lines) with modelines at both ends."""
    body = [f"def function_{i}(): return {i}  # plain comment" for i in range(100_000)]
    return ["# vim: set ts=4 sw=4 et:", *body, "# envctl: provider=gsm"]
