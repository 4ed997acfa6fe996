"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def person_json() -> str:
    return '{"name":"John","age":30}'


@pytest.fixture
def users_xml() -> str:
    return (FIXTURES_DIR / "users.xml").read_text(encoding="utf-8")
