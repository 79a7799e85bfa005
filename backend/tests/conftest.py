"""Shared fixtures for the backend test-suite."""

from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
from bs4 import BeautifulSoup
from fastapi.testclient import TestClient

from table_csv.main import app


@pytest.fixture
def companies_html() -> str:
    return (
        "<table><tr><th>Company</th><th>Country</th></tr>"
        "<tr><td>Acme</td><td>US</td></tr></table>"
    )


@pytest.fixture
def soup() -> Callable[[str], BeautifulSoup]:
    """Parse well-formed markup without HTML5 tree rewriting."""

    def _parse(markup: str) -> BeautifulSoup:
        return BeautifulSoup(markup, "html.parser")

    return _parse


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
