"""
SCRIPTURA - Test Configuration

Pytest fixtures and configuration for all tests.
"""
import json
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest
from hypothesis import HealthCheck, settings

import config as config_module
from data.catalog import BookCatalog, reset_default_catalog
from data.loaders import DEFAULT_DATA_PATH
from data.schemas import BookRecord

# The autouse reset fixture is function scoped; it only clears module caches.
settings.register_profile(
    "scriptura",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("scriptura")


@pytest.fixture(autouse=True)
def isolated_defaults(monkeypatch):
    """Drop the cached configuration and default catalog around every test."""
    monkeypatch.setattr(config_module, "_config", None)
    reset_default_catalog()
    yield
    reset_default_catalog()


@pytest.fixture(scope="session")
def catalog() -> BookCatalog:
    """Catalog built from the packaged dataset."""
    return BookCatalog.from_file(DEFAULT_DATA_PATH)


@pytest.fixture
def fresh_catalog() -> BookCatalog:
    """Packaged catalog with an empty lookup cache."""
    return BookCatalog.from_file(DEFAULT_DATA_PATH)


@pytest.fixture
def small_catalog() -> BookCatalog:
    """Three-book catalog for tests that should not depend on the real canon."""
    return BookCatalog([
        BookRecord(name="Alpha", aliases=("Al", "Alp"), chapters=(3, 2)),
        BookRecord(name="2 Beta", aliases=("II Beta", "2nd Beta", "Second Beta"), chapters=(4,)),
        BookRecord(name="Gamma Omega", aliases=("Gam",), chapters=(1, 1, 5)),
    ])


@pytest.fixture
def raw_entries() -> List[Dict[str, Any]]:
    """Dataset entries in the on-disk layout."""
    return [
        {"book": "Alpha", "aliases": ["Al"], "chapters": [3, 2]},
        {"book": "Beta", "aliases": ["Be"], "chapters": [4]},
    ]


@pytest.fixture
def write_dataset(tmp_path) -> Callable[[Any], Path]:
    """Write a dataset payload to a temporary JSON file and return its path."""

    def _write(payload: Any, name: str = "books.json") -> Path:
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


# Markers
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "property: marks property-based tests using Hypothesis")
    config.addinivalue_line("markers", "scenario: end-to-end reference scenarios")
