"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from typespec_zod.core.graph import load_type_graph
from typespec_zod.emitters import InMemoryEmitter
from typespec_zod.models import Namespace

_TESTS_ROOT = Path(__file__).parent
_FIXTURES = _TESTS_ROOT / "fixtures"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_TESTS_ROOT)
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def demo_graph_path() -> Path:
    """Return the path to the demo type graph (User/Post/Profile/...)."""
    return _FIXTURES / "demo_graph.json"


@pytest.fixture
def demo_schemas() -> str:
    """Return the expected schemas.ts for the demo type graph."""
    return (_FIXTURES / "demo_schemas.ts").read_text(encoding="utf-8")


@pytest.fixture
def demo_graph(demo_graph_path: Path) -> Namespace:
    return load_type_graph(demo_graph_path)


@pytest.fixture
def in_memory_emitter() -> InMemoryEmitter:
    return InMemoryEmitter()
