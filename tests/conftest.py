"""
Pytest configuration and shared fixtures for all rsimport tests.

The lark parser is the only expensive object; it is built once per session
and shared, since Parser.parse keeps no state between calls.
"""

import sys
import pytest
from pathlib import Path
from typing import Callable, Optional

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))
from rsimport.frontend.parser import Parser
from rsimport.analysis.module_system import ModuleLoader


# =============================================================================
# Session-scoped fixtures (shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def session_parser():
    """Session-scoped parser (grammar compiled once, Lark cache on disk)."""
    return Parser()


@pytest.fixture(scope="class")
def parser(session_parser):
    """Class-scoped parser - returns the session parser (stateless, safe to share)."""
    return session_parser


# =============================================================================
# Helper fixtures
# =============================================================================

@pytest.fixture
def module_dir(tmp_path) -> Callable[..., Path]:
    """
    Factory writing '<name>.rs' files.

    module_dir("shapes", source) writes tmp_path/shapes.rs;
    module_dir("shapes", source, "lib") writes tmp_path/lib/shapes.rs.
    Returns the written file's path.
    """
    def _write(name: str, source: str, subdir: Optional[str] = None) -> Path:
        directory = tmp_path / subdir if subdir else tmp_path
        directory.mkdir(parents=True, exist_ok=True)
        file_path = directory / f"{name}.rs"
        file_path.write_text(source, encoding="utf-8")
        return file_path

    return _write


@pytest.fixture
def loader(session_parser, tmp_path, monkeypatch):
    """Loader whose implicit '.' search path is tmp_path."""
    monkeypatch.chdir(tmp_path)
    return ModuleLoader(parser=session_parser)


def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "cli: marks tests that drive the command-line entry point"
    )
