"""Test configuration and fixtures for resptree."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_project(tmp_path):
    """Create a small project with comments, hidden entries and mixed-case names."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.rs").write_text("// Entry point\nfn main() {}\n")
    (tmp_path / "src" / "util.py").write_text("\n\n# Helper functions\nimport os\n")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "guide.md").write_text("Plain text first\n# Heading\n")
    (tmp_path / "Empty").mkdir()
    (tmp_path / "README.txt").write_text("")
    (tmp_path / "build.sh").write_text("#  Builds everything\n")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_text("# git config\n")
    (tmp_path / ".env").write_text("# secrets\n")
    return tmp_path
