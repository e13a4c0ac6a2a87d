"""Integration tests for the command-line interface.

These tests run resptree in a subprocess and check its output, exit codes and
behaviour when the output pipe is closed early.
"""

import os
import subprocess
import sys

import pytest

pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


def run_cli(*args, cwd=None):
    env = dict(os.environ, PYTHONIOENCODING="utf-8")
    return subprocess.run(
        [sys.executable, "-m", "resptree.cli.main", *args],
        capture_output=True,
        cwd=cwd,
        env=env,
    )


@pytest.fixture
def project(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "lib.rs").write_text("// Library root\n")
    (tmp_path / "src" / "Main.rs").write_text("\n// Binary entry point\n")
    (tmp_path / "docs").mkdir()
    (tmp_path / "Makefile").write_text("# Build shortcuts\n")
    (tmp_path / "notes.txt").write_text("no comment here\n")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    return tmp_path


EXPECTED = (
    "├── docs\n"
    "├── src\n"
    "│   ├── lib.rs - Library root\n"
    "│   └── Main.rs - Binary entry point\n"
    "├── Makefile - Build shortcuts\n"
    "└── notes.txt - No responsibility comment\n"
)


def test_render_project(project):
    result = run_cli(str(project))
    assert result.returncode == 0
    assert result.stdout.decode("utf-8") == EXPECTED
    assert result.stderr == b""


def test_render_current_directory(project):
    result = run_cli(cwd=project)
    assert result.returncode == 0
    assert result.stdout.decode("utf-8") == EXPECTED


def test_output_is_idempotent(project):
    assert run_cli(str(project)).stdout == run_cli(str(project)).stdout


def test_missing_directory(tmp_path):
    result = run_cli(str(tmp_path / "missing"))
    assert result.returncode == 1
    assert result.stdout == b""
    assert b"Error: Could not access target directory" in result.stderr


def test_version():
    result = run_cli("--version")
    assert result.returncode == 0
    assert result.stdout.decode("utf-8").startswith("resptree ")


@pytest.mark.parametrize("shell", ["bash", "zsh", "tcsh"])
def test_completion(shell, tmp_path):
    result = run_cli("completion", shell, cwd=tmp_path)
    assert result.returncode == 0
    assert b"resptree" in result.stdout


def test_invalid_completion_shell():
    result = run_cli("completion", "nope")
    assert result.returncode == 2


@pytest.mark.skipif(sys.platform == "win32", reason="SIGPIPE is Unix-only")
def test_closed_pipe(tmp_path):
    for i in range(2000):
        (tmp_path / f"file{i:04d}.txt").write_text(f"# file {i}\n")

    producer = subprocess.Popen(
        [sys.executable, "-m", "resptree.cli.main", str(tmp_path)],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    assert producer.stdout is not None
    first = producer.stdout.readline()
    producer.stdout.close()
    _, err = producer.communicate(timeout=30)

    assert b"file0000.txt" in first
    assert producer.returncode in (0, 141)
    assert b"Traceback" not in err
