import subprocess
import sys

SOURCES = ["src", "tests", "scripts.py"]


def run_tests():
    subprocess.run(["pytest"], check=True)


def run_cli_tests():
    subprocess.run(["pytest", "--run-cli-tests", "tests/integration"], check=True)


def run_lint():
    subprocess.run(["flake8", "--max-line-length=120", *SOURCES], check=True)


def run_typecheck():
    subprocess.run(["mypy", "src"], check=True)


def run_format():
    subprocess.run(["black", *SOURCES], check=True)


def run_coverage():
    subprocess.run(["pytest", "--cov=resptree", "tests/", "--cov-report=xml"], check=True)


if __name__ == "__main__":
    if len(sys.argv) != 2 or not sys.argv[1].startswith("run_") or sys.argv[1] not in globals():
        sys.exit(f"usage: {sys.argv[0]} run_tests|run_cli_tests|run_lint|run_typecheck|run_format|run_coverage")
    globals()[sys.argv[1]]()
