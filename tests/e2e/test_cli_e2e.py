from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess. These tests validate argument parsing, exit codes,
stream output (stdout/stderr), and file system side effects (artifact generation).
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "rntranslationgen" / "main.py"


def run_cli(args: List[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH to ensure the package
    is resolvable without being installed in site-packages.

    Args:
        args: List of command line arguments (excluding 'python' and script path).
        cwd: Optional working directory for the subprocess.

    Returns:
        subprocess.CompletedProcess: The result object containing returncode, stdout, and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["PYTHONIOENCODING"] = "utf-8"

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def _paths(project: Path) -> List[str]:
    return ["--input", str(project / "locales"), "--output", str(project / "src" / "i18n")]

# -----------------------------------------------------------------------------
# TEST CASES
# -----------------------------------------------------------------------------

def test_cli_help_execution() -> None:
    """TC-01: Verify that the --help flag works and returns exit code 0."""
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "rn-translation-gen" in result.stdout
    assert "--exclude-key" in result.stdout
    assert "--no-emit" in result.stdout


def test_cli_generation(project: Path) -> None:
    """TC-02: Full generation reports success and writes both artifacts."""
    result = run_cli(_paths(project))

    assert result.returncode == 0, result.stderr
    assert "✅ Successfully generated translation types and constants" in result.stdout
    out_dir = project / "src" / "i18n"
    assert (out_dir / "translations.d.ts").exists()
    assert '| "home.title"' in (out_dir / "translations.d.ts").read_text(encoding="utf-8")


def test_cli_verify_match_and_drift(project: Path) -> None:
    """TC-03: --no-emit exits 0 on match and 3 on drift, reporting on stderr."""
    assert run_cli(_paths(project)).returncode == 0

    match = run_cli(_paths(project) + ["--no-emit"])
    assert match.returncode == 0, match.stderr
    assert "✅" in match.stdout
    assert "up to date" in match.stdout

    (project / "locales" / "en.json").write_text('{"home": {"heading": "Hi"}}', encoding="utf-8")
    drift = run_cli(_paths(project) + ["--no-emit"])

    assert drift.returncode == 3
    assert "❌" in drift.stderr
    assert "translations.d.ts" in drift.stderr
    assert "heading" not in (project / "src" / "i18n" / "translations.d.ts").read_text(encoding="utf-8")


def test_cli_missing_input(tmp_path: Path) -> None:
    """TC-04: Missing required input reports the fix and exits 1."""
    result = run_cli(["--output", str(tmp_path)], cwd=tmp_path)

    assert result.returncode == 1
    assert "❌" in result.stderr
    assert "--input" in result.stderr


def test_cli_invalid_output_mode(project: Path) -> None:
    result = run_cli(_paths(project) + ["--output-mode", "triple"])

    assert result.returncode == 1
    assert "triple" in result.stderr
    assert os.listdir(project / "src" / "i18n") == []


def test_cli_config_discovery(project: Path) -> None:
    """TC-05: A YAML config in the project root supplies paths relative to it."""
    (project / "rn-translation-gen.yml").write_text(
        "input: ./locales\noutput: ./src/i18n\noutputMode: single\n",
        encoding="utf-8",
    )

    result = run_cli(["--cwd", str(project)])

    assert result.returncode == 0, result.stderr
    assert os.listdir(project / "src" / "i18n") == ["translations.ts"]


def test_cli_flags_override_config(project: Path) -> None:
    (project / "rn-translation-gen.json").write_text(
        json.dumps({"input": "./locales", "output": "./src/i18n", "outputMode": "single"}),
        encoding="utf-8",
    )

    result = run_cli(["--output-mode", "dual"], cwd=project)

    assert result.returncode == 0, result.stderr
    assert sorted(os.listdir(project / "src" / "i18n")) == ["translations.d.ts", "translations.ts"]


def test_cli_dump_config(project: Path) -> None:
    """TC-06: --dump-config prints the resolved options without running."""
    result = run_cli(_paths(project) + ["--exclude-key", "translation", "--dump-config"])

    assert result.returncode == 0
    payload = json.loads(result.stdout)
    assert payload["exclude_key"] == "translation"
    assert payload["output_mode"] == "dual"
    assert payload["config_file"] is None
    assert os.listdir(project / "src" / "i18n") == []


def test_cli_json_output(project: Path) -> None:
    """TC-07: --json prints the result object."""
    result = run_cli(_paths(project) + ["--json"])

    assert result.returncode == 0
    payload = json.loads(result.stdout)
    assert payload["ok"] is True
    assert payload["key_count"] == 2
    assert payload["input_file"].endswith("en.json")
