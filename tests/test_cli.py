## mantacli — `mresolve` command-line integration tests

import os, sys
import json
import subprocess


STORE_ENV = {'MANTA_URL': 'https://store.example.com', 'MANTA_USER': 'alice', 'MANTA_KEY_ID': 'aa:bb:cc'}


def run_cli(*cli_args: str, env: dict | None = None) -> subprocess.CompletedProcess:
    args = [sys.executable, "-m", "mantacli", *cli_args]
    merged_env = {k: v for k, v in os.environ.items() if not k.startswith('MANTA_') and k != 'LOG_LEVEL'}
    merged_env.update(STORE_ENV if env is None else env)
    return subprocess.run(args, capture_output=True, text=True, env=merged_env)


def test_cli_resolves_account_paths():
    result = run_cli("~~/stor/a", "/alice/public/../stor/b")
    assert result.returncode == 0
    assert result.stdout.splitlines() == ["/alice/stor/a", "/alice/stor/b"]


def test_cli_json_reports_headers():
    result = run_cli("--json", "-H", "Content-Type: text/plain", "-H", "X-Range: bytes=0-9:x", "~~/stor")
    assert result.returncode == 0
    summary = json.loads(result.stdout)
    assert summary == {
        "account": "alice",
        "headers": {"Content-Type": "text/plain", "X-Range": "bytes=0-9:x"},
        "paths": ["/alice/stor"],
        "url": "https://store.example.com",
    }


def test_cli_missing_path_is_usage_error():
    result = run_cli()
    assert result.returncode == 1
    assert result.stderr.startswith("path required\n")
    assert "usage: mresolve [OPTIONS] path..." in result.stderr
    assert result.stdout == ""


def test_cli_bad_header_is_usage_error():
    result = run_cli("-H", "NoColonHere", "~~/stor")
    assert result.returncode == 1
    assert '"[header]: value"' in result.stderr


def test_cli_missing_url_is_usage_error():
    result = run_cli("~~/stor", env={'MANTA_USER': 'alice', 'MANTA_KEY_ID': 'aa'})
    assert result.returncode == 1
    assert "url is a required argument" in result.stderr


def test_cli_help_goes_to_stdout():
    result = run_cli("--help")
    assert result.returncode == 0
    assert result.stdout.startswith("usage: mresolve [OPTIONS] path...\noptions:\n")
    assert "--json" in result.stdout
    assert "MANTA_KEY_ID" in result.stdout


def test_cli_version():
    result = run_cli("--version")
    assert result.returncode == 0
    assert result.stdout.strip() != ""


def test_cli_completion_script():
    result = run_cli("--completion")
    assert result.returncode == 0
    assert "_MRESOLVE_COMPLETE" in result.stdout


def test_cli_verbose_logs_to_stderr():
    result = run_cli("-vv", "~~/stor")
    assert result.returncode == 0
    assert "TRACE mresolve" in result.stderr
    assert result.stdout.splitlines() == ["/alice/stor"]
