import sys

import pytest

from oci8_installer.errors import CommandError
from oci8_installer.lib.command import run_cmd


def test_captures_stdout():
    r = run_cmd([sys.executable, "-c", "print('hi')"])
    assert r.returncode == 0
    assert r.stdout == "hi\n"


def test_nonzero_exit_raises_when_checked():
    with pytest.raises(CommandError) as exc:
        run_cmd([sys.executable, "-c", "import sys; sys.stderr.write('bad'); sys.exit(3)"])
    assert exc.value.returncode == 3
    assert exc.value.stderr == "bad"


def test_unchecked_failure_returns_result():
    r = run_cmd([sys.executable, "-c", "import sys; sys.exit(4)"], check=False)
    assert r.returncode == 4


def test_missing_program_is_a_command_error():
    with pytest.raises(CommandError) as exc:
        run_cmd(["oci8-installer-no-such-program"])
    assert exc.value.returncode == 127

    r = run_cmd(["oci8-installer-no-such-program"], check=False)
    assert r.returncode == 127


def test_env_is_merged(monkeypatch):
    monkeypatch.setenv("OCI8_TEST_KEEP", "kept")
    r = run_cmd(
        [sys.executable, "-c", "import os; print(os.environ['OCI8_TEST_KEEP'], os.environ['OCI8_TEST_ADD'])"],
        env={"OCI8_TEST_ADD": "added"},
    )
    assert r.stdout.split() == ["kept", "added"]
