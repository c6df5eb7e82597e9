# Руководство к файлу (TESTS/integration/test_cli_integration.py)
# Назначение:
# - Интеграционные тесты запуска `python -m titlextractor` отдельным процессом:
#   чтение из канала и из перенаправленного файла, выход по Ctrl-C при открытом STDIN.

from __future__ import annotations

import os
import signal
import subprocess
import sys
import time
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _env() -> dict:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))
    return env


def _spawn(stdin) -> subprocess.Popen:
    return subprocess.Popen(
        [sys.executable, "-m", "titlextractor", "--no-color", "-c", "2"],
        stdin=stdin,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        env=_env(),
        cwd=str(PROJECT_ROOT),
    )


def test_piped_input_prints_one_line_per_url():
    proc = _spawn(subprocess.PIPE)
    out, err = proc.communicate(input=b"not a url\n\n   \nalso not a url\n", timeout=30)

    assert proc.returncode == 0, err.decode()
    lines = sorted(out.decode().splitlines())
    assert len(lines) == 2
    assert lines[0].startswith("[Error] also not a url: ")
    assert lines[1].startswith("[Error] not a url: ")


def test_redirected_file_input(tmp_path):
    src = tmp_path / "urls.txt"
    src.write_bytes(b"\n  \nnot a url\n")
    with src.open("rb") as fh:
        proc = _spawn(fh)
        out, err = proc.communicate(timeout=30)

    assert proc.returncode == 0, err.decode()
    assert out.decode().splitlines()[0].startswith("[Error] not a url: ")


@pytest.mark.skipif(os.name != "posix", reason="SIGINT отправляется только на POSIX")
def test_sigint_exits_while_stdin_is_still_open():
    proc = _spawn(subprocess.PIPE)
    try:
        time.sleep(1.5)
        assert proc.poll() is None
        proc.send_signal(signal.SIGINT)

        # STDIN не закрыт: процесс обязан завершиться сам, не дожидаясь конца ввода.
        returncode = proc.wait(timeout=5)
        assert returncode == 130
    finally:
        if proc.poll() is None:
            proc.kill()
        proc.stdin.close()
        proc.wait()
