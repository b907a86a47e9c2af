# tests/modules/scaffolding/infrastructure/test_adapters.py
"""
Tests de Integración para Adaptadores de Infraestructura.
Lanzan procesos reales (el intérprete actual) y usan disco (tmp_path).
"""

import os
import sys

import pytest

from mkproject.modules.scaffolding.domain.exceptions import IoError, ProcessError
from mkproject.modules.scaffolding.domain.value_objects import RunCommand
from mkproject.modules.scaffolding.infrastructure.adapters import (
    LocalFileSystemAdapter,
    RecordingCommandRunner,
    SubprocessCommandRunner,
    exit_code_from_returncode,
)


def python_command(code: str) -> RunCommand:
    return RunCommand((sys.executable, "-c", code), "python snippet")


# === Tests para SubprocessCommandRunner ===


def test_runner_success_returns_none():
    runner = SubprocessCommandRunner()

    assert runner.run(python_command("print('hola')")) is None


def test_runner_maps_nonzero_exit_to_process_error():
    """
    Escenario: El hijo termina con código 3 y escribe en stderr.
    Resultado: ProcessError con código 3 y stderr capturado.
    """
    runner = SubprocessCommandRunner()
    command = python_command("import sys; sys.stderr.write('boom'); sys.exit(3)")

    with pytest.raises(ProcessError) as exc:
        runner.run(command)

    assert exc.value.code == 3
    assert "boom" in exc.value.stderr
    assert "exit code: 3" in str(exc.value)
    assert sys.executable in str(exc.value)


@pytest.mark.skipif(os.name == "nt", reason="Señales POSIX")
def test_runner_reports_signal_as_shell_status():
    runner = SubprocessCommandRunner()
    command = python_command("import os, signal; os.kill(os.getpid(), signal.SIGTERM)")

    with pytest.raises(ProcessError) as exc:
        runner.run(command)

    assert exc.value.code == 128 + 15


def test_runner_missing_executable_is_io_error(tmp_path):
    runner = SubprocessCommandRunner()
    command = RunCommand((str(tmp_path / "no-such-tool"), "new", "x"), "missing")

    with pytest.raises(IoError) as exc:
        runner.run(command)

    assert isinstance(exc.value.__cause__, OSError)


def test_exit_code_from_returncode():
    assert exit_code_from_returncode(0) == 0
    assert exit_code_from_returncode(101) == 101
    assert exit_code_from_returncode(-9) == 137


# === Tests para RecordingCommandRunner ===


def test_recording_runner_records_in_order_and_fails_on_demand():
    runner = RecordingCommandRunner(exit_codes={"pip": 2})
    first = RunCommand(("python3", "-m", "venv", "v"), "venv")
    second = RunCommand(("v/bin/pip", "install", "ipython"), "pip")

    runner.run(first)
    with pytest.raises(ProcessError) as exc:
        runner.run(second)

    assert runner.commands == [first, second]
    assert exc.value.code == 2


# === Tests para LocalFileSystemAdapter ===


def test_fs_create_dir_and_write_readme(tmp_path):
    fs = LocalFileSystemAdapter()
    dest = tmp_path / "proj"

    fs.create_dir(dest)
    fs.write_text(dest / "README.md", "# proj\n")

    # Verificar bytes exactos (sin \r\n en ningún SO)
    assert (dest / "README.md").read_bytes() == b"# proj\n"


def test_fs_create_dir_fails_if_exists(tmp_path):
    fs = LocalFileSystemAdapter()

    with pytest.raises(IoError) as exc:
        fs.create_dir(tmp_path)

    assert isinstance(exc.value.__cause__, FileExistsError)


def test_fs_create_dir_is_not_recursive(tmp_path):
    fs = LocalFileSystemAdapter()

    with pytest.raises(IoError):
        fs.create_dir(tmp_path / "a" / "b")

    assert not (tmp_path / "a").exists()


def test_fs_write_overwrites_existing_file(tmp_path):
    fs = LocalFileSystemAdapter()
    readme = tmp_path / "README.md"
    readme.write_text("contenido viejo\nmás líneas\n", encoding="utf-8")

    fs.write_text(readme, "# nuevo\n")

    assert readme.read_text(encoding="utf-8") == "# nuevo\n"


def test_fs_write_into_missing_dir_is_io_error(tmp_path):
    fs = LocalFileSystemAdapter()

    with pytest.raises(IoError):
        fs.write_text(tmp_path / "nope" / "README.md", "# x\n")
