"""
Adaptadores de Infraestructura para Scaffolding.

Arquitectura: Modular Monolith
Capa: Infrastructure (Adapters)
Responsabilidad: Implementar los puertos del dominio usando tecnologías concretas (subprocess, OS).
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path, PurePath
from typing import Optional

from mkproject.modules.scaffolding.domain.exceptions import IoError, ProcessError
from mkproject.modules.scaffolding.domain.ports.file_system import FileSystemPort
from mkproject.modules.scaffolding.domain.value_objects import RunCommand
from mkproject.modules.scaffolding.infrastructure.observability import (
    ObservabilityService,
)

logger = logging.getLogger(__name__)


def exit_code_from_returncode(returncode: int) -> int:
    """
    Código de salida a propagar. Un hijo terminado por la señal N
    (returncode == -N) se reporta como 128 + N, igual que la shell.
    """
    if returncode < 0:
        return 128 + abs(returncode)
    return returncode


class SubprocessCommandRunner:
    """
    Implementación real del CommandRunner: lanza el proceso, captura su salida
    y bloquea hasta que termine.
    """

    @ObservabilityService.measure_latency(operation_name="run_command")
    def run(self, command: RunCommand) -> None:
        logger.debug(f"Ejecutando: {command.display}")

        try:
            result = subprocess.run(
                list(command.argv),
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as e:
            logger.debug(f"No se pudo lanzar `{command.argv[0]}`: {e}")
            raise IoError(f"running `{command.display}`: {e}") from e

        if result.stdout:
            logger.debug(f"--- STDOUT ---\n{result.stdout.rstrip()}")

        if result.returncode != 0:
            code = exit_code_from_returncode(result.returncode)
            logger.debug(f"--- STDERR ---\n{result.stderr.rstrip()}")
            raise ProcessError(
                f"running `{command.display}` command, exit code: {code}",
                code,
                stderr=result.stderr,
            )


class RecordingCommandRunner:
    """
    Implementación simulada (Fake) del CommandRunner.
    Útil para tests unitarios y desarrollo offline.

    Comportamiento:
    - Registra cada comando recibido, en orden, en `self.commands`.
    - Si el nombre del ejecutable está en `exit_codes`, lanza ProcessError con ese código.
    - Si está en `missing`, lanza IoError (simula ejecutable inexistente).
    """

    def __init__(
        self,
        exit_codes: Optional[dict[str, int]] = None,
        missing: Optional[set[str]] = None,
    ):
        self.commands: list[RunCommand] = []
        self._exit_codes = exit_codes or {}
        self._missing = missing or set()

    def run(self, command: RunCommand) -> None:
        self.commands.append(command)
        program = PurePath(command.argv[0]).name

        if program in self._missing:
            raise IoError(f"running `{command.display}`: No such file or directory")

        code = self._exit_codes.get(program, 0)
        if code != 0:
            raise ProcessError(
                f"running `{command.display}` command, exit code: {code}", code
            )


class LocalFileSystemAdapter(FileSystemPort):
    """
    Implementación que interactúa con el sistema de archivos local del OS.
    """

    def create_dir(self, path: PurePath) -> None:
        logger.debug(f"Creando directorio: {path}")
        try:
            os.mkdir(path)
        except OSError as e:
            logger.debug(f"No se pudo crear el directorio {path}: {e}")
            raise IoError(f"creating directory `{path}`: {e.strerror or e}") from e

    def write_text(self, path: PurePath, content: str) -> None:
        logger.debug(f"Escribiendo archivo: {path}")
        try:
            # newline="" para escribir exactamente "\n" también en Windows
            with open(Path(path), "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            logger.debug(f"No se pudo escribir {path}: {e}")
            raise IoError(f"writing `{path}`: {e.strerror or e}") from e
