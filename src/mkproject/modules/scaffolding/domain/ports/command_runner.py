"""
Puerto para la ejecución de comandos externos.

Arquitectura: Domain Port (Interface)
Responsabilidad: Definir el contrato "ejecutar comando, mapear código de salida a error tipado".
"""

from __future__ import annotations

from typing import Protocol

from mkproject.modules.scaffolding.domain.value_objects import RunCommand


class CommandRunner(Protocol):
    """
    Contrato para lanzar herramientas externas (python3, pip, cargo).

    Implementaciones esperadas:
    - SubprocessCommandRunner (Infraestructura)
    - RecordingCommandRunner (Testing)
    """

    def run(self, command: RunCommand) -> None:
        """
        Ejecuta el comando y bloquea hasta que el proceso hijo termine.

        Raises:
            ProcessError: Si el proceso termina con código distinto de cero.
            IoError: Si el ejecutable no se encuentra o no puede lanzarse.
        """
        ...
