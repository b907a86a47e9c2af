"""
Casos de Uso para la creación de proyectos.

Arquitectura: Modular Monolith
Capa: Application
Responsabilidad: Traducir una ProjectRequest en una lista ordenada de pasos
(crear directorio, ejecutar comando, escribir archivo) y ejecutarlos.
"""

from __future__ import annotations

import logging
import os
from pathlib import PurePath

# === Imports de Dominio ===
from mkproject.modules.scaffolding.domain.exceptions import ArgumentError
from mkproject.modules.scaffolding.domain.ports.command_runner import CommandRunner
from mkproject.modules.scaffolding.domain.ports.file_system import FileSystemPort
from mkproject.modules.scaffolding.domain.value_objects import (
    BootstrapStep,
    CreateDirectory,
    Language,
    ProjectRequest,
    RunCommand,
    Toolchain,
    WriteFile,
)
from mkproject.modules.scaffolding.infrastructure.observability import (
    ObservabilityService,
)

logger = logging.getLogger(__name__)


def render_readme(request: ProjectRequest) -> str:
    """Contenido del README inicial: una sola línea `# <nombre>`."""
    return f"# {request.project_name}\n"


def readme_step(request: ProjectRequest) -> WriteFile:
    return WriteFile(path=request.readme_path, content=render_readme(request))


def venv_bin_dir(windows: bool = os.name == "nt") -> str:
    return "Scripts" if windows else "bin"


def path_argument(path: PurePath) -> str:
    """
    Ruta como argumento de línea de comandos. Una ruta relativa que empieza
    por "-" se prefija con "." para que la herramienta no la tome por opción.
    """
    text = str(path)
    if text.startswith("-"):
        return os.path.join(os.curdir, text)
    return text


def plan_python_project(
    request: ProjectRequest, toolchain: Toolchain, windows: bool = os.name == "nt"
) -> tuple[BootstrapStep, ...]:
    """
    1. Crear el destino.
    2. `python3 -m venv <destino>/venv`
    3. `<destino>/venv/bin/pip install ipython`
    4. README.
    """
    venv_path = request.destination / "venv"
    pip_path = venv_path / venv_bin_dir(windows) / "pip"

    return (
        CreateDirectory(request.destination),
        RunCommand(
            argv=(toolchain.python, "-m", "venv", path_argument(venv_path)),
            description="Creating virtual environment",
        ),
        RunCommand(
            argv=(path_argument(pip_path), "install", toolchain.shell_package),
            description=f"Installing {toolchain.shell_package}",
        ),
        readme_step(request),
    )


# TODO: aceptar argumentos extra por lenguaje (p.ej. `cargo new --lib`)
def plan_rust_project(
    request: ProjectRequest, toolchain: Toolchain
) -> tuple[BootstrapStep, ...]:
    """`cargo new <destino>` y luego README."""
    return (
        RunCommand(
            argv=(toolchain.cargo, "new", path_argument(request.destination)),
            description="Running cargo new",
        ),
        readme_step(request),
    )


def plan_bootstrap(
    request: ProjectRequest, toolchain: Toolchain
) -> tuple[BootstrapStep, ...]:
    """Único punto de despacho por lenguaje."""
    if request.language is Language.PYTHON:
        return plan_python_project(request, toolchain)
    if request.language is Language.RUST:
        return plan_rust_project(request, toolchain)
    raise ArgumentError(f"no bootstrap routine for language: {request.language!r}")


class BootstrapProject:
    """
    Caso de Uso Principal: crear un proyecto nuevo.
    Implementa:
    1. Planificación declarativa (lista ordenada de pasos).
    2. Ejecución lineal con salida temprana en el primer fallo.
    3. Sin rollback: un directorio a medio crear queda en disco.
    """

    def __init__(
        self,
        runner: CommandRunner,
        file_system: FileSystemPort,
        toolchain: Toolchain | None = None,
    ):
        # Inyección de Dependencias (DIP)
        self.runner = runner
        self.fs = file_system
        self.toolchain = toolchain or Toolchain()

    @ObservabilityService.measure_latency(operation_name="bootstrap_project")
    def execute(self, request: ProjectRequest) -> tuple[BootstrapStep, ...]:
        """
        Ejecuta la rutina de arranque del lenguaje pedido.

        Returns:
            Los pasos ejecutados, en orden.

        Raises:
            ArgumentError: Si la ruta no tiene un nombre de proyecto válido
                (se detecta antes de tocar el disco).
            IoError: Si falla el sistema de archivos o no se encuentra un ejecutable.
            ProcessError: Si un comando externo termina con código distinto de cero.
        """
        logger.info(
            f"Creando proyecto {request.language.value} en: {request.destination}"
        )
        steps = plan_bootstrap(request, self.toolchain)

        for step in steps:
            self._apply(step)

        logger.info(f"Proyecto creado: {request.project_name}")
        return steps

    def _apply(self, step: BootstrapStep) -> None:
        if isinstance(step, CreateDirectory):
            logger.debug(f"Creating dir: {step.path}")
            self.fs.create_dir(step.path)
        elif isinstance(step, RunCommand):
            logger.debug(step.description)
            self.runner.run(step)
        elif isinstance(step, WriteFile):
            logger.debug("Creating initial readme")
            self.fs.write_text(step.path, step.content)
        else:
            raise TypeError(f"Paso desconocido: {step!r}")
