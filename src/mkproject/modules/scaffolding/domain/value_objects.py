"""
Value Objects para el Bounded Context de Scaffolding.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Definir inmutables para la petición de proyecto y los pasos de arranque.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath

from .exceptions import ArgumentError

# === Guía de Organización ===
# ✅ PUREZA: Solo tipos nativos y lógica de validación pura.
# ❌ SIN I/O: No tocar disco ni lanzar procesos aquí.


class Language(Enum):
    """Lenguajes soportados. Conjunto cerrado."""

    PYTHON = "python"
    RUST = "rust"

    @classmethod
    def parse(cls, text: str) -> Language:
        """
        Convierte el texto de la CLI en un Language.
        Solo acepta los valores exactos en minúsculas.
        """
        for language in cls:
            if language.value == text:
                return language
        raise ArgumentError(f"unrecognized language: `{text}`")


@dataclass(frozen=True)
class Toolchain:
    """Ejecutables y paquete que usan las rutinas de arranque."""

    python: str = "python3"
    cargo: str = "cargo"
    shell_package: str = "ipython"

    def __post_init__(self):
        for name in ("python", "cargo", "shell_package"):
            if not getattr(self, name):
                raise ValueError(f"El campo '{name}' del toolchain no puede estar vacío.")


@dataclass(frozen=True)
class ProjectRequest:
    """
    Petición de creación: ruta de destino + lenguaje.
    Se construye una vez desde la CLI y no cambia durante la ejecución.
    """

    destination: PurePath
    language: Language

    @property
    def project_name(self) -> str:
        """
        Nombre del proyecto = último componente de la ruta.

        Raises:
            ArgumentError: Si la ruta no tiene componente final o no es texto válido.
        """
        name = self.destination.name
        if name in ("", ".", ".."):
            raise ArgumentError(
                f"no final path component given: `{self.destination}`"
            )
        try:
            # Los bytes no decodificables llegan como surrogates (PEP 383)
            name.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ArgumentError(
                f"path contains invalid UTF-8 data: {self.destination!r}"
            ) from e
        return name

    @property
    def readme_path(self) -> PurePath:
        return self.destination / "README.md"


# === Pasos de arranque ===


@dataclass(frozen=True)
class CreateDirectory:
    """Crear el directorio de destino (falla si ya existe)."""

    path: PurePath


@dataclass(frozen=True)
class RunCommand:
    """Ejecutar un comando externo; un código distinto de cero es fatal."""

    argv: tuple[str, ...]
    description: str

    def __post_init__(self):
        if not self.argv:
            raise ValueError("El comando no puede estar vacío.")

    @property
    def display(self) -> str:
        return " ".join(self.argv)


@dataclass(frozen=True)
class WriteFile:
    """Escribir (o sobrescribir) un archivo de texto."""

    path: PurePath
    content: str


BootstrapStep = CreateDirectory | RunCommand | WriteFile
