"""
Módulo de Scaffolding: creación de proyectos nuevos.
"""

from __future__ import annotations

# Application
from .application.use_cases import BootstrapProject, plan_bootstrap, render_readme

# Domain
from .domain.exceptions import (
    ArgumentError,
    IoError,
    MakeProjectError,
    ProcessError,
)
from .domain.ports.command_runner import CommandRunner
from .domain.ports.file_system import FileSystemPort
from .domain.value_objects import Language, ProjectRequest, Toolchain

# Infrastructure
from .infrastructure.adapters import (
    LocalFileSystemAdapter,
    RecordingCommandRunner,
    SubprocessCommandRunner,
)

__all__ = [
    "Language",
    "ProjectRequest",
    "Toolchain",
    "MakeProjectError",
    "ArgumentError",
    "IoError",
    "ProcessError",
    "CommandRunner",
    "FileSystemPort",
    "BootstrapProject",
    "plan_bootstrap",
    "render_readme",
    "LocalFileSystemAdapter",
    "RecordingCommandRunner",
    "SubprocessCommandRunner",
]
