"""
Configuración de ejecución leída del entorno.

Capa: Infrastructure
Responsabilidad: Traducir variables de entorno a un objeto inmutable. Solo la
CLI (Composition Root) lo consulta; el dominio recibe un Toolchain ya armado.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from mkproject.modules.scaffolding.domain.value_objects import Toolchain

ENV_LOG_LEVEL = "MKPROJECT_LOG_LEVEL"
ENV_LOG_FORMAT = "LOG_FORMAT"
ENV_PYTHON = "MKPROJECT_PYTHON"
ENV_CARGO = "MKPROJECT_CARGO"
ENV_SHELL_PACKAGE = "MKPROJECT_SHELL_PACKAGE"

DEFAULT_LOG_LEVEL = logging.WARNING


@dataclass(frozen=True)
class Settings:
    log_level: int = DEFAULT_LOG_LEVEL
    pretty_events: bool = False
    toolchain: Toolchain = field(default_factory=Toolchain)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Construye la configuración desde el entorno.
        Las variables vacías o ausentes usan el valor por defecto.
        """
        env = os.environ if environ is None else environ
        defaults = Toolchain()

        toolchain = Toolchain(
            python=env.get(ENV_PYTHON) or defaults.python,
            cargo=env.get(ENV_CARGO) or defaults.cargo,
            shell_package=env.get(ENV_SHELL_PACKAGE) or defaults.shell_package,
        )
        return cls(
            log_level=parse_log_level(env.get(ENV_LOG_LEVEL)),
            pretty_events=env.get(ENV_LOG_FORMAT) == "PRETTY",
            toolchain=toolchain,
        )


def parse_log_level(value: Optional[str]) -> int:
    """'debug', 'INFO', '10'... -> nivel numérico. Valores desconocidos -> WARNING."""
    if not value:
        return DEFAULT_LOG_LEVEL

    value = value.strip()
    if value.isdigit():
        return int(value)

    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL
