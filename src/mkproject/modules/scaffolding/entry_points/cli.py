"""
Interfaz de Línea de Comandos (CLI) para el Módulo de Scaffolding.

Arquitectura: Interface Adapter
Responsabilidad:
    1. Parsear argumentos (argv).
    2. Instanciar el Composition Root.
    3. Traducir errores de dominio a códigos de salida.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from mkproject import __version__
from mkproject.modules.scaffolding.application.use_cases import BootstrapProject
from mkproject.modules.scaffolding.domain.exceptions import (
    ArgumentError,
    MakeProjectError,
    ProcessError,
)
from mkproject.modules.scaffolding.domain.value_objects import (
    Language,
    ProjectRequest,
)
from mkproject.modules.scaffolding.infrastructure.adapters import (
    LocalFileSystemAdapter,
    SubprocessCommandRunner,
)
from mkproject.modules.scaffolding.infrastructure.config import Settings
from mkproject.modules.scaffolding.infrastructure.observability import (
    configure_logging,
)

logger = logging.getLogger(__name__)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

EXIT_OK = 0
EXIT_UNEXPECTED = 3
EXIT_INTERRUPTED = 130

# Líneas finales de stderr del hijo que se muestran al fallar
STDERR_TAIL_LINES = 20


def _language_arg(text: str) -> Language:
    try:
        return Language.parse(text)
    except ArgumentError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def setup_parser() -> argparse.ArgumentParser:
    """Configura los argumentos aceptados por la herramienta."""
    parser = argparse.ArgumentParser(
        prog="mkproject",
        description="Create projects with templates easily",
        epilog="Ejemplo: mkproject -l rust ./my-crate",
    )

    parser.add_argument(
        "--language",
        "-l",
        required=True,
        type=_language_arg,
        metavar="{python,rust}",
        help="Lenguaje del proyecto a crear",
    )

    parser.add_argument(
        "path", type=Path, help="Directorio de destino (no debe existir)"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Muestra logs detallados de cada paso",
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def print_error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/] {escape(message)}")


def print_process_failure(error: ProcessError) -> None:
    print_error(str(error))
    tail = error.stderr.strip().splitlines()[-STDERR_TAIL_LINES:]
    if tail:
        err_console.print(escape("\n".join(tail)), style="dim")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = setup_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    configure_logging(
        logging.DEBUG if args.verbose else settings.log_level,
        pretty=settings.pretty_events,
    )

    try:
        # 1. Composition Root (Wiring)
        use_case = BootstrapProject(
            runner=SubprocessCommandRunner(),
            file_system=LocalFileSystemAdapter(),
            toolchain=settings.toolchain,
        )
        request = ProjectRequest(destination=args.path, language=args.language)

        # 2. Ejecución
        use_case.execute(request)

    except ProcessError as e:
        # El código del hijo se propaga tal cual
        print_process_failure(e)
        return e.exit_code
    except MakeProjectError as e:
        # ArgumentError -> 2, IoError -> 1
        print_error(str(e))
        return e.exit_code
    except KeyboardInterrupt:
        err_console.print("\n⚠️  Operación cancelada por el usuario.")
        return EXIT_INTERRUPTED
    except Exception as e:
        # Errores inesperados (Bugs)
        logger.debug("Traceback del error inesperado", exc_info=True)
        print_error(f"unexpected failure: {e}")
        return EXIT_UNEXPECTED

    # 3. Presentación
    console.print(
        f"✅ Proyecto [bold]{escape(request.project_name)}[/] "
        f"({request.language.value}) creado en {escape(str(request.destination))}"
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
