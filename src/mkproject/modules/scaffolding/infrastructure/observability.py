"""
Configuración centralizada de Logging y Métricas.

Principios SRE:
1. Logs legibles para humanos (Consola).
2. Eventos estructurados (JSON) para latencia y saturación (RAM).
3. Contexto (correlation_id, destino) en cada evento.
"""

import functools
import json
import logging
import os
import sys
import time
import uuid
from pathlib import PurePath
from typing import Any, Callable

import psutil

logger = logging.getLogger("mkproject.events")


def configure_logging(level=logging.WARNING, stream=None, pretty=False):
    """
    Configura el logger raíz con un único destino de consola (stderr).
    No se escribe archivo: la herramienta corre dentro de directorios ajenos.

    Los eventos JSON (logger "mkproject.events") solo se muestran con nivel
    INFO o DEBUG;
    en modo normal el usuario ve únicamente el mensaje "Error: ..." de la CLI.
    `pretty` indenta esos eventos (LOG_FORMAT=PRETTY en la CLI).
    """
    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Limpiar handlers previos para evitar duplicados
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)

    logger.setLevel(logging.NOTSET if level <= logging.INFO else logging.CRITICAL + 1)
    ObservabilityService.PRETTY_PRINT = pretty

    logging.getLogger("mkproject").debug(
        f"🔭 Observabilidad iniciada. Nivel: {logging.getLevelName(level)}"
    )


class ObservabilityService:

    # Lo fija configure_logging(); True imprime los eventos JSON indentados
    PRETTY_PRINT = False

    @staticmethod
    def get_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            process = psutil.Process(os.getpid())
            return round(process.memory_info().rss / 1024 / 1024, 2)
        except psutil.Error:
            return 0.0

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ):
        """Emite un evento estructurado en JSON (Horizontal o Vertical)."""

        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }

        if ObservabilityService.PRETTY_PRINT:
            msg = json.dumps(log_entry, indent=4, default=str)
        else:
            msg = json.dumps(log_entry, default=str)

        if level == "ERROR":
            logger.error(msg)
        else:
            logger.info(msg)

    @staticmethod
    def _find_target(args) -> str:
        """Primer argumento que sea (o contenga) una ruta; si no, 'unknown'."""
        for arg in args:
            if isinstance(arg, PurePath):
                return arg.name or str(arg)
            destination = getattr(arg, "destination", None)
            if isinstance(destination, PurePath):
                return destination.name or str(destination)
            argv = getattr(arg, "argv", None)
            if isinstance(argv, tuple) and argv:
                return PurePath(argv[0]).name
        return "unknown"

    @staticmethod
    def measure_latency(operation_name: str):
        def decorator(func: Callable):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.perf_counter()
                start_ram = ObservabilityService._get_ram_usage_mb()
                correlation_id = ObservabilityService.get_correlation_id()
                target = ObservabilityService._find_target(args)

                ObservabilityService.log_event(
                    event_name=f"{operation_name}.started",
                    correlation_id=correlation_id,
                    payload={"target": target, "start_ram_mb": start_ram},
                )

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    crash_ram = ObservabilityService._get_ram_usage_mb()
                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.failed",
                        correlation_id=correlation_id,
                        payload={
                            "duration_sec": round(time.perf_counter() - start_time, 3),
                            "crash_ram_mb": crash_ram,
                            "target": target,
                            "error_type": type(e).__name__,
                            "error_msg": str(e),
                        },
                        level="ERROR",
                    )
                    raise

                end_ram = ObservabilityService._get_ram_usage_mb()
                ObservabilityService.log_event(
                    event_name=f"{operation_name}.completed",
                    correlation_id=correlation_id,
                    payload={
                        "duration_sec": round(time.perf_counter() - start_time, 3),
                        "end_ram_mb": end_ram,
                        "ram_delta_mb": round(end_ram - start_ram, 2),
                        "target": target,
                        "status": "success",
                    },
                )
                return result

            return wrapper

        return decorator
