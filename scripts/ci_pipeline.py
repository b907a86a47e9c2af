#!/usr/bin/env python3
"""
Pipeline de CI Local para mkproject.
Ejecuta linting, verificación de tipos del dominio y tests (unitarios y E2E).

Uso: python scripts/ci_pipeline.py [--skip-e2e]
"""

import argparse
import subprocess
import sys
import time
from datetime import datetime

from rich.console import Console

console = Console()


def print_step(step_name: str) -> None:
    console.rule(f"[bold magenta]EJECUTANDO: {step_name}[/]")


def run_command(command: list[str], description: str) -> tuple[bool, str]:
    console.print(f"⏳ {description}...")
    start = time.perf_counter()
    try:
        result = subprocess.run(command, capture_output=True, text=True)
    except OSError as e:
        console.print(f"[yellow]⚠️  No se pudo ejecutar `{command[0]}`: {e}[/]")
        return False, str(e)
    duration = time.perf_counter() - start

    if result.returncode == 0:
        console.print(f"[green]✅ PASÓ ({duration:.2f}s)[/]")
        return True, result.stdout

    console.print(f"[red]❌ FALLÓ ({duration:.2f}s)[/]")
    console.print("--- STDERR ---", style="yellow")
    console.print(result.stderr, markup=False, highlight=False)
    console.print("--- STDOUT ---", style="yellow")
    console.print(result.stdout, markup=False, highlight=False)
    return False, result.stderr


def main() -> int:
    parser = argparse.ArgumentParser(description="CI local de mkproject")
    parser.add_argument(
        "--skip-e2e", action="store_true", help="No ejecutar tests E2E (cargo/venv)"
    )
    args = parser.parse_args()

    start_total = time.perf_counter()
    console.print("[bold]🚀 INICIANDO PIPELINE CI - mkproject[/]")
    console.print(f"📅 Fecha: {datetime.now()}")

    # --- PASO 1: LINTER (No bloqueante) ---
    print_step("1. ANÁLISIS ESTÁTICO DE CÓDIGO (LINTING)")
    success, _ = run_command(
        ["ruff", "check", "src/", "tests/"],
        "Verificando estilo de código (PEP8) y errores comunes",
    )
    if not success:
        console.print("[yellow]⚠️  Advertencias de estilo detectadas (No bloqueante)[/]")

    # --- PASO 2: TYPE CHECKING del dominio ---
    print_step("2. VERIFICACIÓN DE TIPOS (DOMINIO)")
    success, _ = run_command(
        [
            "mypy",
            "src/mkproject/modules/scaffolding/domain",
            "--ignore-missing-imports",
        ],
        "Validando tipos en el Dominio",
    )
    if not success:
        console.print("[red]⛔ El dominio viola el contrato de tipos.[/]")
        return 1

    # --- PASO 3: TESTS UNITARIOS ---
    print_step("3. TESTS UNITARIOS")
    success, _ = run_command(
        [sys.executable, "-m", "pytest", "tests/modules", "-v"],
        "Ejecutando dominio, aplicación, infraestructura y CLI",
    )
    if not success:
        return 1

    # --- PASO 4: TESTS E2E ---
    if not args.skip_e2e:
        print_step("4. TESTS E2E (cargo / venv reales)")
        success, _ = run_command(
            [sys.executable, "-m", "pytest", "tests/e2e", "-v", "-rs"],
            "Creando proyectos reales en directorios temporales",
        )
        if not success:
            return 1

    total_duration = time.perf_counter() - start_total
    console.rule("[bold green]🎉  BUILD SUCCESSFUL[/]")
    console.print(f"⏱️ Tiempo Total: {total_duration:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
