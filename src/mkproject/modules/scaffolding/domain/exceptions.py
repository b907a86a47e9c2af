"""
Excepciones del dominio de Scaffolding.

Arquitectura: Domain Layer
Responsabilidad: Definir errores semánticos independientes de la infraestructura.
"""


class MakeProjectError(Exception):
    """Clase base para errores al crear un proyecto."""

    exit_code = 1


class ArgumentError(MakeProjectError):
    """Lenguaje no reconocido o ruta de destino mal formada."""

    exit_code = 2


class IoError(MakeProjectError):
    """Fallo del sistema de archivos (crear directorio, escribir archivo, lanzar ejecutable)."""

    pass


class ProcessError(MakeProjectError):
    """
    Un comando externo terminó con código distinto de cero.

    El código se conserva para que la CLI lo propague como su propio
    código de salida.
    """

    def __init__(self, message: str, code: int, stderr: str = ""):
        super().__init__(message)
        self.exit_code = code
        self.stderr = stderr

    @property
    def code(self) -> int:
        """Código de salida del proceso hijo."""
        return self.exit_code
