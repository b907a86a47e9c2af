"""
Puerto (Interface) para operaciones de sistema de archivos requeridas por el dominio.

Arquitectura: Modular Monolith
Capa: Domain -> Ports
Responsabilidad: Abstraer la creación del directorio de destino y la escritura del README.
"""

from abc import ABC, abstractmethod
from pathlib import PurePath


class FileSystemPort(ABC):
    """
    Contrato para interactuar con el almacenamiento local.
    """

    @abstractmethod
    def create_dir(self, path: PurePath) -> None:
        """
        Crea un único directorio (no recursivo).
        Falla con IoError si ya existe o si el padre no existe.
        """
        pass

    @abstractmethod
    def write_text(self, path: PurePath, content: str) -> None:
        """
        Escribe el contenido en UTF-8, sobrescribiendo si el archivo existe.
        """
        pass
