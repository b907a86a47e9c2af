"""mkproject: crea proyectos Python o Rust con su README inicial."""

__version__ = "0.1.0"
