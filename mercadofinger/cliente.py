"""Customers with an id, a name, a surname and an age."""

from __future__ import annotations

from dataclasses import dataclass

MAX_NOMBRE = 100
MAX_APELLIDO = 100


@dataclass
class Cliente:
    """A customer."""

    id: int
    nombre: str
    apellido: str
    edad: int

    def __post_init__(self) -> None:
        if len(self.nombre) >= MAX_NOMBRE:
            raise ValueError(f"name must be shorter than {MAX_NOMBRE} characters")
        if len(self.apellido) >= MAX_APELLIDO:
            raise ValueError(f"surname must be shorter than {MAX_APELLIDO} characters")

    def copia(self) -> Cliente:
        """Return an independent copy of this customer."""
        return Cliente(self.id, self.nombre, self.apellido, self.edad)

    def __str__(self) -> str:
        """The printed form, ending with a newline."""
        return (
            f"Cliente {self.nombre} {self.apellido}\n"
            f"Id: {self.id}\n"
            f"Edad: {self.edad}\n"
        )