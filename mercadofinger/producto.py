"""Products with an id, a name, a price and an entry date."""

from __future__ import annotations

from dataclasses import dataclass

from mercadofinger.fecha import Fecha

MAX_NOMBRE_PRODUCTO = 100


@dataclass
class Producto:
    """A product."""

    id: int
    nombre: str
    precio: int
    fecha_ingreso: Fecha

    def __post_init__(self) -> None:
        if len(self.nombre) >= MAX_NOMBRE_PRODUCTO:
            raise ValueError(
                f"product name must be shorter than {MAX_NOMBRE_PRODUCTO} characters"
            )

    def __str__(self) -> str:
        """The printed form; the entry date is not followed by a newline."""
        return (
            f"Producto: {self.id}\n"
            f"{self.nombre}\n"
            f"Precio: {self.precio}\n"
            f"Ingresado el: {self.fecha_ingreso}"
        )