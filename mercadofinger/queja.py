"""Complaints made by a customer about a product on a date."""

from __future__ import annotations

from dataclasses import dataclass

from mercadofinger.cliente import Cliente
from mercadofinger.fecha import Fecha
from mercadofinger.producto import Producto

MAX_COMENTARIO = 100


@dataclass
class Queja:
    """A complaint with its date, product, customer and comment."""

    fecha: Fecha
    producto: Producto
    cliente: Cliente
    comentario: str

    def __post_init__(self) -> None:
        if len(self.comentario) >= MAX_COMENTARIO:
            raise ValueError(f"comment must be shorter than {MAX_COMENTARIO} characters")

    def __str__(self) -> str:
        return (
            f"Fecha: {self.fecha}\n"
            f"Cliente: {self.cliente}"
            f"{self.producto}\n"
            f"Comentario: {self.comentario}\n"
        )