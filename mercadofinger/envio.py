"""Shipments: a cart of products and the date it must be shipped on."""

from __future__ import annotations

from dataclasses import dataclass

from mercadofinger.carrito_productos import CarritoProductos
from mercadofinger.fecha import Fecha


@dataclass
class Envio:
    """A shipment of a cart of products on a date."""

    carrito: CarritoProductos
    fecha: Fecha

    def __str__(self) -> str:
        """The cart, a blank line break, then the shipping date line."""
        return f"{self.carrito}\nFecha del envio: {self.fecha}\n"