"""Promotions: a set of products on offer between two dates."""

from __future__ import annotations

from mercadofinger.conjunto_productos import ConjuntoProductos
from mercadofinger.fecha import Fecha
from mercadofinger.producto import Producto


def _dentro(fecha: Fecha, inicio: Fecha, fin: Fecha) -> bool:
    return fecha.comparar(inicio) >= 0 and fecha.comparar(fin) <= 0


class Promocion:
    """A promotion with an id, a validity period and the products it covers."""

    def __init__(self, id: int, inicio: Fecha, fin: Fecha, cant_max: int) -> None:
        self.id = id
        self.inicio = inicio
        self.fin = fin
        self.productos = ConjuntoProductos(cant_max)

    def agregar(self, producto: Producto) -> None:
        """Make ``producto`` part of the promotion."""
        self.productos.insertar(producto.id)

    def pertenece(self, producto: Producto) -> bool:
        """Return True if ``producto`` is part of the promotion."""
        return self.productos.pertenece(producto.id)

    def _se_solapa(self, otra: Promocion) -> bool:
        return (
            _dentro(self.inicio, otra.inicio, otra.fin)
            or _dentro(self.fin, otra.inicio, otra.fin)
            or _dentro(otra.inicio, self.inicio, self.fin)
            or _dentro(otra.fin, self.inicio, self.fin)
        )

    def es_compatible(self, otra: Promocion) -> bool:
        """Return False if both promotions overlap in time and share a product."""
        if self._se_solapa(otra):
            return self.productos.interseccion(otra.productos).es_vacio()
        return True

    def __str__(self) -> str:
        return (
            f"Promocion #{self.id} del {self.inicio} al {self.fin}\n"
            f"Productos: {self.productos}"
        )


def son_promociones_compatibles(prom1: Promocion, prom2: Promocion) -> bool:
    """Return True if the two promotions are compatible."""
    return prom1.es_compatible(prom2)