"""Shopping carts: collections of products kept in ascending id order."""

from __future__ import annotations

import bisect
from collections.abc import Iterator

from mercadofinger.producto import Producto


class CarritoProductos:
    """A cart of products ordered by product id, ids being unique."""

    def __init__(self) -> None:
        self._productos: list[Producto] = []
        self._ids: list[int] = []

    def insertar(self, producto: Producto) -> None:
        """Add ``producto`` in id order; its id must not be in the cart already."""
        posicion = bisect.bisect_left(self._ids, producto.id)
        if posicion < len(self._ids) and self._ids[posicion] == producto.id:
            raise ValueError(f"a product with id {producto.id} is already in the cart")
        self._ids.insert(posicion, producto.id)
        self._productos.insert(posicion, producto)

    def es_vacio(self) -> bool:
        """Return True if the cart holds no product."""
        return not self._productos

    def _posicion(self, id_producto: int) -> int | None:
        posicion = bisect.bisect_left(self._ids, id_producto)
        if posicion < len(self._ids) and self._ids[posicion] == id_producto:
            return posicion
        return None

    def existe(self, id_producto: int) -> bool:
        """Return True if a product with ``id_producto`` is in the cart."""
        return self._posicion(id_producto) is not None

    def obtener(self, id_producto: int) -> Producto:
        """Return the product with ``id_producto``; raise KeyError if absent."""
        posicion = self._posicion(id_producto)
        if posicion is None:
            raise KeyError(id_producto)
        return self._productos[posicion]

    def remover(self, id_producto: int) -> None:
        """Remove the product with ``id_producto``; raise KeyError if absent."""
        posicion = self._posicion(id_producto)
        if posicion is None:
            raise KeyError(id_producto)
        del self._ids[posicion]
        del self._productos[posicion]

    def __iter__(self) -> Iterator[Producto]:
        return iter(list(self._productos))

    def __len__(self) -> int:
        return len(self._productos)

    def __str__(self) -> str:
        """The printed forms of the products one after another; empty if none."""
        return "".join(str(producto) for producto in self._productos)