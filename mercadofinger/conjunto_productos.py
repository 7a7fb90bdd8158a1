"""Bounded sets of product ids in the range ``0 <= id < cant_max``."""

from __future__ import annotations

from collections.abc import Iterator


class ConjuntoProductos:
    """A set of product ids bounded by a maximum id."""

    def __init__(self, cant_max: int) -> None:
        if cant_max < 0:
            raise ValueError("the maximum size must be non-negative")
        self._cant_max = cant_max
        self._ids: set[int] = set()

    @property
    def cant_max(self) -> int:
        """The exclusive upper bound of the ids the set can hold."""
        return self._cant_max

    def es_vacio(self) -> bool:
        """Return True if the set holds no id."""
        return not self._ids

    def insertar(self, id_producto: int) -> None:
        """Add ``id_producto``; ids out of range are ignored."""
        if 0 <= id_producto < self._cant_max:
            self._ids.add(id_producto)

    def borrar(self, id_producto: int) -> None:
        """Remove ``id_producto`` if present."""
        self._ids.discard(id_producto)

    def pertenece(self, id_producto: int) -> bool:
        """Return True if ``id_producto`` is in the set."""
        return id_producto in self._ids

    def __contains__(self, id_producto: object) -> bool:
        return id_producto in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._ids))

    def _con(self, ids: set[int]) -> ConjuntoProductos:
        resultado = ConjuntoProductos(self._cant_max)
        for id_producto in ids:
            resultado.insertar(id_producto)
        return resultado

    def union(self, otro: ConjuntoProductos) -> ConjuntoProductos:
        """Return a new set with the ids in either set, bounded like this one."""
        return self._con(self._ids | otro._ids)

    def interseccion(self, otro: ConjuntoProductos) -> ConjuntoProductos:
        """Return a new set with the ids in both sets."""
        return self._con(self._ids & otro._ids)

    def diferencia(self, otro: ConjuntoProductos) -> ConjuntoProductos:
        """Return a new set with the ids in this set but not in ``otro``."""
        return self._con(self._ids - otro._ids)

    def __str__(self) -> str:
        """Ids in ascending order, each followed by a space, then a newline."""
        return "".join(f"{id_producto} " for id_producto in self) + "\n"