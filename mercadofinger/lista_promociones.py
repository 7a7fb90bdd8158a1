"""Lists of promotions kept in ascending order of their start date."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator

from mercadofinger.fecha import Fecha
from mercadofinger.promocion import Promocion


def _clave(fecha: Fecha) -> tuple[int, int, int]:
    return (fecha.anio, fecha.mes, fecha.dia)


class ListaPromociones:
    """Promotions ordered by start date; on ties the newest comes first."""

    def __init__(self, promociones: Iterable[Promocion] = ()) -> None:
        self._promociones: list[Promocion] = []
        self._claves: list[tuple[int, int, int]] = []
        for promocion in promociones:
            self.agregar(promocion)

    def _insertar(self, promocion: Promocion) -> None:
        clave = _clave(promocion.inicio)
        posicion = bisect.bisect_left(self._claves, clave)
        self._claves.insert(posicion, clave)
        self._promociones.insert(posicion, promocion)

    def agregar(self, promocion: Promocion) -> None:
        """Insert ``promocion`` before every promotion starting on or after it.

        Raises ValueError if a promotion with the same id is already listed.
        """
        if self.pertenece(promocion.id):
            raise ValueError(f"a promotion with id {promocion.id} is already listed")
        self._insertar(promocion)

    def es_vacia(self) -> bool:
        """Return True if the list holds no promotion."""
        return not self._promociones

    def pertenece(self, id_promocion: int) -> bool:
        """Return True if a promotion with ``id_promocion`` is listed."""
        return any(p.id == id_promocion for p in self._promociones)

    def obtener(self, id_promocion: int) -> Promocion:
        """Return the promotion with ``id_promocion``; raise KeyError if absent."""
        for promocion in self._promociones:
            if promocion.id == id_promocion:
                return promocion
        raise KeyError(id_promocion)

    def _extraer(self, condicion) -> ListaPromociones:
        extraidas = ListaPromociones()
        restantes_p: list[Promocion] = []
        restantes_c: list[tuple[int, int, int]] = []
        for promocion, clave in zip(self._promociones, self._claves):
            if condicion(promocion):
                extraidas._promociones.append(promocion)
                extraidas._claves.append(clave)
            else:
                restantes_p.append(promocion)
                restantes_c.append(clave)
        self._promociones = restantes_p
        self._claves = restantes_c
        return extraidas

    def extraer_finalizadas(self, fecha: Fecha) -> ListaPromociones:
        """Remove and return, in order, the promotions that ended before ``fecha``."""
        return self._extraer(lambda p: p.fin.comparar(fecha) < 0)

    def extraer_activas(self, fecha: Fecha) -> ListaPromociones:
        """Remove and return, in order, the promotions in force on ``fecha``."""
        return self._extraer(
            lambda p: p.inicio.comparar(fecha) <= 0 and p.fin.comparar(fecha) >= 0
        )

    def es_compatible(self, promocion: Promocion) -> bool:
        """Return True if ``promocion`` is compatible with every listed promotion."""
        return all(promocion.es_compatible(otra) for otra in self._promociones)

    def __iter__(self) -> Iterator[Promocion]:
        return iter(list(self._promociones))

    def __len__(self) -> int:
        return len(self._promociones)

    def __str__(self) -> str:
        """The printed forms of the promotions in order; empty if none."""
        return "".join(str(promocion) for promocion in self._promociones)


def unir_listas(lista1: ListaPromociones, lista2: ListaPromociones) -> ListaPromociones:
    """Return a new list with the promotions of both lists, inserted in turn."""
    unida = ListaPromociones()
    for promocion in (*lista1, *lista2):
        unida._insertar(promocion)
    return unida