"""Hash tables of complaints keyed by the complaint's date."""

from __future__ import annotations

from mercadofinger.fecha import Fecha
from mercadofinger.queja import Queja


def funcion_hash(fecha: Fecha, cant_estimadas: int) -> int:
    """Return the bucket of ``fecha`` in a table of ``cant_estimadas`` buckets."""
    return (31 * fecha.mes + fecha.dia) % cant_estimadas


class TablaQuejas:
    """A table of complaints with separate chaining by date."""

    def __init__(self, cant_estimadas: int) -> None:
        if cant_estimadas < 1:
            raise ValueError("the estimated size must be positive")
        self._cubetas: list[list[Queja]] = [[] for _ in range(cant_estimadas)]
        self._cantidad = 0

    @property
    def cant_estimadas(self) -> int:
        """The number of buckets."""
        return len(self._cubetas)

    def _cubeta(self, fecha: Fecha) -> list[Queja]:
        return self._cubetas[funcion_hash(fecha, len(self._cubetas))]

    def agregar(self, queja: Queja) -> None:
        """Add ``queja``; no other complaint may have the same date."""
        if self.pertenece(queja.fecha):
            raise ValueError(f"a complaint dated {queja.fecha} is already stored")
        self._cubeta(queja.fecha).insert(0, queja)
        self._cantidad += 1

    def pertenece(self, fecha: Fecha) -> bool:
        """Return True if a complaint with date ``fecha`` is stored."""
        return self.obtener(fecha) is not None

    def obtener(self, fecha: Fecha) -> Queja | None:
        """Return the complaint dated ``fecha``, or None if there is none."""
        return next(
            (q for q in self._cubeta(fecha) if fecha.comparar(q.fecha) == 0), None
        )

    def __len__(self) -> int:
        return self._cantidad

    def __str__(self) -> str:
        """Each bucket in order, its complaints newest first."""
        partes = []
        for posicion, cubeta in enumerate(self._cubetas):
            if not cubeta:
                partes.append(
                    f"No hay elementos guardados en la posicion {posicion} de la tabla.\n"
                )
            else:
                partes.append(f"Elementos en la posicion {posicion} de la tabla:\n")
                partes.extend(str(queja) for queja in cubeta)
        return "".join(partes)