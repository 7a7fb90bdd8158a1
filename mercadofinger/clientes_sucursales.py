"""Branches' customer groups kept in order of their average age."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from mercadofinger.cliente import Cliente
from mercadofinger.clientes_abb import ClientesABB


@dataclass
class _Sucursal:
    grupo: ClientesABB
    id_sucursal: int


class ClientesSucursalesLDE:
    """A sequence of customer groups ordered by ascending average age."""

    def __init__(self) -> None:
        self._sucursales: list[_Sucursal] = []

    def insertar(self, clientes_abb: ClientesABB, id_sucursal: int) -> None:
        """Insert a group after every group whose average age is not greater."""
        edad = clientes_abb.edad_promedio()
        posicion = next(
            (
                i
                for i, sucursal in enumerate(self._sucursales)
                if sucursal.grupo.edad_promedio() > edad
            ),
            len(self._sucursales),
        )
        self._sucursales.insert(posicion, _Sucursal(clientes_abb, id_sucursal))

    @staticmethod
    def _formatear(grupos: Iterator[ClientesABB]) -> str:
        partes = ["clientesSucursalesLDE de grupos:\n"]
        for grupo in grupos:
            partes.append(f"Grupo con edad promedio {grupo.edad_promedio():.2f}:\n")
            partes.append(str(grupo))
        return "".join(partes)

    def __str__(self) -> str:
        """The groups from lowest to highest average age."""
        return self._formatear(iter(self))

    def invertido(self) -> str:
        """The groups from highest to lowest average age, in the same format."""
        return self._formatear(s.grupo for s in reversed(self._sucursales))

    def __len__(self) -> int:
        return len(self._sucursales)

    def __iter__(self) -> Iterator[ClientesABB]:
        return iter([sucursal.grupo for sucursal in self._sucursales])

    def primero(self) -> ClientesABB:
        """Return the first group; raise IndexError when there is none."""
        if not self._sucursales:
            raise IndexError("the collection is empty")
        return self._sucursales[0].grupo

    def obtener_nesimo(self, n: int) -> ClientesABB | None:
        """Return the ``n``-th group counting from 1, or None if there are fewer."""
        if n < 1:
            raise IndexError("n must be positive")
        if n > len(self._sucursales):
            return None
        return self._sucursales[n - 1].grupo

    def remover_ultimo(self) -> ClientesABB:
        """Remove and return the last group; raise IndexError when empty."""
        if not self._sucursales:
            raise IndexError("the collection is empty")
        return self._sucursales.pop().grupo

    def remover_nesimo(self, n: int) -> ClientesABB:
        """Remove and return the ``n``-th group counting from 1."""
        if not 1 <= n <= len(self._sucursales):
            raise IndexError(f"there is no group at position {n}")
        return self._sucursales.pop(n - 1).grupo

    def cliente_mas_repetido(self) -> Cliente | None:
        """Return the customer found in most groups, the lowest id on ties.

        Returns None when no group holds a customer.
        """
        mas_repetido: Cliente | None = None
        cant_max = 0
        for posicion, sucursal in enumerate(self._sucursales):
            siguientes = self._sucursales[posicion + 1 :]
            for cliente in sucursal.grupo:
                if mas_repetido is not None and cliente.id == mas_repetido.id:
                    continue
                repeticiones = 1 + sum(
                    1 for otra in siguientes if otra.grupo.existe(cliente.id)
                )
                if repeticiones > cant_max or (
                    repeticiones == cant_max
                    and mas_repetido is not None
                    and cliente.id < mas_repetido.id
                ):
                    mas_repetido = cliente
                    cant_max = repeticiones
        return mas_repetido