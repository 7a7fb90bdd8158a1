"""Binary search trees of customers keyed by customer id."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice

from mercadofinger.cliente import Cliente


@dataclass
class _Nodo:
    cliente: Cliente
    izq: _Nodo | None = None
    der: _Nodo | None = None


class ClientesABB:
    """A binary search tree of customers ordered by id."""

    def __init__(self) -> None:
        self._raiz: _Nodo | None = None

    def insertar(self, cliente: Cliente) -> None:
        """Insert ``cliente``; equal ids go to the left subtree."""
        nuevo = _Nodo(cliente)
        if self._raiz is None:
            self._raiz = nuevo
            return
        actual = self._raiz
        while True:
            if cliente.id > actual.cliente.id:
                if actual.der is None:
                    actual.der = nuevo
                    return
                actual = actual.der
            else:
                if actual.izq is None:
                    actual.izq = nuevo
                    return
                actual = actual.izq

    def _buscar(self, id_cliente: int) -> _Nodo | None:
        actual = self._raiz
        while actual is not None and actual.cliente.id != id_cliente:
            actual = actual.der if id_cliente > actual.cliente.id else actual.izq
        return actual

    def existe(self, id_cliente: int) -> bool:
        """Return True if a customer with ``id_cliente`` is in the tree."""
        return self._buscar(id_cliente) is not None

    def obtener(self, id_cliente: int) -> Cliente:
        """Return the customer with ``id_cliente``; raise KeyError if absent."""
        nodo = self._buscar(id_cliente)
        if nodo is None:
            raise KeyError(id_cliente)
        return nodo.cliente

    def altura(self) -> int:
        """Return the number of levels of the tree; 0 when empty."""
        altura = 0
        nivel = [self._raiz] if self._raiz is not None else []
        while nivel:
            altura += 1
            nivel = [h for n in nivel for h in (n.izq, n.der) if h is not None]
        return altura

    def max_id(self) -> Cliente:
        """Return the customer with the largest id; raise ValueError when empty."""
        if self._raiz is None:
            raise ValueError("the tree is empty")
        actual = self._raiz
        while actual.der is not None:
            actual = actual.der
        return actual.cliente

    def remover(self, id_cliente: int) -> None:
        """Remove the customer with ``id_cliente``; raise KeyError if absent.

        A node with two children takes a copy of the customer with the
        largest id of its left subtree.
        """
        padre: _Nodo | None = None
        nodo = self._raiz
        while nodo is not None and nodo.cliente.id != id_cliente:
            padre = nodo
            nodo = nodo.der if id_cliente > nodo.cliente.id else nodo.izq
        if nodo is None:
            raise KeyError(id_cliente)

        if nodo.izq is not None and nodo.der is not None:
            padre_max = nodo
            maximo = nodo.izq
            while maximo.der is not None:
                padre_max = maximo
                maximo = maximo.der
            nodo.cliente = maximo.cliente.copia()
            if padre_max is nodo:
                padre_max.izq = maximo.izq
            else:
                padre_max.der = maximo.izq
            return

        hijo = nodo.izq if nodo.der is None else nodo.der
        if padre is None:
            self._raiz = hijo
        elif padre.izq is nodo:
            padre.izq = hijo
        else:
            padre.der = hijo

    def __iter__(self) -> Iterator[Cliente]:
        pila: list[_Nodo] = []
        actual = self._raiz
        while pila or actual is not None:
            while actual is not None:
                pila.append(actual)
                actual = actual.izq
            nodo = pila.pop()
            yield nodo.cliente
            actual = nodo.der

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def edad_promedio(self) -> float:
        """Return the average age of the customers; 0 when empty."""
        edades = [cliente.edad for cliente in self]
        if not edades:
            return 0.0
        return sum(edades) / len(edades)

    def obtener_nesimo(self, n: int) -> Cliente:
        """Return the ``n``-th customer in id order, counting from 1."""
        if n < 1:
            raise IndexError("n must be positive")
        try:
            return next(islice(self, n - 1, None))
        except StopIteration:
            raise IndexError(f"the tree has fewer than {n} customers") from None

    def __str__(self) -> str:
        """The printed forms of the customers in id order."""
        return "".join(str(cliente) for cliente in self)