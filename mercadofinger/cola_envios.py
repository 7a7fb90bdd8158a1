"""Bounded priority queues of shipments ordered by shipping date."""

from __future__ import annotations

from mercadofinger.envio import Envio


class ColaEnvios:
    """A binary heap of shipments.

    By default the shipment with the latest date has the highest priority.
    After the priority is inverted, the one with the earliest date does.
    """

    def __init__(self, maximo: int) -> None:
        if maximo < 0:
            raise ValueError("the maximum number of shipments must be non-negative")
        self._maximo = maximo
        self._heap: list[Envio] = []
        self._invertida = False

    @property
    def maximo(self) -> int:
        """The maximum number of pending shipments."""
        return self._maximo

    @property
    def invertida(self) -> bool:
        """True when the earliest date has the highest priority."""
        return self._invertida

    def _antes(self, a: Envio, b: Envio) -> bool:
        """Return True if ``a`` strictly outranks ``b``."""
        objetivo = -1 if self._invertida else 1
        return a.fecha.comparar(b.fecha) == objetivo

    def _subir(self, pos: int) -> None:
        heap = self._heap
        while pos > 0:
            padre = (pos - 1) // 2
            if not self._antes(heap[pos], heap[padre]):
                break
            heap[pos], heap[padre] = heap[padre], heap[pos]
            pos = padre

    def _bajar(self, pos: int) -> None:
        heap = self._heap
        cantidad = len(heap)
        while True:
            mejor = pos
            for hijo in (2 * pos + 1, 2 * pos + 2):
                if hijo < cantidad and self._antes(heap[hijo], heap[mejor]):
                    mejor = hijo
            if mejor == pos:
                return
            heap[mejor], heap[pos] = heap[pos], heap[mejor]
            pos = mejor

    def encolar(self, envio: Envio) -> None:
        """Add ``envio``; raise OverflowError when the queue is full."""
        if len(self._heap) >= self._maximo:
            raise OverflowError("the shipment queue is full")
        self._heap.append(envio)
        self._subir(len(self._heap) - 1)

    def desencolar(self) -> Envio:
        """Remove and return the highest-priority shipment."""
        if not self._heap:
            raise IndexError("the shipment queue is empty")
        primero = self._heap[0]
        ultimo = self._heap.pop()
        if self._heap:
            self._heap[0] = ultimo
            self._bajar(0)
        return primero

    def mas_prioritario(self) -> Envio:
        """Return the highest-priority shipment without removing it."""
        if not self._heap:
            raise IndexError("the shipment queue is empty")
        return self._heap[0]

    def invertir_prioridad(self) -> None:
        """Swap which end of the date order has the highest priority."""
        self._invertida = not self._invertida
        extraidos = [self.desencolar() for _ in range(len(self._heap))]
        for envio in extraidos:
            self.encolar(envio)

    def __len__(self) -> int:
        return len(self._heap)