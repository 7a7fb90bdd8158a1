"""A record of past, current and future promotions relative to a current date."""

from __future__ import annotations

from mercadofinger.fecha import Fecha
from mercadofinger.lista_promociones import ListaPromociones, unir_listas
from mercadofinger.producto import Producto
from mercadofinger.promocion import Promocion


class Historial:
    """Promotions split into finished, active and future ones."""

    def __init__(self, fecha: Fecha) -> None:
        self.fecha_actual = fecha
        self.futuras = ListaPromociones()
        self.activas = ListaPromociones()
        self.finalizadas = ListaPromociones()

    def agregar_promocion(self, promocion: Promocion) -> None:
        """File ``promocion`` by its dates; it must be compatible with the rest."""
        if not self.es_compatible(promocion):
            raise ValueError(f"promotion {promocion.id} is not compatible")
        if promocion.fin.comparar(self.fecha_actual) < 0:
            self.finalizadas.agregar(promocion)
        elif promocion.inicio.comparar(self.fecha_actual) > 0:
            self.futuras.agregar(promocion)
        else:
            self.activas.agregar(promocion)

    def agregar_producto_a_promocion(self, producto: Producto, id_promo: int) -> None:
        """Add ``producto`` to the promotion ``id_promo``; raise KeyError if absent."""
        for lista in (self.finalizadas, self.activas, self.futuras):
            if lista.pertenece(id_promo):
                lista.obtener(id_promo).agregar(producto)
                return
        raise KeyError(id_promo)

    def avanzar_a_fecha(self, fecha: Fecha) -> None:
        """Move the current date to ``fecha`` and refile the promotions."""
        if fecha.comparar(self.fecha_actual) < 0:
            raise ValueError("the new date must not be earlier than the current one")
        terminadas = self.activas.extraer_finalizadas(fecha)
        self.finalizadas = unir_listas(terminadas, self.finalizadas)

        terminadas_futuras = self.futuras.extraer_finalizadas(fecha)
        self.finalizadas = unir_listas(terminadas_futuras, self.finalizadas)

        nuevas_activas = self.futuras.extraer_activas(fecha)
        self.activas = unir_listas(nuevas_activas, self.activas)

        self.fecha_actual = fecha

    def es_compatible(self, promocion: Promocion) -> bool:
        """Return True if ``promocion`` is compatible with every recorded one."""
        return (
            self.futuras.es_compatible(promocion)
            and self.finalizadas.es_compatible(promocion)
            and self.activas.es_compatible(promocion)
        )

    def imprimir_finalizadas(self) -> str:
        """The printed forms of the finished promotions."""
        return str(self.finalizadas)

    def imprimir_activas(self) -> str:
        """The printed forms of the active promotions."""
        return str(self.activas)

    def imprimir_futuras(self) -> str:
        """The printed forms of the future promotions."""
        return str(self.futuras)