"""Calendar dates made of day, month and year."""

from __future__ import annotations

from dataclasses import dataclass

_MESES_DE_31 = frozenset({1, 3, 5, 7, 8, 10, 12})
_MESES_DE_30 = frozenset({4, 6, 9, 11})


def es_bisiesto(anio: int) -> bool:
    """Return True if ``anio`` is a leap year."""
    return anio % 400 == 0 or (anio % 4 == 0 and anio % 100 != 0)


def dias_mes(mes: int, anio: int) -> int:
    """Return the number of days of ``mes`` in ``anio``; 0 for an unknown month."""
    if mes in _MESES_DE_31:
        return 31
    if mes in _MESES_DE_30:
        return 30
    if mes == 2:
        return 29 if es_bisiesto(anio) else 28
    return 0


@dataclass
class Fecha:
    """A mutable date; all components are non-negative integers."""

    dia: int
    mes: int
    anio: int

    def __post_init__(self) -> None:
        if min(self.dia, self.mes, self.anio) < 0:
            raise ValueError("date components must be non-negative")

    def aumentar(self, dias: int) -> None:
        """Move this date forward by ``dias`` days."""
        if dias < 0:
            raise ValueError("the number of days must be non-negative")
        self.dia += dias
        while self.dia > (largo := dias_mes(self.mes, self.anio)):
            self.dia -= largo
            self.mes += 1
            if self.mes > 12:
                self.mes = 1
                self.anio += 1

    def comparar(self, otra: Fecha) -> int:
        """Return 1 if this date is later than ``otra``, -1 if earlier, 0 if equal."""
        propia = (self.anio, self.mes, self.dia)
        ajena = (otra.anio, otra.mes, otra.dia)
        return (propia > ajena) - (propia < ajena)

    def copia(self) -> Fecha:
        """Return an independent copy of this date."""
        return Fecha(self.dia, self.mes, self.anio)

    def __str__(self) -> str:
        return f"{self.dia}/{self.mes}/{self.anio}"