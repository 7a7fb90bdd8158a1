import pytest

from mercadofinger.fecha import Fecha
from mercadofinger.lista_promociones import ListaPromociones, unir_listas
from mercadofinger.producto import Producto
from mercadofinger.promocion import Promocion


def _producto(id_producto):
    return Producto(id_producto, "Producto Dummy", 100, Fecha(1, 1, 1))


def _promo(id_promo, inicio, fin, productos=(), cant_max=50):
    promocion = Promocion(id_promo, Fecha(*inicio), Fecha(*fin), cant_max)
    for id_producto in productos:
        promocion.agregar(_producto(id_producto))
    return promocion


def _ids(lista):
    return [p.id for p in lista]


def test_nueva_lista_es_vacia():
    lista = ListaPromociones()
    assert lista.es_vacia()
    assert len(lista) == 0
    assert str(lista) == ""


def test_agregar_ordena_por_fecha_de_inicio():
    lista = ListaPromociones()
    lista.agregar(_promo(1, (10, 3, 2024), (20, 3, 2024)))
    lista.agregar(_promo(2, (1, 1, 2024), (5, 1, 2024)))
    lista.agregar(_promo(3, (15, 2, 2024), (20, 2, 2024)))
    assert _ids(lista) == [2, 3, 1]
    assert not lista.es_vacia()


def test_empate_inserta_antes_de_las_existentes():
    lista = ListaPromociones()
    lista.agregar(_promo(1, (1, 1, 2024), (5, 1, 2024)))
    lista.agregar(_promo(2, (1, 1, 2024), (9, 1, 2024)))
    lista.agregar(_promo(3, (2, 1, 2024), (9, 1, 2024)))
    lista.agregar(_promo(4, (1, 1, 2024), (3, 1, 2024)))
    assert _ids(lista) == [4, 2, 1, 3]


def test_constructor_con_promociones():
    lista = ListaPromociones(
        [_promo(1, (5, 1, 2024), (6, 1, 2024)), _promo(2, (1, 1, 2024), (2, 1, 2024))]
    )
    assert _ids(lista) == [2, 1]


def test_agregar_id_repetido_falla():
    lista = ListaPromociones([_promo(1, (1, 1, 2024), (5, 1, 2024))])
    with pytest.raises(ValueError):
        lista.agregar(_promo(1, (2, 1, 2024), (5, 1, 2024)))


def test_pertenece_y_obtener():
    promo = _promo(7, (1, 1, 2024), (5, 1, 2024))
    lista = ListaPromociones([promo])
    assert lista.pertenece(7)
    assert not lista.pertenece(8)
    assert lista.obtener(7) is promo
    with pytest.raises(KeyError):
        lista.obtener(8)


def test_extraer_finalizadas():
    lista = ListaPromociones(
        [
            _promo(1, (1, 1, 2024), (5, 1, 2024)),
            _promo(2, (2, 1, 2024), (20, 1, 2024)),
            _promo(3, (3, 1, 2024), (10, 1, 2024)),
            _promo(4, (4, 1, 2024), (6, 1, 2024)),
        ]
    )
    finalizadas = lista.extraer_finalizadas(Fecha(10, 1, 2024))
    assert _ids(finalizadas) == [1, 4]
    assert _ids(lista) == [2, 3]


def test_extraer_activas():
    lista = ListaPromociones(
        [
            _promo(1, (1, 1, 2024), (5, 1, 2024)),
            _promo(2, (2, 1, 2024), (20, 1, 2024)),
            _promo(3, (8, 1, 2024), (9, 1, 2024)),
            _promo(4, (10, 1, 2024), (30, 1, 2024)),
            _promo(5, (11, 1, 2024), (30, 1, 2024)),
        ]
    )
    activas = lista.extraer_activas(Fecha(10, 1, 2024))
    assert _ids(activas) == [2, 4]
    assert _ids(lista) == [1, 3, 5]


def test_es_compatible():
    lista = ListaPromociones(
        [
            _promo(1, (1, 1, 2024), (10, 1, 2024), productos=(1, 2)),
            _promo(2, (1, 2, 2024), (10, 2, 2024), productos=(3,)),
        ]
    )
    assert lista.es_compatible(_promo(3, (5, 1, 2024), (15, 1, 2024), productos=(3,)))
    assert not lista.es_compatible(
        _promo(4, (5, 2, 2024), (15, 2, 2024), productos=(3,))
    )
    assert ListaPromociones().es_compatible(_promo(5, (1, 1, 2024), (2, 1, 2024)))


def test_unir_listas_ordena_y_no_modifica():
    lista1 = ListaPromociones(
        [_promo(1, (1, 1, 2024), (5, 1, 2024)), _promo(2, (9, 1, 2024), (12, 1, 2024))]
    )
    lista2 = ListaPromociones([_promo(3, (4, 1, 2024), (6, 1, 2024))])
    unida = unir_listas(lista1, lista2)
    assert _ids(unida) == [1, 3, 2]
    assert _ids(lista1) == [1, 2]
    assert _ids(lista2) == [3]
    claves = [(p.inicio.anio, p.inicio.mes, p.inicio.dia) for p in unida]
    assert claves == sorted(claves)


def test_str_concatena_promociones():
    p1 = _promo(1, (1, 1, 2024), (5, 1, 2024), productos=(3,))
    p2 = _promo(2, (2, 1, 2024), (5, 1, 2024))
    lista = ListaPromociones([p2, p1])
    assert str(lista) == str(p1) + str(p2)
    assert str(p1) == "Promocion #1 del 1/1/2024 al 5/1/2024\nProductos: 3 \n"