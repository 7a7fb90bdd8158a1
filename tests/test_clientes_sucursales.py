import pytest

from mercadofinger.cliente import Cliente
from mercadofinger.clientes_abb import ClientesABB
from mercadofinger.clientes_sucursales import ClientesSucursalesLDE

HEADER = "clientesSucursalesLDE de grupos:\n"


def make_grupo(*pares):
    grupo = ClientesABB()
    for id_cliente, edad in pares:
        grupo.insertar(Cliente(id_cliente, "Nombre", "Apellido", edad))
    return grupo


def test_empty_collection():
    coleccion = ClientesSucursalesLDE()
    assert len(coleccion) == 0
    assert str(coleccion) == HEADER
    assert coleccion.invertido() == HEADER
    assert coleccion.cliente_mas_repetido() is None
    assert coleccion.obtener_nesimo(1) is None


def test_empty_collection_errors():
    coleccion = ClientesSucursalesLDE()
    with pytest.raises(IndexError):
        coleccion.primero()
    with pytest.raises(IndexError):
        coleccion.remover_ultimo()
    with pytest.raises(IndexError):
        coleccion.remover_nesimo(1)


def test_insert_orders_by_average_age():
    g30 = make_grupo((1, 30))
    g10 = make_grupo((2, 10))
    g20 = make_grupo((3, 15), (4, 25))
    coleccion = ClientesSucursalesLDE()
    for i, grupo in enumerate((g30, g10, g20)):
        coleccion.insertar(grupo, i)
    assert [id(g) for g in coleccion] == [id(g10), id(g20), id(g30)]
    assert coleccion.primero() is g10
    assert len(coleccion) == 3


def test_ties_go_after_existing():
    primero = make_grupo((1, 40))
    segundo = make_grupo((2, 40))
    menor = make_grupo((3, 5))
    coleccion = ClientesSucursalesLDE()
    coleccion.insertar(primero, 1)
    coleccion.insertar(menor, 2)
    coleccion.insertar(segundo, 3)
    assert [id(g) for g in coleccion] == [id(menor), id(primero), id(segundo)]


def test_empty_group_goes_first():
    vacio = ClientesABB()
    lleno = make_grupo((1, 1))
    coleccion = ClientesSucursalesLDE()
    coleccion.insertar(lleno, 1)
    coleccion.insertar(vacio, 2)
    assert coleccion.primero() is vacio


def test_str_and_inverted():
    g1 = make_grupo((1, 20))
    g2 = make_grupo((2, 50))
    coleccion = ClientesSucursalesLDE()
    coleccion.insertar(g2, 1)
    coleccion.insertar(g1, 2)
    texto = str(coleccion)
    assert texto.startswith(HEADER + "Grupo con edad promedio 20.00:\n" + str(g1))
    assert texto.endswith("Grupo con edad promedio 50.00:\n" + str(g2))
    invertido = coleccion.invertido()
    assert invertido == (
        HEADER
        + "Grupo con edad promedio 50.00:\n"
        + str(g2)
        + "Grupo con edad promedio 20.00:\n"
        + str(g1)
    )


def test_obtener_nesimo():
    grupos = [make_grupo((i, i * 10)) for i in range(1, 4)]
    coleccion = ClientesSucursalesLDE()
    for i, grupo in enumerate(grupos):
        coleccion.insertar(grupo, i)
    assert coleccion.obtener_nesimo(2) is grupos[1]
    assert coleccion.obtener_nesimo(3) is grupos[2]
    assert coleccion.obtener_nesimo(4) is None
    with pytest.raises(IndexError):
        coleccion.obtener_nesimo(0)


def test_remover_ultimo_and_nesimo():
    grupos = [make_grupo((i, i * 10)) for i in range(1, 5)]
    coleccion = ClientesSucursalesLDE()
    for i, grupo in enumerate(grupos):
        coleccion.insertar(grupo, i)
    assert coleccion.remover_ultimo() is grupos[3]
    assert coleccion.remover_nesimo(2) is grupos[1]
    assert [id(g) for g in coleccion] == [id(grupos[0]), id(grupos[2])]
    assert coleccion.remover_nesimo(1) is grupos[0]
    assert coleccion.remover_ultimo() is grupos[2]
    assert len(coleccion) == 0
    with pytest.raises(IndexError):
        coleccion.remover_nesimo(1)


def test_cliente_mas_repetido_counts_groups():
    coleccion = ClientesSucursalesLDE()
    coleccion.insertar(make_grupo((3, 10), (5, 10)), 1)
    coleccion.insertar(make_grupo((5, 20), (3, 20)), 2)
    coleccion.insertar(make_grupo((5, 30), (7, 30)), 3)
    resultado = coleccion.cliente_mas_repetido()
    assert resultado.id == 5


def test_cliente_mas_repetido_tie_prefers_lower_id():
    coleccion = ClientesSucursalesLDE()
    coleccion.insertar(make_grupo((9, 10)), 1)
    coleccion.insertar(make_grupo((2, 20)), 2)
    coleccion.insertar(make_grupo((9, 30), (2, 30)), 3)
    assert coleccion.cliente_mas_repetido().id == 2


def test_cliente_mas_repetido_all_groups_empty():
    coleccion = ClientesSucursalesLDE()
    coleccion.insertar(ClientesABB(), 1)
    coleccion.insertar(ClientesABB(), 2)
    assert coleccion.cliente_mas_repetido() is None