# mercadofinger

Data structures for a small online store. The package covers dates,
clients, products, shopping carts, bounded sets of product ids,
promotions and a promotion history. It also has per-branch client trees,
shipments with a priority queue, complaints with a hash table, and a
tokenizer for whitespace-separated input. It has no runtime
dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

Printing is done through `str()`. Each `__str__` returns the text the
object prints as. It does not write to standard output.

- `mercadofinger.fecha`
  - `Fecha(dia, mes, anio)` is a mutable date. Negative components raise
    `ValueError`.
  - `aumentar(dias)` moves the date forward, rolling over months and
    years.
  - `comparar(otra)` returns 1, -1 or 0.
  - `copia()` returns an independent copy.
  - `str()` gives `d/m/aaaa`.
  - The module also has the functions `es_bisiesto(anio)` and
    `dias_mes(mes, anio)`.
- `mercadofinger.cliente`
  - `Cliente(id, nombre, apellido, edad)` is a client.
  - Names of 100 characters or more raise `ValueError`.
  - `copia()` returns an independent copy.
- `mercadofinger.producto`
  - `Producto(id, nombre, precio, fecha_ingreso)` is a product.
- `mercadofinger.conjunto_productos`
  - `ConjuntoProductos(cant_max)` is a set of ids with
    `0 <= id < cant_max`. Ids out of range are ignored by `insertar`.
  - Other methods are `borrar`, `pertenece` and `es_vacio`.
  - The set supports `in`, `len()`, and iteration in ascending order.
  - `union`, `interseccion` and `diferencia` return new sets.
- `mercadofinger.carrito_productos`
  - `CarritoProductos` keeps products ordered by id.
  - A duplicate id in `insertar` raises `ValueError`.
  - `obtener` and `remover` raise `KeyError` for a missing id.
- `mercadofinger.clientes_abb`
  - `ClientesABB` is a binary search tree of clients keyed by id.
  - Methods are `insertar`, `existe`, `obtener`, `remover`, `altura`,
    `max_id`, `edad_promedio` and `obtener_nesimo(n)` (1-based).
  - Iteration goes in id order.
  - When `remover` deletes a node with two children, the node takes a
    copy of the largest client in its left subtree.
- `mercadofinger.clientes_sucursales`
  - `ClientesSucursalesLDE` holds client trees, one per branch, ordered
    by ascending average age.
  - Methods are `insertar(clientes_abb, id_sucursal)`, `primero`,
    `obtener_nesimo(n)`, `remover_ultimo` and `remover_nesimo(n)`.
    `obtener_nesimo(n)` returns `None` when there are fewer than `n`
    trees.
  - `invertido()` gives the printed form in reverse order.
  - `cliente_mas_repetido()` returns the client found in the most trees,
    choosing the lowest id on ties. It returns `None` if all trees are
    empty.
- `mercadofinger.envio`
  - `Envio(carrito, fecha)` is a cart together with its shipping date.
- `mercadofinger.cola_envios`
  - `ColaEnvios(maximo)` is a bounded binary heap of shipments. The
    latest date has the highest priority.
  - `encolar` raises `OverflowError` when the queue is full.
  - `desencolar` and `mas_prioritario` raise `IndexError` when it is
    empty.
  - `invertir_prioridad()` makes the earliest date the most urgent.
- `mercadofinger.queja`
  - `Queja(fecha, producto, cliente, comentario)` is a complaint.
- `mercadofinger.tabla_quejas`
  - `TablaQuejas(cant_estimadas)` is a hash table of complaints keyed by
    date. It uses `funcion_hash(fecha, cant_estimadas)` to pick a bucket.
  - Methods are `agregar`, `pertenece` and `obtener`. `agregar` raises
    `ValueError` on a duplicate date. `obtener` returns `None` when no
    complaint has that date.
- `mercadofinger.promocion`
  - `Promocion(id, inicio, fin, cant_max)` has the methods `agregar`,
    `pertenece` and `es_compatible`.
  - `son_promociones_compatibles(p1, p2)` also tests compatibility.
  - Two promotions are incompatible when their periods overlap and they
    share a product.
- `mercadofinger.lista_promociones`
  - `ListaPromociones` keeps promotions ordered by start date. On ties
    the newly added promotion comes first, and a duplicate id raises
    `ValueError`.
  - Methods are `pertenece`, `obtener`, `es_compatible`,
    `extraer_finalizadas(fecha)` and `extraer_activas(fecha)`. The two
    `extraer_*` methods remove the matching promotions and return them as
    a new list.
  - `unir_listas(lista1, lista2)` merges two lists into a new one.
- `mercadofinger.historial`
  - `Historial(fecha)` sorts promotions into finished, active and future
    ones relative to its current date.
  - `agregar_promocion` raises `ValueError` for an incompatible
    promotion.
  - `avanzar_a_fecha` refiles the promotions. It raises `ValueError` for
    an earlier date.
  - `imprimir_finalizadas`, `imprimir_activas` and `imprimir_futuras`
    return text.
- `mercadofinger.scanner`
  - `Scanner(stream)` reads from a text stream with `read_word`,
    `read_int`, `read_nat`, `read_double`, `read_char`,
    `read_rest_of_line` and `skip_blank`.

## Example

```python
from mercadofinger.carrito_productos import CarritoProductos
from mercadofinger.cola_envios import ColaEnvios
from mercadofinger.envio import Envio
from mercadofinger.fecha import Fecha
from mercadofinger.producto import Producto
from mercadofinger.promocion import Promocion, son_promociones_compatibles

fecha = Fecha(28, 2, 2024)
fecha.aumentar(2)
print(fecha)  # 1/3/2024

yerba = Producto(3, "Yerba", 100, Fecha(1, 1, 2024))
enero = Promocion(1, Fecha(1, 1, 2024), Fecha(31, 1, 2024), 10)
quincena = Promocion(2, Fecha(15, 1, 2024), Fecha(15, 2, 2024), 10)
enero.agregar(yerba)
quincena.agregar(yerba)
print(son_promociones_compatibles(enero, quincena))  # False

cola = ColaEnvios(2)
cola.encolar(Envio(CarritoProductos(), Fecha(1, 3, 2024)))
cola.encolar(Envio(CarritoProductos(), Fecha(5, 3, 2024)))
print(cola.desencolar().fecha)  # 5/3/2024
```

## What the package does not do

This is a library only. It has no command-line program and no
interactive command interpreter. It does not read commands from
standard input, and it does not store anything to disk. `Scanner` can
tokenize such input, but nothing in the package dispatches commands.