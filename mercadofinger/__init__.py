"""Store data structures: dates, clients, products, carts, promotions, shipment queues and complaint tables."""

__version__ = "0.4.0"