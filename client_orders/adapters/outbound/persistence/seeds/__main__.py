# client_orders/adapters/outbound/persistence/seeds/__main__.py

from client_orders.adapters.outbound.persistence.seeds import run

run()
