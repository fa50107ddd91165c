# client_orders/adapters/outbound/persistence/__init__.py
