# client_orders/adapters/configuration/__init__.py
