# client_orders/adapters/__init__.py
