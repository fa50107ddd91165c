# client_orders/shared/__init__.py
