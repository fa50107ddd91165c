# client_orders/application/ports/__init__.py
