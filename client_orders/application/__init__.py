# client_orders/application/__init__.py
