# client_orders/application/dtos/__init__.py
