# client_orders/adapters/outbound/__init__.py
