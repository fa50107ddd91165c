# client_orders/adapters/outbound/security/__init__.py
