# client_orders/adapters/inbound/api/__init__.py
