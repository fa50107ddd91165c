# client_orders/adapters/inbound/__init__.py
