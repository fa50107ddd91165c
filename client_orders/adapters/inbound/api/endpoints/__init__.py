# client_orders/adapters/inbound/api/endpoints/__init__.py
