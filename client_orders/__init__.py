# client_orders/__init__.py
