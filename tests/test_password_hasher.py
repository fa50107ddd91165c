# tests/test_password_hasher.py

from client_orders.adapters.outbound.security.password_hasher import password_hasher


def test_hash_is_one_way_and_verifiable():
    digest = password_hasher.hash("secret123")
    assert digest != "secret123"
    assert password_hasher.verify("secret123", digest)
    assert not password_hasher.verify("secret124", digest)


def test_same_password_hashes_differently():
    assert password_hasher.hash("secret123") != password_hasher.hash("secret123")
