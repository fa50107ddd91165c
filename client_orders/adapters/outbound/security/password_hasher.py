# client_orders/adapters/outbound/security/password_hasher.py

from passlib.context import CryptContext

from client_orders.application.ports.outbound import IPasswordHasher


class BcryptPasswordHasher(IPasswordHasher):
    """
    bcrypt password hashing through passlib.
    """

    crypt_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

    def hash(self, plain_password: str) -> str:
        """Return the hash of a plain text password."""
        return self.crypt_context.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify if the plain text password matches the stored hash."""
        return self.crypt_context.verify(plain_password, hashed_password)


password_hasher = BcryptPasswordHasher()
