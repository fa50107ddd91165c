# client_orders/adapters/outbound/security/token_service.py

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt, JWTError, ExpiredSignatureError

from client_orders.application.ports.outbound import ITokenService
from client_orders.domain.exceptions import InvalidTokenException

logger = logging.getLogger(__name__)

DEFAULT_EXPIRES_MINUTES = 60


class JWTTokenService(ITokenService):
    """
    Signs and verifies bearer tokens carrying a user identifier.

    The secret key is handed over by whoever builds the service
    (see ``deps.get_token_service``); nothing here reads configuration.
    """

    def __init__(
            self,
            secret_key: str,
            algorithm: str = "HS256",
            expires_minutes: int = DEFAULT_EXPIRES_MINUTES,
    ):
        if not secret_key:
            raise ValueError("A secret key is required to sign tokens")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expires_minutes)

    def issue(self, subject: str, expires_delta: Optional[timedelta] = None) -> str:
        """
        Create a signed access token.

        - subject: the user's id.
        - expires_delta: custom lifetime, defaults to the configured one (1 hour).
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else self.expires_delta)
        payload = {
            "sub": str(subject),
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Verify signature and expiry and return the claims.

        Raises:
            InvalidTokenException: If the token is malformed, tampered with or expired
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            logger.warning("Rejected expired token")
            raise InvalidTokenException(detail="Invalid token", original_error=e)
        except JWTError as e:
            logger.warning(f"Rejected invalid token: {e}")
            raise InvalidTokenException(detail="Invalid token", original_error=e)

    def verify(self, token: str) -> str:
        """
        Verify a token and return its subject.

        Raises:
            InvalidTokenException: If the token is invalid or has no subject
        """
        payload = self.decode(token)
        subject = payload.get("sub")
        if not subject:
            logger.warning("Rejected token without 'sub' claim")
            raise InvalidTokenException(detail="Invalid token")
        return subject
