# client_orders/shared/utils/input_validation.py

import re
from typing import Any, Optional, Tuple
from uuid import UUID

from client_orders.domain.exceptions import InvalidInputException


class InputValidator:
    """
    Validation and sanitization of user input,
    complementing the Pydantic validations.
    """

    # Limits
    MAX_NAME_LENGTH = 255
    MIN_PASSWORD_LENGTH = 6
    MAX_PASSWORD_LENGTH = 72  # bcrypt only looks at the first 72 bytes

    @classmethod
    def validate_name(cls, name: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a person/client name.

        Returns:
            Tuple (valid, error_message)
        """
        if not name or not name.strip():
            return False, "Name is required"

        if len(name.strip()) > cls.MAX_NAME_LENGTH:
            return False, f"Name is too long (maximum {cls.MAX_NAME_LENGTH} characters)"

        return True, None

    @classmethod
    def sanitize_name(cls, name: str) -> str:
        """
        Trim the name and collapse repeated inner whitespace.
        """
        return re.sub(r'\s+', ' ', name.strip())

    @classmethod
    def validate_password(cls, password: str) -> Tuple[bool, Optional[str]]:
        """
        Validate password length.

        Returns:
            Tuple (valid, error_message)
        """
        if not password or len(password) < cls.MIN_PASSWORD_LENGTH:
            return False, f"Password must be at least {cls.MIN_PASSWORD_LENGTH} characters long"

        if len(password.encode("utf-8")) > cls.MAX_PASSWORD_LENGTH:
            return False, f"Password is too long (maximum {cls.MAX_PASSWORD_LENGTH} bytes)"

        return True, None

    @classmethod
    def parse_uuid(cls, value: Any) -> Optional[UUID]:
        """
        Parse an identifier received from the outside.

        Returns:
            The UUID, or None when the value is not a well-formed identifier
        """
        if isinstance(value, UUID):
            return value
        try:
            return UUID(str(value))
        except (ValueError, TypeError, AttributeError):
            return None

    @classmethod
    def require_uuid(cls, value: Any, detail: str = "Invalid ID format") -> UUID:
        """
        Parse an identifier or fail with an input error.

        Raises:
            InvalidInputException: If the value is not a well-formed identifier
        """
        parsed = cls.parse_uuid(value)
        if parsed is None:
            raise InvalidInputException(detail=detail)
        return parsed
