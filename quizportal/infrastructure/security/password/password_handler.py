"""
Password Handler
================
Password hashing, verification and default-password generation for user accounts.
"""

import logging
import secrets
import string

from passlib.context import CryptContext

from quizportal.core.config.settings import get_settings

logger = logging.getLogger(__name__)

SPECIAL_CHARACTERS = "!@#$%^&*()-_=+"


class PasswordHandler:
    """
    Handles password hashing and verification using passlib.
    Allows configuration of hashing schemes.
    """

    def __init__(self, schemes: list[str] | None = None, deprecated: str = "auto"):
        """
        Initialize the PasswordHandler with specified schemes.

        Args:
            schemes: List of hashing schemes (e.g., ["bcrypt"]). Defaults to settings.
            deprecated: Handling of deprecated hashes ("auto", "warn", "error").
        """
        settings = get_settings()
        self.schemes = schemes or settings.PASSWORD_HASHING_SCHEMES
        self.default_length = settings.DEFAULT_PASSWORD_LENGTH
        self.context = CryptContext(schemes=self.schemes, deprecated=deprecated)
        logger.debug(f"PasswordHandler initialized with schemes: {self.schemes}")

    def get_password_hash(self, password: str) -> str:
        """
        Hashes a plain text password.

        Args:
            password: The plain text password.

        Returns:
            The hashed password.
        """
        return self.context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verifies a plain text password against a hashed password.

        Args:
            plain_password: The plain text password.
            hashed_password: The hashed password to compare against.

        Returns:
            True if the password matches, False otherwise (including unrecognised hashes).
        """
        try:
            return self.context.verify(plain_password, hashed_password)
        except ValueError as e:
            logger.warning(f"Password verification encountered an issue: {e}")
            return False

    def generate_secure_password(self, length: int | None = None) -> str:
        """
        Generate a random password for accounts created without one.

        The result always contains an uppercase letter, a lowercase letter,
        a digit and a special character.

        Args:
            length: Length of password to generate (default from settings, minimum 8)

        Returns:
            Secure random password string
        """
        length = max(length or self.default_length, 8)

        uppercase = string.ascii_uppercase
        lowercase = string.ascii_lowercase
        digits = string.digits

        password = [
            secrets.choice(uppercase),
            secrets.choice(lowercase),
            secrets.choice(digits),
            secrets.choice(SPECIAL_CHARACTERS),
        ]
        all_chars = uppercase + lowercase + digits + SPECIAL_CHARACTERS
        password.extend(secrets.choice(all_chars) for _ in range(length - 4))
        secrets.SystemRandom().shuffle(password)

        logger.debug(f"Generated default password of length {length}")
        return "".join(password)
