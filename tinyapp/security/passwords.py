"""
Password hashing strategies.

The directories depend only on the `PasswordHasher` interface, so tests can
use a cheap bcrypt cost and the app can raise it through settings.
"""

from abc import ABC, abstractmethod

import bcrypt

from tinyapp.errors import ValidationError

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class PasswordHasher(ABC):
    """Abstract base class for one-way salted password hashing"""

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext password.

        Args:
            plaintext: Password as typed by the user

        Returns:
            Salted hash, safe to store
        """
        pass

    @abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a plaintext password against a stored hash"""
        pass


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt with a configurable cost factor (4 to 31)"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        try:
            password = plaintext.encode("utf-8")
        except UnicodeEncodeError:
            raise ValidationError("Password must be valid UTF-8")
        if len(password) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return bcrypt.hashpw(password, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify(self, plaintext: str, hashed: str) -> bool:
        try:
            password = plaintext.encode("utf-8")
        except UnicodeEncodeError:
            return False
        if len(password) > MAX_PASSWORD_BYTES:
            return False
        return bcrypt.checkpw(password, hashed.encode("utf-8"))
