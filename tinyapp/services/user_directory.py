import logging
from typing import Dict, Optional

from tinyapp.errors import InvalidCredentials, ValidationError
from tinyapp.models.user import User
from tinyapp.security.passwords import PasswordHasher
from tinyapp.services.identifiers import IdentifierGenerator

logger = logging.getLogger(__name__)


class UserDirectory:
    """
    In-memory mapping of user id -> User.

    Emails are matched exactly (case-sensitive). Users are never mutated
    or deleted once registered.
    """

    def __init__(
        self,
        hasher: PasswordHasher,
        identifiers: IdentifierGenerator,
        id_length: int = 6,
        max_retries: int = 5
    ):
        self.hasher = hasher
        self.identifiers = identifiers
        self.id_length = id_length
        self.max_retries = max_retries
        self._users: Dict[str, User] = {}

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    def __len__(self) -> int:
        return len(self._users)

    def get(self, user_id: Optional[str]) -> Optional[User]:
        if not user_id:
            return None
        return self._users.get(user_id)

    def find_by_email(self, email: Optional[str]) -> Optional[User]:
        """Linear scan by email; None for unknown or empty email"""
        if not email:
            return None
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def create(self, email: str, password: str) -> User:
        """
        Register a new user.

        All validation (and hashing) happens before the directory is touched,
        so a rejected registration leaves no trace.

        Raises:
            ValidationError: empty email/password, or email already registered
        """
        if not email:
            raise ValidationError("Email is required")
        if not password:
            raise ValidationError("Password is required")
        if self.find_by_email(email) is not None:
            raise ValidationError("Email is already registered")

        password_hash = self.hasher.hash(password)
        user_id = self.identifiers.generate_unique(self.id_length, self._users, self.max_retries)

        user = User(id=user_id, email=email, password_hash=password_hash)
        self._users[user_id] = user
        logger.info("Registered user %s", user_id)
        return user

    def authenticate(self, email: str, password: str) -> User:
        """
        Resolve login credentials to a user.

        Raises:
            InvalidCredentials: unknown email or wrong password
        """
        user = self.find_by_email(email)
        if user is None or not password or not self.hasher.verify(password, user.password_hash):
            logger.warning("Rejected login attempt for %r", email)
            raise InvalidCredentials()
        logger.info("User %s logged in", user.id)
        return user
