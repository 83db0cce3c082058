"""
Process-wide application state.

Built once at startup (see `tinyapp.dependencies.get_state`) and handed to
every service; nothing in the core reaches for module-level globals. Tests
build their own instance per test.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from tinyapp.config import Settings, settings as default_settings
from tinyapp.security.passwords import BcryptPasswordHasher, PasswordHasher
from tinyapp.services.auth import AuthGate, OwnershipGuard
from tinyapp.services.identifiers import IdentifierGenerator
from tinyapp.services.url_directory import UrlDirectory, utcnow
from tinyapp.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)


class AppState:
    """Owns the user and URL directories plus the auth components built on them"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        hasher: Optional[PasswordHasher] = None,
        identifiers: Optional[IdentifierGenerator] = None,
        clock: Callable[[], datetime] = utcnow
    ):
        self.settings = settings or default_settings
        self.identifiers = identifiers or IdentifierGenerator()
        self.hasher = hasher or BcryptPasswordHasher(rounds=self.settings.bcrypt_rounds)

        self.users = UserDirectory(
            hasher=self.hasher,
            identifiers=self.identifiers,
            id_length=self.settings.user_id_length,
            max_retries=self.settings.max_retries
        )
        self.urls = UrlDirectory(
            users=self.users,
            identifiers=self.identifiers,
            code_length=self.settings.short_code_length,
            max_retries=self.settings.max_retries,
            clock=clock
        )
        self.gate = AuthGate(self.users)
        self.guard = OwnershipGuard(self.gate, self.urls, self.users)

        logger.debug("Application state initialized")

    def new_visitor_id(self) -> str:
        return self.identifiers.generate(self.settings.visitor_id_length)
