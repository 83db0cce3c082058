"""
Core TinyApp logic, independent of the HTTP layer.
"""

from .auth import AuthGate, FailureMode, OwnedUrl, OwnershipGuard
from .identifiers import ALPHABET, IdentifierGenerator
from .url_directory import UrlDirectory
from .user_directory import UserDirectory

__all__ = [
    "ALPHABET",
    "AuthGate",
    "FailureMode",
    "IdentifierGenerator",
    "OwnedUrl",
    "OwnershipGuard",
    "UrlDirectory",
    "UserDirectory",
]
