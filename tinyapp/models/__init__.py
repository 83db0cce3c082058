"""
In-memory records for TinyApp.

Nothing here is persisted: the directories in `tinyapp.services` own these
objects for the lifetime of the process.
"""

from .session import SessionState
from .url import ShortUrl, Visit
from .user import User

__all__ = ["SessionState", "ShortUrl", "User", "Visit"]
