import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from tinyapp.errors import NotFound, ValidationError
from tinyapp.models.url import ShortUrl, Visit
from tinyapp.services.identifiers import IdentifierGenerator
from tinyapp.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UrlDirectory:
    """
    In-memory mapping of short code -> ShortUrl.

    Ownership is NOT checked here: update/delete assume the caller already
    went through the OwnershipGuard.
    """

    def __init__(
        self,
        users: UserDirectory,
        identifiers: IdentifierGenerator,
        code_length: int = 6,
        max_retries: int = 5,
        clock: Callable[[], datetime] = utcnow
    ):
        self.users = users
        self.identifiers = identifiers
        self.code_length = code_length
        self.max_retries = max_retries
        self.clock = clock
        self._urls: Dict[str, ShortUrl] = {}

    def __contains__(self, code: object) -> bool:
        return code in self._urls

    def __len__(self) -> int:
        return len(self._urls)

    def create(self, long_url: str, owner_id: str) -> ShortUrl:
        """
        Create a new short URL owned by `owner_id`.

        Raises:
            ValidationError: empty long_url, or owner not in the user directory
        """
        if not long_url:
            raise ValidationError("Long URL is required")
        if owner_id not in self.users:
            raise ValidationError(f"Unknown owner: {owner_id}")

        code = self.identifiers.generate_unique(self.code_length, self._urls, self.max_retries)
        record = ShortUrl(
            code=code,
            long_url=long_url,
            owner_id=owner_id,
            created_at=self.clock()
        )
        self._urls[code] = record
        logger.info("Created short URL %s for user %s", code, owner_id)
        return record

    def get(self, code: str) -> Optional[ShortUrl]:
        return self._urls.get(code)

    def update(self, code: str, new_long_url: str) -> ShortUrl:
        """Replace the long URL in place"""
        record = self._urls.get(code)
        if record is None:
            raise NotFound()
        if not new_long_url:
            raise ValidationError("Long URL is required")

        record.long_url = new_long_url
        logger.info("Updated short URL %s", code)
        return record

    def delete(self, code: str) -> ShortUrl:
        """Remove a record and return it"""
        record = self._urls.pop(code, None)
        if record is None:
            raise NotFound()
        logger.info("Deleted short URL %s", code)
        return record

    def list_for_owner(self, owner_id: str) -> Dict[str, ShortUrl]:
        """Records owned by `owner_id`, in directory order"""
        return {
            code: record
            for code, record in self._urls.items()
            if record.owner_id == owner_id
        }

    def record_visit(self, code: str, visitor_id: str) -> Optional[Visit]:
        """
        Append a visit to the record's log.

        No-op returning None when the code does not exist; redirect callers
        check existence themselves first.
        """
        record = self._urls.get(code)
        if record is None:
            return None

        visit = Visit(timestamp=self.clock(), visitor_id=visitor_id)
        record.visits.append(visit)
        if visitor_id not in record.unique_visitors:
            record.unique_visitors.append(visitor_id)
        logger.debug("Recorded visit to %s by %s", code, visitor_id)
        return visit
