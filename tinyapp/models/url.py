from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Visit:
    """One traversal of a short link"""
    timestamp: datetime
    visitor_id: str


@dataclass
class ShortUrl:
    """
    Short code -> long URL mapping with its visit analytics.

    Analytics live on the record itself:
    - visits: every redirect, in order
    - unique_visitors: each visitor id once, in first-seen order
    """
    code: str
    long_url: str
    owner_id: str
    created_at: datetime
    visits: List[Visit] = field(default_factory=list)
    unique_visitors: List[str] = field(default_factory=list)

    @property
    def visit_count(self) -> int:
        return len(self.visits)

    @property
    def unique_visitor_count(self) -> int:
        return len(self.unique_visitors)

    @property
    def last_visited(self) -> Optional[datetime]:
        return self.visits[-1].timestamp if self.visits else None
