"""
Storage interface the screens load their data through
"""
from datetime import datetime
from typing import Optional, Protocol, Sequence


class Record(Protocol):
    """What list screens read from a stored row"""

    id: str
    name: str
    description: Optional[str]
    created: Optional[datetime]


class DataPort(Protocol):
    async def list_records(self, page: int, page_size: int) -> Sequence[Record]:
        """Fetch one page of records. Raises database.DataError on failure."""
        ...
