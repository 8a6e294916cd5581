from typing import Dict, List

from app.core.config import settings
from app.db.Connection.database import JSONStore
from app.db import repository
from app.schemas.URLListResponse import URLListItem

NO_REFERRER = "None"


def top_referrer(referrers: Dict[str, int]) -> str:
    """Referrer with the most hits; the first one seen wins a tie."""
    if not referrers:
        return NO_REFERRER
    return max(referrers.items(), key=lambda item: item[1])[0]


class URL:
    def get_all(store: JSONStore) -> List[URLListItem]:
        with store.reading():
            items = [
                URLListItem(
                    short_code=u.short_code,
                    original=u.original,
                    short_url=f"{settings.BASE_URL}/{u.short_code}",
                    created=u.created,
                    clicks=s.clicks,
                ) for u, s in repository.list_with_stats(store)
            ]
        # sort() is stable, so equal click counts keep insertion order
        items.sort(key=lambda item: item.clicks, reverse=True)
        return items
