from datetime import datetime
from typing import List, Optional, Tuple
import logging

from app.core.exceptions import ConflictError
from app.db.Connection.database import JSONStore
from app.db.Models.models import StatsRecord, URLRecord
from app.utils.encoding import generate_short_code

logger = logging.getLogger(__name__)

MAX_GENERATE_RETRIES = 5


def get_url_by_short_code(store: JSONStore, short_code: str) -> Optional[URLRecord]:
    return store.urls.get(short_code)


def get_stats(store: JSONStore, short_code: str) -> Optional[StatsRecord]:
    return store.stats.get(short_code)


def _insert_pair(store: JSONStore, short_code: str, original_url: str) -> URLRecord:
    url_item = URLRecord(original=original_url, short_code=short_code)
    store.urls[short_code] = url_item
    store.stats[short_code] = StatsRecord()
    return url_item


def _create_and_generate_code(store: JSONStore, original_url: str) -> URLRecord:
    for attempt in range(MAX_GENERATE_RETRIES):
        short_code = generate_short_code()
        if short_code not in store.urls:
            return _insert_pair(store, short_code, original_url)
        logger.info(f"Short code collision on attempt {attempt + 1}/{MAX_GENERATE_RETRIES}")

    raise ConflictError(f"Failed to generate unique short code after {MAX_GENERATE_RETRIES} attempts")


def create_url(store: JSONStore, short_code: Optional[str], original_url: str) -> URLRecord:
    """Insert a URL/stats pair. Caller holds the store transaction and has
    already checked that a custom ``short_code`` is free."""
    if short_code:
        return _insert_pair(store, short_code, original_url)
    return _create_and_generate_code(store, original_url)


def increment_click(store: JSONStore, short_code: str, referrer: str, when: datetime) -> Optional[StatsRecord]:
    stats = store.stats.get(short_code)
    if stats is None:
        return None
    stats.clicks += 1
    stats.last_access = when
    stats.referrers[referrer] = stats.referrers.get(referrer, 0) + 1
    return stats


def delete_url(store: JSONStore, short_code: str) -> bool:
    if short_code not in store.urls:
        return False
    del store.urls[short_code]
    store.stats.pop(short_code, None)
    return True


def list_with_stats(store: JSONStore) -> List[Tuple[URLRecord, StatsRecord]]:
    return [(url_item, store.stats[code]) for code, url_item in store.urls.items()]


def delete_idle_since(store: JSONStore, cutoff: datetime) -> List[str]:
    """Remove every pair whose last activity predates ``cutoff``.

    Last activity is the last access, or the creation time for never-visited codes.
    """
    removed = []
    for code, stats in list(store.stats.items()):
        url_item = store.urls[code]
        last_activity = stats.last_access or url_item.created
        if last_activity < cutoff:
            delete_url(store, code)
            removed.append(code)
    return removed
