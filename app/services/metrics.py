from app.core.exceptions import NotFoundError
from app.db.Connection.database import JSONStore
from app.db import repository
from app.db.Models.models import URLRecord, utcnow
import logging

logger = logging.getLogger(__name__)

DIRECT_REFERRER = "Direct"


def referrer_from_headers(headers) -> str:
    return headers.get("referer") or headers.get("referrer") or DIRECT_REFERRER


def record_click(store: JSONStore, short_code: str, referrer: str = DIRECT_REFERRER) -> URLRecord:
    with store.transaction():
        url_item = repository.get_url_by_short_code(store, short_code)
        if url_item is None:
            raise NotFoundError(short_code)
        stats = repository.increment_click(store, short_code, referrer, utcnow())
        logger.info("metrics.record_click: %s clicks=%d referrer=%s", short_code, stats.clicks, referrer)
        return url_item
