from datetime import datetime, timedelta
from typing import Optional, Tuple
import logging

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.db.Connection.database import JSONStore
from app.db.Models.models import StatsRecord, URLRecord, utcnow
from app.db import repository
from app.services import metrics
from app.utils.encoding import is_valid_custom_code, suggest_alternative
from app.utils.validators import is_absolute_uri


logger = logging.getLogger(__name__)


class URLService:

    @staticmethod
    def validate_url(original_url: Optional[str]) -> str:
        if not original_url:
            raise ValidationError("URL is required")
        if not is_absolute_uri(original_url):
            raise ValidationError("Invalid URL")
        return original_url

    @staticmethod
    def validate_custom_code(store: JSONStore, custom_code: Optional[str]):
        if not custom_code:
            return None
        if repository.get_url_by_short_code(store, custom_code):
            logger.warning(f"Custom code collision: '{custom_code}'")
            raise ConflictError(
                "Custom code is already in use",
                suggestion=suggest_alternative(custom_code),
            )
        if not is_valid_custom_code(custom_code):
            raise ValidationError("Custom code may only contain letters, numbers, _ and -")
        return custom_code

    @staticmethod
    def create_short_url(store: JSONStore, original_url: Optional[str], custom_code: Optional[str] = None) -> URLRecord:
        original_url = URLService.validate_url(original_url)

        with store.transaction():
            code = URLService.validate_custom_code(store, custom_code)
            url_item = repository.create_url(store, code, original_url)

        logger.info("Created short code '%s' for URL: %s", url_item.short_code, original_url[:50])
        return url_item

    @staticmethod
    def resolve(store: JSONStore, short_code: str, referrer: str = metrics.DIRECT_REFERRER) -> URLRecord:
        """Look up a code for redirecting and count the visit."""
        return metrics.record_click(store, short_code, referrer)

    @staticmethod
    def get_url_stats(store: JSONStore, short_code: str) -> Tuple[URLRecord, StatsRecord]:
        with store.reading():
            url_item = repository.get_url_by_short_code(store, short_code)
            if url_item is None:
                raise NotFoundError(short_code)
            stats = repository.get_stats(store, short_code)
            return url_item, stats.model_copy(deep=True)

    @staticmethod
    def delete_url(store: JSONStore, short_code: str) -> None:
        with store.transaction():
            if not repository.delete_url(store, short_code):
                raise NotFoundError(short_code)
        logger.info("Deleted short code '%s'", short_code)

    @staticmethod
    def cleanup(store: JSONStore, days: int, now: Optional[datetime] = None) -> Tuple[int, datetime]:
        try:
            cutoff = (now or utcnow()) - timedelta(days=days)
        except OverflowError:
            raise ValidationError(f"Cleanup threshold of {days} days is out of range")
        with store.transaction():
            removed = repository.delete_idle_since(store, cutoff)
        logger.info("Cleanup removed %d URLs idle since before %s", len(removed), cutoff.isoformat())
        return len(removed), cutoff
