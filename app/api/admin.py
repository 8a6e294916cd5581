from fastapi import APIRouter, Depends, Query
import logging

from app.core.config import settings
from app.db.Connection.database import JSONStore, get_store
from app.schemas.ActionResponse import CleanupResponse, DeleteResponse
from app.schemas.URLListResponse import URLListResponse
from app.schemas.URLStatsResponse import Statistics, URLStatsResponse
from app.services.Analytics import URL, top_referrer
from app.services.shortener import URLService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["admin"])

MAX_CLEANUP_DAYS = 36500


@router.get("/stats/{short_code}", response_model=URLStatsResponse)
def get_url_statistics_endpoint(short_code: str, store: JSONStore = Depends(get_store)):
    url_item, stats = URLService.get_url_stats(store, short_code)
    return URLStatsResponse(
        short_code=url_item.short_code,
        original=url_item.original,
        short_url=f"{settings.BASE_URL}/{url_item.short_code}",
        created=url_item.created,
        statistics=Statistics(
            total_clicks=stats.clicks,
            last_access=stats.last_access,
            referrers=stats.referrers,
            top_referrer=top_referrer(stats.referrers),
        ),
    )


@router.get("/list", response_model=URLListResponse)
def list_urls_endpoint(store: JSONStore = Depends(get_store)):
    urls = URL.get_all(store)
    return URLListResponse(total=len(urls), urls=urls)


@router.delete("/delete/{short_code}", response_model=DeleteResponse)
def delete_url_endpoint(short_code: str, store: JSONStore = Depends(get_store)):
    URLService.delete_url(store, short_code)
    return DeleteResponse(message="URL deleted successfully", short_code=short_code)


@router.post("/cleanup", response_model=CleanupResponse)
def cleanup_endpoint(
    days: int = Query(settings.CLEANUP_DAYS, ge=0, le=MAX_CLEANUP_DAYS),
    store: JSONStore = Depends(get_store),
):
    deleted, cutoff = URLService.cleanup(store, days)
    logger.info(f"Admin cleanup: threshold={days} days, removed={deleted}")
    return CleanupResponse(
        message=f"{deleted} old URLs were removed",
        deleted=deleted,
        cutoff_date=cutoff,
    )
