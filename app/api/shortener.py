from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
import logging

from app.core.config import settings
from app.db.Connection.database import JSONStore, get_store
from app.schemas.URLCreateRequest import URLCreateRequest
from app.schemas.URLInfoResponse import URLInfoResponse
from app.services.shortener import URLService
from app.services import metrics

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", tags=["index"])
def index():
    return {
        "message": f"{settings.PROJECT_NAME} API",
        "version": settings.VERSION,
        "endpoints": {
            "POST /api/shorten": "Shorten a URL",
            "GET /:shortCode": "Redirect to the original URL",
            "GET /api/stats/:shortCode": "Get statistics for a short URL",
            "GET /api/list": "List all URLs",
            "DELETE /api/delete/:shortCode": "Delete a URL",
            "POST /api/cleanup": f"Remove URLs idle for more than {settings.CLEANUP_DAYS} days",
        },
        "examples": {
            "shorten": {
                "method": "POST",
                "endpoint": "/api/shorten",
                "body": {
                    "url": "https://www.example.com/very/long/url",
                    "customCode": "optional-custom-code",
                },
            }
        },
    }


@router.post("/api/shorten", response_model=URLInfoResponse, status_code=status.HTTP_201_CREATED)
def shorten_url_endpoint(url_request: URLCreateRequest, store: JSONStore = Depends(get_store)):
    url_item = URLService.create_short_url(store, url_request.url, url_request.custom_code)

    logger.info(f"API success: Shortened {url_item.original[:50]}... to {url_item.short_code}")
    return URLInfoResponse(
        original=url_item.original,
        short_url=f"{settings.BASE_URL}/{url_item.short_code}",
        short_code=url_item.short_code,
        created=url_item.created,
    )


@router.get("/{short_code}", tags=["redirect"])
def redirect_to_url_endpoint(short_code: str, request: Request, store: JSONStore = Depends(get_store)):
    referrer = metrics.referrer_from_headers(request.headers)
    url_item = URLService.resolve(store, short_code, referrer)
    return RedirectResponse(url=url_item.original, status_code=status.HTTP_302_FOUND)
