# re-export common schemas for simpler imports
from .URLCreateRequest import URLCreateRequest
from .URLInfoResponse import URLInfoResponse
from .URLStatsResponse import Statistics, URLStatsResponse
from .URLListResponse import URLListItem, URLListResponse
from .ActionResponse import CleanupResponse, DeleteResponse

__all__ = [
    "URLCreateRequest",
    "URLInfoResponse",
    "Statistics",
    "URLStatsResponse",
    "URLListItem",
    "URLListResponse",
    "DeleteResponse",
    "CleanupResponse",
]
