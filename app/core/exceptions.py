from typing import Any, Dict, Optional


class ShortenerError(Exception):
    """Base for errors that map onto a JSON error response."""

    status_code = 400

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, **self.extra}


class ValidationError(ShortenerError):
    status_code = 400


class ConflictError(ShortenerError):
    status_code = 400

    def __init__(self, message: str, suggestion: Optional[str] = None):
        super().__init__(message, {"suggestion": suggestion} if suggestion else None)
        self.suggestion = suggestion


class NotFoundError(ShortenerError):
    status_code = 404

    def __init__(self, short_code: str, message: str = "URL not found"):
        super().__init__(message, {"shortCode": short_code})
        self.short_code = short_code


class PersistenceError(Exception):
    """Reading or writing the backing JSON file failed."""
