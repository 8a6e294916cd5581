from datetime import datetime, timedelta, timezone

import pytest

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.db import repository
from app.services.Analytics import top_referrer
from app.services.shortener import URLService
from app.utils import encoding
from app.utils.validators import is_absolute_uri


def test_generated_code_alphabet():
    for _ in range(50):
        code = encoding.generate_short_code()
        assert len(code) == 7
        assert encoding.is_valid_custom_code(code)


def test_generated_code_collision_retries(store, monkeypatch):
    """Test that a colliding generated code is regenerated."""
    URLService.create_short_url(store, "https://example.com/a", "AAAAAAA")
    codes = iter(["AAAAAAA", "AAAAAAA", "BBBBBBB"])
    monkeypatch.setattr(repository, "generate_short_code", lambda: next(codes))

    url_item = URLService.create_short_url(store, "https://example.com/b")
    assert url_item.short_code == "BBBBBBB"
    assert store.urls["AAAAAAA"].original == "https://example.com/a"


def test_generated_code_collision_gives_up(store, monkeypatch):
    URLService.create_short_url(store, "https://example.com/a", "AAAAAAA")
    monkeypatch.setattr(repository, "generate_short_code", lambda: "AAAAAAA")

    with pytest.raises(ConflictError):
        URLService.create_short_url(store, "https://example.com/b")
    assert len(store.urls) == 1


def test_conflict_checked_before_format(store):
    """Test that a taken code reports a conflict even if the request is otherwise bad."""
    URLService.create_short_url(store, "https://example.com/a", "promo")
    with pytest.raises(ConflictError) as exc_info:
        URLService.create_short_url(store, "https://example.com/b", "promo")
    assert exc_info.value.suggestion.startswith("promo-")


def test_invalid_url_raises_validation_error(store):
    with pytest.raises(ValidationError):
        URLService.create_short_url(store, None)
    with pytest.raises(ValidationError):
        URLService.create_short_url(store, "example.com/no-scheme")
    assert store.urls == {}


def test_unknown_codes_raise_not_found(store):
    with pytest.raises(NotFoundError):
        URLService.resolve(store, "missing")
    with pytest.raises(NotFoundError):
        URLService.get_url_stats(store, "missing")
    with pytest.raises(NotFoundError):
        URLService.delete_url(store, "missing")


def test_cleanup_boundaries(store):
    """Test the cutoff against a fixed clock."""
    now = datetime(2026, 6, 1, tzinfo=timezone.utc)
    for code, created, accessed in [
        ("old", now - timedelta(days=120), now - timedelta(days=91)),
        ("warm", now - timedelta(days=120), now - timedelta(days=89)),
        ("unused", now - timedelta(days=91), None),
    ]:
        URLService.create_short_url(store, f"https://example.com/{code}", code)
        store.urls[code] = store.urls[code].model_copy(update={"created": created})
        store.stats[code].last_access = accessed

    removed, cutoff = URLService.cleanup(store, 90, now=now)

    assert removed == 2
    assert cutoff == now - timedelta(days=90)
    assert set(store.urls) == {"warm"}


def test_stats_are_a_snapshot(store):
    URLService.create_short_url(store, "https://example.com/snap", "snap")
    _, stats = URLService.get_url_stats(store, "snap")
    URLService.resolve(store, "snap")
    assert stats.clicks == 0


@pytest.mark.parametrize("referrers, expected", [
    ({}, "None"),
    ({"Direct": 1}, "Direct"),
    ({"a": 1, "b": 3, "c": 2}, "b"),
    ({"first": 2, "second": 2}, "first"),
])
def test_top_referrer(referrers, expected):
    assert top_referrer(referrers) == expected


@pytest.mark.parametrize("url, valid", [
    ("https://example.com/a/b", True),
    ("http://localhost:3000/x?y=1", True),
    ("mailto:someone@example.com", True),
    ("ftp://files.example.com/pub", True),
    ("not-a-url", False),
    ("http://", False),
    ("https://bad host.com", False),
    ("http://example.com:notaport/", False),
    ("https://example.com/a%20b%2F", True),
    ("https://example.com/%zz", False),
    ("https://example.com/50%", False),
    ("https://example.com/%4", False),
    ("https://example.com/caf\u00e9", False),
    ("https://example.com/a\\b", False),
    ("", False),
])
def test_is_absolute_uri(url, valid):
    assert is_absolute_uri(url) is valid


def test_cleanup_threshold_out_of_range(store):
    URLService.create_short_url(store, "https://example.com/keep", "keep")
    with pytest.raises(ValidationError):
        URLService.cleanup(store, 1000000)
    assert "keep" in store.urls
