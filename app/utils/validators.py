import re

from pydantic import AnyUrl, TypeAdapter, ValidationError

# RFC 3986 unreserved, reserved and "%" characters
URI_CHARACTERS = re.compile(r"^[A-Za-z0-9:/?#\[\]@!$&'()*+,;=.\-_~%]+$")
INCOMPLETE_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

_any_url = TypeAdapter(AnyUrl)


def is_absolute_uri(url: str) -> bool:
    """Check that ``url`` is a well-formed absolute URI.

    Only RFC 3986 characters and complete ``%XX`` escapes are allowed, so the
    stored string can be sent back verbatim in a ``Location`` header.
    """
    if not url or not isinstance(url, str):
        return False
    if not URI_CHARACTERS.match(url) or INCOMPLETE_ESCAPE.search(url):
        return False

    try:
        _any_url.validate_python(url)
    except ValidationError:
        return False
    return True
