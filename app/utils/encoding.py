import re
import secrets
import string

# URL-safe alphabet: letters, digits, "_" and "-"
ALPHABET = string.ascii_letters + string.digits + "_-"
SHORT_CODE_LENGTH = 7
SUGGESTION_SUFFIX_LENGTH = 3

CUSTOM_CODE_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def generate_short_code(length: int = SHORT_CODE_LENGTH) -> str:
    """Generate a cryptographically secure random code from the URL-safe alphabet."""
    return ''.join(secrets.choice(ALPHABET) for _ in range(length))


def is_valid_custom_code(code: str) -> bool:
    return bool(CUSTOM_CODE_PATTERN.match(code))


def suggest_alternative(code: str) -> str:
    """Propose a free-looking variant of a taken custom code, e.g. ``promo-x_3``."""
    return f"{code}-{generate_short_code(SUGGESTION_SUFFIX_LENGTH)}"
