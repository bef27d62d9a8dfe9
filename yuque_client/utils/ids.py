"""ID helpers."""

from __future__ import annotations

import secrets
import string

_SLUG_ALPHABET = string.ascii_letters + string.digits


def gen_random_slug(length: int) -> str:
    """Generate a random alphanumeric slug of ``length`` characters."""
    return "".join(secrets.choice(_SLUG_ALPHABET) for _ in range(length))
