"""
Admin key helpers.
"""

from __future__ import annotations

import secrets


class AdminKeyError(RuntimeError):
    pass


class MissingAdminKey(AdminKeyError):
    pass


class InvalidAdminKey(AdminKeyError):
    pass


def verify_admin_key(presented: str | None, expected: str) -> None:
    """
    Raise unless `presented` matches the configured admin secret.
    """
    raw = (presented or "").strip()
    secret = expected.strip()
    if not raw:
        raise MissingAdminKey("Missing X-Admin-Key header.")

    # Constant-time comparison; the secret is a plain shared string.
    if not secrets.compare_digest(raw.encode("utf-8"), secret.encode("utf-8")):
        raise InvalidAdminKey("Forbidden: Admin access required.")
