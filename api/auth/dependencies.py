"""
Auth dependencies for the admin route group.
"""

from __future__ import annotations

import logging

from fastapi import Depends, Header, HTTPException, status

from core.config import Settings, get_settings

from . import security

logger = logging.getLogger(__name__)


async def require_admin_key(
    x_admin_key: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    try:
        security.verify_admin_key(x_admin_key, settings.admin_secret_key)
    except security.MissingAdminKey as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc
    except security.InvalidAdminKey as exc:
        logger.warning("admin_key_rejected")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(exc),
        ) from exc
