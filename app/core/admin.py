import logging

from fastapi import HTTPException, Query, Request

from app.core.config import settings

logger = logging.getLogger(__name__)


async def _caller(request: Request, query_user: str | None) -> str | None:
    """The `user` named by the request.

    A JSON body is authoritative, with or without a `user` key. The query
    parameter only counts when the request has no body at all.
    """
    if not await request.body():
        return query_user
    try:
        payload = await request.json()
    except ValueError:
        return None
    if isinstance(payload, dict):
        return payload.get("user")
    return None


async def require_admin(request: Request, user: str | None = Query(None)) -> str:
    """Allow the request only when its `user` field names the admin."""
    caller = await _caller(request, user)
    if caller != settings.admin_username:
        logger.warning("admin access denied", extra={"user": caller, "path": request.url.path})
        raise HTTPException(status_code=403, detail="Forbidden: Admin access required.")
    return caller
