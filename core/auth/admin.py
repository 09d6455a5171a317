"""Admin API key validation."""
import hmac
import os
from fastapi import Header, HTTPException

from core.errors import ERROR_ADMIN_KEY_MISSING, ERROR_ADMIN_REQUIRED


async def verify_admin(
    authorization: str = Header(None, alias="Authorization")
):
    """
    Verify ADMIN_API_KEY for catalog management endpoints.

    Expects ``Authorization: Bearer <ADMIN_API_KEY>``.
    """
    admin_key = os.environ.get("ADMIN_API_KEY", "")

    if not admin_key:
        raise HTTPException(status_code=500, detail=ERROR_ADMIN_KEY_MISSING)

    if not authorization or not hmac.compare_digest(
        authorization.encode(), f"Bearer {admin_key}".encode()
    ):
        raise HTTPException(status_code=403, detail=ERROR_ADMIN_REQUIRED)

    return True
