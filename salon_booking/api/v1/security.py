from __future__ import annotations

from typing import Callable

from fastapi import Header, HTTPException

from salon_booking.core.config import settings
from salon_booking.infrastructure.auth.credentials import Role, authenticate


def require_role(role: Role) -> Callable[..., Role]:
    def dependency(x_access_secret: str | None = Header(None, alias="X-Access-Secret")) -> Role:
        if not authenticate(role.value, x_access_secret, settings.CLIENT_SECRET, settings.STAFF_SECRET):
            raise HTTPException(status_code=401, detail="Invalid credentials")
        return role

    return dependency
