from __future__ import annotations

import hmac
import logging
from enum import Enum


logger = logging.getLogger(__name__)


class Role(str, Enum):
    client = "client"
    staff = "staff"


def authenticate(role: str, secret: str | None, client_secret: str, staff_secret: str) -> bool:
    """Fixed shared-secret check per role. Unknown roles never authenticate."""
    expected = {
        Role.client.value: client_secret,
        Role.staff.value: staff_secret,
    }.get(role)
    if expected is None or secret is None:
        logger.warning("Authentication rejected", extra={"reason": "unknown_role_or_missing_secret"})
        return False

    if not hmac.compare_digest(expected.encode("utf-8"), secret.encode("utf-8")):
        logger.warning("Authentication rejected", extra={"reason": "bad_secret"})
        return False
    return True
