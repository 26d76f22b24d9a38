"""
Caller identity for the callable endpoints.

Tokens are issued and verified by the external identity provider in front
of this service; the handlers only need to know whether a caller identity
was presented.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Header

BEARER_PREFIX = "bearer "


@dataclass(frozen=True)
class AuthContext:
    token: Optional[str] = None

    @property
    def authenticated(self) -> bool:
        return bool(self.token)


def get_auth_context(authorization: Optional[str] = Header(None)) -> AuthContext:
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return AuthContext()
    token = authorization[len(BEARER_PREFIX):].strip()
    return AuthContext(token=token or None)
