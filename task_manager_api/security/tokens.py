# task_manager_api/security/tokens.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from task_manager_api.exceptions import AuthenticationError


class TokenService:
    """
    Issues and verifies signed bearer tokens (JWT).

    The token carries the user id as ``sub`` and expires ``expires_in``
    after issue. Verification failures of any kind (bad signature,
    expired, malformed, missing ``sub``) surface as ``AuthenticationError``.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(hours=24),
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self.expires_in = expires_in

    def issue(self, user_id: str, *, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """
        Return the user id embedded in ``token``.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired") from None
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid token") from None

        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            raise AuthenticationError("Invalid token")
        return user_id


def build_token_service(secret: str, algorithm: str, expires_hours: int) -> TokenService:
    return TokenService(secret=secret, algorithm=algorithm, expires_in=timedelta(hours=expires_hours))


__all__ = ["TokenService", "build_token_service"]
