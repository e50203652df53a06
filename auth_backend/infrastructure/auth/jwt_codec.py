"""JWT token codec.

Signs and verifies the stateless access tokens handed out on login.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt

from auth_backend.domain.users.entities import TokenClaims
from auth_backend.domain.users.exceptions import InvalidTokenError
from auth_backend.domain.users.repositories import TokenCodec


class JwtTokenCodec(TokenCodec):
    """HS256 codec for ``{sub, email, iat, exp}`` tokens.

    Examples
    --------
    >>> codec = JwtTokenCodec(secret_key="change-me")
    >>> token = codec.issue(user_id, "user@example.com")
    >>> codec.verify(token).email
    'user@example.com'
    """

    DEFAULT_EXPIRES_IN = timedelta(hours=1)
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        expires_in: timedelta = DEFAULT_EXPIRES_IN,
    ) -> None:
        """Initialize the codec.

        Parameters
        ----------
        secret_key
            Secret used to sign and verify tokens.
        expires_in
            Lifetime of issued tokens (default one hour).
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expires_in = expires_in

    @property
    def expires_in(self) -> timedelta:
        return self._expires_in

    def issue(
        self,
        subject: str,
        email: str,
        *,
        expires_in: timedelta | None = None,
    ) -> str:
        """Sign a token for ``subject``.

        Parameters
        ----------
        subject
            The user id, stored as ``sub``.
        email
            The user's normalized email.
        expires_in
            Override of the configured lifetime.

        Returns
        -------
        The encoded JWT string
        """
        now = datetime.now(tz=UTC)
        payload = {
            "sub": subject,
            "email": email,
            "iat": now,
            "exp": now + (expires_in if expires_in is not None else self._expires_in),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """Verify signature and expiry, then decode.

        Raises
        ------
        InvalidTokenError
            If the token is expired, tampered with, or lacks required claims.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp", "iat"]},
            )
            return TokenClaims(
                user_id=str(payload["sub"]),
                email=str(payload["email"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError(message="Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError() from e
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError(message="Malformed token payload") from e
