"""Password hashing strategies."""

from __future__ import annotations

import bcrypt

from auth_backend.domain.users.repositories import PasswordHasher

# bcrypt ignores (or rejects, depending on version) input past this many bytes.
BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    SALT_ROUNDS = 10

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.SALT_ROUNDS)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("ascii"))
        except (ValueError, TypeError):
            return False
