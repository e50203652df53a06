# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC

from sqlalchemy.exc import IntegrityError

from auth_backend.domain.users.entities import User as DomainUser
from auth_backend.domain.users.exceptions import UserAlreadyExistsError
from auth_backend.domain.users.repositories import UserRepository
from auth_backend.infrastructure.db.models import User
from auth_backend.infrastructure.db.session import SessionFactory, session_scope


def _to_domain(row: User) -> DomainUser:
    created_at = row.created_at
    # SQLite hands back naive datetimes even for timezone-aware columns.
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return DomainUser(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        created_at=created_at,
        current_session_token=row.current_session_token,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with session_scope(self._session_factory) as session:
            row = session.query(User).filter(User.email == email).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: str) -> DomainUser | None:
        with session_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope(self._session_factory) as session:
                row = User(
                    id=user.id,
                    email=user.email,
                    password_hash=user.password_hash,
                    current_session_token=user.current_session_token,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                persisted = _to_domain(row)
        except IntegrityError as exc:
            # Only the unique email index can collide; ids are fresh UUIDs.
            raise UserAlreadyExistsError() from exc
        return persisted

    def set_session_token(self, user_id: str, token: str | None) -> None:
        with session_scope(self._session_factory) as session:
            updated = (
                session.query(User)
                .filter(User.id == user_id)
                .update({User.current_session_token: token}, synchronize_session=False)
            )
            if updated == 0:
                raise LookupError(f"user {user_id} not found")
