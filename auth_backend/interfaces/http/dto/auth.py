from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, StrictStr

from auth_backend.domain.users.entities import Identity, PublicUser


class RegisterRequestDTO(BaseModel):
    # Presence, length and format rules live in the register use case.
    email: StrictStr | None = None
    password: StrictStr | None = None


class LoginRequestDTO(BaseModel):
    email: StrictStr = Field(max_length=320)
    password: StrictStr = Field(max_length=1024)  # No strength check on login


class LogoutRequestDTO(BaseModel):
    email: StrictStr | None = None


class PublicUserDTO(BaseModel):
    id: str
    email: str
    created_at: datetime = Field(serialization_alias="createdAt")

    @classmethod
    def from_domain(cls, user: PublicUser) -> PublicUserDTO:
        return cls(id=user.id, email=user.email, created_at=user.created_at)


class AccessTokenDTO(BaseModel):
    access_token: str


class ProfileDTO(BaseModel):
    user_id: str = Field(serialization_alias="userId")
    email: str

    @classmethod
    def from_identity(cls, identity: Identity) -> ProfileDTO:
        return cls(user_id=identity.user_id, email=identity.email)


class MessageDTO(BaseModel):
    message: str
