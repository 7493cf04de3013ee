from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from userauth.domain.users.entities import User
from userauth.domain.users.exceptions import NotAuthenticatedError


class CredentialsRequestDTO(BaseModel):
    """Body of both ``POST /users`` and ``POST /sessions``."""

    email: str = ""
    password: str = Field(default="", repr=False)

    model_config = ConfigDict(extra="ignore", strict=True)


class UserCreatedDTO(BaseModel):
    email: str
    encrypted_password: str

    @classmethod
    def from_user(cls, user: User) -> UserCreatedDTO:
        return cls(email=user.email, encrypted_password=user.encrypted_password)


class UserProfileDTO(BaseModel):
    id: int
    email: str

    @classmethod
    def from_user(cls, user: User) -> UserProfileDTO:
        if user.id is None:
            raise NotAuthenticatedError(context={"reason": "unsaved_user"})
        return cls(id=user.id, email=user.email)
