from pydantic import Field, field_validator

from teamboard.models.base import ApiModel, DocumentModel


class User(DocumentModel):
    """Persisted user identity. Never returned from the API directly (see ``UserPublic``)."""

    name: str
    email: str
    password_hash: str
    role: str = "member"


class UserPublic(ApiModel):
    """User fields safe to expose: used for token responses and populated references."""

    id: str
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserPublic":
        return cls(id=user.id, name=user.name, email=user.email)


def _normalize_email(value: str) -> str:
    return value.strip().lower()


class SignupPayload(ApiModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, pattern=r"^\s*[^\s@]+@[^\s@]+\.[^\s@]+\s*$")
    password: str = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def _normalize(cls, value: str) -> str:
        return _normalize_email(value)


class LoginPayload(ApiModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def _normalize(cls, value: str) -> str:
        return _normalize_email(value)


class AuthResponse(ApiModel):
    token: str
    user: UserPublic
