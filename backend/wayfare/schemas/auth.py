import uuid

from pydantic import EmailStr, Field

from wayfare.schemas.catalog import CamelModel


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    phone: str | None = None


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class UserResponse(CamelModel):
    id: uuid.UUID
    email: str
    first_name: str
    last_name: str
    phone: str | None = None
    role: str

    model_config = {"from_attributes": True}


class AuthResponse(CamelModel):
    token: str
    user: UserResponse
