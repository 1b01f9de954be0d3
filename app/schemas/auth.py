from pydantic import BaseModel, EmailStr, Field


class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class IdentityOut(BaseModel):
    id: str
    email: str
    display_name: str | None = None
    is_mock: bool = False
