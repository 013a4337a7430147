from enum import StrEnum

from pydantic import BaseModel, Field


class Role(StrEnum):
    admin = "admin"
    user = "user"


class User(BaseModel):
    name: str = ""
    email: str = ""
    role: Role = Role.user


class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class RegisterRequest(BaseModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    from_register_page: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
