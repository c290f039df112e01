from enum import Enum
from pydantic import BaseModel, ConfigDict, EmailStr, Field, TypeAdapter, ValidationError, field_validator

email_adapter = TypeAdapter(EmailStr)


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"


class UserRegister(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str = Field(..., description="Email")
    password: str = Field(..., description="Password")

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        # Emails are matched exactly as stored, so keep the submitted string
        # rather than EmailStr's normalized form.
        try:
            email_adapter.validate_python(value)
        except ValidationError:
            raise ValueError("value is not a valid email address")
        return value


class UserLogin(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str = Field(..., description="Email")
    password: str = Field(..., description="Password")


class MakeAdmin(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str = Field(..., description="Email of the user to promote")
    role: Role = Field(Role.ADMIN, description="Role to assign")
