"""Auth Schemas — registration and login payloads.

Invariants:
    - email is stripped of surrounding whitespace, otherwise stored as given (case-sensitive)
    - password is never echoed back in any response model

Design Decisions:
    - Plain str with a light pattern over EmailStr: avoids the email-validator extra
    - password upper bound is bytes-checked again by the hasher (bcrypt 72-byte limit)
"""

from pydantic import BaseModel, Field, field_validator


class Credentials(BaseModel):
    """Email/password pair submitted at registration."""
    email: str = Field(min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=1, max_length=72)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v


class LoginCredentials(BaseModel):
    """Email/password pair submitted at login.

    No format rules: malformed input fails as an unknown email or a wrong password.
    """
    email: str
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v


class RegisterResponse(BaseModel):
    message: str
    email: str


class LoginResponse(BaseModel):
    message: str = "Login successful"
    token: str
    token_type: str = "bearer"
    expires_in: int
