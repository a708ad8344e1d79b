from beanie import Document, Indexed
from pydantic import field_validator
from typing import Optional


class User(Document):
    name: Optional[str] = None
    email: Indexed(str, unique=True)
    password: Optional[str] = None  # stored as submitted, no hashing
    phone: Optional[str] = None

    class Settings:
        name = "users"

    @field_validator("email")
    @classmethod
    def email_not_empty(cls, v):
        # an empty string counts as missing
        if not v:
            raise ValueError("email is required")
        return v
