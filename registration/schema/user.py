from typing import Optional

from pydantic import BaseModel, ConfigDict


class RegisterRequest(BaseModel):
    # No presence or format checks: the unique index is the only enforced rule.
    # Numbers are cast to text, e.g. {"phone": 555} is stored as "555".
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None


class MessageOut(BaseModel):
    message: str


class ErrorOut(BaseModel):
    error: str
