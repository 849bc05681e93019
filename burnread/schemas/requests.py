from typing import Any

from pydantic import BaseModel, Field


class MessageCreateIn(BaseModel):
    # Left untyped: type, emptiness and length are checked by the domain
    # so every bad message gets the same 400.
    message: Any = Field(None, description="The message to burn after reading")
