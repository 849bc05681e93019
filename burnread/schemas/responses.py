from pydantic import BaseModel, Field


class MessageCreatedOut(BaseModel):
    id: str = Field(..., description="The id of the message")
    link: str = Field(..., description="One-time link to read the message")


class MessageOut(BaseModel):
    message: str = Field(..., description="The message content, escaped")


class ErrorOut(BaseModel):
    detail: str
