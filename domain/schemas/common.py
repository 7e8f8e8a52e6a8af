from pydantic import BaseModel


class MessageResponseSchema(BaseModel):
    message: str


class ErrorResponseSchema(BaseModel):
    detail: str
    errors: list[str] = []


class RateLimitErrorSchema(BaseModel):
    detail: str = "Too many requests"
