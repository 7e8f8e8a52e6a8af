from pydantic import BaseModel, Field, model_validator

from utils.enums import UserRole


class LoginRequestSchema(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)


class TokenResponseSchema(BaseModel):
    token: str


class CredentialsUpdateSchema(BaseModel):
    username: str | None = Field(None, min_length=1, max_length=100)
    password: str | None = Field(None, min_length=6)

    @model_validator(mode="after")
    def check_not_empty(self):
        if self.username is None and self.password is None:
            raise ValueError("username or password is required")
        return self


class CurrentAdminSchema(BaseModel):
    id: int
    username: str
    role: UserRole = UserRole.admin
