from pydantic import BaseModel


class FieldError(BaseModel):
    path: list[str | int]
    message: str
