from pydantic import BaseModel, ConfigDict
from typing import Generic, TypeVar

T = TypeVar("T")


class Failure(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str

    @classmethod
    def create(cls, message: str) -> 'Failure':
        return cls(message=message)

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True


class Success(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    value: T

    @classmethod
    def create(cls, value: T) -> 'Success[T]':
        return cls(value=value)

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

