from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    success: bool
    data: T | None = None
    error: str = ""
    status_code: int = 200

    @classmethod
    def ok(cls, data: T = None) -> ServiceResult[T]:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str, status_code: int = 400) -> ServiceResult[T]:
        return cls(success=False, error=message, status_code=status_code)
