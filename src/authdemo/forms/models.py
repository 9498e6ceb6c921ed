"""Value types shared by the credential form controllers."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum

EMAIL = "email"
PASSWORD = "password"
CONFIRM_PASSWORD = "confirm_password"

FormState = dict[str, str]


@dataclass(eq=False)
class ValidationErrors(Mapping[str, str]):
    """Per-field messages, kept in form order.

    ``first_invalid_field`` is what the view layer focuses after a failed
    submit.
    """

    fields: dict[str, str] = field(default_factory=dict)

    def __getitem__(self, name: str) -> str:
        return self.fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def first_invalid_field(self) -> str | None:
        return next(iter(self.fields), None)

    def add(self, name: str, message: str) -> None:
        self.fields[name] = message

    def discard(self, name: str) -> None:
        self.fields.pop(name, None)


class NotificationKind(Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    message: str

    @classmethod
    def success(cls, message: str) -> Notification:
        return cls(NotificationKind.SUCCESS, message)

    @classmethod
    def error(cls, message: str) -> Notification:
        return cls(NotificationKind.ERROR, message)

    @property
    def is_success(self) -> bool:
        return self.kind is NotificationKind.SUCCESS


class PasswordStrength(Enum):
    NONE = (0, "")
    WEAK = (1, "Weak")
    MEDIUM = (2, "Medium")
    STRONG = (3, "Strong")

    def __init__(self, score: int, label: str) -> None:
        self.score = score
        self.label = label
