from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from creational.core.patterns.builder import Builder
from creational.domain.users import Role


class Account(BaseModel):
    """
    Immutable school account.

    Accounts are not built through their constructor directly but through
    ``Account.builder()``, which stages the fields one at a time and
    validates them all at once.
    """

    model_config = ConfigDict(frozen=True)

    username: str = Field(min_length=3, max_length=32, pattern=r"^[a-z0-9_.]+$")
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    role: Role
    first_name: str = Field(min_length=1)
    last_name: str = ""
    age: Optional[int] = Field(default=None, ge=0, le=150)
    phone: Optional[str] = None
    courses: Tuple[str, ...] = ()

    @classmethod
    def builder(cls) -> "AccountBuilder":
        return AccountBuilder()


class AccountBuilder(Builder[Account]):
    """Fluent staging object for :class:`Account`."""

    product = Account
    required = ("username", "email", "role", "first_name")

    def __init__(self) -> None:
        super().__init__()
        self._courses: List[str] = []

    def with_username(self, username: str) -> "AccountBuilder":
        return self._set("username", username)

    def with_email(self, email: str) -> "AccountBuilder":
        return self._set("email", email)

    def with_role(self, role: Role) -> "AccountBuilder":
        return self._set("role", role)

    def with_first_name(self, first_name: str) -> "AccountBuilder":
        return self._set("first_name", first_name)

    def with_last_name(self, last_name: str) -> "AccountBuilder":
        return self._set("last_name", last_name)

    def with_age(self, age: int) -> "AccountBuilder":
        return self._set("age", age)

    def with_phone(self, phone: str) -> "AccountBuilder":
        return self._set("phone", phone)

    def with_courses(self, courses: List[str]) -> "AccountBuilder":
        self._courses = list(courses)
        return self

    def add_course(self, course: str) -> "AccountBuilder":
        self._courses.append(course)
        return self

    def _snapshot(self) -> Dict[str, Any]:
        fields = super()._snapshot()
        if self._courses:
            fields["courses"] = tuple(self._courses)
        return fields

    def reset(self) -> "AccountBuilder":
        super().reset()
        self._courses = []
        return self
