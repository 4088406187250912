from typing import List, Optional

from pydantic import BaseModel, Field

from creational.domain.users import Role


class AccountRequest(BaseModel):
    """Raw account fields; every one is optional so the builder decides what is missing."""

    username: Optional[str] = None
    email: Optional[str] = None
    role: Optional[Role] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None
    phone: Optional[str] = None
    courses: List[str] = Field(default_factory=list)


class SingletonInstanceOut(BaseModel):
    manager: str
    variant: str
    instance_id: int
    same_instance: bool


class DepartmentOut(BaseModel):
    subject: str
    factory: str
    student: dict
    teacher: dict
    compatible: bool
