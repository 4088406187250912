from enum import Enum
from typing import ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from creational.core.patterns.prototype import Prototype


class Role(str, Enum):
    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"


class Subject(str, Enum):
    BIOLOGY = "biology"
    MATHEMATICS = "mathematics"


class User(BaseModel, Prototype):
    """A school user; the concrete subclass decides the role."""

    ROLE: ClassVar[Optional[Role]] = None
    SUBJECT: ClassVar[Optional[Subject]] = None

    model_config = ConfigDict(validate_assignment=True)

    first_name: str = Field(min_length=1)
    last_name: str = ""
    email: Optional[str] = None
    courses: List[str] = Field(default_factory=list)

    @computed_field
    @property
    def role(self) -> Optional[Role]:
        return self.ROLE

    @computed_field
    @property
    def subject(self) -> Optional[Subject]:
        return self.SUBJECT

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def clone(self):
        # Deep copy so nested lists are not shared with the original
        return self.model_copy(deep=True)


class Student(User):
    ROLE: ClassVar[Optional[Role]] = Role.STUDENT

    year: int = Field(default=1, ge=1)


class Teacher(User):
    ROLE: ClassVar[Optional[Role]] = Role.TEACHER

    office: Optional[str] = None

    def can_teach(self, student: Student) -> bool:
        """Subject teachers only teach students of their own subject."""
        if self.subject is None:
            return True
        return student.subject == self.subject


class Admin(User):
    ROLE: ClassVar[Optional[Role]] = Role.ADMIN

    permissions: List[str] = Field(default_factory=list)


class BiologyStudent(Student):
    SUBJECT: ClassVar[Optional[Subject]] = Subject.BIOLOGY


class BiologyTeacher(Teacher):
    SUBJECT: ClassVar[Optional[Subject]] = Subject.BIOLOGY


class MathematicsStudent(Student):
    SUBJECT: ClassVar[Optional[Subject]] = Subject.MATHEMATICS


class MathematicsTeacher(Teacher):
    SUBJECT: ClassVar[Optional[Subject]] = Subject.MATHEMATICS
