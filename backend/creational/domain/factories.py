"""
Factories for school users, in three escalating variants.

- ``SimpleUserFactory``: one static method picks the concrete type from a role.
  Adding a role means editing the factory.
- ``UserFactory`` and its subclasses (factory method): each subclass overrides
  ``create_user`` to produce its own type. Adding a role means adding a
  subclass; ``get_user_factory`` selects one by role.
- ``DepartmentFactory`` and its subclasses (abstract factory): each family
  creates a student and a teacher of the same subject, so the products of
  one family always work together.
"""

from abc import ABC, abstractmethod
from typing import Any, Type, Union
import logging

from creational.core.patterns.exceptions import UnknownProductError
from creational.core.patterns.factory import CreatorRegistry
from creational.domain.users import (
    Admin,
    BiologyStudent,
    BiologyTeacher,
    MathematicsStudent,
    MathematicsTeacher,
    Role,
    Student,
    Subject,
    Teacher,
    User,
)


logger = logging.getLogger(__name__)


class SimpleUserFactory:

    @staticmethod
    def create_user(role: Union[Role, str], **fields: Any) -> User:
        try:
            role = Role(role)
        except ValueError:
            raise UnknownProductError(role, supported=[r.value for r in Role]) from None

        if role is Role.STUDENT:
            return Student(**fields)
        elif role is Role.TEACHER:
            return Teacher(**fields)
        elif role is Role.ADMIN:
            return Admin(**fields)
        raise UnknownProductError(role, supported=[r.value for r in Role])


user_factories: CreatorRegistry[Type["UserFactory"]] = CreatorRegistry("user factories")


class UserFactory(ABC):
    """Creator whose subclasses decide which user type ``create_user`` returns."""

    @abstractmethod
    def create_user(self, first_name: str, last_name: str = "", **fields: Any) -> User:
        pass

    def register(self, first_name: str, last_name: str = "", **fields: Any) -> User:
        """Create a user and log it; the shared step every subclass inherits."""
        user = self.create_user(first_name, last_name, **fields)
        logger.info(f"{type(self).__name__} created {type(user).__name__} '{user.full_name}'")
        return user


@user_factories.register(Role.STUDENT)
class StudentFactory(UserFactory):
    def create_user(self, first_name: str, last_name: str = "", **fields: Any) -> Student:
        return Student(first_name=first_name, last_name=last_name, **fields)


@user_factories.register(Role.TEACHER)
class TeacherFactory(UserFactory):
    def create_user(self, first_name: str, last_name: str = "", **fields: Any) -> Teacher:
        return Teacher(first_name=first_name, last_name=last_name, **fields)


@user_factories.register(Role.ADMIN)
class AdminFactory(UserFactory):
    def create_user(self, first_name: str, last_name: str = "", **fields: Any) -> Admin:
        return Admin(first_name=first_name, last_name=last_name, **fields)


def get_user_factory(role: Union[Role, str]) -> UserFactory:
    try:
        role = Role(role)
    except ValueError:
        raise UnknownProductError(role, supported=[r.value for r in user_factories.keys()]) from None
    return user_factories.get(role)()


department_factories: CreatorRegistry[Type["DepartmentFactory"]] = CreatorRegistry("department factories")


class DepartmentFactory(ABC):
    """Creates a compatible student and teacher for one subject."""

    subject: Subject

    @abstractmethod
    def create_student(self, first_name: str, last_name: str = "", **fields: Any) -> Student:
        pass

    @abstractmethod
    def create_teacher(self, first_name: str, last_name: str = "", **fields: Any) -> Teacher:
        pass


@department_factories.register(Subject.BIOLOGY)
class BiologyDepartmentFactory(DepartmentFactory):
    subject = Subject.BIOLOGY

    def create_student(self, first_name: str, last_name: str = "", **fields: Any) -> BiologyStudent:
        return BiologyStudent(first_name=first_name, last_name=last_name, **fields)

    def create_teacher(self, first_name: str, last_name: str = "", **fields: Any) -> BiologyTeacher:
        return BiologyTeacher(first_name=first_name, last_name=last_name, **fields)


@department_factories.register(Subject.MATHEMATICS)
class MathematicsDepartmentFactory(DepartmentFactory):
    subject = Subject.MATHEMATICS

    def create_student(self, first_name: str, last_name: str = "", **fields: Any) -> MathematicsStudent:
        return MathematicsStudent(first_name=first_name, last_name=last_name, **fields)

    def create_teacher(self, first_name: str, last_name: str = "", **fields: Any) -> MathematicsTeacher:
        return MathematicsTeacher(first_name=first_name, last_name=last_name, **fields)


def get_department_factory(subject: Union[Subject, str]) -> DepartmentFactory:
    try:
        subject = Subject(subject)
    except ValueError:
        raise UnknownProductError(subject, supported=[s.value for s in department_factories.keys()]) from None
    return department_factories.get(subject)()
