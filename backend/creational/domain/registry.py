import logging

from creational.core.patterns.prototype import PrototypeRegistry
from creational.domain.users import Role, Student, Teacher, User


logger = logging.getLogger(__name__)


def build_default_registry(seed: bool = True) -> PrototypeRegistry[User]:
    """
    Create the user prototype registry, keyed by role.

    Args:
        seed: Register the stock John Doe student and Jane Roe teacher

    Returns:
        A new registry; callers get clones through ``get_prototype``
    """
    registry: PrototypeRegistry[User] = PrototypeRegistry()
    if seed:
        registry.add_prototype(
            Role.STUDENT,
            Student(
                first_name="John",
                last_name="Doe",
                email="john.doe@school.example",
                courses=["Biology 101", "Algebra I"],
                year=2,
            ),
        )
        registry.add_prototype(
            Role.TEACHER,
            Teacher(
                first_name="Jane",
                last_name="Roe",
                email="jane.roe@school.example",
                courses=["Biology 101"],
                office="B-204",
            ),
        )
        logger.info(f"Prototype registry seeded with {len(registry)} prototypes")
    return registry
