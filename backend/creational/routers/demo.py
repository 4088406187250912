"""
Runnable demonstrations of each pattern, one group of endpoints per pattern.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from creational.core.config_manager import ConfigManager
from creational.core.connection_manager import ConnectionManager
from creational.core.dependencies import (
    get_config_manager,
    get_connection_manager,
    get_prototype_registry,
    get_service_manager,
)
from creational.core.patterns.exceptions import (
    BuilderValidationError,
    PrototypeNotFoundError,
    UnknownProductError,
)
from creational.core.patterns.prototype import PrototypeRegistry
from creational.core.service_manager import ServiceManager
from creational.domain.accounts import Account
from creational.domain.factories import (
    SimpleUserFactory,
    get_department_factory,
    get_user_factory,
)
from creational.schemas.demo import AccountRequest, DepartmentOut, SingletonInstanceOut

router = APIRouter(
    prefix="/demo",
    tags=["Pattern Demonstrations"],
    responses={404: {"description": "Not found"}},
)


@router.get("/singleton", response_model=List[SingletonInstanceOut])
def get_singleton_instances(
    config_mgr: ConfigManager = Depends(get_config_manager),
    connection_mgr: ConnectionManager = Depends(get_connection_manager),
    service_mgr: ServiceManager = Depends(get_service_manager)
):
    """
    Compare the injected managers with fresh accessor calls.

    Each manager uses a different singleton variant; all of them must
    report the same instance.
    """
    return [
        SingletonInstanceOut(
            manager="ConfigManager",
            variant="eager",
            instance_id=id(config_mgr),
            same_instance=config_mgr is ConfigManager.get_instance()
        ),
        SingletonInstanceOut(
            manager="ServiceManager",
            variant="synchronized",
            instance_id=id(service_mgr),
            same_instance=service_mgr is ServiceManager.get_instance()
        ),
        SingletonInstanceOut(
            manager="ConnectionManager",
            variant="double-checked",
            instance_id=id(connection_mgr),
            same_instance=connection_mgr is ConnectionManager.get_instance()
        ),
    ]


@router.post("/accounts", status_code=status.HTTP_201_CREATED, response_model=Account)
def build_account(request: AccountRequest):
    """Stage every provided field on an AccountBuilder and build the account."""
    builder = Account.builder().with_courses(request.courses)
    setters = {
        "username": builder.with_username,
        "email": builder.with_email,
        "role": builder.with_role,
        "first_name": builder.with_first_name,
        "last_name": builder.with_last_name,
        "age": builder.with_age,
        "phone": builder.with_phone,
    }
    for field, setter in setters.items():
        value = getattr(request, field)
        if value is not None:
            setter(value)

    try:
        return builder.build()
    except BuilderValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())


@router.get("/prototypes")
def list_prototypes(registry: PrototypeRegistry = Depends(get_prototype_registry)):
    return {"keys": [str(getattr(key, "value", key)) for key in registry.keys()]}


@router.get("/prototypes/{role}")
def clone_prototype(role: str, registry: PrototypeRegistry = Depends(get_prototype_registry)):
    """Return a fresh clone of the canonical prototype registered for ``role``."""
    key = _lookup_key(registry, role)
    try:
        clone = registry.get_prototype(key)
    except PrototypeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"type": type(clone).__name__, "user": clone.model_dump(mode="json")}


@router.get("/factories/simple/{role}")
def create_with_simple_factory(role: str, first_name: str = Query("John", min_length=1), last_name: str = "Doe"):
    try:
        user = SimpleUserFactory.create_user(role, first_name=first_name, last_name=last_name)
    except UnknownProductError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"factory": "SimpleUserFactory", "type": type(user).__name__, "user": user.model_dump(mode="json")}


@router.get("/factories/method/{role}")
def create_with_factory_method(role: str, first_name: str = Query("John", min_length=1), last_name: str = "Doe"):
    try:
        factory = get_user_factory(role)
    except UnknownProductError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    user = factory.register(first_name, last_name)
    return {"factory": type(factory).__name__, "type": type(user).__name__, "user": user.model_dump(mode="json")}


@router.get("/factories/departments/{subject}", response_model=DepartmentOut)
def create_department_pair(
    subject: str,
    student_name: str = Query("John", min_length=1),
    teacher_name: str = Query("Jane", min_length=1)
):
    """Create a student and a teacher from one department family."""
    try:
        department = get_department_factory(subject)
    except UnknownProductError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    student = department.create_student(student_name)
    teacher = department.create_teacher(teacher_name)
    return DepartmentOut(
        subject=department.subject.value,
        factory=type(department).__name__,
        student=student.model_dump(mode="json"),
        teacher=teacher.model_dump(mode="json"),
        compatible=teacher.can_teach(student)
    )


def _lookup_key(registry: PrototypeRegistry, raw: str):
    # Registry keys are Role members; match them by value so the path stays a plain string
    for key in registry.keys():
        if getattr(key, "value", key) == raw:
            return key
    return raw
