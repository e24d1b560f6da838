"""Instructor endpoints (hire, list)."""

from fastapi import APIRouter, Depends, status

from gympilot.api.deps import get_gym, get_secretary
from gympilot.core.secretary import Secretary
from gympilot.models import InstructorCreate, InstructorRead, Person
from gympilot.models.gym import Gym

router = APIRouter(prefix="/instructors", tags=["instructors"])


@router.post("", response_model=InstructorRead, status_code=status.HTTP_201_CREATED)
async def hire_instructor(
    payload: InstructorCreate,
    secretary: Secretary = Depends(get_secretary),
):
    person = Person(payload.name, payload.balance, payload.gender, payload.birth_date)
    instructor = secretary.hire_instructor(person, payload.salary, payload.session_types)
    return InstructorRead.model_validate(instructor)


@router.get("", response_model=list[InstructorRead])
async def list_instructors(gym: Gym = Depends(get_gym)):
    return [InstructorRead.model_validate(i) for i in gym.instructors]
