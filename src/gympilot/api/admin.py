"""Administrative endpoints: secretary appointment, payroll, action log, report."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from gympilot.api.deps import get_gym, get_secretary
from gympilot.core.logging import get_logger
from gympilot.core.secretary import Secretary
from gympilot.models import PayrollResult, Person, SecretaryCreate, SecretaryRead
from gympilot.models.gym import Gym

logger = get_logger(__name__)

router = APIRouter(tags=["admin"])


@router.put("/secretary", response_model=SecretaryRead)
async def appoint_secretary(payload: SecretaryCreate, gym: Gym = Depends(get_gym)):
    """Appoint a new secretary. The previous one can no longer act."""
    person = Person(payload.name, payload.balance, payload.gender, payload.birth_date)
    secretary = gym.set_secretary(person, payload.salary)
    logger.info("secretary.appointed", secretary_id=secretary.id)
    return SecretaryRead.model_validate(secretary)


@router.get("/secretary", response_model=SecretaryRead)
async def current_secretary(secretary: Secretary = Depends(get_secretary)):
    return SecretaryRead.model_validate(secretary)


@router.post("/payroll", response_model=PayrollResult)
async def pay_salaries(
    gym: Gym = Depends(get_gym),
    secretary: Secretary = Depends(get_secretary),
):
    total = secretary.pay_salaries()
    return PayrollResult(total_paid=total, gym_balance=gym.balance)


@router.get("/actions", response_model=list[str])
async def list_actions(secretary: Secretary = Depends(get_secretary)):
    """Full action log, oldest first."""
    return list(secretary.actions())


@router.get("/report", response_class=PlainTextResponse)
async def gym_report(gym: Gym = Depends(get_gym)) -> str:
    return gym.report()
