"""Client endpoints (register, list, unregister, mailbox)."""

from fastapi import APIRouter, Depends, status

from gympilot.api.deps import get_gym, get_secretary
from gympilot.core.secretary import Secretary
from gympilot.models import ClientCreate, ClientRead, Person
from gympilot.models.gym import Gym

router = APIRouter(prefix="/clients", tags=["clients"])


@router.post("", response_model=ClientRead, status_code=status.HTTP_201_CREATED)
async def register_client(
    payload: ClientCreate,
    secretary: Secretary = Depends(get_secretary),
):
    """Register a new client. Must be 18 or older."""
    person = Person(payload.name, payload.balance, payload.gender, payload.birth_date)
    client = secretary.register_client(person)
    return ClientRead.model_validate(client)


@router.get("", response_model=list[ClientRead])
async def list_clients(gym: Gym = Depends(get_gym)):
    return [ClientRead.model_validate(c) for c in gym.clients]


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unregister_client(
    client_id: int,
    gym: Gym = Depends(get_gym),
    secretary: Secretary = Depends(get_secretary),
) -> None:
    """Remove a client from the gym and all their sessions (no refund)."""
    client = gym.lookup_client(client_id)
    secretary.unregister_client(client)


@router.get("/{client_id}/notifications", response_model=list[str])
async def client_notifications(client_id: int, gym: Gym = Depends(get_gym)):
    return list(gym.find_client(client_id).notifications)
