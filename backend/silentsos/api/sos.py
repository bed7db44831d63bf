"""SOS, alert inbox and history API."""

from fastapi import APIRouter, Depends

from silentsos.core.config import settings
from silentsos.core.deps import get_current_user_id
from silentsos.db.session import DocumentStore, get_store
from silentsos.models import Alert, SosEvent
from silentsos.schemas.sos import SosCreate, SosResponse
from silentsos.services import sos_service

router = APIRouter(prefix=settings.api_prefix, tags=["sos"])


@router.post("/sos", response_model=SosResponse)
def create_sos(
    data: SosCreate,
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """Raise an SOS from a 3-tap or safe-word trigger and alert nearby users."""
    with store.session() as db:
        event = sos_service.dispatch_sos(db, user_id, data.lat, data.lng, data.type, data.location_text)
    return SosResponse(sos_event=event)


@router.get("/alerts", response_model=list[Alert])
def list_alerts(
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """Pending nearby alerts. Each alert is returned once, then marked delivered."""
    with store.session() as db:
        return sos_service.fetch_alerts(db, user_id)


@router.get("/history", response_model=list[SosEvent])
def list_history(
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """SOS events raised by the current user, oldest first."""
    with store.session() as db:
        return sos_service.list_history(db, user_id)
