"""Profile and location API."""

from fastapi import APIRouter, Depends

from silentsos.core.config import settings
from silentsos.core.deps import get_current_user_id
from silentsos.db.session import DocumentStore, get_store
from silentsos.models import Profile
from silentsos.schemas.profile import LocationResponse, LocationUpdate, ProfileUpdate
from silentsos.services import profile_service

router = APIRouter(prefix=settings.api_prefix, tags=["profile"])


@router.get("/profile", response_model=Profile)
def get_profile(
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    with store.session() as db:
        return profile_service.get_profile(db, user_id)


@router.put("/profile", response_model=Profile)
def update_profile(
    data: ProfileUpdate,
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """Update name, phone and contact email; omitted fields are kept."""
    with store.session() as db:
        return profile_service.update_profile(db, user_id, data)


@router.post("/location", response_model=LocationResponse)
def update_location(
    data: LocationUpdate,
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """User reports their location, used to find them for nearby alerts."""
    with store.session() as db:
        location = profile_service.update_location(db, user_id, data.lat, data.lng)
    return LocationResponse(last_location=location)
