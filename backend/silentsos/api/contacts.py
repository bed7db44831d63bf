"""Emergency contacts API."""

from fastapi import APIRouter, Depends, Response, status

from silentsos.core.config import settings
from silentsos.core.deps import get_current_user_id
from silentsos.db.session import DocumentStore, get_store
from silentsos.models import Contact
from silentsos.schemas.contact import ContactWrite
from silentsos.services import profile_service

router = APIRouter(prefix=f"{settings.api_prefix}/contacts", tags=["contacts"])


@router.get("", response_model=list[Contact])
def list_contacts(
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    with store.session() as db:
        return profile_service.list_contacts(db, user_id)


@router.post("", response_model=Contact, status_code=status.HTTP_201_CREATED)
def create_contact(
    data: ContactWrite,
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """Add a contact. Name and phone are required."""
    with store.session() as db:
        return profile_service.create_contact(db, user_id, data)


@router.put("/{contact_id}", response_model=Contact)
def update_contact(
    contact_id: str,
    data: ContactWrite,
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    with store.session() as db:
        return profile_service.update_contact(db, user_id, contact_id, data)


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact(
    contact_id: str,
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    with store.session() as db:
        profile_service.delete_contact(db, user_id, contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
