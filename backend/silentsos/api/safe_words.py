"""Safe words API."""

from fastapi import APIRouter, Depends, Response, status

from silentsos.core.config import settings
from silentsos.core.deps import get_current_user_id
from silentsos.db.session import DocumentStore, get_store
from silentsos.models import SafeWord
from silentsos.schemas.contact import SafeWordCreate, SafeWordUpdate
from silentsos.services import profile_service

router = APIRouter(prefix=f"{settings.api_prefix}/safe-words", tags=["safe-words"])


@router.get("", response_model=list[SafeWord])
def list_safe_words(
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    with store.session() as db:
        return profile_service.list_safe_words(db, user_id)


@router.post("", response_model=SafeWord, status_code=status.HTTP_201_CREATED)
def create_safe_word(
    data: SafeWordCreate,
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """Add a safe word. New words are active unless ``activate`` is false."""
    with store.session() as db:
        return profile_service.create_safe_word(db, user_id, data)


@router.put("/{word_id}", response_model=SafeWord)
def update_safe_word(
    word_id: str,
    data: SafeWordUpdate,
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """Partially update a safe word, e.g. toggle ``activate``."""
    with store.session() as db:
        return profile_service.update_safe_word(db, user_id, word_id, data)


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_safe_word(
    word_id: str,
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    with store.session() as db:
        profile_service.delete_safe_word(db, user_id, word_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
