"""Profile, location, contact and safe-word service.

Every lookup goes through the authenticated user's own lists, so ids from
another account resolve to NotFoundError.
"""

from __future__ import annotations

from silentsos.core.errors import NotFoundError, ValidationError
from silentsos.core.util import new_id, now_ms
from silentsos.db.session import Session
from silentsos.models import Contact, Location, Profile, SafeWord, User
from silentsos.schemas.contact import ContactWrite, SafeWordCreate, SafeWordUpdate
from silentsos.schemas.profile import ProfileUpdate
from silentsos.services.auth_service import get_user


def get_profile(db: Session, user_id: str) -> Profile:
    return get_user(db, user_id).profile


def update_profile(db: Session, user_id: str, data: ProfileUpdate) -> Profile:
    """Overwrite the provided fields. The login email is left alone."""
    user = get_user(db, user_id)
    if data.name is not None:
        user.profile.name = data.name
    if data.phone is not None:
        user.profile.phone = data.phone
    if data.email is not None:
        user.profile.email = data.email
    db.commit()
    return user.profile


def set_location(user: User, lat: float, lng: float) -> Location:
    """Replace the last-known location. The caller commits."""
    user.last_location = Location(lat=lat, lng=lng, timestamp=now_ms())
    return user.last_location


def update_location(db: Session, user_id: str, lat: float, lng: float) -> Location:
    user = get_user(db, user_id)
    location = set_location(user, lat, lng)
    db.commit()
    return location


# ---------- Contacts ----------


def _find_contact(user: User, contact_id: str) -> Contact:
    contact = next((c for c in user.contacts if c.id == contact_id), None)
    if not contact:
        raise NotFoundError("Contact not found")
    return contact


def _require_name_and_phone(data: ContactWrite) -> None:
    if not data.name or not data.phone:
        raise ValidationError("Name and phone are required")


def list_contacts(db: Session, user_id: str) -> list[Contact]:
    return get_user(db, user_id).contacts


def create_contact(db: Session, user_id: str, data: ContactWrite) -> Contact:
    _require_name_and_phone(data)
    user = get_user(db, user_id)
    contact = Contact(
        id=new_id(),
        name=data.name,
        relationship=data.relationship or "",
        phone=data.phone,
        email=data.email or "",
        share_location=bool(data.share_location),
    )
    user.contacts.append(contact)
    db.commit()
    return contact


def update_contact(db: Session, user_id: str, contact_id: str, data: ContactWrite) -> Contact:
    """Replace the editable fields of a contact; its id is kept."""
    user = get_user(db, user_id)
    contact = _find_contact(user, contact_id)
    _require_name_and_phone(data)
    contact.name = data.name
    contact.relationship = data.relationship or ""
    contact.phone = data.phone
    contact.email = data.email or ""
    contact.share_location = bool(data.share_location)
    db.commit()
    return contact


def delete_contact(db: Session, user_id: str, contact_id: str) -> None:
    user = get_user(db, user_id)
    contact = _find_contact(user, contact_id)
    user.contacts.remove(contact)
    db.commit()


# ---------- Safe words ----------


def _find_safe_word(user: User, word_id: str) -> SafeWord:
    safe_word = next((w for w in user.safe_words if w.id == word_id), None)
    if not safe_word:
        raise NotFoundError("Safe word not found")
    return safe_word


def list_safe_words(db: Session, user_id: str) -> list[SafeWord]:
    return get_user(db, user_id).safe_words


def create_safe_word(db: Session, user_id: str, data: SafeWordCreate) -> SafeWord:
    if not data.word:
        raise ValidationError("Word is required")
    user = get_user(db, user_id)
    safe_word = SafeWord(
        id=new_id(),
        word=data.word,
        notify_emergency_contact=bool(data.notify_emergency_contact),
        notify_nearby=bool(data.notify_nearby),
        call_police=bool(data.call_police),
        activate=bool(data.activate) if "activate" in data.model_fields_set else True,
    )
    user.safe_words.append(safe_word)
    db.commit()
    return safe_word


def update_safe_word(db: Session, user_id: str, word_id: str, data: SafeWordUpdate) -> SafeWord:
    """Apply only the fields present in the request body."""
    user = get_user(db, user_id)
    safe_word = _find_safe_word(user, word_id)
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    if "word" in changes and not changes["word"]:
        raise ValidationError("Word is required")
    for field, value in changes.items():
        setattr(safe_word, field, value)
    db.commit()
    return safe_word


def delete_safe_word(db: Session, user_id: str, word_id: str) -> None:
    user = get_user(db, user_id)
    safe_word = _find_safe_word(user, word_id)
    user.safe_words.remove(safe_word)
    db.commit()
