"""In-memory contact store.

The store owns every Contact it holds and is the only place ids are handed
out. Callers get copies back, so a fetched contact never changes under them;
re-fetch after an update to see the new values.
"""
import logging
import threading
from dataclasses import replace
from typing import Iterable, List, Optional

from fastapi import Request

from .models import Contact

logger = logging.getLogger(__name__)

SAMPLE_CONTACTS = (
    Contact(first_name="John", last_name="Doe", phone="555-1234",
            email="john.doe@example.com", organization="Acme Corp"),
    Contact(first_name="Jane", last_name="Smith", phone="555-5678",
            email="jane.smith@example.com", organization="Tech Solutions"),
    Contact(first_name="Bob", last_name="Johnson", phone="555-9012",
            email="bob.johnson@example.com", organization="Global Industries"),
)

MUTABLE_FIELDS = ("first_name", "last_name", "phone", "email", "organization")


def _sort_key(contact: Contact):
    return (contact.last_name, contact.first_name, contact.id)


class ContactStore:
    """Thread-safe list of contacts with a monotonic id counter."""

    def __init__(self, seed: Iterable[Contact] = ()):
        self._lock = threading.Lock()
        self._contacts: List[Contact] = []
        self._next_id = 1
        for contact in seed:
            self.add(replace(contact))

    @classmethod
    def with_sample_data(cls) -> "ContactStore":
        return cls(SAMPLE_CONTACTS)

    def _find(self, contact_id: int) -> Optional[Contact]:
        # caller must hold the lock
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact
        return None

    def list_all(self) -> List[Contact]:
        with self._lock:
            return [replace(c) for c in sorted(self._contacts, key=_sort_key)]

    def get_by_id(self, contact_id: int) -> Optional[Contact]:
        with self._lock:
            contact = self._find(contact_id)
            return replace(contact) if contact is not None else None

    def add(self, contact: Contact) -> Contact:
        """Assign the next id to ``contact`` and store a copy of it.

        Any id already set on ``contact`` is overwritten. Returns a copy of
        the stored record.
        """
        with self._lock:
            contact.id = self._next_id
            self._next_id += 1
            stored = replace(contact)
            self._contacts.append(stored)
        logger.info("Added contact %s (%s)", stored.id, stored.full_name)
        return replace(stored)

    def update(self, contact: Contact) -> bool:
        """Overwrite the mutable fields of the stored contact with ``contact.id``.

        Returns False and changes nothing when no such contact exists.
        """
        with self._lock:
            existing = self._find(contact.id)
            if existing is None:
                logger.debug("Update skipped, no contact with id %s", contact.id)
                return False
            for name in MUTABLE_FIELDS:
                setattr(existing, name, getattr(contact, name))
        logger.info("Updated contact %s", contact.id)
        return True

    def delete(self, contact_id: int) -> bool:
        with self._lock:
            existing = self._find(contact_id)
            if existing is None:
                logger.debug("Delete skipped, no contact with id %s", contact_id)
                return False
            self._contacts.remove(existing)
        logger.info("Deleted contact %s", contact_id)
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._contacts)


def get_store(request: Request) -> ContactStore:
    return request.app.state.store
