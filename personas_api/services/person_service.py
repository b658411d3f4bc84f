"""Person use cases: register, edit, remove and look up records."""

from __future__ import annotations

import logging
import threading

from personas_api.db.models import Person
from personas_api.domain.persons import validate_person
from personas_api.repositories.sql_repository import SQLRepository
from personas_api.schemas.person import PersonPayload

logger = logging.getLogger(__name__)

# One store per process: every session on the shared connection, and every
# check-then-write sequence, runs under this lock.
_store_lock = threading.Lock()


class PersonError(Exception):
    """Base exception for person workflow."""


class PersonNotFoundError(PersonError):
    """Raised when the requested id is not in the store."""

    def __init__(self, person_id: int):
        super().__init__(f"Person {person_id} not found")
        self.person_id = person_id


class PersonValidationError(PersonError):
    """Raised when one or more field rules fail."""

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__("One or more validation errors occurred.")
        self.errors = errors


class DuplicateDocumentError(PersonError):
    """Raised when another record already holds the document number."""

    message = "ERROR: document number cannot be duplicated"

    def __init__(self, document_number: str):
        super().__init__(self.message)
        self.document_number = document_number


class PersonService:
    """Validates payloads and applies them to the store."""

    def __init__(self, repository: SQLRepository | None = None) -> None:
        self.repository = repository or SQLRepository()

    def list_persons(self) -> list[Person]:
        with _store_lock:
            return self.repository.list_persons()

    def get_person(self, person_id: int) -> Person:
        with _store_lock:
            entity = self.repository.get_person(person_id)
        if not entity:
            raise PersonNotFoundError(person_id)
        return entity

    def _validate(self, payload: PersonPayload) -> None:
        errors = validate_person(payload.model_dump(by_alias=True))
        if errors:
            logger.info("Person payload rejected", extra={"fields": sorted(errors)})
            raise PersonValidationError(errors)

    def register(self, payload: PersonPayload) -> Person:
        self._validate(payload)
        with _store_lock:
            if self.repository.document_number_taken(payload.document_number):
                logger.warning("Duplicate document number on register")
                raise DuplicateDocumentError(payload.document_number)
            entity = self.repository.create_person(**payload.as_fields())
        logger.info("Person %s registered", entity.id, extra={"person_id": entity.id})
        return entity

    def edit(self, person_id: int, payload: PersonPayload) -> Person:
        self.get_person(person_id)
        self._validate(payload)
        with _store_lock:
            if self.repository.document_number_taken(payload.document_number, exclude_id=person_id):
                logger.warning("Duplicate document number on edit of %s", person_id, extra={"person_id": person_id})
                raise DuplicateDocumentError(payload.document_number)
            entity = self.repository.update_person(person_id, **payload.as_fields())
        if not entity:
            # removido entre a busca e a escrita
            raise PersonNotFoundError(person_id)
        logger.info("Person %s updated", person_id, extra={"person_id": person_id})
        return entity

    def remove(self, person_id: int) -> Person:
        with _store_lock:
            entity = self.repository.delete_person(person_id)
        if not entity:
            raise PersonNotFoundError(person_id)
        logger.info("Person %s deleted", person_id, extra={"person_id": person_id})
        return entity
