"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from personas_api.db.models import Person
from personas_api.db.session import get_session

MUTABLE_FIELDS = ("full_name", "document_number", "email", "phone", "birth_date")


def document_key(value: str | None) -> str:
    return (value or "").upper()


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def list_persons(self) -> list[Person]:
        with get_session() as session:
            stmt = select(Person).order_by(Person.id)
            return list(session.execute(stmt).scalars().all())

    def get_person(self, person_id: int) -> Optional[Person]:
        with get_session() as session:
            return session.get(Person, person_id)

    def create_person(
        self,
        *,
        document_number: str,
        email: str,
        birth_date: str,
        full_name: str | None = None,
        phone: str | None = None,
    ) -> Person:
        entity = Person(
            full_name=full_name,
            document_number=document_number,
            document_number_key=document_key(document_number),
            email=email,
            phone=phone,
            birth_date=birth_date,
        )
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def update_person(self, person_id: int, **values) -> Optional[Person]:
        unknown = set(values) - set(MUTABLE_FIELDS)
        if unknown:
            raise ValueError(f"Campos nao editaveis: {sorted(unknown)}")
        with get_session() as session:
            entity = session.get(Person, person_id)
            if not entity:
                return None
            for name, value in values.items():
                setattr(entity, name, value)
            if "document_number" in values:
                entity.document_number_key = document_key(values["document_number"])
            session.commit()
            session.refresh(entity)
            return entity

    def delete_person(self, person_id: int) -> Optional[Person]:
        with get_session() as session:
            entity = session.get(Person, person_id)
            if not entity:
                return None
            session.delete(entity)
            session.commit()
            return entity

    def document_number_taken(self, document_number: str, *, exclude_id: int | None = None) -> bool:
        value = document_number or ""
        if not value.strip():
            return False
        with get_session() as session:
            stmt = select(Person.id).where(Person.document_number_key == document_key(value))
            if exclude_id is not None:
                stmt = stmt.where(Person.id != exclude_id)
            return session.execute(stmt.limit(1)).first() is not None
