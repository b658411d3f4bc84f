"""JSON shape of a person record."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from personas_api.db.models import Person


class PersonPayload(BaseModel):
    """
    Body accepted by the create/edit endpoints.

    Every field is optional text so missing values reach the domain validator
    (and its messages) instead of failing at parse time. A client-sent id is ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    full_name: Optional[str] = Field(default=None, alias="fullName")
    document_number: Optional[str] = Field(default=None, alias="documentNumber")
    email: Optional[str] = None
    phone: Optional[str] = None
    birth_date: Optional[str] = Field(default=None, alias="birthDate")

    def as_fields(self) -> dict:
        """Column values for the store, keyed by model attribute."""
        return {
            "full_name": self.full_name,
            "document_number": self.document_number,
            "email": self.email,
            "phone": self.phone,
            "birth_date": self.birth_date,
        }


def person_to_dict(entity: Person) -> dict:
    return {
        "id": entity.id,
        "fullName": entity.full_name,
        "documentNumber": entity.document_number,
        "email": entity.email,
        "phone": entity.phone,
        "birthDate": entity.birth_date,
    }
