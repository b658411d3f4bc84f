"""Request/response shapes exchanged over HTTP."""

from .person import PersonPayload, person_to_dict

__all__ = ["PersonPayload", "person_to_dict"]
