"""Schema bootstrap for the person store (called from the app lifespan)."""
from __future__ import annotations

from .session import Base, get_engine
from . import models  # noqa: F401  # registers Person on Base.metadata


def create_all() -> None:
    Base.metadata.create_all(bind=get_engine())
