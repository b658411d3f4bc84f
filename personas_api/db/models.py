"""SQLAlchemy models for the person store."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from .session import Base


class Person(Base):
    __tablename__ = "personas"
    # AUTOINCREMENT: ids removidos nunca voltam a ser usados
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(255), nullable=True)
    document_number = Column(String(64), nullable=False)
    # document_number em maiusculas (str.upper, Unicode completo), usado na checagem de duplicidade
    document_number_key = Column(String(64), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    phone = Column(String(64), nullable=True)
    birth_date = Column(String(64), nullable=False)
