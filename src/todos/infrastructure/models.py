"""
Todos Infrastructure Models
===========================

SQLAlchemy ORM models for the todos module.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, Text, false, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base


class TodoModel(Base):
    """
    Database model for the Todo entity.

    Maps to the 'todos' table. id, completed and created_at are filled
    in by the database.
    """
    __tablename__ = "todos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, server_default=false())

    # Ordering only, never exposed
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
